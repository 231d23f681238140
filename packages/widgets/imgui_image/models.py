"""Typed models shared by the widget builders and backends."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Tuple, Union

import numpy as np


Vec2 = Tuple[float, float]
Vec4 = Tuple[float, float, float, float]

UV_MIN: Vec2 = (0.0, 0.0)
UV_MAX: Vec2 = (1.0, 1.0)
WHITE: Vec4 = (1.0, 1.0, 1.0, 1.0)
TRANSPARENT: Vec4 = (0.0, 0.0, 0.0, 0.0)


class StyleVar(str, Enum):
    """Style variables this layer overrides, valued by their pyimgui constant name."""

    FRAME_PADDING = "STYLE_FRAME_PADDING"


@dataclass(frozen=True)
class TextureId:
    """Opaque handle to a texture owned by the renderer."""

    value: int

    @classmethod
    def of(cls, handle: Union["TextureId", int]) -> "TextureId":
        if isinstance(handle, TextureId):
            return handle
        return cls(int(handle))

    def id(self) -> int:
        return self.value


def _as_vec(value: Any, n: int, what: str) -> tuple[float, ...]:
    arr = np.asarray(value, dtype=np.float32).reshape(-1)
    if arr.size != n:
        raise ValueError(f"{what} needs {n} components, got {arr.size}")
    return tuple(float(v) for v in arr)


def as_vec2(value: Any) -> Vec2:
    return _as_vec(value, 2, "Vec2")  # type: ignore[return-value]


def as_vec4(value: Any) -> Vec4:
    return _as_vec(value, 4, "Vec4")  # type: ignore[return-value]


@dataclass(frozen=True)
class BackendCall:
    name: str
    args: dict[str, Any] = field(default_factory=dict)
    result: Any = None
