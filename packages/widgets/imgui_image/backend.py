"""Backend abstraction over the immediate-mode renderer's entry points."""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

from .models import StyleVar, Vec2, Vec4


@runtime_checkable
class ImguiBackend(Protocol):
    """Entry points the widget builders forward to.

    Each method maps onto one native call. Implementations must not
    buffer or reorder calls: push/pop pairs are issued in strict LIFO order
    and are expected to reach the renderer in that order.
    """

    def image(self, texture_id: int, size: Vec2, uv0: Vec2, uv1: Vec2, tint_col: Vec4, border_col: Vec4) -> None:
        ...

    def image_button(
        self,
        str_id: str,
        texture_id: int,
        size: Vec2,
        uv0: Vec2,
        uv1: Vec2,
        bg_col: Vec4,
        tint_col: Vec4,
    ) -> bool:
        ...

    def push_id(self, key: Union[int, str]) -> None:
        ...

    def pop_id(self) -> None:
        ...

    def push_style_var(self, var: StyleVar, value: Vec2) -> None:
        ...

    def pop_style_var(self, count: int = 1) -> None:
        ...


class PyImguiBackend:
    """Thin wrapper over the pyimgui module.

    pyimgui's ``image_button`` predates string ids, so the id is pushed as an
    identity scope around the call. Its ``border_color`` argument is the
    button background.
    """

    def __init__(self, module: Any | None = None) -> None:
        if module is None:
            import imgui  # type: ignore

            module = imgui
        self._imgui = module

    def image(self, texture_id: int, size: Vec2, uv0: Vec2, uv1: Vec2, tint_col: Vec4, border_col: Vec4) -> None:
        self._imgui.image(
            texture_id,
            size[0],
            size[1],
            uv0=uv0,
            uv1=uv1,
            tint_color=tint_col,
            border_color=border_col,
        )

    def image_button(
        self,
        str_id: str,
        texture_id: int,
        size: Vec2,
        uv0: Vec2,
        uv1: Vec2,
        bg_col: Vec4,
        tint_col: Vec4,
    ) -> bool:
        self._imgui.push_id(str_id)
        try:
            return bool(
                self._imgui.image_button(
                    texture_id,
                    size[0],
                    size[1],
                    uv0=uv0,
                    uv1=uv1,
                    tint_color=tint_col,
                    border_color=bg_col,
                    frame_padding=-1,
                )
            )
        finally:
            self._imgui.pop_id()

    def push_id(self, key: Union[int, str]) -> None:
        self._imgui.push_id(str(key))

    def pop_id(self) -> None:
        self._imgui.pop_id()

    def push_style_var(self, var: StyleVar, value: Vec2) -> None:
        self._imgui.push_style_var(getattr(self._imgui, var.value), value)

    def pop_style_var(self, count: int = 1) -> None:
        self._imgui.pop_style_var(count)
