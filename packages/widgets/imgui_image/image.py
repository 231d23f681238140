"""Image and image-button widget builders."""

from __future__ import annotations

import warnings
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Union

from imgui_image_core.logging_setup import get_logger

from .models import TRANSPARENT, UV_MAX, UV_MIN, WHITE, StyleVar, TextureId, Vec2, Vec4, as_vec2, as_vec4

if TYPE_CHECKING:
    from .ui import Ui


logger = get_logger("image")


def _deprecated_size() -> None:
    warnings.warn("just set the size in the constructor", DeprecationWarning, stacklevel=3)


@dataclass(init=False)
class _TexturedWidget:
    """Fields and setters shared by every textured widget.

    Setters mutate the builder and return it for chaining. Values are not
    validated; degenerate UV rectangles or out-of-range colours are passed
    through to the renderer as given.
    """

    texture_id: TextureId
    extent: Vec2
    uv_min: Vec2 = UV_MIN
    uv_max: Vec2 = UV_MAX
    tint: Vec4 = WHITE

    def __init__(self, texture_id: Union[TextureId, int], size: Any) -> None:
        self.texture_id = TextureId.of(texture_id)
        self.extent = as_vec2(size)
        self.uv_min = UV_MIN
        self.uv_max = UV_MAX
        self.tint = WHITE

    def size(self, size: Any):
        """Sets the size. Deprecated: pass it to the constructor."""
        _deprecated_size()
        self.extent = as_vec2(size)
        return self

    def uv0(self, uv0: Any):
        """Sets uv0 (default ``(0.0, 0.0)``)."""
        self.uv_min = as_vec2(uv0)
        return self

    def uv1(self, uv1: Any):
        """Sets uv1 (default ``(1.0, 1.0)``)."""
        self.uv_max = as_vec2(uv1)
        return self

    def tint_color(self, tint: Any):
        """Sets the tint color (default: no tint)."""
        self.tint = as_vec4(tint)
        return self


@dataclass(init=False)
class Image(_TexturedWidget):
    """Builder for an image widget."""

    border: Vec4 = TRANSPARENT

    def __init__(self, texture_id: Union[TextureId, int], size: Any) -> None:
        super().__init__(texture_id, size)
        self.border = TRANSPARENT

    @classmethod
    def new(cls, texture_id: Union[TextureId, int], size: Any) -> "Image":
        return cls(texture_id, size)

    def border_color(self, border: Any) -> "Image":
        """Sets the border color (default: no border)."""
        self.border = as_vec4(border)
        return self

    def build(self, ui: "Ui") -> None:
        ui.check_context("Image")
        ui.backend.image(self.texture_id.id(), self.extent, self.uv_min, self.uv_max, self.tint, self.border)
        logger.debug("image built texture=%d", self.texture_id.id(), extra={"event": "image_built"})


@dataclass(init=False)
class _ButtonWidget(_TexturedWidget):
    background: Vec4 = TRANSPARENT

    def __init__(self, texture_id: Union[TextureId, int], size: Any) -> None:
        super().__init__(texture_id, size)
        self.background = TRANSPARENT

    def background_color(self, background: Any):
        """Sets the background color (default: no background)."""
        self.background = as_vec4(background)
        return self

    def _forward(self, ui: "Ui", label: str):
        return ui.backend.image_button(
            label,
            self.texture_id.id(),
            self.extent,
            self.uv_min,
            self.uv_max,
            self.background,
            self.tint,
        )


@dataclass(init=False)
class ImageButton(_ButtonWidget):
    """Builder for an image button identified by an explicit string id.

    Two buttons with the same texture and parameters are distinct widgets as
    long as their ids differ. ``build`` returns True on the frame the button
    was clicked; nothing is remembered between frames.
    """

    str_id: str = ""
    ui: Optional["Ui"] = field(default=None, compare=False, repr=False)
    _frame: int = field(default=0, compare=False, repr=False)

    def __init__(self, ui: "Ui", str_id: str, texture_id: Union[TextureId, int], size: Any) -> None:
        super().__init__(texture_id, size)
        self.ui = ui
        self.str_id = str_id
        self._frame = ui.frame_count

    @classmethod
    def new_with_id(cls, ui: "Ui", str_id: str, texture_id: Union[TextureId, int], size: Any) -> "ImageButton":
        warnings.warn("use ui.image_button_config(...) instead", DeprecationWarning, stacklevel=2)
        return cls(ui, str_id, texture_id, size)

    @staticmethod
    def new(texture_id: Union[TextureId, int], size: Any) -> "LegacyImageButton":
        warnings.warn("use ui.image_button_config(...) instead", DeprecationWarning, stacklevel=2)
        return LegacyImageButton(texture_id, size)

    def build(self) -> bool:
        ui = self.ui
        ui.check_context("ImageButton", self._frame)
        clicked = self._forward(ui, ui.scratch_txt(self.str_id))
        logger.debug("image button %r built clicked=%s", self.str_id, clicked, extra={"event": "image_button_built"})
        return clicked


@dataclass(init=False)
class LegacyImageButton(_ButtonWidget):
    """Image button identified by its texture handle.

    Two legacy buttons sharing a texture in the same id scope resolve to the
    same widget, whatever their other parameters. Wrap them in distinct
    ``ui.id_scope`` blocks or move to ``ImageButton``.
    """

    padding: int = -1

    def __init__(self, texture_id: Union[TextureId, int], size: Any) -> None:
        super().__init__(texture_id, size)
        self.padding = -1

    def frame_padding(self, frame_padding: int) -> "LegacyImageButton":
        """Sets the frame padding (default: frame padding from style).

        - ``< 0``: frame padding from style
        - ``= 0``: no framing
        - ``> 0``: explicit framing size in pixels
        """
        self.padding = int(frame_padding)
        return self

    def build(self, ui: "Ui") -> bool:
        ui.check_context("LegacyImageButton")
        with ExitStack() as scopes:
            scopes.enter_context(ui.id_scope(self.texture_id.id()))
            if self.padding >= 0:
                pad = float(self.padding)
                scopes.enter_context(ui.style_var(StyleVar.FRAME_PADDING, (pad, pad)))
            clicked = self._forward(ui, ui.config.legacy_label)
        logger.debug(
            "legacy image button built texture=%d clicked=%s",
            self.texture_id.id(),
            clicked,
            extra={"event": "legacy_image_button_built"},
        )
        return clicked
