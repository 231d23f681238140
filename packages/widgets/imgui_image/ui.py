"""Frame-scoped UI context that owns the backend handle and the id/style scopes."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Union

from imgui_image_core.config import AppConfig
from imgui_image_core.logging_setup import get_logger

from .backend import ImguiBackend
from .image import ImageButton
from .models import StyleVar, TextureId, Vec2


logger = get_logger("ui")


class ContextError(RuntimeError):
    """A builder was used outside the frame that owns its context."""


class Ui:
    """Borrowed handle to the renderer for the current frame.

    The host application owns the frame lifecycle and marks it with
    ``new_frame``/``end_frame`` (or the ``frame()`` context manager). Builders
    must not outlive the frame they were created in. With ``debug_checks`` on,
    that contract is checked at build time and stack balance is checked at
    ``end_frame``.
    """

    def __init__(self, backend: ImguiBackend, config: AppConfig | None = None) -> None:
        self.backend = backend
        self.config = (config or AppConfig()).widgets
        self.frame_count = 0
        self._in_frame = False
        self._id_depth = 0
        self._style_depth = 0

    @property
    def in_frame(self) -> bool:
        return self._in_frame

    @property
    def debug_checks(self) -> bool:
        return self.config.debug_checks

    def new_frame(self) -> None:
        self.frame_count += 1
        self._in_frame = True
        self._id_depth = 0
        self._style_depth = 0
        logger.debug("frame %d started", self.frame_count, extra={"event": "frame_started"})

    def end_frame(self) -> None:
        self._in_frame = False
        if self.debug_checks and (self._id_depth or self._style_depth):
            msg = f"unbalanced scopes at end of frame {self.frame_count}: id={self._id_depth} style={self._style_depth}"
            logger.error(msg, extra={"event": "unbalanced_scopes"})
            raise ContextError(msg)
        logger.debug("frame %d ended", self.frame_count, extra={"event": "frame_ended"})

    @contextmanager
    def frame(self) -> Iterator["Ui"]:
        self.new_frame()
        try:
            yield self
        except BaseException:
            self._in_frame = False
            raise
        self.end_frame()

    def check_context(self, widget: str, created_frame: int | None = None) -> None:
        if not self.debug_checks:
            return
        if not self._in_frame:
            msg = f"{widget} built outside of a frame"
        elif created_frame is not None and created_frame != self.frame_count:
            msg = f"{widget} created in frame {created_frame} but built in frame {self.frame_count}"
        else:
            return
        logger.error(msg, extra={"event": "context_violation"})
        raise ContextError(msg)

    @contextmanager
    def id_scope(self, key: Union[int, str]) -> Iterator[None]:
        self.backend.push_id(key)
        self._id_depth += 1
        try:
            yield
        finally:
            self._id_depth -= 1
            self.backend.pop_id()

    @contextmanager
    def style_var(self, var: StyleVar, value: Vec2) -> Iterator[None]:
        self.backend.push_style_var(var, value)
        self._style_depth += 1
        try:
            yield
        finally:
            self._style_depth -= 1
            self.backend.pop_style_var(1)

    @staticmethod
    def scratch_txt(text: Union[str, bytes]) -> str:
        if isinstance(text, bytes):
            return text.decode("utf-8")
        return str(text)

    def image_button(self, str_id: str, texture_id: Union[TextureId, int], size) -> bool:
        return self.image_button_config(str_id, texture_id, size).build()

    def image_button_config(self, str_id: str, texture_id: Union[TextureId, int], size) -> ImageButton:
        return ImageButton(self, str_id, texture_id, size)
