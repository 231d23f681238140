"""Image and image-button widget builders for immediate-mode GUIs."""

from .backend import ImguiBackend, PyImguiBackend
from .image import Image, ImageButton, LegacyImageButton
from .models import BackendCall, StyleVar, TextureId, as_vec2, as_vec4
from .recording import CallReport, RecordingBackend
from .ui import ContextError, Ui

__all__ = [
    "BackendCall",
    "CallReport",
    "ContextError",
    "Image",
    "ImageButton",
    "ImguiBackend",
    "LegacyImageButton",
    "PyImguiBackend",
    "RecordingBackend",
    "StyleVar",
    "TextureId",
    "Ui",
    "as_vec2",
    "as_vec4",
]
