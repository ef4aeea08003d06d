from .errors import (
    ConfigError,
    DecodeError,
    EncodeError,
    NotFoundError,
    RotagifError,
    WriteError,
)
from .geometry import Affine, Rect, rotation_about_centers
from .palette import WEB_SAFE, Palette
from .render import composite_frame, render_frame
from .scheduler import Frame, FrameSequence, synthesize

__version__ = "0.1.0"

__all__ = [
    "Affine",
    "ConfigError",
    "DecodeError",
    "EncodeError",
    "Frame",
    "FrameSequence",
    "NotFoundError",
    "Palette",
    "Rect",
    "RotagifError",
    "WEB_SAFE",
    "WriteError",
    "composite_frame",
    "render_frame",
    "rotation_about_centers",
    "synthesize",
]
