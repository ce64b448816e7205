"""Framebuffer texture formats and framebuffer settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class FramebufferTextureFormat(Enum):
    NONE = auto()
    RGBA8 = auto()
    BGRA8 = auto()
    RGB8 = auto()
    BGR8 = auto()
    RGBA16F = auto()
    RGBA32F = auto()
    RGB565 = auto()
    RGBA4 = auto()
    RG8 = auto()
    RG16F = auto()
    R32F = auto()
    R11F_G11F_B10F = auto()
    RGB9_E5 = auto()
    R8 = auto()
    SR8 = auto()
    SRGB8_ALPHA8 = auto()
    SBGRA8 = auto()
    RGB10_A2 = auto()
    R16 = auto()
    BC1_RGB = auto()
    BC1_RGBA = auto()
    BC2 = auto()
    BC3 = auto()
    BC4 = auto()
    BC5 = auto()
    BC6H = auto()
    BC7 = auto()
    ETC2_RGB = auto()
    ETC2_RGBA1 = auto()
    ETC2_RGBA8 = auto()
    EAC_R11 = auto()
    EAC_RG11 = auto()
    ASTC_4x4 = auto()
    ASTC_5x4 = auto()
    ASTC_5x5 = auto()
    ASTC_6x5 = auto()
    ASTC_6x6 = auto()
    ASTC_8x5 = auto()
    ASTC_8x6 = auto()
    ASTC_8x8 = auto()
    ASTC_10x5 = auto()
    ASTC_10x6 = auto()
    ASTC_10x8 = auto()
    ASTC_10x10 = auto()
    ASTC_12x10 = auto()
    ASTC_12x12 = auto()
    DEPTH16 = auto()
    DEPTH24X8 = auto()
    DEPTH32 = auto()
    DEPTH16_STENCIL8 = auto()
    DEPTH24_STENCIL8 = auto()
    DEPTH32_STENCIL8 = auto()
    STENCIL8 = auto()


def format_to_string(texture_format) -> str:
    """Return the display name of a texture format."""
    if texture_format is FramebufferTextureFormat.NONE:
        return "None"
    if isinstance(texture_format, FramebufferTextureFormat):
        return texture_format.name
    return "Missing format"


@dataclass
class FramebufferProperties:
    """Attachment formats and size of a framebuffer."""

    attachments: list = field(default_factory=list)
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        self.attachments = [FramebufferTextureFormat(a) for a in self.attachments]