"""Configuration module for settings and renderer options."""

from .options import MathOptions, RendererOptions
from .settings import Settings, get_settings

__all__ = ["MathOptions", "RendererOptions", "Settings", "get_settings"]
