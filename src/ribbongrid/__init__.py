"""Numbered ribbon grid pattern generator with animation frontends."""

__version__ = "0.1.0"

from .core.pattern import Cell, ColorClass, generate_pattern
from .core.driver import AnimationDriver

__all__ = ["Cell", "ColorClass", "generate_pattern", "AnimationDriver"]
