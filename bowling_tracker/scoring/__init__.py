"""Event-driven scoring engines."""

from . import bowling

__all__ = ["bowling"]
