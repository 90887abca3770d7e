"""Application layer - use cases and configuration."""

from .commands import LayoutCommand
from .dtos import LayoutOutput

__all__ = [
    "LayoutCommand",
    "LayoutOutput",
]
