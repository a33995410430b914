"""Local overlay and profile scaffolding."""

from .core import OverlayScaffolder

__all__ = [
    "OverlayScaffolder",
]
