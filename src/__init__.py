"""Line-by-line dictionary spell checker package."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "models",
    "spell_check",
]
