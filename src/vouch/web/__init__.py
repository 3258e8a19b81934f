"""HTTP surface for the vouch validation engine."""

from .api import app

__all__ = [
    "app",
]
