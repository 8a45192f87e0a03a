"""Utility modules for teamlog."""

from . import formatting

__all__ = ["formatting"]
