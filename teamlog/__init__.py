"""Team productivity tracker: daily work logs, rollups and report export."""

from .version import __version__

__all__ = ["__version__"]
