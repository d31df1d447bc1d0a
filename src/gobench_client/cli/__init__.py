"""Command-line interface for the gobench client."""

from gobench_client import __version__

__all__ = ["__version__"]
