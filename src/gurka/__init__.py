"""Command-line weather lookup against the MET Norway Locationforecast API."""

from __future__ import annotations

__version__ = "1.0.0"

__all__ = ["__version__"]
