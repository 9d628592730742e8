"""Command-line interface for stylecheck."""

from .main import main

__all__ = ["main"]
