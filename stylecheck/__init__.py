"""stylecheck - configuration resolution for a pluggable code style checker."""

__version__ = "0.1.0"
