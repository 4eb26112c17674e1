"""Command-line front-end tools for a Redis-compatible server: option parsing, usage text and version reporting."""

__version__ = "0.1.0"

__all__ = ["__version__"]