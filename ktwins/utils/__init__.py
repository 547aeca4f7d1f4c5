"""Utility functions for the ktwins TUI."""

from ktwins.utils.logging_config import configure_logging, resolve_level

__all__ = [
    "configure_logging",
    "resolve_level",
]
