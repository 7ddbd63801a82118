"""Utility helpers."""

from roomtypes.utils.logging import configure_logging

__all__ = ["configure_logging"]
