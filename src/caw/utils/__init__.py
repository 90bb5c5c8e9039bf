"""Utility helpers for caw."""

from .logging import configure_logging

__all__ = ["configure_logging"]
