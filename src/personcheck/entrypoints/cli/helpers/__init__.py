"""Helpers for the personcheck CLI."""

from .messages import error, success, warn

__all__ = ["error", "success", "warn"]
