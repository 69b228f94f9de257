"""Utility functions."""

from .validation import validate_table_name, validate_dialect, validate_placeholder_style

__all__ = ["validate_table_name", "validate_dialect", "validate_placeholder_style"]
