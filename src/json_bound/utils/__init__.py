"""Utility functions for json-bound."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
