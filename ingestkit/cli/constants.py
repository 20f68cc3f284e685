"""Shared CLI constants."""

VALIDATION_EXIT_CODE = 2

__all__ = ["VALIDATION_EXIT_CODE"]
