"""Local platform access."""

from .files import find_files, is_valid_pattern

__all__ = ["find_files", "is_valid_pattern"]
