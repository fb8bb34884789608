"""
Core functionality for letter_freq.
"""

from letter_freq.core.ascii import (
    LETTER_COUNT,
    LETTERS,
    fold_case,
    is_ascii_letter,
    letter_index,
)
from letter_freq.core.base import CountSummary

__all__ = [
    # Base classes
    "CountSummary",
    # ASCII classification
    "LETTER_COUNT",
    "LETTERS",
    "is_ascii_letter",
    "fold_case",
    "letter_index",
]
