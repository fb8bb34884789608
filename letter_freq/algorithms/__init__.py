"""
Counting implementations for letter_freq.
"""

from letter_freq.algorithms.frequency import (
    DEFAULT_CHUNK_SIZE,
    FrequencyTable,
    count_frequencies,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "FrequencyTable",
    "count_frequencies",
]
