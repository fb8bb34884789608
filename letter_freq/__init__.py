"""
letter_freq - ASCII Letter Frequency Counting

letter_freq reads a byte stream to exhaustion and tallies each ASCII letter,
case-insensitively, into a fixed table of 26 counters.
"""

__version__ = "0.1.0"

# Import main names to make them available at the top level
from letter_freq.algorithms.frequency import FrequencyTable, count_frequencies
from letter_freq.core.base import CountSummary

__all__ = [
    # Core base classes
    "CountSummary",
    # Counting
    "FrequencyTable",
    "count_frequencies",
]
