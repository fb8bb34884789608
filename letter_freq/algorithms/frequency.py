"""
Letter frequency counting for letter_freq.

This module provides `count_frequencies`, which consumes a byte stream to
exhaustion and tallies each ASCII letter case-insensitively, and
`FrequencyTable`, the fixed-size container of 26 counters it fills.

Counting guarantees:
1. Only the bytes A-Z and a-z are counted; every other byte is ignored.
2. Case-folding is ASCII-only and does not depend on the process locale.
3. The result does not depend on how the stream is chunked.
"""

import sys
from typing import (
    Any,
    BinaryIO,
    Dict,
    Iterable,
    Iterator,
    List,
    MutableSequence,
    Optional,
    Tuple,
    Union,
)

from letter_freq.core.ascii import LETTER_COUNT, LETTERS, letter_index
from letter_freq.core.base import CountSummary

DEFAULT_CHUNK_SIZE = 8192

_LETTER_CODES = LETTERS.encode("ascii")

Key = Union[int, str, bytes]


def _check_count(value: Any) -> int:
    """
    Validate a counter value.

    Raises:
        TypeError: If the value is not an integer.
        ValueError: If the value is negative.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Counter values must be integers, not {type(value).__name__}")
    if value < 0:
        raise ValueError("Counter values must be non-negative")
    return value


class FrequencyTable(CountSummary):
    """
    Fixed-size table of 26 letter counters.

    Index i holds the count of the letter chr(ord('a') + i). The table always
    has exactly 26 entries and every entry is a non-negative integer. Counters
    can be addressed by index or, case-insensitively, by letter:

        >>> table = FrequencyTable()
        >>> table["B"] = 3
        >>> table[1]
        3
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, counts: Optional[Iterable[int]] = None):
        """
        Initialize a new frequency table.

        Args:
            counts: Optional iterable of exactly 26 initial counter values.
                    None means all counters start at zero.

        Raises:
            ValueError: If counts does not hold exactly 26 values or holds
                        a negative value.
            TypeError: If a value is not an integer.
        """
        if counts is None:
            self._counts: List[int] = [0] * LETTER_COUNT
            return

        values = [_check_count(value) for value in counts]
        if len(values) != LETTER_COUNT:
            raise ValueError(
                f"A frequency table needs exactly {LETTER_COUNT} counters, got {len(values)}"
            )
        self._counts = values

    @classmethod
    def from_stream(
        cls, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> "FrequencyTable":
        """
        Create a table filled from a byte stream.

        Args:
            stream: An open binary stream; it is read to the end but not closed.
            chunk_size: Number of bytes requested per read.

        Returns:
            A new FrequencyTable holding the letter counts of the stream.
        """
        table = cls()
        count_frequencies(stream, table, chunk_size=chunk_size)
        return table

    def _index(self, key: Key) -> int:
        if isinstance(key, int) and not isinstance(key, bool):
            if not -LETTER_COUNT <= key < LETTER_COUNT:
                raise IndexError("FrequencyTable index out of range")
            return key % LETTER_COUNT
        return letter_index(key)

    def __getitem__(self, key: Union[Key, slice]) -> Any:
        if isinstance(key, slice):
            return self._counts[key]
        return self._counts[self._index(key)]

    def __setitem__(self, key: Union[Key, slice], value: Any) -> None:
        if isinstance(key, slice):
            values = [_check_count(v) for v in value]
            if len(values) != len(range(*key.indices(LETTER_COUNT))):
                raise ValueError("Slice assignment cannot change the table length")
            self._counts[key] = values
            return
        self._counts[self._index(key)] = _check_count(value)

    def __delitem__(self, key: Any) -> None:
        raise ValueError("Counters cannot be removed from a FrequencyTable")

    def __len__(self) -> int:
        return LETTER_COUNT

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FrequencyTable):
            return self._counts == other._counts
        if isinstance(other, (list, tuple)):
            return self._counts == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        nonzero = ", ".join(f"{letter}={count}" for letter, count in self.get_top_k())
        return f"FrequencyTable({nonzero})"

    def reset(self) -> None:
        """Zero all 26 counters in place."""
        for i in range(LETTER_COUNT):
            self._counts[i] = 0

    def total(self) -> int:
        """Get the number of letters counted."""
        return sum(self._counts)

    def estimate_frequency(self, letter: Key) -> int:
        """
        Get the count of a letter.

        Counts are exact; the name matches the query API of frequency
        estimators so a table can stand in for one.

        Args:
            letter: The letter, as a one-character string, one byte or byte value.

        Returns:
            The number of times the letter was counted, in either case.

        Raises:
            KeyError: If letter is not an ASCII letter.
        """
        return self._counts[letter_index(letter)]

    def query(self, *args: Any, **kwargs: Any) -> int:
        """
        Query the count of a letter.

        This is a convenience method that calls estimate_frequency.

        Raises:
            ValueError: If no letter is given.
        """
        if len(args) > 0:
            return self.estimate_frequency(args[0])
        if "letter" in kwargs:
            return self.estimate_frequency(kwargs["letter"])
        raise ValueError("Missing required argument 'letter'")

    def relative_frequency(self, letter: Key) -> float:
        """
        Get the share of a letter among all counted letters.

        Returns:
            A value between 0.0 and 1.0; 0.0 when nothing has been counted.
        """
        total = self.total()
        if total == 0:
            return 0.0
        return self.estimate_frequency(letter) / total

    def get_heavy_hitters(self, threshold: float) -> Dict[str, int]:
        """
        Get letters whose share of the total is at least the threshold.

        Args:
            threshold: The minimum frequency ratio (0.0 to 1.0) to include.

        Returns:
            A dictionary mapping letters to their counts. Letters never seen
            are not included.

        Raises:
            ValueError: If threshold is not between 0 and 1.
        """
        if not 0 <= threshold <= 1:
            raise ValueError("Threshold must be between 0 and 1")

        min_count = threshold * self.total()
        return {
            letter: count
            for letter, count in zip(LETTERS, self._counts)
            if count > 0 and count >= min_count
        }

    def get_top_k(self, k: Optional[int] = None) -> List[Tuple[str, int]]:
        """
        Get the k most frequent letters.

        Args:
            k: The number of letters to return. If None, returns every letter
               that was seen at least once.

        Returns:
            A list of (letter, count) tuples sorted by count in descending
            order, ties broken alphabetically.

        Raises:
            ValueError: If k is negative.
        """
        if k is not None and k < 0:
            raise ValueError("k must be non-negative")

        seen = [(letter, count) for letter, count in zip(LETTERS, self._counts) if count > 0]
        # sorted() is stable, so equal counts keep alphabetical order
        ranked = sorted(seen, key=lambda pair: pair[1], reverse=True)
        if k is None:
            return ranked
        return ranked[:k]

    def as_dict(self) -> Dict[str, int]:
        """Get a mapping of every letter 'a'-'z' to its count."""
        return dict(zip(LETTERS, self._counts))

    def merge(self, other: "FrequencyTable") -> "FrequencyTable":
        """
        Merge this table with another one.

        Letter counting is commutative and associative, so the merged table of
        two streams equals the table of their concatenation.

        Args:
            other: Another FrequencyTable.

        Returns:
            A new table holding the element-wise sum.

        Raises:
            TypeError: If other is not a FrequencyTable.
        """
        self._check_same_type(other)
        return FrequencyTable(a + b for a, b in zip(self._counts, other._counts))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the table to a dictionary for serialization.

        Returns:
            A dictionary representation of the table.
        """
        data = self._base_dict()
        data["counts"] = list(self._counts)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FrequencyTable":
        """
        Create a table from a dictionary representation.

        Args:
            data: The dictionary containing the table state.

        Returns:
            A new FrequencyTable.

        Raises:
            ValueError: If the dictionary is malformed: counts missing, not a
                        list of 26 non-negative integers, or disagreeing with
                        the recorded type or total.
        """
        if "counts" not in data:
            raise ValueError("Missing 'counts' in FrequencyTable data")

        counts = data["counts"]
        if not isinstance(counts, (list, tuple)):
            raise ValueError(
                f"FrequencyTable counts must be a list, not {type(counts).__name__}"
            )
        if "type" in data and data["type"] != cls.__name__:
            raise ValueError(f"Cannot load {data['type']} data as {cls.__name__}")

        try:
            table = cls(counts)
        except TypeError as e:
            raise ValueError(f"Invalid FrequencyTable counts: {e}") from e

        if "total" in data and data["total"] != table.total():
            raise ValueError(
                f"Recorded total {data['total']} does not match counts "
                f"(sum {table.total()})"
            )
        return table

    def estimate_size(self) -> int:
        """
        Estimate the current memory usage of this table in bytes.

        Returns:
            Estimated memory usage in bytes.
        """
        size = super().estimate_size()
        size += sys.getsizeof(self._counts)
        size += sum(sys.getsizeof(count) for count in self._counts)
        return size

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the current state of the table.

        Returns:
            A dictionary with the base statistics plus the number of distinct
            letters seen and the most frequent letter (None if empty).
        """
        stats = super().get_stats()
        top = self.get_top_k(1)
        stats["distinct_letters"] = sum(1 for count in self._counts if count > 0)
        stats["most_common"] = top[0][0] if top else None
        return stats


def count_frequencies(
    stream: Optional[BinaryIO],
    counts: Optional[MutableSequence[int]],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    """
    Count the ASCII letters of a byte stream into 26 counters.

    All 26 slots of counts are zeroed first, then the stream is read until
    read() returns an empty chunk. Each byte A-Z or a-z is folded to lowercase
    and increments counts[byte - ord('a')]; every other byte is ignored.

    Passing None for either argument is a no-op: nothing is read, nothing is
    mutated and no error is raised.

    The stream is left at end of stream and is not closed. Errors raised by
    stream.read() propagate; counters then hold the letters read so far.

    Args:
        stream: An open binary stream (file opened with 'rb', io.BytesIO,
                sys.stdin.buffer, ...).
        counts: A FrequencyTable or any mutable sequence of exactly 26 slots.
        chunk_size: Number of bytes requested per read.

    Raises:
        ValueError: If counts does not have 26 slots or chunk_size is below 1.
        TypeError: If the stream yields something other than bytes, such as
                   str from a text-mode stream.
    """
    if stream is None or counts is None:
        return

    if len(counts) != LETTER_COUNT:
        raise ValueError(
            f"counts must have exactly {LETTER_COUNT} slots, got {len(counts)}"
        )
    if chunk_size < 1:
        raise ValueError("Chunk size must be at least 1")

    for i in range(LETTER_COUNT):
        counts[i] = 0

    while True:
        chunk = stream.read(chunk_size)
        if not isinstance(chunk, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"stream.read() must return bytes, not {type(chunk).__name__}"
            )
        if not chunk:
            break

        # bytes.lower() only maps A-Z, so non-ASCII bytes never become letters
        folded = bytes(chunk).lower()
        for index, code in enumerate(_LETTER_CODES):
            seen = folded.count(code)
            if seen:
                counts[index] += seen
