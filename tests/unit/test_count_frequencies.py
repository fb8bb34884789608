"""
Unit tests for letter frequency counting over byte streams.
"""

import io
import random
import string
import tempfile
import unittest
from collections import Counter

from letter_freq.algorithms.frequency import FrequencyTable, count_frequencies


def _index(letter):
    return ord(letter) - ord("a")


class FailingStream:
    """Binary stream that yields some data, then fails like a broken device."""

    def __init__(self, data):
        self._data = data
        self._served = False

    def read(self, size=-1):
        if not self._served:
            self._served = True
            return self._data
        raise OSError("device error")


class TestCountFrequencies(unittest.TestCase):
    """Test cases for count_frequencies."""

    def test_hello_world(self):
        """Test the letter counts of a mixed sentence."""
        counts = [0] * 26
        count_frequencies(io.BytesIO(b"Hello World! 123."), counts)

        expected = {"h": 1, "e": 1, "l": 3, "o": 2, "w": 1, "r": 1, "d": 1}
        for letter in string.ascii_lowercase:
            self.assertEqual(
                counts[_index(letter)],
                expected.get(letter, 0),
                f"Wrong count for {letter!r}",
            )

    def test_empty_stream(self):
        """Test that an empty stream leaves every counter at zero."""
        counts = [7] * 26
        count_frequencies(io.BytesIO(b""), counts)
        self.assertEqual(counts, [0] * 26)

    def test_no_letters(self):
        """Test that digits, punctuation and whitespace are ignored."""
        counts = [0] * 26
        count_frequencies(io.BytesIO(b"123 !@#\t\n\x00\x7f"), counts)
        self.assertEqual(counts, [0] * 26)

    def test_case_insensitive(self):
        """Test that upper and lower case letters share a counter."""
        counts = [0] * 26
        count_frequencies(io.BytesIO(b"AAaa"), counts)
        self.assertEqual(counts[0], 4)
        self.assertEqual(sum(counts), 4)

        count_frequencies(io.BytesIO(b"AaAaBbBb"), counts)
        self.assertEqual(counts[0], 4)
        self.assertEqual(counts[1], 4)
        self.assertEqual(sum(counts[2:]), 0)

    def test_boundary_bytes(self):
        """Test the bytes just outside the letter ranges."""
        counts = [0] * 26
        # '@' '[' '`' '{' surround A-Z and a-z
        count_frequencies(io.BytesIO(b"@[`{AZaz"), counts)
        self.assertEqual(counts[0], 2)
        self.assertEqual(counts[25], 2)
        self.assertEqual(sum(counts), 4)

    def test_non_ascii_bytes_ignored(self):
        """Test that bytes above 0x7F are never counted, whatever their locale meaning."""
        counts = [0] * 26
        data = bytes(range(0x80, 0x100)) + "Ünïcödé".encode("utf-8")
        count_frequencies(io.BytesIO(data), counts)
        # Only the ASCII letters of the UTF-8 text remain: n, c, d
        self.assertEqual(counts[_index("n")], 1)
        self.assertEqual(counts[_index("c")], 1)
        self.assertEqual(counts[_index("d")], 1)
        self.assertEqual(sum(counts), 3)

    def test_sum_matches_letter_count(self):
        """Test that the total equals the number of ASCII letters on random input."""
        rng = random.Random(42)
        for _ in range(20):
            data = bytes(rng.randrange(256) for _ in range(rng.randrange(500)))
            counts = [0] * 26
            count_frequencies(io.BytesIO(data), counts)

            letters = [chr(b).lower() for b in data if chr(b) in string.ascii_letters]
            self.assertEqual(sum(counts), len(letters))

            expected = Counter(letters)
            for letter in string.ascii_lowercase:
                self.assertEqual(counts[_index(letter)], expected[letter])

    def test_counters_reset_between_calls(self):
        """Test that a second call reflects only the second stream."""
        counts = [0] * 26
        count_frequencies(io.BytesIO(b"aaaa zzz"), counts)
        self.assertEqual(counts[0], 4)

        count_frequencies(io.BytesIO(b"b"), counts)
        self.assertEqual(counts[0], 0)
        self.assertEqual(counts[25], 0)
        self.assertEqual(counts[1], 1)

    def test_incoming_contents_irrelevant(self):
        """Test that arbitrary prior contents are zeroed before counting."""
        counts = list(range(100, 126))
        count_frequencies(io.BytesIO(b"q"), counts)
        self.assertEqual(sum(counts), 1)
        self.assertEqual(counts[_index("q")], 1)

    def test_chunk_size_independent(self):
        """Test that the result does not depend on the read size."""
        data = b"The quick brown fox jumps over the lazy dog. " * 37
        reference = [0] * 26
        count_frequencies(io.BytesIO(data), reference)

        for chunk_size in (1, 2, 3, 7, 64, 1 << 16):
            counts = [0] * 26
            count_frequencies(io.BytesIO(data), counts, chunk_size=chunk_size)
            self.assertEqual(counts, reference, f"chunk_size={chunk_size}")

        # Pangram repeated 37 times: every letter appears at least 37 times
        self.assertTrue(all(count >= 37 for count in reference))

    def test_none_stream_is_noop(self):
        """Test that a missing stream leaves the counters untouched."""
        counts = list(range(26))
        count_frequencies(None, counts)
        self.assertEqual(counts, list(range(26)))

    def test_none_counts_is_noop(self):
        """Test that a missing container does not consume the stream."""
        stream = io.BytesIO(b"abc")
        count_frequencies(stream, None)
        self.assertEqual(stream.tell(), 0)

        # Both missing
        count_frequencies(None, None)

    def test_stream_consumed_not_closed(self):
        """Test that the stream is read to the end and left open."""
        stream = io.BytesIO(b"prefix:abc")
        stream.seek(7)
        counts = [0] * 26
        count_frequencies(stream, counts)

        # Counting starts at the current position
        self.assertEqual(sum(counts), 3)
        self.assertFalse(stream.closed)
        self.assertEqual(stream.read(), b"")

    def test_file_stream(self):
        """Test counting from a file opened in binary mode."""
        with tempfile.TemporaryFile() as handle:
            handle.write(b"Mississippi")
            handle.seek(0)
            counts = [0] * 26
            count_frequencies(handle, counts)

        self.assertEqual(counts[_index("m")], 1)
        self.assertEqual(counts[_index("i")], 4)
        self.assertEqual(counts[_index("s")], 4)
        self.assertEqual(counts[_index("p")], 2)

    def test_frequency_table_container(self):
        """Test counting into a FrequencyTable."""
        table = FrequencyTable()
        table["z"] = 9
        count_frequencies(io.BytesIO(b"Hello World! 123."), table)

        self.assertEqual(table["l"], 3)
        self.assertEqual(table["z"], 0)
        self.assertEqual(table.total(), 10)

    def test_wrong_container_length(self):
        """Test that a container without 26 slots is rejected before reading."""
        stream = io.BytesIO(b"abc")
        with self.assertRaises(ValueError):
            count_frequencies(stream, [0] * 25)
        with self.assertRaises(ValueError):
            count_frequencies(stream, [0] * 27)
        self.assertEqual(stream.tell(), 0)

    def test_invalid_chunk_size(self):
        """Test that a non-positive chunk size is rejected."""
        with self.assertRaises(ValueError):
            count_frequencies(io.BytesIO(b"abc"), [0] * 26, chunk_size=0)

    def test_text_stream_rejected(self):
        """Test that a text-mode stream raises TypeError."""
        with self.assertRaises(TypeError):
            count_frequencies(io.StringIO("abc"), [0] * 26)

    def test_read_error_propagates(self):
        """Test that a read failure is not mistaken for end of stream."""
        counts = [0] * 26
        with self.assertRaises(OSError):
            count_frequencies(FailingStream(b"ab"), counts)

        # Counts hold what was read before the failure
        self.assertEqual(counts[0], 1)
        self.assertEqual(counts[1], 1)


if __name__ == "__main__":
    unittest.main()
