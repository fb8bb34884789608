"""
Example of counting letter frequencies with letter_freq.

This example counts the letters of an in-memory text, of a file, and of
standard input (when data is piped in), and prints a simple bar chart.
Reporting lives here: the library itself only fills the counters.

Usage:
    python examples/letter_frequency_demo.py [FILE ...]
"""

import io
import sys

from letter_freq import FrequencyTable, count_frequencies


def print_histogram(table: FrequencyTable, width: int = 40) -> None:
    """Print one bar per letter seen, scaled to the most frequent letter."""
    ranked = table.get_top_k()
    if not ranked:
        print("  (no letters)")
        return

    highest = ranked[0][1]
    for letter, count in sorted(ranked):
        bar = "#" * max(1, round(count / highest * width))
        print(f"  {letter} {count:6d} {bar}")


def demonstrate_in_memory():
    """Count letters of a byte string wrapped in a stream."""
    print("\n=== In-memory Stream Demo ===")

    counts = [0] * 26
    count_frequencies(io.BytesIO(b"Hello World! 123."), counts)
    print(f"Raw counters: {counts}")

    table = FrequencyTable(counts)
    print(f"Letters counted: {table.total()}")
    print(f"Top 3: {table.get_top_k(3)}")
    print_histogram(table)


def demonstrate_files(paths):
    """Count letters of each file and of all files together."""
    print("\n=== File Demo ===")

    combined = FrequencyTable()
    for path in paths:
        with open(path, "rb") as handle:
            table = FrequencyTable.from_stream(handle)
        print(f"\n{path}: {table.total()} letters")
        print_histogram(table)
        combined = combined.merge(table)

    if len(paths) > 1:
        print(f"\nAll files: {combined.total()} letters")
        print_histogram(combined)


def demonstrate_stdin():
    """Count letters piped through standard input."""
    print("\n=== Standard Input Demo ===")

    table = FrequencyTable()
    count_frequencies(sys.stdin.buffer, table)
    print(f"Letters counted: {table.total()}")
    print(f"Heavy hitters (>= 8%): {table.get_heavy_hitters(0.08)}")
    print_histogram(table)


if __name__ == "__main__":
    demonstrate_in_memory()

    if len(sys.argv) > 1:
        demonstrate_files(sys.argv[1:])

    if not sys.stdin.isatty():
        demonstrate_stdin()
