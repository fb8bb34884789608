"""
ASCII classification helpers for letter_freq.

Classification works on raw byte values with explicit ranges, so the result
never depends on the process locale. Bytes outside 0x00-0x7F are never
letters.
"""

from typing import Union

LETTER_COUNT = 26
LETTERS = "abcdefghijklmnopqrstuvwxyz"

_UPPER_A = 0x41
_UPPER_Z = 0x5A
_LOWER_A = 0x61
_LOWER_Z = 0x7A
_CASE_BIT = 0x20


def is_ascii_letter(byte: int) -> bool:
    """
    Check whether a byte value is an ASCII letter (A-Z or a-z).

    Args:
        byte: The byte value (0-255).

    Returns:
        True if the byte is an ASCII letter.
    """
    return _UPPER_A <= byte <= _UPPER_Z or _LOWER_A <= byte <= _LOWER_Z


def fold_case(byte: int) -> int:
    """
    Map an uppercase ASCII letter to its lowercase byte.

    Any other byte value is returned unchanged.
    """
    if _UPPER_A <= byte <= _UPPER_Z:
        return byte | _CASE_BIT
    return byte


def letter_index(letter: Union[int, str, bytes]) -> int:
    """
    Get the counter index (0-25) of a letter, case-insensitively.

    Args:
        letter: A byte value, a one-character string or a one-byte bytes object.

    Returns:
        The index of the letter, 0 for 'a' through 25 for 'z'.

    Raises:
        KeyError: If the value is not a single ASCII letter.
    """
    if isinstance(letter, str):
        if len(letter) != 1 or not letter.isascii():
            raise KeyError(letter)
        byte = ord(letter)
    elif isinstance(letter, (bytes, bytearray)):
        if len(letter) != 1:
            raise KeyError(letter)
        byte = letter[0]
    elif isinstance(letter, int) and not isinstance(letter, bool):
        byte = letter
    else:
        raise KeyError(letter)

    if not is_ascii_letter(byte):
        raise KeyError(letter)
    return fold_case(byte) - _LOWER_A
