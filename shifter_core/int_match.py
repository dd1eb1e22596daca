"""
int_match.py - Trailing Integer Extraction

Splits a filename into stem / trailing integer / extension and renders the
shifted name back. All functions are pure and do not touch the filesystem.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import os
import re


_TRAILING_DIGITS = re.compile(r"[0-9]+\Z")
_SHIFT_VALUE = re.compile(r"^-?[0-9]+\Z")

MAX_NAME_LENGTH = 255


@dataclass(frozen=True)
class TrailingInteger:
    """Result of splitting a stem at its trailing integer"""
    stem: str           # Stem with the integer run removed
    value: int          # Parsed value (0 when absent)
    had_integer: bool   # Whether a run was found
    text: str           # The run exactly as written, sign included


def split_extension(name: str) -> Tuple[str, str]:
    """
    Split a basename on its last dot

    Args:
        name: Basename

    Returns:
        (stem, extension), the extension keeps its dot and is empty when
        the name has no dot
    """
    index = name.rfind(".")
    if index == -1:
        return name, ""
    return name[:index], name[index:]


def split_trailing_integer(stem: str) -> TrailingInteger:
    """
    Extract the trailing integer of a stem

    A hyphen right before the digits is read as a minus sign only when it
    starts the stem or follows a character that is neither a letter nor a
    digit ("-5", "run_-5", "a--5"). After a letter or digit it is a
    separator and stays in the stem ("item-5" -> "item-" and 5).

    Leading zeros belong to the run but are parsed as decimal.
    """
    match = _TRAILING_DIGITS.search(stem)
    if match is None:
        return TrailingInteger(stem=stem, value=0, had_integer=False, text="")

    start = match.start()
    negative = False
    if start > 0 and stem[start - 1] == "-":
        before = stem[:start - 1]
        if not before or not before[-1].isalnum():
            start -= 1
            negative = True

    value = int(match.group(), 10)
    if negative:
        value = -value

    return TrailingInteger(stem=stem[:start], value=value, had_integer=True, text=stem[start:])


def format_shifted(text: str, value: int, shifted: int) -> str:
    """
    Decimal text for a shifted integer

    No zero padding is applied. An unchanged value keeps its original text
    so a zero shift leaves names such as "frame007" intact.
    """
    if shifted == value:
        return text
    return str(shifted)


def is_valid_shift(text: str) -> bool:
    """Whether text is a signed decimal integer"""
    return bool(_SHIFT_VALUE.match(text))


def is_valid_filename(name: str) -> Tuple[bool, Optional[str]]:
    """
    Check if a generated filename is usable

    Args:
        name: Filename

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Filename cannot be empty"

    invalid_chars = '<>:"/\\|?*' if os.name == "nt" else "/\0"
    for char in invalid_chars:
        if char in name:
            return False, f"Filename contains invalid character: {char!r}"

    if len(name) > MAX_NAME_LENGTH:
        return False, f"Filename exceeds {MAX_NAME_LENGTH} characters"

    return True, None
