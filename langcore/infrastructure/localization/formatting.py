"""Text formatting helpers: compact numbers, enum names and small caps."""

import math
from typing import Callable, List, Tuple

# (threshold, divisor, format key, default format); checked largest first
NUMBER_SCALES: List[Tuple[float, float, str, str]] = [
    (1_000_000_000_000, 1_000_000_000_000.0, "format_number.trillion", "{s}T"),
    (1_000_000_000, 1_000_000_000.0, "format_number.billion", "{s}B"),
    (1_000_000, 1_000_000.0, "format_number.million", "{s}M"),
    (1_000, 1_000.0, "format_number.thousand", "{s}K"),
]
DEFAULT_NUMBER_FORMAT_KEY = "format_number.default"
DEFAULT_NUMBER_FORMAT = "{s}"

SMALL_CAPS = {
    'a': 'ᴀ', 'b': 'ʙ', 'c': 'ᴄ', 'd': 'ᴅ', 'e': 'ᴇ', 'f': 'ꜰ', 'g': 'ɢ',
    'h': 'ʜ', 'i': 'ɪ', 'j': 'ᴊ', 'k': 'ᴋ', 'l': 'ʟ', 'm': 'ᴍ', 'n': 'ɴ',
    'o': 'ᴏ', 'p': 'ᴘ', 'q': 'ǫ', 'r': 'ʀ', 's': 'ꜱ', 't': 'ᴛ', 'u': 'ᴜ',
    'v': 'ᴠ', 'w': 'ᴡ', 'x': 'x', 'y': 'ʏ', 'z': 'ᴢ',
}


def round_one_decimal(value: float) -> float:
    """Rounds half up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10.0


def format_decimal(value: float) -> str:
    """Drops the fractional part when the value is whole (2.0 -> '2')."""
    if value == math.floor(value):
        return str(int(value))
    return str(value)


def format_number(number: float, lookup_format: Callable[[str, str], str] = lambda key, default: default) -> str:
    """Formats a number compactly with K/M/B/T suffixes.

    Args:
        number: The number to format.
        lookup_format: Returns the format string for a key, or the given
            default. Formats use '{s}' for the scaled number.

    Example:
        >>> format_number(1530)
        '1.5K'
    """
    for threshold, divisor, key, default in NUMBER_SCALES:
        if number >= threshold:
            value = round_one_decimal(number / divisor)
            return lookup_format(key, default).replace("{s}", format_decimal(value))
    value = round_one_decimal(number)
    return lookup_format(DEFAULT_NUMBER_FORMAT_KEY, DEFAULT_NUMBER_FORMAT).replace("{s}", format_decimal(value))


def format_enum_name(enum_name: str) -> str:
    """Turns 'DIAMOND_SWORD' into 'Diamond Sword'."""
    words = [word[0] + word[1:].lower() for word in enum_name.split("_") if word]
    return " ".join(words).strip()


def to_small_caps(text: str) -> str:
    """Maps letters to their Unicode small-caps forms; other characters pass through."""
    chars = []
    for char in text:
        if char.isalpha():
            lower = char.lower()
            chars.append(SMALL_CAPS.get(lower, lower))
        else:
            chars.append(char)
    return "".join(chars)
