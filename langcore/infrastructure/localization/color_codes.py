"""Color code translation for game chat text.

Supports both legacy ampersand codes (&a, &l, ...) and hex colors in the
&#RRGGBB form, converting them to the section-sign (§) escapes the game
client understands.
"""

import re
from typing import Optional

SECTION_SIGN = "§"
ALT_COLOR_CHAR = "&"

# &#RRGGBB, e.g. &#FF5733
HEX_PATTERN = re.compile(r"&#([A-Fa-f0-9]{6})")
# &0-&9, &a-&f colors, &k-&o formats, &r reset, &x hex prefix
LEGACY_PATTERN = re.compile(r"&([0-9A-FK-ORXa-fk-orx])")

# Already translated codes, including each digit of an expanded hex color
SECTION_CODE_PATTERN = re.compile(SECTION_SIGN + r"[0-9A-FK-ORXa-fk-orx]")
UNTRANSLATED_CODE_PATTERN = re.compile(r"&#[0-9a-fA-F]{6}|&[0-9a-fA-FxXk-orK-OR]")

WHITE = SECTION_SIGN + "f"


def hex_to_section_codes(hex_digits: str) -> str:
    """Expands six hex digits to the client's §x§R§R§G§G§B§B form."""
    return SECTION_SIGN + "x" + "".join(SECTION_SIGN + digit for digit in hex_digits)


def translate_hex_only(message: Optional[str]) -> Optional[str]:
    """Translates &#RRGGBB codes and leaves legacy codes untouched."""
    if message is None:
        return None
    return HEX_PATTERN.sub(lambda match: hex_to_section_codes(match.group(1)), message)


def translate_legacy_only(message: Optional[str]) -> Optional[str]:
    """Translates &-prefixed legacy codes and leaves hex codes untouched."""
    if message is None:
        return None
    return LEGACY_PATTERN.sub(lambda match: SECTION_SIGN + match.group(1).lower(), message)


def translate_color_codes(message: Optional[str]) -> Optional[str]:
    """Translates hex colors first, then legacy codes.

    Example:
        >>> translate_color_codes("&#FF5733Hi &aWorld")
        '§x§F§F§5§7§3§3Hi §aWorld'
    """
    if message is None:
        return None
    return translate_legacy_only(translate_hex_only(message))


def strip_colors(message: Optional[str]) -> Optional[str]:
    """Removes translated (§) color and format codes."""
    if message is None:
        return None
    return SECTION_CODE_PATTERN.sub("", message)


def strip_all_color_codes(message: Optional[str]) -> str:
    """Removes translated and untranslated codes, for console output."""
    if message is None:
        return ""
    return UNTRANSLATED_CODE_PATTERN.sub("", SECTION_CODE_PATTERN.sub("", message))


def has_colors(message: Optional[str]) -> bool:
    if message is None:
        return False
    return SECTION_SIGN in message or ALT_COLOR_CHAR in message
