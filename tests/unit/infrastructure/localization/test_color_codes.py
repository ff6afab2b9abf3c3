import pytest

from langcore.infrastructure.localization import color_codes


@pytest.mark.parametrize("raw, expected", [
    ("&aGreen", "§aGreen"),
    ("&AGreen", "§aGreen"),
    ("&l&nBold", "§l§nBold"),
    ("&rReset", "§rReset"),
    ("&zNot a code", "&zNot a code"),
    ("Tom & Jerry", "Tom & Jerry"),
    ("", ""),
])
def test_translate_legacy_codes(raw, expected):
    assert color_codes.translate_color_codes(raw) == expected


def test_translate_hex_before_legacy():
    assert color_codes.translate_color_codes("&#FF5733Hi &aWorld") == "§x§F§F§5§7§3§3Hi §aWorld"


def test_hex_keeps_digit_case():
    assert color_codes.translate_hex_only("&#ab12Cd") == "§x§a§b§1§2§C§d"


def test_translate_none_passes_through():
    assert color_codes.translate_color_codes(None) is None


def test_partial_translations():
    text = "&#00FF00&aX"
    assert color_codes.translate_hex_only(text) == "§x§0§0§F§F§0§0&aX"
    assert color_codes.translate_legacy_only(text) == "&#00FF00§aX"


def test_strip_all_color_codes():
    assert color_codes.strip_all_color_codes("§x§F§F§0§0§0§0Red &aGreen &#123456Hex §lBold") == "Red Green Hex Bold"
    assert color_codes.strip_all_color_codes(None) == ""


def test_strip_colors_only_touches_translated_codes():
    assert color_codes.strip_colors("§aHi &b") == "Hi &b"


def test_has_colors():
    assert color_codes.has_colors("&aHi")
    assert color_codes.has_colors("§aHi")
    assert not color_codes.has_colors("Hi")
    assert not color_codes.has_colors(None)
