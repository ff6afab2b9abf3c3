"""Cache key construction for text + placeholder inputs."""

from typing import Mapping, Optional

from langcore.domain.models.common import CacheKey

KEY_SEPARATOR = "|"
VALUE_SEPARATOR = "="


def build_cache_key(base_text: str, placeholders: Optional[Mapping[str, str]] = None) -> CacheKey:
    """Derives a cache key from base text and an optional placeholder mapping.

    Placeholder names are sorted before concatenation, so the same pairs
    produce the same key regardless of insertion order. With no
    placeholders the key is the base text itself.

    Separators are not escaped: a name, value or base text containing
    '|' or '=' can collide with a different input. Locale content is not
    expected to use them in placeholder names or values.

    Example:
        >>> build_cache_key("Hi {b} {a}", {"b": "2", "a": "1"})
        'Hi {b} {a}|a=1|b=2'
    """
    if not placeholders:
        return CacheKey(base_text)
    parts = [base_text]
    for name in sorted(placeholders):
        parts.append(f"{KEY_SEPARATOR}{name}{VALUE_SEPARATOR}{placeholders[name]}")
    return CacheKey("".join(parts))
