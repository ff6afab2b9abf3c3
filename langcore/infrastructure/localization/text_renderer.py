"""Text rendering: placeholder substitution and color translation.

Rendered results are memoized in a caller-supplied bounded cache keyed
by the raw text plus its placeholders, so repeated renders of the same
input skip both substitution and color translation.
"""

import logging
from typing import Callable, List, Mapping, Optional, Sequence

from langcore.domain.interfaces.cache import BoundedCache
from langcore.infrastructure.cache.cache_keys import build_cache_key
from langcore.infrastructure.cache.counters import HitMissCounters
from langcore.infrastructure.localization import color_codes

logger = logging.getLogger(__name__)

LINE_BREAK = "\n"


def placeholder_token(name: str) -> str:
    return "{" + name + "}"


def apply_placeholders(text: str, placeholders: Optional[Mapping[str, str]]) -> str:
    """Replaces every {name} occurrence for each supplied placeholder.

    Literal replacement, not regex. Tokens with no supplied value are
    left as they are.
    """
    if not placeholders:
        return text
    for name, value in placeholders.items():
        text = text.replace(placeholder_token(name), str(value))
    return text


def split_value_lines(value: str) -> List[str]:
    """Splits a multi-line placeholder value, dropping trailing empty segments."""
    segments = value.split(LINE_BREAK)
    while len(segments) > 1 and segments[-1] == "":
        segments.pop()
    return segments


class TextRenderer:
    """Renders raw locale text, memoizing results in bounded caches.

    Hit/miss accounting goes to the injected counters, once per cached
    render. Renders without a cache are not counted.
    """

    def __init__(self, counters: Optional[HitMissCounters] = None):
        self.counters = counters or HitMissCounters()

    def render_with_placeholders_and_color(
        self,
        text: Optional[str],
        placeholders: Optional[Mapping[str, str]] = None,
        cache: Optional[BoundedCache] = None,
    ) -> Optional[str]:
        """Substitutes placeholders, then translates color codes.

        Args:
            text: Raw text. None passes through as None, uncached.
            placeholders: Optional name -> value substitutions.
            cache: Cache for colorized results. Must not be shared with
                render_placeholders_only, since outputs differ per key.

        Returns:
            The rendered text.
        """
        return self._render(text, placeholders, cache, self._colorize)

    def render_placeholders_only(
        self,
        text: Optional[str],
        placeholders: Optional[Mapping[str, str]] = None,
        cache: Optional[BoundedCache] = None,
    ) -> Optional[str]:
        """Substitutes placeholders without color translation."""
        return self._render(text, placeholders, cache, apply_placeholders)

    def render_multiline(
        self,
        lines: Sequence[str],
        placeholders: Optional[Mapping[str, str]] = None,
        cache: Optional[BoundedCache] = None,
    ) -> List[str]:
        """Renders lore-like lines, expanding placeholders whose values span lines.

        A line that contains a placeholder whose value has line breaks is
        expanded into one output line per value segment. Single-line
        placeholders are resolved first. The first output line is the
        line with the placeholder replaced by the first segment; each
        further segment is prefixed with the text that preceded the
        placeholder. Expanded lines are color-translated but not cached.
        All other lines use the cached colorized path.
        """
        placeholders = placeholders or {}
        multiline = {
            name: str(value) for name, value in placeholders.items() if LINE_BREAK in str(value)
        }
        result: List[str] = []
        for line in lines:
            if not any(placeholder_token(name) in line for name in multiline):
                result.append(self.render_with_placeholders_and_color(line, placeholders, cache))
                continue

            processed = apply_placeholders(
                line,
                {name: value for name, value in placeholders.items() if name not in multiline},
            )
            for name, value in multiline.items():
                token = placeholder_token(name)
                if token not in processed:
                    continue
                segments = split_value_lines(value)
                line_start = processed[:processed.index(token)]
                result.append(color_codes.translate_color_codes(processed.replace(token, segments[0])))
                for segment in segments[1:]:
                    result.append(color_codes.translate_color_codes(line_start + segment))
        return result

    def _colorize(self, text: str, placeholders: Optional[Mapping[str, str]]) -> str:
        return color_codes.translate_color_codes(apply_placeholders(text, placeholders))

    def _render(
        self,
        text: Optional[str],
        placeholders: Optional[Mapping[str, str]],
        cache: Optional[BoundedCache],
        transform: Callable[[str, Optional[Mapping[str, str]]], str],
    ) -> Optional[str]:
        if text is None:
            return None
        if cache is None:
            return transform(text, placeholders)

        cache_key = build_cache_key(text, placeholders)
        cached = cache.get(cache_key)
        if cached is not None:
            self.counters.record_hit()
            logger.debug(f"Render cache hit for key: {cache_key!r}")
            return cached

        self.counters.record_miss()
        result = transform(text, placeholders)
        cache.put(cache_key, result)
        return result
