"""Interface for delivering rendered text to a recipient.

Defines the contract for presenting chat messages, titles, action bars,
sounds and multi-line text. Implementations treat all text as opaque:
it arrives already placeholder-substituted and color-translated.
"""

import abc
from typing import Any, Optional, Sequence

from langcore.domain.models.common import CacheStatistics, RenderedText


class DeliverySink(abc.ABC):
    """Abstract Base Class for presenting rendered text."""

    @abc.abstractmethod
    def send_message(self, text: RenderedText, **kwargs: Any) -> None:
        """Delivers a chat message.

        Args:
            text: The rendered message.
            **kwargs: Additional arguments for presentation.
        """
        pass

    @abc.abstractmethod
    def send_title(self, title: Optional[str], subtitle: Optional[str]) -> None:
        """Delivers a title and/or subtitle. Either may be empty."""
        pass

    @abc.abstractmethod
    def send_action_bar(self, text: RenderedText) -> None:
        pass

    @abc.abstractmethod
    def play_sound(self, sound_name: str) -> None:
        """Plays a named sound.

        Raises:
            ValueError: If the sound name is not recognized by the sink.
        """
        pass

    def send_lines(self, lines: Sequence[str], **kwargs: Any) -> None:
        """Delivers several lines, one message per line by default."""
        for line in lines:
            self.send_message(RenderedText(line), **kwargs)

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an operator-facing error. Sinks without an error channel ignore it."""
        pass

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an operator-facing informational message."""
        pass

    def display_statistics(self, stats: CacheStatistics) -> None:
        """Presents cache statistics. The default sends one line per category."""
        for name, category in stats["categories"].items():
            self.send_message(RenderedText(f"{name}: {category['size']}/{category['capacity']}"))
        self.send_message(RenderedText(
            f"hits={stats['hits']} misses={stats['misses']} hit_ratio={stats['hit_ratio']:.2f}"
        ))
