"""Delivers configured messages to a sink.

A message key in messages.yml may carry a chat line, a title/subtitle
pair, an action bar and a sound. MessageService resolves each through
the LanguageService and hands the rendered parts to a DeliverySink.
"""

import logging
import threading
from typing import Any, Dict, Mapping, Optional

from langcore.core.services.language_service import LanguageService
from langcore.domain.interfaces.user_interface import DeliverySink
from langcore.domain.models.common import MISSING_MESSAGE_PREFIX, RenderedText
from langcore.infrastructure.localization.color_codes import SECTION_SIGN, strip_all_color_codes

logger = logging.getLogger(__name__)

MISSING_KEY_FORMAT = SECTION_SIGN + "cMissing message key: {key}"


class MessageService:
    """Sends every configured part of a message to a delivery sink."""

    def __init__(self, language_service: LanguageService):
        self.language_service = language_service
        self._key_exists: Dict[str, bool] = {}
        self._key_exists_lock = threading.Lock()
        logger.info("MessageService initialized.")

    def send_message(
        self,
        sink: DeliverySink,
        key: str,
        placeholders: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Sends the chat line, title, action bar and sound configured for key.

        Parts that are absent or disabled are skipped. A missing key sends
        a red "Missing message key" notice instead.
        """
        if not self.check_key_exists(key):
            logger.warning(f"Message key not found: {key}")
            sink.send_message(RenderedText(MISSING_KEY_FORMAT.format(key=key)))
            return

        message = self.language_service.get_message(key, placeholders)
        if message is not None and not message.startswith(MISSING_MESSAGE_PREFIX):
            sink.send_message(RenderedText(message))

        self._send_extras(sink, key, placeholders)

    def _send_extras(self, sink: DeliverySink, key: str, placeholders: Optional[Mapping[str, Any]]) -> None:
        title = self.language_service.get_title(key, placeholders)
        subtitle = self.language_service.get_subtitle(key, placeholders)
        if title is not None or subtitle is not None:
            sink.send_title(title or "", subtitle or "")

        action_bar = self.language_service.get_action_bar(key, placeholders)
        if action_bar is not None:
            sink.send_action_bar(RenderedText(action_bar))

        sound_name = self.language_service.get_sound(key)
        if sound_name is not None:
            try:
                sink.play_sound(sound_name)
            except Exception as e:
                logger.warning(f"Invalid sound name for key {key}: {sound_name} ({e})")

    def send_console_message(self, key: str, placeholders: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        """Logs a message with every color code stripped.

        Returns:
            The logged text, or None if the key could not be resolved.
        """
        if not self.language_service.key_exists(key):
            logger.warning(f"Message key not found: {key}")
            return None

        message = self.language_service.get_message_for_console(key, placeholders)
        if message is None or message.startswith(MISSING_MESSAGE_PREFIX):
            logger.warning(f"Failed to retrieve message for key: {key}")
            return None

        console_message = strip_all_color_codes(message)
        logger.info(console_message)
        return console_message

    def check_key_exists(self, key: str) -> bool:
        """Checks key existence, remembering the answer until the memo is cleared."""
        with self._key_exists_lock:
            exists = self._key_exists.get(key)
            if exists is None:
                exists = self.language_service.key_exists(key)
                self._key_exists[key] = exists
            return exists

    def clear_key_exists_cache(self) -> None:
        with self._key_exists_lock:
            self._key_exists.clear()
        logger.debug("Cleared message key existence memo.")
