"""Command Handler: Orchestrates CLI command execution.

Receives commands from the main entry point (main.py) and delegates
the work to the language system's services, presenting results through
the delivery sink.
"""

import logging
from typing import Mapping, Optional

from langcore.core.language_system import LanguageSystem
from langcore.domain.interfaces.user_interface import DeliverySink
from langcore.domain.models.common import RenderedText

logger = logging.getLogger(__name__)

LORE_SECTIONS = ('gui', 'items')


class CommandHandler:
    """Handles incoming commands and delegates to appropriate services."""

    def __init__(self, language_system: LanguageSystem, ui: DeliverySink):
        """Initializes the CommandHandler with the language system and output sink."""
        self.language_system = language_system
        self.language_service = language_system.language_service
        self.message_service = language_system.message_service
        self.ui = ui

    def handle_message(self, key: str, placeholders: Optional[Mapping[str, str]] = None, console: bool = False) -> None:
        """Handles the 'message' command: delivers every configured part of a message."""
        logger.info(f"Handling 'message' command for key: {key}")
        try:
            if console:
                text = self.message_service.send_console_message(key, placeholders)
                if text is None:
                    self.ui.display_error(f"No console message for key: {key}")
            else:
                self.message_service.send_message(self.ui, key, placeholders)
        except Exception as e:
            logger.error(f"Message command failed: {e}", exc_info=True)
            self.ui.display_error(f"Message failed: {e}")

    def handle_render(self, text: str, placeholders: Optional[Mapping[str, str]] = None, plain: bool = False) -> None:
        """Handles the 'render' command: renders raw text with placeholders."""
        logger.info("Handling 'render' command.")
        try:
            if plain:
                rendered = self.language_service.apply_only_placeholders(text, placeholders)
            else:
                rendered = self.language_service.apply_placeholders_and_colors(text, placeholders)
            self.ui.send_message(RenderedText(rendered))
        except Exception as e:
            logger.error(f"Render command failed: {e}", exc_info=True)
            self.ui.display_error(f"Render failed: {e}")

    def handle_lore(self, key: str, placeholders: Optional[Mapping[str, str]] = None, section: str = 'items') -> None:
        """Handles the 'lore' command: renders lore lines, expanding multi-line placeholders."""
        logger.info(f"Handling 'lore' command for {section} key: {key}")
        if section not in LORE_SECTIONS:
            self.ui.display_error(f"Invalid section '{section}'. Choose 'gui' or 'items'.")
            return
        try:
            if section == 'gui':
                lines = self.language_service.get_gui_item_lore_multiline(key, placeholders)
            else:
                lines = self.language_service.get_item_lore_multiline(key, placeholders)
            if not lines:
                self.ui.display_info(f"No lore defined for '{key}'.")
                return
            self.ui.send_lines(lines)
        except Exception as e:
            logger.error(f"Lore command failed: {e}", exc_info=True)
            self.ui.display_error(f"Lore failed: {e}")

    def handle_stats(self) -> None:
        """Handles the 'stats' command."""
        logger.info("Handling 'stats' command.")
        try:
            self.ui.display_statistics(self.language_service.statistics())
        except Exception as e:
            logger.error(f"Stats command failed: {e}", exc_info=True)
            self.ui.display_error(f"Failed to read cache statistics: {e}")

    def handle_reload(self) -> None:
        """Handles the 'reload' command."""
        logger.info("Handling 'reload' command.")
        try:
            self.language_system.reload()
            self.ui.display_info(f"Reloaded language files for '{self.language_system.locale_store.locale}'.")
        except Exception as e:
            logger.error(f"Reload command failed: {e}", exc_info=True)
            self.ui.display_error(f"Reload failed: {e}")

    def handle_clear_cache(self) -> None:
        """Handles the 'clear-cache' command."""
        logger.info("Handling 'clear-cache' command.")
        try:
            self.language_service.clear_cache()
            self.message_service.clear_key_exists_cache()
            self.ui.display_info("All language caches cleared.")
        except Exception as e:
            logger.error(f"Failed to clear cache: {e}", exc_info=True)
            self.ui.display_error(f"Failed to clear cache: {e}")
