"""Main entry point for the langcore application.

Sets up the Typer CLI application, performs dependency injection (Composition Root),
defines CLI commands, and delegates execution to the CommandHandler.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional

import typer

logger = logging.getLogger(__name__)

# --- Core Layer ---
from langcore.core.command_handler import CommandHandler
from langcore.core.language_system import LanguageSystem

# --- Infrastructure Layer ---
# Config
from langcore.infrastructure.config.settings import (
    get_cache_capacities,
    get_default_locale,
    get_defaults_dir,
    get_enabled_file_types,
    get_language_dir,
    get_logging_settings,
    load_configuration,
    set_config,
)
# UI
from langcore.infrastructure.cli.display import ConsoleDisplay
# Cache
from langcore.infrastructure.cache.registry import parse_capacity_overrides
# Monitoring
from langcore.infrastructure.monitoring.logger_setup import level_from_name, setup_logging

# --- Dependency Injection Container (Manual) ---

def create_dependencies() -> Dict[str, Any]:
    """Creates and wires up all dependencies for the application.

    This acts as the Composition Root.
    """
    dependencies: Dict[str, Any] = {}
    try:
        # 1. Load Configuration First
        load_configuration()
        log_settings = get_logging_settings()
        setup_logging(
            log_level=level_from_name(log_settings['level']),
            log_file=log_settings['file'],
            log_format=log_settings['format'],
        )
        logger.info("Configuration and logging initialized.")

        # 2. Instantiate Infrastructure Adapters
        dependencies['ui'] = ConsoleDisplay()

        # 3. Build the language system
        dependencies['language_system'] = (
            LanguageSystem.builder()
            .language_dir(get_language_dir())
            .defaults_dir(get_defaults_dir())
            .locale(get_default_locale())
            .file_types(*get_enabled_file_types())
            .cache_capacities(parse_capacity_overrides(get_cache_capacities()))
            .build()
        )
        dependencies['language_system'].load()
        logger.info("Language system initialized.")

        # 4. Instantiate Command Handler
        dependencies['command_handler'] = CommandHandler(
            language_system=dependencies['language_system'],
            ui=dependencies['ui'],
        )
        logger.info("All dependencies initialized successfully.")
        return dependencies

    except Exception as e:
        logger.error(f"Fatal Error during application initialization: {e}", exc_info=True)
        if 'ui' in dependencies and dependencies['ui']:
            dependencies['ui'].display_error(f"Application Initialization Failed: {e}")
        else:
            print(f"FATAL ERROR during initialization: {e}", file=sys.stderr)
        raise typer.Exit(code=1)


# Created on first command so global options can adjust configuration first
_dependencies: Optional[Dict[str, Any]] = None


def get_dependencies() -> Dict[str, Any]:
    global _dependencies
    if _dependencies is None:
        _dependencies = create_dependencies()
    return _dependencies


def reset_dependencies() -> None:
    global _dependencies
    _dependencies = None


def get_handler() -> CommandHandler:
    return get_dependencies()['command_handler']


def parse_placeholders(raw: Optional[List[str]]) -> Dict[str, str]:
    """Parses repeated 'name=value' options. A literal '\\n' in a value becomes a line break."""
    placeholders: Dict[str, str] = {}
    for item in raw or []:
        name, sep, value = item.partition('=')
        if not sep or not name:
            raise typer.BadParameter(f"Placeholder must look like name=value, got '{item}'")
        placeholders[name] = value.replace('\\n', '\n')
    return placeholders


# --- Typer App Definition ---
app = typer.Typer(
    name="langcore",
    help="langcore: localized message lookup, rendering and caching.",
    add_completion=False,
)

# --- CLI Commands ---

# Shared placeholder option
PlaceholderOption = Annotated[
    Optional[List[str]],
    typer.Option("--placeholder", "-p", help="Placeholder as name=value. Repeatable.")
]


@app.command()
def message(
    key: Annotated[str, typer.Argument(help="Message key in messages.yml.")],
    placeholder: PlaceholderOption = None,
    console: Annotated[bool, typer.Option("--console", help="Log the color-stripped console text instead.")] = False,
):
    """Deliver a configured message (chat line, title, action bar and sound)."""
    get_handler().handle_message(key, parse_placeholders(placeholder), console=console)


@app.command()
def render(
    text: Annotated[str, typer.Argument(help="Raw text with {placeholders} and &-color codes.")],
    placeholder: PlaceholderOption = None,
    plain: Annotated[bool, typer.Option("--plain", help="Substitute placeholders without translating colors.")] = False,
):
    """Render raw text."""
    get_handler().handle_render(text, parse_placeholders(placeholder), plain=plain)


@app.command()
def lore(
    key: Annotated[str, typer.Argument(help="Lore key in gui.yml or items.yml.")],
    placeholder: PlaceholderOption = None,
    section: Annotated[str, typer.Option("--section", "-s", help="Section to read ('gui' or 'items').")] = 'items',
):
    """Render lore lines, expanding multi-line placeholders."""
    get_handler().handle_lore(key, parse_placeholders(placeholder), section=section)


@app.command()
def stats():
    """Show cache sizes, capacities and hit/miss counts."""
    get_handler().handle_stats()


@app.command()
def reload():
    """Reload the language files and clear every cache."""
    get_handler().handle_reload()


@app.command(name="clear-cache")
def clear_cache_command():
    """Clear every language cache."""
    get_handler().handle_clear_cache()


@app.callback()
def main_callback(
    language_dir: Annotated[
        Optional[Path],
        typer.Option("--language-dir", "-d", help="Directory holding one folder per locale.")
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale to load (e.g., 'en_US').")
    ] = None,
):
    """Global options applied before any command runs."""
    if language_dir is not None:
        set_config('language_dir', str(language_dir))
    if locale is not None:
        set_config('language', locale)


# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()


if __name__ == "__main__":
    cli_entry_point()
