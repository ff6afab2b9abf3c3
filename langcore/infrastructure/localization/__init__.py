"""Localization package for locale content and text rendering.

This package provides the locale stores, color-code translation,
placeholder rendering and text formatting helpers.
"""

from langcore.infrastructure.localization.memory_store import InMemoryLocaleStore
from langcore.infrastructure.localization.text_renderer import TextRenderer
from langcore.infrastructure.localization.yaml_locale_store import YamlLocaleStore

__all__ = ['InMemoryLocaleStore', 'TextRenderer', 'YamlLocaleStore']
