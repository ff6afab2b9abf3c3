"""langcore: localized message rendering with bounded LRU caching.

Loads per-locale YAML message files, renders them with placeholder
substitution and color-code translation, and memoizes the results in
fixed-capacity caches that are cleared together on reload.
"""

__version__ = "1.0.0"
