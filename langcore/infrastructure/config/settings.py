"""Provides functions for loading and accessing configuration settings.

Supports loading from .env files, environment variables, and a dedicated
configuration file (e.g., ~/.langcore/config.yaml).
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from dotenv import load_dotenv

from langcore.domain.models.common import CacheCategory, LanguageFileType

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".langcore"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
ENV_FILE_NAME = ".env"
ENV_PREFIX = "LANGCORE_"

DEFAULT_LOCALE = "en_US"
DEFAULT_LANGUAGE_DIR = Path.cwd() / "language"

# --- Global Configuration Store (Simple Approach) ---
_config: Dict[str, Any] = {}
_test_config: Dict[str, Any] = {}
_runtime_config: Dict[str, Any] = {}
_loaded = False


def load_configuration(config_file: Optional[Path] = None, env_file: Optional[Path] = None) -> None:
    """Loads configuration from environment, .env file, and YAML file.

    Priority order (highest to lowest):
    1. Values set at runtime with set_config
    2. Environment Variables
    3. .env file
    4. YAML configuration file
    5. Default values passed to get_config

    Args:
        config_file: Path to the YAML configuration file (DEFAULT_CONFIG_FILE if None).
        env_file: Path to the .env file (searches upwards from cwd if None).
    """
    global _config, _loaded
    if _loaded:
        logger.debug("Configuration already loaded.")
        return

    _config = {}
    config_file = config_file or DEFAULT_CONFIG_FILE

    # 1. Load from YAML file (Lowest priority)
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                yaml_config = yaml.safe_load(f)
            if isinstance(yaml_config, dict):
                _config.update(_flatten(yaml_config))
                logger.info(f"Loaded configuration from YAML: {config_file}")
            elif yaml_config is not None:
                logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load or parse YAML config {config_file}: {e}")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    # 2. Load from .env file (Medium priority)
    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path:
        # override=False: real environment variables take precedence
        if load_dotenv(dotenv_path=dotenv_path, override=False):
            logger.info(f"Loaded environment variables from: {dotenv_path}")
    else:
        logger.debug("Skipping .env file loading (path not found or specified as None).")

    # 3. Environment variables and runtime overrides are handled in get_config

    _loaded = True
    logger.info("Configuration loading process completed.")


def reset_configuration() -> None:
    """Forgets loaded and runtime configuration so the next load_configuration re-reads it."""
    global _config, _loaded
    _config = {}
    _runtime_config.clear()
    _loaded = False


def _flatten(tree: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Flattens nested YAML into dotted keys, keeping the nested mappings too."""
    flat: Dict[str, Any] = {}
    for key, value in tree.items():
        dotted = f"{prefix}{key}"
        flat[dotted] = value
        if isinstance(value, Mapping):
            flat.update(_flatten(value, prefix=f"{dotted}."))
    return flat


def env_var_name(key: str) -> str:
    """Maps a config key to its environment variable ('cache.size' -> 'LANGCORE_CACHE_SIZE')."""
    return ENV_PREFIX + key.upper().replace('.', '_').replace('-', '_')


def _coerce_env_value(value: str) -> Any:
    if value.lower() == 'true':
        return True
    if value.lower() == 'false':
        return False
    try:
        if '.' in value:
            return float(value)
        return int(value)
    except (ValueError, TypeError):
        return value


def get_config(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by key.

    Priority:
    1. Test configuration (if in testing mode)
    2. Runtime values from set_config (e.g., CLI options)
    3. Environment variable (LANGCORE_ prefixed)
    4. YAML config
    5. Default value

    Args:
        key: The configuration key
        default: Default value if the key is not found

    Returns:
        The configuration value
    """
    if key in _test_config:
        return _test_config[key]

    if key in _runtime_config:
        return _runtime_config[key]

    env_key = env_var_name(key)
    if env_key in os.environ:
        return _coerce_env_value(os.environ[env_key])

    if key in _config:
        return _config[key]

    logger.debug(f"Config key '{key}' not found in environment or loaded config. Returning default: {default}")
    return default


def set_config(key: str, value: Any) -> None:
    """Sets a configuration value for the current process, overriding the environment.

    Args:
        key: Configuration key (e.g., 'language')
        value: Value to set
    """
    logger.debug(f"Setting config: {key} = {value}")
    _runtime_config[key] = value


def find_dotenv_path() -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    cwd = Path.cwd()
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None


# --- Convenience Functions ---

def get_default_locale() -> str:
    """Gets the active locale code."""
    locale = get_config('language', DEFAULT_LOCALE)
    return str(locale) if locale else DEFAULT_LOCALE


def get_language_dir() -> Path:
    """Gets the directory holding one subdirectory per locale."""
    return Path(str(get_config('language_dir', DEFAULT_LANGUAGE_DIR))).expanduser()


def get_defaults_dir() -> Optional[Path]:
    """Gets the optional directory of bundled default locale files."""
    defaults = get_config('defaults_dir')
    return Path(str(defaults)).expanduser() if defaults else None


def get_enabled_file_types() -> List[LanguageFileType]:
    """Gets the file types to load, from a list or comma-separated string.

    Unknown names are logged and skipped. Defaults to all four.
    """
    raw = get_config('file_types')
    if not raw:
        return list(LanguageFileType)
    names = raw.split(',') if isinstance(raw, str) else list(raw)
    file_types = []
    for name in names:
        try:
            file_types.append(LanguageFileType.from_name(str(name)))
        except ValueError as e:
            logger.warning(f"{e}. Skipping.")
    return file_types


def get_cache_capacities() -> Dict[str, Any]:
    """Gets per-category cache capacity overrides (cache.capacity.<category>).

    Values come from the config file mapping, with per-category
    environment variables such as LANGCORE_CACHE_CAPACITY_GUI_NAME on top.
    """
    capacities = get_config('cache.capacity', {})
    if not isinstance(capacities, Mapping):
        logger.warning(f"Ignoring cache.capacity: expected a mapping, got {type(capacities).__name__}")
        capacities = {}
    capacities = dict(capacities)
    for category in CacheCategory:
        value = get_cache_capacity(category.value)
        if value is not None:
            capacities[category.value] = value
    return capacities


def get_cache_capacity(category: str, default: Any = None) -> Any:
    """Gets the raw capacity setting for one cache category, e.g. 'rendered-string'."""
    return get_config(f"cache.capacity.{category}", default)


def get_logging_settings() -> Dict[str, Any]:
    """Gets logging level name, file and format."""
    return {
        'level': str(get_config('logging.level', 'INFO')).upper(),
        'file': get_config('logging.file'),
        'format': get_config('logging.format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
    }


def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """
    Set configuration values for testing purposes.
    These values will override any existing configuration.

    Args:
        config_dict: Dictionary of configuration values to set
    """
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")


def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()
    logger.debug("Cleared testing configuration")
