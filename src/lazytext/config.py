"""lazytext configuration system.

Configuration is YAML-based and optional: every setting has a default, and
the library works without any file present. Supports environment variable
substitution (${VAR}) in config files.

Configuration file discovery (in priority order):
1. Explicit path passed to load_config()
2. ./.lazytext/config.yaml
3. ./lazytext.yaml
"""

import codecs
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from lazytext.utils.logging import LogMode, parse_level, setup_logging

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class EncodingConfig:
    """How sinks decode encoded (bytes) fragments.

    Attributes:
        encoding: Codec name used for byte fragments
        errors: Codec error handler (strict, replace, ignore, ...)
    """

    encoding: str = "utf-8"
    errors: str = "replace"

    def __post_init__(self) -> None:
        """Validate encoding configuration."""
        try:
            codecs.getincrementaldecoder(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e

        try:
            codecs.lookup_error(self.errors)
        except LookupError as e:
            raise ValueError(f"Unknown codec error handler: {self.errors}") from e


@dataclass
class LoggingConfig:
    """Logging configuration.

    Attributes:
        mode: Output mode (human, verbose, json)
        level: Minimum log level name
    """

    mode: str = LogMode.HUMAN.value
    level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate logging configuration."""
        valid_modes = {m.value for m in LogMode}
        if self.mode not in valid_modes:
            raise ValueError(f"Invalid log mode: {self.mode}. Valid: {sorted(valid_modes)}")
        parse_level(self.level)


@dataclass
class LazyTextConfig:
    """Top-level lazytext configuration.

    Attributes:
        encoding: Byte fragment decoding settings
        logging: Logging output settings
    """

    encoding: EncodingConfig = field(default_factory=EncodingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} syntax. Strings, dicts and lists are processed
    recursively; anything else passes through unchanged.

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, str):

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return _ENV_VAR_RE.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.lazytext/config.yaml
    2. ./lazytext.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".lazytext" / "config.yaml",
        start_path / "lazytext.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> LazyTextConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        LazyTextConfig instance
    """
    data = substitute_env_vars(data)

    config = LazyTextConfig()

    if "encoding" in data:
        encoding_data = data["encoding"] or {}
        config.encoding = EncodingConfig(
            encoding=encoding_data.get("encoding", config.encoding.encoding),
            errors=encoding_data.get("errors", config.encoding.errors),
        )

    if "logging" in data:
        logging_data = data["logging"] or {}
        config.logging = LoggingConfig(
            mode=logging_data.get("mode", config.logging.mode),
            level=str(logging_data.get("level", config.logging.level)),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> LazyTextConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        LazyTextConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = LazyTextConfig()

    return config


# =============================================================================
# Active Configuration
# =============================================================================

_active_config: LazyTextConfig | None = None


def get_config() -> LazyTextConfig:
    """Return the process-wide configuration, defaulting on first use.

    The default is built in code rather than discovered from disk so that
    importing and rendering never touches the filesystem implicitly.
    """
    global _active_config
    if _active_config is None:
        _active_config = LazyTextConfig()
    return _active_config


def set_config(config: LazyTextConfig | None) -> None:
    """Replace the process-wide configuration (None restores defaults)."""
    global _active_config
    _active_config = config


def apply_config(config: LazyTextConfig) -> None:
    """Make ``config`` the active configuration and set up logging from it."""
    set_config(config)
    setup_logging(mode=config.logging.mode, level=config.logging.level)


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# lazytext configuration

# Decoding of byte fragments written to sinks
encoding:
  encoding: "utf-8"     # any Python codec name
  errors: "replace"     # strict, replace, ignore, backslashreplace

# Logging (the library only logs at DEBUG)
logging:
  mode: "human"         # human, verbose, json
  level: "WARNING"
'''
