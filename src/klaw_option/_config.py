"""Library configuration: OptionConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_option._logging import configure_logging

__all__ = [
    'OptionConfig',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class OptionConfig:
    """Configuration for klaw-option.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON log lines when True, console output otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: OptionConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_OPTION_LOG_LEVEL, if set."""
    env_level = os.environ.get('KLAW_OPTION_LOG_LEVEL', '').strip()
    return env_level.upper() or None


def _detect_json_logs() -> bool:
    """Read the log format from KLAW_OPTION_LOG_JSON (default: JSON)."""
    env_json = os.environ.get('KLAW_OPTION_LOG_JSON', '').strip().lower()
    if not env_json or env_json in _TRUTHY:
        return True
    if env_json in _FALSY:
        return False
    logging.warning("Unknown KLAW_OPTION_LOG_JSON value '%s', defaulting to JSON", env_json)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> OptionConfig:
    """Initialize klaw-option with the given configuration.

    Unset arguments are resolved from the environment
    (``KLAW_OPTION_LOG_LEVEL`` and ``KLAW_OPTION_LOG_JSON``).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON log lines (True) or console output (False).

    Returns:
        The OptionConfig that was set.

    Example:
        ```python
        from klaw_option import init

        init(log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = OptionConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> OptionConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-option not initialized. Call klaw_option.init() first.'
        raise RuntimeError(msg)
    return _config
