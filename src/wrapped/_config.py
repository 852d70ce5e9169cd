"""Library configuration: WrappedConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from wrapped._logging import configure_logging

__all__ = [
    'WrappedConfig',
    'get_config',
    'init',
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WrappedConfig:
    """Configuration for the wrapped library.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs when True, console output when False.
    """

    log_level: str | None = None
    json_logs: bool = True


_config: WrappedConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from WRAPPED_LOG_LEVEL, if set."""
    level = os.environ.get('WRAPPED_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read the log format from WRAPPED_LOG_FORMAT ("json" or "console").

    Unknown values fall back to JSON with a warning.
    """
    fmt = os.environ.get('WRAPPED_LOG_FORMAT', '').lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logger.warning("Unknown WRAPPED_LOG_FORMAT value '%s', defaulting to json", fmt)
    return True


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | str | None = None,
) -> WrappedConfig:
    """Initialize wrapped with the specified configuration.

    Arguments take precedence over the environment, which takes
    precedence over the defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = read
            WRAPPED_LOG_LEVEL, silent if unset.
        json_logs: True/"json" for JSON logs, False/"console" for console
            output. None = read WRAPPED_LOG_FORMAT.

    Returns:
        The WrappedConfig that was set.

    Raises:
        ValueError: If json_logs is a string other than "json" or "console".

    Example:
        ```python
        from wrapped import init

        init(log_level='DEBUG', json_logs='console')
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    if json_logs is None:
        resolved_json = _detect_json_logs()
    elif isinstance(json_logs, str):
        if json_logs.lower() not in ('json', 'console'):
            msg = f"Unknown log format '{json_logs}', expected 'json' or 'console'"
            raise ValueError(msg)
        resolved_json = json_logs.lower() == 'json'
    else:
        resolved_json = json_logs

    _config = WrappedConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> WrappedConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'wrapped not initialized. Call wrapped.init() first.'
        raise RuntimeError(msg)
    return _config
