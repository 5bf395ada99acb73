"""Library configuration: LoggingConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from monadkit._logging import configure_logging

__all__ = [
    'LoggingConfig',
    'get_config',
    'init',
]


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for monadkit's logging output.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render JSON if True, colored console output otherwise.
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: LoggingConfig | None = None


def _config_from_env() -> LoggingConfig:
    """Build a config from MONADKIT_LOG_LEVEL and MONADKIT_LOG_FORMAT."""
    level = os.environ.get('MONADKIT_LOG_LEVEL') or None
    fmt = os.environ.get('MONADKIT_LOG_FORMAT', '').lower()
    if fmt == 'console':
        json_output = False
    else:
        json_output = True
        if fmt and fmt != 'json':
            logging.warning("Unknown MONADKIT_LOG_FORMAT value '%s', defaulting to json", fmt)
    return LoggingConfig(log_level=level.upper() if level else None, json_output=json_output)


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> LoggingConfig:
    """Initialize monadkit logging.

    Explicit arguments take precedence over MONADKIT_LOG_LEVEL and
    MONADKIT_LOG_FORMAT.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = use env or stay silent.
        json_output: JSON rendering if True, console if False. None = use env.

    Returns:
        The LoggingConfig that was set.

    Example:
        ```python
        from monadkit import Writer, init

        init(log_level='DEBUG', json_output=False)
        Writer.of(3, ['parsed']).fold(str, Writer.emit_log())
        ```
    """
    global _config  # noqa: PLW0603

    env = _config_from_env()
    _config = LoggingConfig(
        log_level=log_level.upper() if log_level is not None else env.log_level,
        json_output=json_output if json_output is not None else env.json_output,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> LoggingConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'monadkit not initialized. Call monadkit.init() first.'
        raise RuntimeError(msg)
    return _config
