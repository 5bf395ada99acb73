"""Structured logging for Writer log entries.

The containers themselves never log. Logging only happens when a Writer's
accumulated entries are forwarded to a logger through ``Writer.emit_log``,
which emits one ``writer.entry`` event per entry carrying ``entry``,
``index`` and ``size`` fields.

Entries may be arbitrary objects, including msgspec Structs such as
``Some``/``Nothing`` or the caller's own structured records. The
``normalize_entry`` processor turns them into plain builtins before
rendering, so JSON and console output show their fields rather than a repr.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import msgspec
import structlog

__all__ = [
    'WRITER_LOGGER',
    'configure_logging',
    'get_logger',
    'normalize_entry',
]

WRITER_LOGGER = 'monadkit.writer'
"""Logger name used by Writer.emit_log when no logger is given."""


def normalize_entry(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Convert a forwarded Writer entry into builtins.

    Events without an ``entry`` field pass through untouched. Values msgspec
    cannot convert fall back to their repr.
    """
    if 'entry' in event_dict:
        event_dict['entry'] = msgspec.to_builtins(event_dict['entry'], enc_hook=repr)
    return event_dict


def _get_shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        normalize_entry,
    ]


def _get_renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route structlog (and stdlib) records through one rendered handler.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use colored console output.
    """
    structlog.configure(
        processors=[
            *_get_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger, defaulting to the Writer entry logger."""
    return structlog.get_logger(name if name is not None else WRITER_LOGGER)
