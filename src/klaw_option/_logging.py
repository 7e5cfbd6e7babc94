"""Structured logging configuration for klaw-option.

Library loggers live under the ``klaw_option`` stdlib logger and only emit
debug-level events. `configure_logging()` gives that logger its own
ProcessorFormatter handler (JSON or console) and never touches the root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _create_hook_processor(),
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    import structlog

    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


LIBRARY_LOGGER = 'klaw_option'

# Handler installed by the last configure_logging() call
_handler: logging.Handler | None = None


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route klaw-option log events to stderr through ProcessorFormatter.

    Only the ``klaw_option`` logger is touched: its level is set, the handler
    from a previous call is replaced and propagation is turned off. The root
    logger and the global structlog configuration stay as the host application
    left them.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    import structlog

    global _handler  # noqa: PLW0603

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False
    _handler = handler


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger backed by the stdlib logger ``name``.

    The logger is wrapped explicitly instead of going through the global
    structlog configuration, so library events follow the host application's
    stdlib levels and handlers and stay silent until `configure_logging()`
    (or the application) enables them.

    Args:
        name: Logger name. If None, the root logger is used.

    Returns:
        A structlog BoundLogger.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called for each log entry.

    Hooks receive a copy of the event dict and can be used for metrics,
    alerting or test assertions.

    Args:
        hook: Callable that receives log entry dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a processor that invokes log hooks."""

    def hook_processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for hook in _log_hooks:
            try:
                hook(event_dict.copy())
            except Exception:  # noqa: BLE001, S110
                pass  # A failing hook must not break logging
        return event_dict

    return hook_processor
