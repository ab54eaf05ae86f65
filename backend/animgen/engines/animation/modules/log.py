"""
`log` capability for generated animations: info, warn, error, debug.

Generated code cannot reach the logging package; this namespace is the only
way for it to leave a trace. Messages are rendered eagerly and truncated so
a runaway scene cannot flood the service log.
"""

import logging
from types import SimpleNamespace
from typing import Any

MAX_MESSAGE_CHARS = 2000

_LEVELS = {
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "debug": logging.DEBUG,
}


def _render(msg: Any, args: tuple[Any, ...]) -> str:
    text = str(msg)
    if args:
        try:
            text = text % args
        except (TypeError, ValueError):
            text = " ".join([text, *(str(a) for a in args)])
    if len(text) > MAX_MESSAGE_CHARS:
        text = text[:MAX_MESSAGE_CHARS] + "...[truncated]"
    return text


def make_log_module(
    *,
    logger_instance: logging.Logger | None = None,
    extra: dict[str, Any] | None = None,
) -> Any:
    """Build the `log` namespace. ``extra`` is attached to every record as context."""
    log = logger_instance or logging.getLogger(__name__)
    ext = dict(extra or {})

    def _make(level: int) -> Any:
        def emit(msg: Any, *args: Any) -> None:
            if log.isEnabledFor(level):
                log.log(level, "%s", _render(msg, args), extra=ext or None)

        return emit

    return SimpleNamespace(**{name: _make(level) for name, level in _LEVELS.items()})
