"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import contextlib
import contextvars
from typing import Any, Iterator

import structlog

_export_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "csv_export_context", default=None
)


class ExportContextProcessor:
    """structlog processor that stamps the active export onto log events.

    Injects ``export_source`` and ``export_delivery`` while a
    :func:`bind_export_context` block is active, so that log lines emitted by
    sources or storage backends during a run can be attributed to it.
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        ctx = _export_context.get()
        if ctx:
            for key, value in ctx.items():
                event_dict.setdefault(key, value)
        return event_dict


@contextlib.contextmanager
def bind_export_context(**values: Any) -> Iterator[None]:
    """Bind ``export_*`` keys for the duration of the block."""
    current = _export_context.get() or {}
    token = _export_context.set({**current, **{f"export_{k}": v for k, v in values.items()}})
    try:
        yield
    finally:
        _export_context.reset(token)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ExportContextProcessor", "bind_export_context", "get_logger"]
