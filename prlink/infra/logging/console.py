import logging
import sys
from typing import Any, Mapping, TextIO

from prlink.core.ports.logger import Logger

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def render_context(message: str, context: Mapping[str, Any]) -> str:
    if not context:
        return message
    pairs = ' '.join(f'{key}={value!r}' for key, value in context.items())
    return f'{message} | {pairs}'


class _ContextFormatter(logging.Formatter):
    # formatMessage keeps the context on the message line, above any traceback.
    def formatMessage(self, record: logging.LogRecord) -> str:
        base = super().formatMessage(record)
        return render_context(base, getattr(record, 'context', None) or {})


class ConsoleLogger(Logger):
    """Plain ``logging`` backend for running prlink outside of Actions.

    ``static_context`` (for example the repository) is attached to every
    line, before the per-call context.
    """

    def __init__(
        self,
        name: str,
        level: str = 'INFO',
        stream: TextIO | None = None,
        **static_context: Any,
    ) -> None:
        self._context = static_context
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        if not self._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(_ContextFormatter(LOG_FORMAT))
            self._logger.addHandler(handler)
        self._logger.propagate = False

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs, exc_info=True)

    def _log(
        self,
        level: int,
        message: str,
        context: Mapping[str, Any],
        exc_info: bool = False,
    ) -> None:
        self._logger.log(
            level,
            message,
            exc_info=exc_info,
            extra={'context': {**self._context, **context}},
        )
