from typing import Any

from prlink.core.ports.logger import Logger


def _load_logfire():
    try:
        import logfire
    except ImportError as error:
        raise RuntimeError(
            'logfire library is not installed; install prlink[logfire]'
        ) from error
    return logfire


def configure_logfire(api_token: str, service_name: str = 'prlink') -> None:
    logfire = _load_logfire()
    logfire.configure(token=api_token, service_name=service_name)


def _literal(message: str) -> str:
    # Messages embed regex literals such as \d{3}; logfire treats braces as
    # template fields.
    return message.replace('{', '{{').replace('}', '}}')


class LogfireLogger(Logger):
    """Sends prlink's log lines to logfire, tagged with the logger name.

    ``static_context`` becomes attributes on every record.
    """

    def __init__(self, name: str, **static_context: Any) -> None:
        logfire = _load_logfire()
        self._logfire = logfire.with_tags(name)
        self._context = static_context

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logfire.debug(_literal(message), **self._attributes(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logfire.info(_literal(message), **self._attributes(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logfire.warn(_literal(message), **self._attributes(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logfire.error(_literal(message), **self._attributes(kwargs))

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logfire.exception(_literal(message), **self._attributes(kwargs))

    def _attributes(self, context: dict[str, Any]) -> dict[str, Any]:
        return {**self._context, **context}
