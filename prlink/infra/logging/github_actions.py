import sys
import traceback
from typing import Any, Mapping, TextIO

from prlink.core.ports.logger import Logger
from prlink.infra.logging.console import render_context


def escape_data(value: str) -> str:
    return value.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


class GitHubActionsLogger(Logger):
    """Writes workflow commands so errors show up as run annotations.

    Info lines are printed as-is; debug lines only appear when step
    debugging is enabled on the runner.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def debug(self, message: str, **kwargs: Any) -> None:
        self._command('debug', message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._write(render_context(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._command('warning', message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._command('error', message, kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        details = traceback.format_exc()
        if details and details != 'NoneType: None\n':
            message = f'{message}\n{details.rstrip()}'
        self._command('error', message, kwargs)

    def _command(self, name: str, message: str, context: Mapping[str, Any]) -> None:
        self._write(f'::{name}::{escape_data(render_context(message, context))}')

    def _write(self, line: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(f'{line}\n')
        stream.flush()
