from typing import Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """Structured logger used by jobs.

    Keyword arguments are context rendered next to the message. Errors
    reported through ``error`` are what the run shows as failures, so callers
    pass the bare message there.
    """

    def debug(self, message: str, **kwargs: object) -> None: ...

    def info(self, message: str, **kwargs: object) -> None: ...

    def warning(self, message: str, **kwargs: object) -> None: ...

    def error(self, message: str, **kwargs: object) -> None: ...

    def exception(self, message: str, **kwargs: object) -> None: ...
