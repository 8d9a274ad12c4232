from typing import Sequence


class PRLinkError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(PRLinkError):
    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        noun = "input" if len(self.missing) == 1 else "inputs"
        super().__init__(f"Missing required {noun}: {', '.join(self.missing)}")


class PatternError(PRLinkError):
    pass


class TicketNotFoundError(PRLinkError):
    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(
            f"Neither current branch nor title start with a Forecast ticket {pattern}."
        )


class UpdateRejectedError(PRLinkError):
    def __init__(self, message: str, status: int | None) -> None:
        self.status = status
        super().__init__(message)
