from typing import Protocol, runtime_checkable

from prlink.core.schema.pr import UpdateRequest


@runtime_checkable
class PRUpdater(Protocol):
    def update(self, request: UpdateRequest) -> None:
        """Apply the changed fields; raise UpdateRejectedError when refused."""
        ...
