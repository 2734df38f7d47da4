"""Reporter port for the agency domain."""

from typing import Protocol


class IntermediaryReporter(Protocol):
    def listing_published(self) -> None: ...

    def buyers_called(self) -> None: ...
