"""Reporter port for the listing domain: defines events in domain language."""

from typing import Protocol


class RealEstateReporter(Protocol):
    def observer_registered(self, observer_type: str, observer_count: int) -> None: ...

    def observer_already_registered(self, observer_type: str) -> None: ...

    def observer_unregistered(
        self, observer_type: str, observer_count: int
    ) -> None: ...

    def observer_not_registered(self, observer_type: str) -> None: ...

    def finished_changed(self, previous: bool, current: bool) -> None: ...

    def notification_started(self, value: bool, observer_count: int) -> None: ...

    def notification_completed(self, value: bool, observer_count: int) -> None: ...
