"""Error types raised by scenario infrastructure."""

from estate_watch.core.errors import EstateWatchError


class ObserverTypeNotSupportedError(EstateWatchError):
    """Raised when the config names an observer type that has no implementation."""

    def __init__(self, observer_type: str) -> None:
        self.observer_type = observer_type
        super().__init__(
            f"Failed to create observer: unsupported observer type '{observer_type}'"
        )
