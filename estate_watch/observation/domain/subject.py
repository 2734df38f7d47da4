"""Subject protocol: owns observers and broadcasts its state to them."""

from typing import Protocol

from estate_watch.observation.domain.observer import Observer


class Subject(Protocol):
    """Holds an ordered, duplicate-free sequence of observers.

    Duplicates are judged by reference identity, not equality.
    """

    def register(self, observer: Observer) -> None:
        """Append observer unless the identical object is already registered."""
        ...

    def unregister(self, observer: Observer) -> None:
        """Remove observer if registered; no-op otherwise."""
        ...

    def notify(self) -> None:
        """Call react_to on every observer, synchronously, in registration order."""
        ...
