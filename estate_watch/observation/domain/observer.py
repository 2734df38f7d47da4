"""Observer protocol: anything that can receive a published flag value."""

from typing import Protocol


class Observer(Protocol):
    """Receives the subject's current value on every notification.

    Implementations may perform arbitrary side effects. The return value is
    never consumed, and exceptions raised here propagate to the subject's
    caller.
    """

    def react_to(self, value: bool) -> None: ...
