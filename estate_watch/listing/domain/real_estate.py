"""RealEstate: the subject whose `finished` flag observers watch."""

from estate_watch.listing.domain.reporter import RealEstateReporter
from estate_watch.observation.domain.observer import Observer


class RealEstate:
    """A development project that announces when construction is finished.

    Every write through `set_finished` notifies all observers, even when the
    value is unchanged. Observer failures are not caught: the first exception
    aborts delivery to the observers registered after it.

    Satisfies the Subject protocol structurally.
    """

    def __init__(self, reporter: RealEstateReporter) -> None:
        self._reporter = reporter
        self._observers: list[Observer] = []
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def set_finished(self, value: bool) -> None:
        """Store value, then notify every observer regardless of the previous value."""
        previous = self._finished
        self._finished = value
        self._reporter.finished_changed(previous=previous, current=value)
        self.notify()

    def register(self, observer: Observer) -> None:
        if any(existing is observer for existing in self._observers):
            self._reporter.observer_already_registered(
                observer_type=_describe(observer)
            )
            return
        self._observers.append(observer)
        self._reporter.observer_registered(
            observer_type=_describe(observer),
            observer_count=len(self._observers),
        )

    def unregister(self, observer: Observer) -> None:
        remaining = [
            existing for existing in self._observers if existing is not observer
        ]
        if len(remaining) == len(self._observers):
            self._reporter.observer_not_registered(observer_type=_describe(observer))
            return
        self._observers = remaining
        self._reporter.observer_unregistered(
            observer_type=_describe(observer),
            observer_count=len(self._observers),
        )

    def notify(self) -> None:
        value = self._finished
        # Snapshot so the count reported matches the round actually delivered.
        observers = list(self._observers)
        self._reporter.notification_started(value=value, observer_count=len(observers))
        for observer in observers:
            observer.react_to(value)
        self._reporter.notification_completed(
            value=value, observer_count=len(observers)
        )


def _describe(observer: Observer) -> str:
    return type(observer).__name__
