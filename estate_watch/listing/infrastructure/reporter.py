"""Structlog implementation of the RealEstateReporter port."""

import structlog


class StructlogRealEstateReporter:
    """Delegates listing domain events to structlog.

    Satisfies the RealEstateReporter protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def observer_registered(self, observer_type: str, observer_count: int) -> None:
        self._log.debug(
            "listing.observer_registered",
            observer_type=observer_type,
            observer_count=observer_count,
        )

    def observer_already_registered(self, observer_type: str) -> None:
        self._log.debug(
            "listing.observer_already_registered", observer_type=observer_type
        )

    def observer_unregistered(self, observer_type: str, observer_count: int) -> None:
        self._log.debug(
            "listing.observer_unregistered",
            observer_type=observer_type,
            observer_count=observer_count,
        )

    def observer_not_registered(self, observer_type: str) -> None:
        self._log.debug("listing.observer_not_registered", observer_type=observer_type)

    def finished_changed(self, previous: bool, current: bool) -> None:
        self._log.info("listing.finished_changed", previous=previous, current=current)

    def notification_started(self, value: bool, observer_count: int) -> None:
        self._log.debug(
            "listing.notification.started", value=value, observer_count=observer_count
        )

    def notification_completed(self, value: bool, observer_count: int) -> None:
        self._log.debug(
            "listing.notification.completed",
            value=value,
            observer_count=observer_count,
        )
