"""Structlog implementation of the IntermediaryReporter port."""

import structlog


class StructlogIntermediaryReporter:
    """Delegates agency domain events to structlog.

    Satisfies the IntermediaryReporter protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def listing_published(self) -> None:
        self._log.info(
            "agency.listing_published",
            message="The house is finished, the listing has been updated!",
        )

    def buyers_called(self) -> None:
        self._log.info(
            "agency.buyers_called",
            message=(
                "The house is finished, when are you free to come and see it?"
                " There is a discount on offer..."
            ),
        )
