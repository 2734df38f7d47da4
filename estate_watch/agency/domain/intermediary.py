"""Intermediary: the estate agent reacting to a finished development."""

from estate_watch.agency.domain.reporter import IntermediaryReporter


class Intermediary:
    """Publishes the listing, then calls prospective buyers, once the house is finished.

    Stateless. Satisfies the Observer protocol structurally.
    """

    def __init__(self, reporter: IntermediaryReporter) -> None:
        self._reporter = reporter

    def react_to(self, value: bool) -> None:
        if value:
            self.publish_listing()
            self.call_buyers()

    def publish_listing(self) -> None:
        self._reporter.listing_published()

    def call_buyers(self) -> None:
        self._reporter.buyers_called()
