"""ScenarioRunner: wires observers to a RealEstate and replays the configured writes."""

import time

from estate_watch.buyer.domain.customer import Customer
from estate_watch.config.domain.scenario import ScenarioConfig
from estate_watch.listing.domain.real_estate import RealEstate
from estate_watch.listing.domain.reporter import RealEstateReporter
from estate_watch.observation.domain.observer import Observer
from estate_watch.observation.domain.subject import Subject
from estate_watch.scenario.domain.reporter import ScenarioReporter
from estate_watch.scenario.domain.result import CustomerOutcome, ScenarioResult
from estate_watch.scenario.infrastructure.registry import (
    ObserverReporters,
    create_observer,
)


class ScenarioRunner:
    """Runs one scenario: build the subject, register observers, write the flag.

    Every observer is created before any is registered, so an unknown observer
    type fails the run before a single notification is sent. Exceptions raised
    by observers are not caught here.
    """

    def __init__(
        self,
        config: ScenarioConfig,
        real_estate_reporter: RealEstateReporter,
        observer_reporters: ObserverReporters,
        reporter: ScenarioReporter,
    ) -> None:
        self._config = config
        self._real_estate_reporter = real_estate_reporter
        self._observer_reporters = observer_reporters
        self._reporter = reporter

    def run(self) -> ScenarioResult:
        observers: list[Observer] = [
            create_observer(
                observer_type=observer_type,
                customer_config=self._config.customer,
                reporters=self._observer_reporters,
            )
            for observer_type in self._config.observers
        ]

        real_estate = RealEstate(reporter=self._real_estate_reporter)
        _register_all(subject=real_estate, observers=observers)

        self._reporter.scenario_started(
            name=self._config.name, observer_types=list(self._config.observers)
        )
        started_at = time.monotonic()

        for write_index, value in enumerate(self._config.finished_writes):
            self._reporter.finished_written(
                name=self._config.name, value=value, write_index=write_index
            )
            real_estate.set_finished(value)

        rounds = len(self._config.finished_writes)
        self._reporter.scenario_completed(
            name=self._config.name,
            notification_rounds=rounds,
            elapsed_seconds=time.monotonic() - started_at,
        )

        return ScenarioResult(
            name=self._config.name,
            finished=real_estate.finished,
            notification_rounds=rounds,
            observer_types=list(self._config.observers),
            customers=[
                CustomerOutcome(
                    balance=observer.balance,
                    withdrawals=observer.withdrawals,
                    state=observer.state,
                )
                for observer in observers
                if isinstance(observer, Customer)
            ],
        )


def _register_all(subject: Subject, observers: list[Observer]) -> None:
    for observer in observers:
        subject.register(observer)
