"""Structlog implementation of the ScenarioReporter port."""

import structlog


class StructlogScenarioReporter:
    """Delegates scenario events to structlog.

    Satisfies the ScenarioReporter protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scenario_started(self, name: str, observer_types: list[str]) -> None:
        self._log.info(
            "scenario.started", name=name, observer_types=observer_types
        )

    def finished_written(self, name: str, value: bool, write_index: int) -> None:
        self._log.debug(
            "scenario.finished_written",
            name=name,
            value=value,
            write_index=write_index,
        )

    def scenario_completed(
        self, name: str, notification_rounds: int, elapsed_seconds: float
    ) -> None:
        self._log.info(
            "scenario.completed",
            name=name,
            notification_rounds=notification_rounds,
            elapsed_seconds=round(elapsed_seconds, 4),
        )
