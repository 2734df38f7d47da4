"""Reporter port for the scenario domain."""

from typing import Protocol


class ScenarioReporter(Protocol):
    def scenario_started(self, name: str, observer_types: list[str]) -> None: ...

    def finished_written(self, name: str, value: bool, write_index: int) -> None: ...

    def scenario_completed(
        self, name: str, notification_rounds: int, elapsed_seconds: float
    ) -> None: ...
