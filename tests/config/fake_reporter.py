"""Fake ConfigReporter for use in tests: records events without mocking."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigLoadedEvent:
    name: str
    observer_count: int


class FakeConfigReporter:
    def __init__(self) -> None:
        self.loaded: list[ConfigLoadedEvent] = []

    def config_loaded(self, name: str, observer_count: int) -> None:
        self.loaded.append(ConfigLoadedEvent(name=name, observer_count=observer_count))
