"""Reporter port for the config domain: defines events in domain language."""

from typing import Protocol


class ConfigReporter(Protocol):
    def config_loaded(self, name: str, observer_count: int) -> None: ...
