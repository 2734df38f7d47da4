"""Structlog implementation of the ConfigReporter port."""

import structlog


class StructlogConfigReporter:
    """Delegates config domain events to structlog.

    Satisfies the ConfigReporter protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, observer_count: int) -> None:
        self._log.info("config.loaded", name=name, observer_count=observer_count)
