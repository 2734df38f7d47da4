"""Base exception class for all estate-watch-specific errors."""


class EstateWatchError(Exception):
    """Base class for all estate-watch errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
