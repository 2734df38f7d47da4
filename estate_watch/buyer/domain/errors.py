"""Error types raised by the buyer domain."""

from estate_watch.core.errors import EstateWatchError


class PurchaseAttemptsExhaustedError(EstateWatchError):
    """Raised when a purchase needs more withdrawals than the customer allows."""

    def __init__(self, attempts: int, balance: int, threshold: int) -> None:
        self.attempts = attempts
        self.balance = balance
        self.threshold = threshold
        super().__init__(
            f"Failed to purchase: balance {balance} still below {threshold}"
            f" after {attempts} withdrawals"
        )


class InvalidCustomerTermsError(EstateWatchError):
    """Raised when a Customer is built with a non-positive amount."""

    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Failed to create customer: {field} must be positive, got {value}"
        )
