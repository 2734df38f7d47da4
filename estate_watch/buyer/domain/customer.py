"""Customer: a buyer who withdraws funds until the house is affordable."""

from estate_watch.buyer.domain.errors import (
    InvalidCustomerTermsError,
    PurchaseAttemptsExhaustedError,
)
from estate_watch.buyer.domain.reporter import CustomerReporter
from estate_watch.buyer.domain.state import CustomerState


class Customer:
    """Buys the house once notified that it is finished.

    Each purchase attempt withdraws `withdrawal_amount` and checks the balance
    against `purchase_threshold`, repeating until the threshold is met. The
    retry is an explicit loop; `max_attempts` optionally bounds the number of
    withdrawals a single purchase may take.

    Satisfies the Observer protocol structurally.
    """

    def __init__(
        self,
        withdrawal_amount: int,
        purchase_threshold: int,
        reporter: CustomerReporter,
        max_attempts: int | None = None,
    ) -> None:
        if withdrawal_amount <= 0:
            raise InvalidCustomerTermsError(
                field="withdrawal_amount", value=withdrawal_amount
            )
        if purchase_threshold <= 0:
            raise InvalidCustomerTermsError(
                field="purchase_threshold", value=purchase_threshold
            )
        self._withdrawal_amount = withdrawal_amount
        self._purchase_threshold = purchase_threshold
        self._reporter = reporter
        self._max_attempts = max_attempts
        self._balance = 0
        self._withdrawals = 0
        self._state = CustomerState.WAITING

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def withdrawals(self) -> int:
        return self._withdrawals

    @property
    def state(self) -> CustomerState:
        return self._state

    def react_to(self, value: bool) -> None:
        if value:
            self.buy()

    def withdraw(self) -> None:
        self._balance += self._withdrawal_amount
        self._withdrawals += 1
        self._reporter.funds_withdrawn(
            amount=self._withdrawal_amount, balance=self._balance
        )

    def buy(self) -> None:
        """Withdraw until the balance covers the threshold, then purchase.

        Raises:
            PurchaseAttemptsExhaustedError: if max_attempts withdrawals were not
                enough to reach the threshold.
        """
        if self._state is CustomerState.PURCHASED:
            self._reporter.purchase_already_completed(balance=self._balance)
            return

        self._state = CustomerState.WITHDRAWING
        attempts = 0
        while True:
            if self._max_attempts is not None and attempts >= self._max_attempts:
                raise PurchaseAttemptsExhaustedError(
                    attempts=attempts,
                    balance=self._balance,
                    threshold=self._purchase_threshold,
                )
            attempts += 1
            self.withdraw()
            if self._balance >= self._purchase_threshold:
                break
            self._reporter.purchase_unaffordable(
                balance=self._balance, threshold=self._purchase_threshold
            )

        self._state = CustomerState.PURCHASED
        self._reporter.purchase_completed(
            balance=self._balance, withdrawals=self._withdrawals
        )
