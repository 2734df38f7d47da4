"""Structlog implementation of the CustomerReporter port."""

import structlog


class StructlogCustomerReporter:
    """Delegates buyer domain events to structlog.

    Satisfies the CustomerReporter protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def funds_withdrawn(self, amount: int, balance: int) -> None:
        self._log.debug("buyer.funds_withdrawn", amount=amount, balance=balance)

    def purchase_unaffordable(self, balance: int, threshold: int) -> None:
        self._log.info(
            "buyer.purchase_unaffordable",
            balance=balance,
            threshold=threshold,
            message="Can't afford it yet!",
        )

    def purchase_completed(self, balance: int, withdrawals: int) -> None:
        self._log.info(
            "buyer.purchase_completed",
            balance=balance,
            withdrawals=withdrawals,
            message="Purchased!",
        )

    def purchase_already_completed(self, balance: int) -> None:
        self._log.info("buyer.purchase_already_completed", balance=balance)
