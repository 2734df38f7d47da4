"""Reporter port for the buyer domain: defines events in domain language."""

from typing import Protocol


class CustomerReporter(Protocol):
    def funds_withdrawn(self, amount: int, balance: int) -> None: ...

    def purchase_unaffordable(self, balance: int, threshold: int) -> None: ...

    def purchase_completed(self, balance: int, withdrawals: int) -> None: ...

    def purchase_already_completed(self, balance: int) -> None: ...
