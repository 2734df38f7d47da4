"""ScenarioResult: the outcome of a completed scenario run."""

from pydantic import BaseModel

from estate_watch.buyer.domain.state import CustomerState


class CustomerOutcome(BaseModel, frozen=True):
    """Final balance and lifecycle state of one registered Customer."""

    balance: int
    withdrawals: int
    state: CustomerState


class ScenarioResult(BaseModel, frozen=True):
    """Immutable summary returned when every configured write has been delivered."""

    name: str
    finished: bool
    notification_rounds: int
    observer_types: list[str]
    customers: list[CustomerOutcome]
