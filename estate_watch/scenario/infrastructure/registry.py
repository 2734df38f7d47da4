"""Observer registry: maps a configured observer type to a concrete Observer."""

from dataclasses import dataclass

from estate_watch.agency.domain.intermediary import Intermediary
from estate_watch.agency.domain.reporter import IntermediaryReporter
from estate_watch.buyer.domain.customer import Customer
from estate_watch.buyer.domain.reporter import CustomerReporter
from estate_watch.config.domain.customer import CustomerConfig
from estate_watch.observation.domain.observer import Observer
from estate_watch.scenario.infrastructure.errors import ObserverTypeNotSupportedError

INTERMEDIARY = "intermediary"
CUSTOMER = "customer"


@dataclass(frozen=True)
class ObserverReporters:
    intermediary: IntermediaryReporter
    customer: CustomerReporter


def create_observer(
    observer_type: str,
    customer_config: CustomerConfig,
    reporters: ObserverReporters,
) -> Observer:
    """Return a new observer for observer_type.

    Raises:
        ObserverTypeNotSupportedError: if observer_type is not a known type.
    """
    if observer_type == INTERMEDIARY:
        return Intermediary(reporter=reporters.intermediary)
    if observer_type == CUSTOMER:
        return Customer(
            withdrawal_amount=customer_config.withdrawal_amount,
            purchase_threshold=customer_config.purchase_threshold,
            reporter=reporters.customer,
            max_attempts=customer_config.max_attempts,
        )

    raise ObserverTypeNotSupportedError(observer_type=observer_type)
