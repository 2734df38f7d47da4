"""Top-level ScenarioConfig aggregate: the root configuration object."""

from pydantic import BaseModel, Field

from estate_watch.config.domain.customer import CustomerConfig

type ObserverType = str


class ScenarioConfig(BaseModel, frozen=True):
    """Root configuration for a scenario run.

    `observers` lists observer types in registration order. Each entry builds
    a new observer instance, so repeated types are separate registrations.
    `finished_writes` is applied in order; every write notifies.
    """

    name: str = Field(default="demo", min_length=1)
    customer: CustomerConfig = CustomerConfig()
    observers: list[ObserverType] = Field(
        default_factory=lambda: ["intermediary", "customer"], min_length=1
    )
    finished_writes: list[bool] = Field(default_factory=lambda: [True])
