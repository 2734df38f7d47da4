"""Customer configuration model."""

from pydantic import BaseModel, Field


class CustomerConfig(BaseModel, frozen=True):
    withdrawal_amount: int = Field(default=1_000_000, gt=0)
    purchase_threshold: int = Field(default=3_000_000, gt=0)
    max_attempts: int | None = Field(default=None, ge=1)
