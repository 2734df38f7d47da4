"""Purchase lifecycle of a Customer."""

from enum import StrEnum


class CustomerState(StrEnum):
    WAITING = "waiting"
    WITHDRAWING = "withdrawing"
    PURCHASED = "purchased"
