from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Price:
    """客室料金"""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Price cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)
