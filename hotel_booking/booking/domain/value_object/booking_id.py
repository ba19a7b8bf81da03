from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID

    採番順に増加する正の整数。一覧は ID の降順で返す。
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("BookingId must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)
