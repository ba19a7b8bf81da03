from dataclasses import dataclass


@dataclass(frozen=True)
class GuestId:
    """宿泊者ID（全コンテキスト共通）"""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("GuestId must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)
