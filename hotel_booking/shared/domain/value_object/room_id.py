from dataclasses import dataclass


@dataclass(frozen=True)
class RoomId:
    """客室ID（全コンテキスト共通）

    Value Object として不変性を保証。
    同じ値を持つ RoomId は同一とみなされる。
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("RoomId must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)
