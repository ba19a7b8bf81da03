from dataclasses import dataclass


@dataclass(frozen=True)
class RoomType:
    """客室タイプ（STANDARD / DELUXE / SUITE など、列挙に限定しない）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Room type cannot be empty")
        if len(self.value) > 50:
            raise ValueError("Room type is too long (max 50 characters)")

    def __str__(self) -> str:
        return self.value
