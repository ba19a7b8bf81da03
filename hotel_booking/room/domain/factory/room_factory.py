from decimal import Decimal
from typing import NotRequired, TypedDict

from hotel_booking.room.domain.entity.room import Room
from hotel_booking.room.domain.value_object import Price, RoomType
from hotel_booking.shared.domain import RoomId


class RoomDetails(TypedDict):
    """客室登録の入力データ"""

    room_type: str
    room_price: Decimal
    room_description: NotRequired[str]


class RoomFactory:
    """客室エンティティを生成する Factory"""

    def create(
        self, room_id: RoomId, details: RoomDetails, photo_url: str | None = None
    ) -> Room:
        """新規客室のエンティティを作成する"""
        return Room(
            id=room_id,
            room_type=RoomType(details["room_type"]),
            price=Price(details["room_price"]),
            description=details.get("room_description", ""),
            photo_url=photo_url,
        )
