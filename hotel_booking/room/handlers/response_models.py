from pydantic import BaseModel

from hotel_booking.room.domain.entity import Room


class RoomData(BaseModel):
    """客室データのレスポンスモデル"""

    room_id: int
    room_type: str
    room_price: str
    room_description: str
    room_photo_url: str | None = None


def to_room_data(room: Room) -> dict:
    """Entity をレスポンス形式に変換"""
    return RoomData(
        room_id=room.id.value,
        room_type=str(room.room_type),
        room_price=str(room.price),
        room_description=room.description,
        room_photo_url=room.photo_url,
    ).model_dump()
