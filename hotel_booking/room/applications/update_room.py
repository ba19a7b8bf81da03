from decimal import Decimal
from typing import TypedDict

from aws_lambda_powertools import Logger

from hotel_booking.room.domain.entity import Room
from hotel_booking.room.domain.media import MediaStore, Photo
from hotel_booking.room.domain.repository import RoomRepository
from hotel_booking.room.domain.value_object import Price, RoomType
from hotel_booking.shared.applications import Outcome, OutcomeKind
from hotel_booking.shared.domain import RoomId

logger = Logger(child=True)

ROOM_NOT_FOUND_MESSAGE = "Room Not Found"


class RoomChanges(TypedDict, total=False):
    """客室更新の入力データ（指定された項目だけを変更する）"""

    room_type: str
    room_price: Decimal
    room_description: str


class UpdateRoomService:
    """客室更新のユースケース"""

    def __init__(self, repository: RoomRepository, media_store: MediaStore) -> None:
        self._repository = repository
        self._media_store = media_store

    def update(
        self, room_id: RoomId, changes: RoomChanges, photo: Photo | None = None
    ) -> Outcome[Room]:
        """客室情報を部分更新する"""
        try:
            room = self._repository.find_by_id(room_id)
            if room is None:
                return Outcome.failure(
                    OutcomeKind.ROOM_NOT_FOUND, ROOM_NOT_FOUND_MESSAGE
                )

            photo_url = self._media_store.store(photo) if photo is not None else None
            room_type = changes.get("room_type")
            room_price = changes.get("room_price")
            room.update_details(
                room_type=RoomType(room_type) if room_type else None,
                price=Price(room_price) if room_price is not None else None,
                description=changes.get("room_description"),
                photo_url=photo_url,
            )
            self._repository.update(room)
        except Exception as e:
            logger.exception("Failed to update room", extra={"room_id": room_id.value})
            return Outcome.failure(OutcomeKind.ERROR, f"Error saving a room: {e}")

        return Outcome.success(room)
