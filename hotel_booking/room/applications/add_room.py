from aws_lambda_powertools import Logger

from hotel_booking.room.domain.entity import Room
from hotel_booking.room.domain.factory import RoomDetails, RoomFactory
from hotel_booking.room.domain.media import MediaStore, Photo
from hotel_booking.room.domain.repository import RoomRepository
from hotel_booking.shared.applications import Outcome, OutcomeKind

logger = Logger(child=True)


class AddRoomService:
    """客室登録のユースケース"""

    def __init__(
        self,
        repository: RoomRepository,
        factory: RoomFactory,
        media_store: MediaStore,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._media_store = media_store

    def add(self, details: RoomDetails, photo: Photo | None = None) -> Outcome[Room]:
        """客室を登録する（写真があれば先にアップロードする）"""
        try:
            photo_url = self._media_store.store(photo) if photo is not None else None
            room = self._factory.create(self._repository.next_id(), details, photo_url)
            self._repository.save(room)
        except Exception as e:
            logger.exception("Failed to add room")
            return Outcome.failure(OutcomeKind.ERROR, f"Error saving a room: {e}")

        logger.info("Room added", extra={"room_id": room.id.value})
        return Outcome.success(room)
