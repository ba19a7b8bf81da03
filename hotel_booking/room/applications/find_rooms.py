from aws_lambda_powertools import Logger

from hotel_booking.room.domain.entity import Room
from hotel_booking.room.domain.repository import RoomRepository
from hotel_booking.shared.applications import Outcome, OutcomeKind
from hotel_booking.shared.domain import RoomId

logger = Logger(child=True)


class FindRoomsService:
    """客室照会のユースケース"""

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def get_room(self, room_id: RoomId) -> Outcome[Room]:
        """客室を予約一覧付きで取得する"""
        try:
            room = self._repository.find_by_id(room_id)
        except Exception as e:
            logger.exception("Failed to get room", extra={"room_id": room_id.value})
            return Outcome.failure(OutcomeKind.ERROR, f"Error getting a room: {e}")

        if room is None:
            return Outcome.failure(OutcomeKind.ROOM_NOT_FOUND, "Room Not Found")
        return Outcome.success(room)

    def list_rooms(self) -> Outcome[list[Room]]:
        try:
            return Outcome.success(self._repository.find_all())
        except Exception as e:
            logger.exception("Failed to list rooms")
            return Outcome.failure(OutcomeKind.ERROR, f"Error getting all rooms: {e}")

    def list_room_types(self) -> Outcome[list[str]]:
        try:
            return Outcome.success(self._repository.find_room_types())
        except Exception as e:
            logger.exception("Failed to list room types")
            return Outcome.failure(
                OutcomeKind.ERROR, f"Error getting room types: {e}"
            )

    def list_available_rooms(self) -> Outcome[list[Room]]:
        """現在予約が1件も入っていない客室を取得する

        find_all は予約を含まない一覧のため、客室ごとに予約付きで読み直す。
        """
        try:
            rooms = []
            for summary in self._repository.find_all():
                room = self._repository.find_by_id(summary.id)
                if room is not None and not room.bookings:
                    rooms.append(room)
        except Exception as e:
            logger.exception("Failed to list available rooms")
            return Outcome.failure(
                OutcomeKind.ERROR, f"Error getting available rooms: {e}"
            )
        return Outcome.success(rooms)
