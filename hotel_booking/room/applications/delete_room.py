from aws_lambda_powertools import Logger

from hotel_booking.room.domain.repository import RoomRepository
from hotel_booking.shared.applications import Outcome, OutcomeKind
from hotel_booking.shared.domain import RoomId

logger = Logger(child=True)


class DeleteRoomService:
    """客室削除のユースケース（客室の予約も削除される）"""

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def delete(self, room_id: RoomId) -> Outcome[None]:
        try:
            room = self._repository.find_by_id(room_id)
            if room is None:
                return Outcome.failure(OutcomeKind.ROOM_NOT_FOUND, "Room Not Found")
            self._repository.delete(room)
        except Exception as e:
            logger.exception("Failed to delete room", extra={"room_id": room_id.value})
            return Outcome.failure(OutcomeKind.ERROR, f"Error deleting a room: {e}")

        logger.info("Room deleted", extra={"room_id": room_id.value})
        return Outcome.success()
