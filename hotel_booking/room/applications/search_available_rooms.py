from aws_lambda_powertools import Logger

from hotel_booking.booking.domain.service import is_available
from hotel_booking.booking.domain.value_object import StayPeriod
from hotel_booking.room.domain.entity import Room
from hotel_booking.room.domain.repository import RoomRepository
from hotel_booking.shared.applications import Outcome, OutcomeKind

logger = Logger(child=True)


class SearchAvailableRoomsService:
    """空室検索のユースケース

    予約作成と同じ空き判定を使い、指定期間に予約可能な客室を返す。
    """

    def __init__(self, repository: RoomRepository) -> None:
        self._repository = repository

    def search(
        self,
        check_in_date: str,
        check_out_date: str,
        room_type: str | None = None,
    ) -> Outcome[list[Room]]:
        try:
            stay_period = StayPeriod.from_iso(check_in_date, check_out_date)
        except ValueError as e:
            return Outcome.failure(OutcomeKind.INVALID, f"Invalid date range: {e}")

        try:
            available: list[Room] = []
            for summary in self._repository.find_all():
                if room_type and str(summary.room_type) != room_type:
                    continue
                room = self._repository.find_by_id(summary.id)
                if room is None:
                    continue
                existing = [booking.stay_period for booking in room.bookings]
                if is_available(stay_period, existing):
                    available.append(room)
        except Exception as e:
            logger.exception("Failed to search available rooms")
            return Outcome.failure(
                OutcomeKind.ERROR, f"Error searching available rooms: {e}"
            )

        return Outcome.success(available)
