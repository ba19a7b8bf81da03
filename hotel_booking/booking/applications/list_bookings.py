from aws_lambda_powertools import Logger

from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.domain.repository import BookingRepository
from hotel_booking.guest.domain.repository import GuestRepository
from hotel_booking.shared.applications import Outcome, OutcomeKind
from hotel_booking.shared.domain import GuestId

logger = Logger(child=True)


class ListBookingsService:
    """予約一覧のユースケース"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        guest_repository: GuestRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._guest_repository = guest_repository

    def list_all(self) -> Outcome[list[Booking]]:
        """全予約を予約IDの降順で取得する"""
        try:
            return Outcome.success(self._booking_repository.find_all())
        except Exception as e:
            logger.exception("Failed to list bookings")
            return Outcome.failure(
                OutcomeKind.ERROR, f"Error getting all bookings: {e}"
            )

    def list_for_guest(self, guest_id: GuestId) -> Outcome[list[Booking]]:
        """宿泊者の予約履歴を取得する"""
        try:
            if self._guest_repository.find_by_id(guest_id) is None:
                return Outcome.failure(OutcomeKind.GUEST_NOT_FOUND, "Guest Not Found")
            return Outcome.success(self._booking_repository.find_by_guest_id(guest_id))
        except Exception as e:
            logger.exception("Failed to list guest bookings")
            return Outcome.failure(
                OutcomeKind.ERROR, f"Error getting guest bookings: {e}"
            )
