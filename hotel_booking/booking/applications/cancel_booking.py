from aws_lambda_powertools import Logger

from hotel_booking.booking.domain.repository import BookingRepository
from hotel_booking.booking.domain.value_object import BookingId
from hotel_booking.shared.applications import Outcome, OutcomeKind

logger = Logger(child=True)


class CancelBookingService:
    """予約キャンセルのユースケース

    キャンセルは予約レコードそのものを削除する。
    """

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def cancel(self, booking_id: BookingId) -> Outcome[None]:
        """予約をキャンセルする"""
        try:
            booking = self._repository.find_by_id(booking_id)
            if booking is None:
                return Outcome.failure(
                    OutcomeKind.BOOKING_NOT_FOUND, "Booking Does Not Exist"
                )
            self._repository.delete(booking)
        except Exception as e:
            logger.exception(
                "Failed to cancel booking", extra={"booking_id": booking_id.value}
            )
            return Outcome.failure(
                OutcomeKind.ERROR, f"Error cancelling a booking: {e}"
            )

        logger.info("Booking cancelled", extra={"booking_id": booking_id.value})
        return Outcome.success()
