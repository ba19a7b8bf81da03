from aws_lambda_powertools import Logger

from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.domain.repository import BookingRepository
from hotel_booking.booking.domain.value_object import ConfirmationCode
from hotel_booking.shared.applications import Outcome, OutcomeKind

logger = Logger(child=True)

BOOKING_NOT_FOUND_MESSAGE = "Booking Not Found"


class FindBookingService:
    """確認コードによる予約照会ユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def find_by_confirmation_code(self, code: str) -> Outcome[Booking]:
        """確認コードで予約を取得する

        形式が不正なコードに一致する予約は存在しないため、見つからない扱いにする。
        """
        try:
            confirmation_code = ConfirmationCode(code)
        except ValueError:
            return Outcome.failure(
                OutcomeKind.BOOKING_NOT_FOUND, BOOKING_NOT_FOUND_MESSAGE
            )

        try:
            booking = self._repository.find_by_confirmation_code(confirmation_code)
        except Exception as e:
            logger.exception("Failed to find booking")
            return Outcome.failure(OutcomeKind.ERROR, f"Error finding a booking: {e}")

        if booking is None:
            return Outcome.failure(
                OutcomeKind.BOOKING_NOT_FOUND, BOOKING_NOT_FOUND_MESSAGE
            )
        return Outcome.success(booking)
