from aws_lambda_powertools import Logger

from hotel_booking.guest.domain.repository import GuestRepository
from hotel_booking.shared.applications import Outcome, OutcomeKind
from hotel_booking.shared.domain import GuestId

logger = Logger(child=True)


class DeleteGuestService:
    """宿泊者削除のユースケース（宿泊者の予約も削除される）"""

    def __init__(self, repository: GuestRepository) -> None:
        self._repository = repository

    def delete(self, guest_id: GuestId) -> Outcome[None]:
        try:
            guest = self._repository.find_by_id(guest_id)
            if guest is None:
                return Outcome.failure(OutcomeKind.GUEST_NOT_FOUND, "Guest Not Found")
            self._repository.delete(guest)
        except Exception as e:
            logger.exception(
                "Failed to delete guest", extra={"guest_id": guest_id.value}
            )
            return Outcome.failure(OutcomeKind.ERROR, f"Error deleting a guest: {e}")

        logger.info("Guest deleted", extra={"guest_id": guest_id.value})
        return Outcome.success()
