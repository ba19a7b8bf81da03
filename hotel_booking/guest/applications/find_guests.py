from aws_lambda_powertools import Logger

from hotel_booking.guest.domain.entity import Guest
from hotel_booking.guest.domain.repository import GuestRepository
from hotel_booking.shared.applications import Outcome, OutcomeKind
from hotel_booking.shared.domain import GuestId

logger = Logger(child=True)

GUEST_NOT_FOUND_MESSAGE = "Guest Not Found"


class FindGuestsService:
    """宿泊者照会のユースケース"""

    def __init__(self, repository: GuestRepository) -> None:
        self._repository = repository

    def list_guests(self) -> Outcome[list[Guest]]:
        try:
            return Outcome.success(self._repository.find_all())
        except Exception as e:
            logger.exception("Failed to list guests")
            return Outcome.failure(OutcomeKind.ERROR, f"Error getting all guests: {e}")

    def get_guest(self, guest_id: GuestId) -> Outcome[Guest]:
        try:
            guest = self._repository.find_by_id(guest_id)
        except Exception as e:
            logger.exception("Failed to get guest", extra={"guest_id": guest_id.value})
            return Outcome.failure(OutcomeKind.ERROR, f"Error getting a guest: {e}")

        if guest is None:
            return Outcome.failure(OutcomeKind.GUEST_NOT_FOUND, GUEST_NOT_FOUND_MESSAGE)
        return Outcome.success(guest)

    def get_by_email(self, email: str) -> Outcome[Guest]:
        """ログイン中の宿泊者自身の情報を取得する

        email は登録時と同じく前後の空白を除いて小文字に揃えてから検索する。
        """
        try:
            guest = self._repository.find_by_email(email.strip().lower())
        except Exception as e:
            logger.exception("Failed to get guest by email")
            return Outcome.failure(OutcomeKind.ERROR, f"Error getting a guest: {e}")

        if guest is None:
            return Outcome.failure(OutcomeKind.GUEST_NOT_FOUND, GUEST_NOT_FOUND_MESSAGE)
        return Outcome.success(guest)
