from aws_lambda_powertools import Logger

from hotel_booking.guest.domain.entity import Guest
from hotel_booking.guest.domain.factory import (
    GuestFactory,
    RegistrationDetails,
    normalize_registration,
)
from hotel_booking.guest.domain.repository import GuestRepository
from hotel_booking.guest.domain.security import PasswordHasher
from hotel_booking.shared.applications import Outcome, OutcomeKind

logger = Logger(child=True)


class RegisterGuestService:
    """宿泊者登録のユースケース"""

    def __init__(
        self,
        repository: GuestRepository,
        factory: GuestFactory,
        password_hasher: PasswordHasher,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._password_hasher = password_hasher

    def register(self, details: RegistrationDetails) -> Outcome[Guest]:
        """宿泊者を登録する

        入力は永続化の前に normalize_registration で正規化する。
        """
        try:
            normalized = normalize_registration(details)
            if self._repository.exists_by_email(normalized["email"]):
                return Outcome.failure(
                    OutcomeKind.ALREADY_EXISTS,
                    f"{normalized['email']} Already Exists",
                )
            guest = self._factory.create(
                self._repository.next_id(),
                normalized,
                self._password_hasher.hash(normalized["password"]),
            )
            self._repository.save(guest)
        except Exception as e:
            logger.exception("Failed to register guest")
            return Outcome.failure(
                OutcomeKind.ERROR,
                f"Error occurred during guest registration: {e}",
            )

        logger.info("Guest registered", extra={"guest_id": guest.id.value})
        return Outcome.success(guest)
