from collections.abc import Callable

from aws_lambda_powertools import Logger

from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.domain.exception import (
    DuplicateConfirmationCodeException,
    GuestNotFoundException,
    RoomNotAvailableException,
    RoomNotFoundException,
)
from hotel_booking.booking.domain.factory import BookingDetails, BookingFactory
from hotel_booking.booking.domain.metrics import BookingMetrics
from hotel_booking.booking.domain.repository import BookingRepository
from hotel_booking.booking.domain.service import is_available
from hotel_booking.booking.domain.value_object import ConfirmationCode, StayPeriod
from hotel_booking.guest.domain.repository import GuestRepository
from hotel_booking.room.domain.repository import RoomRepository
from hotel_booking.shared.applications import Outcome, OutcomeKind
from hotel_booking.shared.domain import DuplicateResourceException, GuestId, RoomId

logger = Logger(child=True)

ROOM_NOT_FOUND_MESSAGE = "Room Not Found"
GUEST_NOT_FOUND_MESSAGE = "Guest Not Found"
ROOM_NOT_AVAILABLE_MESSAGE = "Room not Available for selected date range"

MAX_CODE_ATTEMPTS = 3


class CreateBookingService:
    """予約作成ユースケース

    客室と宿泊者を読み込み、空き判定を通過した場合だけ確認コード付きの予約を
    保存する。成功・失敗の件数と処理時間をメトリクスに記録する。
    """

    def __init__(
        self,
        room_repository: RoomRepository,
        guest_repository: GuestRepository,
        booking_repository: BookingRepository,
        factory: BookingFactory,
        metrics: BookingMetrics,
        code_generator: Callable[[], ConfirmationCode] = ConfirmationCode.generate,
        max_code_attempts: int = MAX_CODE_ATTEMPTS,
    ) -> None:
        self._room_repository = room_repository
        self._guest_repository = guest_repository
        self._booking_repository = booking_repository
        self._factory = factory
        self._metrics = metrics
        self._code_generator = code_generator
        self._max_code_attempts = max_code_attempts

    def create(
        self, room_id: RoomId, guest_id: GuestId, details: BookingDetails
    ) -> Outcome[Booking]:
        """予約を作成する

        Returns:
            Outcome[Booking]: 成功時は保存した予約、失敗時は失敗種別とメッセージ
        """
        sample = self._metrics.start_timer()
        try:
            return self._create(room_id, guest_id, details)
        finally:
            self._metrics.stop_timer(sample)

    def _create(
        self, room_id: RoomId, guest_id: GuestId, details: BookingDetails
    ) -> Outcome[Booking]:
        try:
            booking = self._admit(room_id, guest_id, details)
        except RoomNotFoundException:
            return self._fail(OutcomeKind.ROOM_NOT_FOUND, ROOM_NOT_FOUND_MESSAGE)
        except GuestNotFoundException:
            return self._fail(OutcomeKind.GUEST_NOT_FOUND, GUEST_NOT_FOUND_MESSAGE)
        except RoomNotAvailableException:
            return self._fail(
                OutcomeKind.ROOM_NOT_AVAILABLE, ROOM_NOT_AVAILABLE_MESSAGE
            )
        except Exception as e:
            # 日付の逆転も保存失敗と同じ扱いにする
            logger.exception(
                "Failed to save booking",
                extra={"room_id": room_id.value, "guest_id": guest_id.value},
            )
            return self._fail(OutcomeKind.ERROR, f"Error saving a booking: {e}")

        self._metrics.increment_created()
        logger.info(
            "Booking created",
            extra={
                "booking_id": booking.id.value,
                "confirmation_code": str(booking.confirmation_code),
            },
        )
        return Outcome.success(booking)

    def _admit(
        self, room_id: RoomId, guest_id: GuestId, details: BookingDetails
    ) -> Booking:
        # 1. 客室（現在の予約一覧を含む）と宿泊者を読み込む
        room = self._room_repository.find_by_id(room_id)
        if room is None:
            raise RoomNotFoundException(f"Room not found: {room_id}")

        guest = self._guest_repository.find_by_id(guest_id)
        if guest is None:
            raise GuestNotFoundException(f"Guest not found: {guest_id}")

        # 2. 滞在期間を検証し、空き判定を行う
        stay_period = StayPeriod.from_iso(
            details["check_in_date"], details["check_out_date"]
        )
        existing = [booking.stay_period for booking in room.bookings]
        if not is_available(stay_period, existing):
            raise RoomNotAvailableException(
                f"Room {room_id} is not available from "
                f"{stay_period.check_in} to {stay_period.check_out}"
            )

        # 3. 確認コードを付与して保存（コード衝突時のみ再生成する）
        booking_id = self._booking_repository.next_id()
        for attempt in range(1, self._max_code_attempts + 1):
            booking = self._factory.create(
                booking_id,
                room.id,
                guest.id,
                stay_period,
                details,
                self._code_generator(),
            )
            try:
                self._booking_repository.save(
                    booking, expected_room_version=room.version
                )
                return booking
            except DuplicateConfirmationCodeException:
                logger.warning(
                    "Confirmation code collision, regenerating",
                    extra={"attempt": attempt},
                )

        raise DuplicateResourceException(
            "Could not generate a unique confirmation code "
            f"after {self._max_code_attempts} attempts"
        )

    def _fail(self, kind: OutcomeKind, message: str) -> Outcome[Booking]:
        self._metrics.increment_error()
        return Outcome.failure(kind, message)
