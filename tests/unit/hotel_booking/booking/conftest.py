from unittest.mock import MagicMock

import pytest

from hotel_booking.booking.applications.create_booking import CreateBookingService
from hotel_booking.booking.domain.factory import BookingDetails, BookingFactory
from hotel_booking.booking.domain.value_object import BookingId, ConfirmationCode


@pytest.fixture
def booking_details() -> BookingDetails:
    """チェックイン +1日 / チェックアウト +3日 相当の予約内容"""
    return {
        "check_in_date": "2024-05-11",
        "check_out_date": "2024-05-13",
        "num_of_adults": 2,
        "num_of_children": 1,
    }


@pytest.fixture
def room_repository(create_room):
    repository = MagicMock()
    repository.find_by_id.return_value = create_room(version=4)
    return repository


@pytest.fixture
def guest_repository(create_guest):
    repository = MagicMock()
    repository.find_by_id.return_value = create_guest()
    return repository


@pytest.fixture
def booking_repository():
    repository = MagicMock()
    repository.next_id.return_value = BookingId(value=7)
    return repository


@pytest.fixture
def metrics():
    """BookingMetrics のモック"""
    return MagicMock()


@pytest.fixture
def code_generator():
    return MagicMock(
        side_effect=[
            ConfirmationCode("AAAAAAAAAA"),
            ConfirmationCode("BBBBBBBBBB"),
            ConfirmationCode("CCCCCCCCCC"),
        ]
    )


@pytest.fixture
def create_service(
    room_repository, guest_repository, booking_repository, metrics, code_generator
):
    """CreateBookingService を生成する Factory fixture"""

    def _factory(max_code_attempts: int = 3) -> CreateBookingService:
        return CreateBookingService(
            room_repository=room_repository,
            guest_repository=guest_repository,
            booking_repository=booking_repository,
            factory=BookingFactory(),
            metrics=metrics,
            code_generator=code_generator,
            max_code_attempts=max_code_attempts,
        )

    return _factory
