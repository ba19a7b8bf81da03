import os
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

# Handler モジュールの import 時にリソースを生成するため先に設定しておく
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("TABLE_NAME", "hotel-booking-test")
os.environ.setdefault("PHOTO_BUCKET_NAME", "hotel-photos-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "hotel-booking")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "HotelBooking")

from hotel_booking.booking.domain.entity import Booking  # noqa: E402
from hotel_booking.booking.domain.value_object import (  # noqa: E402
    BookingId,
    ConfirmationCode,
    StayPeriod,
)
from hotel_booking.guest.domain.entity import Guest  # noqa: E402
from hotel_booking.room.domain.entity import Room  # noqa: E402
from hotel_booking.room.domain.value_object import Price, RoomType  # noqa: E402
from hotel_booking.shared.domain import GuestId, RoomId  # noqa: E402


@pytest.fixture
def room_id():
    """全テスト共通の RoomId フィクスチャ"""
    return RoomId(value=1)


@pytest.fixture
def guest_id():
    """全テスト共通の GuestId フィクスチャ"""
    return GuestId(value=1)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: int = 1,
        room_id: int = 1,
        guest_id: int = 1,
        check_in: date = date(2024, 5, 10),
        check_out: date = date(2024, 5, 12),
        num_of_adults: int = 2,
        num_of_children: int = 0,
        confirmation_code: str = "ABCDE12345",
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            room_id=RoomId(value=room_id),
            guest_id=GuestId(value=guest_id),
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            num_of_adults=num_of_adults,
            num_of_children=num_of_children,
            confirmation_code=ConfirmationCode(confirmation_code),
        )

    return _factory


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture"""

    def _factory(
        room_id: int = 1,
        room_type: str = "DELUXE",
        price: Decimal = Decimal("150.00"),
        description: str = "Ocean view",
        photo_url: str | None = None,
        bookings: tuple[Booking, ...] = (),
        version: int = 0,
    ) -> Room:
        return Room(
            id=RoomId(value=room_id),
            room_type=RoomType(room_type),
            price=Price(price),
            description=description,
            photo_url=photo_url,
            bookings=bookings,
            version=version,
        )

    return _factory


@pytest.fixture
def create_guest():
    """Guest を生成する Factory fixture"""

    def _factory(
        guest_id: int = 1,
        name: str = "Taro Yamada",
        email: str = "taro@example.com",
        phone_number: str = "090-1234-5678",
        password_hash: str = "hashed",
        role: str = "USER",
    ) -> Guest:
        return Guest(
            id=GuestId(value=guest_id),
            name=name,
            email=email,
            phone_number=phone_number,
            password_hash=password_hash,
            role=role,
        )

    return _factory


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    """Powertools のデコレータが参照する LambdaContext の代替"""
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway HTTP API (v2) イベントを生成する Factory fixture"""

    def _factory(
        body: str | None = None,
        path_parameters: dict | None = None,
        query_string_parameters: dict | None = None,
    ) -> dict:
        event: dict = {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/",
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "requestContext": {
                "http": {"method": "POST", "path": "/"},
                "requestId": "request-id",
                "stage": "$default",
            },
            "isBase64Encoded": False,
        }
        if body is not None:
            event["body"] = body
        if path_parameters is not None:
            event["pathParameters"] = path_parameters
        if query_string_parameters is not None:
            event["queryStringParameters"] = query_string_parameters
        return event

    return _factory
