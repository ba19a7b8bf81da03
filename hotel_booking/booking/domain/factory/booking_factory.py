from typing import TypedDict

from hotel_booking.booking.domain.entity.booking import Booking
from hotel_booking.booking.domain.value_object import (
    BookingId,
    ConfirmationCode,
    StayPeriod,
)
from hotel_booking.shared.domain import GuestId, RoomId


class BookingDetails(TypedDict):
    """予約内容の入力データ"""

    check_in_date: str
    check_out_date: str
    num_of_adults: int
    num_of_children: int


class BookingFactory:
    """予約エンティティを生成する Factory"""

    def create(
        self,
        booking_id: BookingId,
        room_id: RoomId,
        guest_id: GuestId,
        stay_period: StayPeriod,
        details: BookingDetails,
        confirmation_code: ConfirmationCode,
    ) -> Booking:
        """新規予約のエンティティを作成する"""
        return Booking(
            id=booking_id,
            room_id=room_id,
            guest_id=guest_id,
            stay_period=stay_period,
            num_of_adults=details["num_of_adults"],
            num_of_children=details["num_of_children"],
            confirmation_code=confirmation_code,
        )
