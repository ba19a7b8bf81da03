from pydantic import BaseModel

from hotel_booking.booking.domain.entity import Booking


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: int
    room_id: int
    guest_id: int
    check_in_date: str
    check_out_date: str
    nights: int
    num_of_adults: int
    num_of_children: int
    total_num_of_guests: int
    confirmation_code: str


def to_booking_data(booking: Booking) -> dict:
    """Entity をレスポンス形式に変換"""
    return BookingData(
        booking_id=booking.id.value,
        room_id=booking.room_id.value,
        guest_id=booking.guest_id.value,
        check_in_date=booking.stay_period.check_in.isoformat(),
        check_out_date=booking.stay_period.check_out.isoformat(),
        nights=booking.stay_period.nights(),
        num_of_adults=booking.num_of_adults,
        num_of_children=booking.num_of_children,
        total_num_of_guests=booking.total_num_of_guests,
        confirmation_code=str(booking.confirmation_code),
    ).model_dump()
