from .booking_id import BookingId
from .confirmation_code import ConfirmationCode
from .stay_period import StayPeriod

__all__ = ["BookingId", "ConfirmationCode", "StayPeriod"]
