from .entity import Booking
from .factory import BookingDetails, BookingFactory
from .metrics import BookingMetrics, TimerSample
from .repository import BookingRepository
from .service import is_available, overlaps
from .value_object import BookingId, ConfirmationCode, StayPeriod

__all__ = [
    "Booking",
    "BookingId",
    "ConfirmationCode",
    "StayPeriod",
    "BookingRepository",
    "BookingFactory",
    "BookingDetails",
    "BookingMetrics",
    "TimerSample",
    "is_available",
    "overlaps",
]
