from .exceptions import (
    DuplicateConfirmationCodeException,
    GuestNotFoundException,
    RoomNotAvailableException,
    RoomNotFoundException,
)

__all__ = [
    "RoomNotFoundException",
    "GuestNotFoundException",
    "RoomNotAvailableException",
    "DuplicateConfirmationCodeException",
]
