from .entity import Guest
from .factory import (
    DEFAULT_ROLE,
    GuestFactory,
    RegistrationDetails,
    normalize_registration,
)
from .repository import GuestRepository
from .security import PasswordHasher

__all__ = [
    "Guest",
    "GuestRepository",
    "GuestFactory",
    "RegistrationDetails",
    "normalize_registration",
    "DEFAULT_ROLE",
    "PasswordHasher",
]
