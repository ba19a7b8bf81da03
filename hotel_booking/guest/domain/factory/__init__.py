from .guest_factory import (
    DEFAULT_ROLE,
    GuestFactory,
    RegistrationDetails,
    normalize_registration,
)

__all__ = [
    "DEFAULT_ROLE",
    "GuestFactory",
    "RegistrationDetails",
    "normalize_registration",
]
