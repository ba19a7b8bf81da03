from .guest_id import GuestId
from .room_id import RoomId

__all__ = ["RoomId", "GuestId"]
