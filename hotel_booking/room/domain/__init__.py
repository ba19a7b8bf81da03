from .entity import Room
from .factory import RoomDetails, RoomFactory
from .media import MediaStore, Photo
from .repository import RoomRepository
from .value_object import Price, RoomType

__all__ = [
    "Room",
    "RoomType",
    "Price",
    "RoomRepository",
    "RoomFactory",
    "RoomDetails",
    "MediaStore",
    "Photo",
]
