from .price import Price
from .room_type import RoomType

__all__ = ["Price", "RoomType"]
