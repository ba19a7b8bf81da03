from decimal import Decimal

from hotel_booking.room.domain.entity import Room
from hotel_booking.room.domain.factory import RoomDetails, RoomFactory


class TestRoomFactory:
    def test_create_room(self, room_id):
        details: RoomDetails = {
            "room_type": "DELUXE",
            "room_price": Decimal("150.00"),
            "room_description": "Ocean view",
        }

        room = RoomFactory().create(room_id, details, "https://example.com/a.jpg")

        assert isinstance(room, Room)
        assert room.id == room_id
        assert str(room.room_type) == "DELUXE"
        assert room.price.amount == Decimal("150.00")
        assert room.photo_url == "https://example.com/a.jpg"
        assert room.bookings == ()
        assert room.version == 0

    def test_description_defaults_to_empty(self, room_id):
        details: RoomDetails = {"room_type": "STANDARD", "room_price": Decimal("80")}

        room = RoomFactory().create(room_id, details)

        assert room.description == ""
        assert room.photo_url is None
