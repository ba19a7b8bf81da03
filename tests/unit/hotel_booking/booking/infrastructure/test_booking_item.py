from hotel_booking.booking.domain.value_object import BookingId
from hotel_booking.booking.infrastructure.booking_item import (
    booking_keys,
    booking_sk,
    to_entity,
    to_item,
)


class TestBookingItem:
    def test_booking_sk_is_zero_padded(self):
        assert booking_sk(BookingId(value=42)) == "BOOKING#0000000042"

    def test_to_item(self, create_booking):
        booking = create_booking(booking_id=3, room_id=2, guest_id=5)

        item = to_item(booking)

        assert item["PK"] == "ROOM#2"
        assert item["SK"] == "BOOKING#0000000003"
        assert item["GSI1PK"] == "BOOKINGS"
        assert item["GSI2PK"] == "GUEST#5"
        assert item["check_in_date"] == "2024-05-10"
        assert item["check_out_date"] == "2024-05-12"
        assert item["confirmation_code"] == "ABCDE12345"
        assert item["total_num_of_guests"] == 2

    def test_to_entity_restores_booking(self, create_booking):
        booking = create_booking(num_of_adults=2, num_of_children=1)

        restored = to_entity(to_item(booking))

        assert restored == booking
        assert restored.stay_period == booking.stay_period
        assert restored.total_num_of_guests == 3
        assert restored.confirmation_code == booking.confirmation_code

    def test_booking_keys_cover_booking_and_pointers(self, create_booking):
        booking = create_booking(
            booking_id=3, room_id=2, confirmation_code="QWERT12345"
        )

        assert booking_keys(booking) == [
            {"PK": "ROOM#2", "SK": "BOOKING#0000000003"},
            {"PK": "CODE#QWERT12345", "SK": "CODE"},
            {"PK": "BOOKING#3", "SK": "BOOKING"},
        ]
