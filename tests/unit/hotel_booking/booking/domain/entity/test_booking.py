import pytest

from hotel_booking.shared.domain.exception import BusinessRuleViolationException


class TestBooking:
    def test_total_num_of_guests_is_derived(self, create_booking):
        booking = create_booking(num_of_adults=2, num_of_children=1)
        assert booking.total_num_of_guests == 3

    def test_change_guest_count(self, create_booking):
        booking = create_booking(num_of_adults=2, num_of_children=1)

        booking.change_guest_count(1, 0)

        assert booking.num_of_adults == 1
        assert booking.num_of_children == 0
        assert booking.total_num_of_guests == 1

    def test_requires_at_least_one_adult(self, create_booking):
        with pytest.raises(
            BusinessRuleViolationException, match="Number of adults must be at least 1"
        ):
            create_booking(num_of_adults=0)

    def test_children_cannot_be_negative(self, create_booking):
        with pytest.raises(
            BusinessRuleViolationException,
            match="Number of children cannot be negative",
        ):
            create_booking(num_of_children=-1)

    def test_equality_is_based_on_id(self, create_booking):
        assert create_booking(booking_id=1) == create_booking(
            booking_id=1, num_of_adults=3
        )
        assert create_booking(booking_id=1) != create_booking(booking_id=2)
