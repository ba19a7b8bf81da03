from hotel_booking.booking.applications.cancel_booking import CancelBookingService
from hotel_booking.booking.domain.value_object import BookingId
from hotel_booking.shared.applications import OutcomeKind


class TestCancelBookingService:
    def test_cancel_existing_booking(self, mock_repository, create_booking):
        booking = create_booking(booking_id=3)
        mock_repository.find_by_id.return_value = booking
        service = CancelBookingService(repository=mock_repository)

        outcome = service.cancel(BookingId(value=3))

        assert outcome.kind == OutcomeKind.SUCCESS
        assert outcome.message == "successful"
        mock_repository.delete.assert_called_once_with(booking)

    def test_cancel_unknown_booking(self, mock_repository):
        mock_repository.find_by_id.return_value = None
        service = CancelBookingService(repository=mock_repository)

        outcome = service.cancel(BookingId(value=99))

        assert outcome.kind == OutcomeKind.BOOKING_NOT_FOUND
        assert outcome.status_code == 404
        assert outcome.message == "Booking Does Not Exist"
        mock_repository.delete.assert_not_called()

    def test_cancel_failure(self, mock_repository, create_booking):
        mock_repository.find_by_id.return_value = create_booking()
        mock_repository.delete.side_effect = RuntimeError("boom")
        service = CancelBookingService(repository=mock_repository)

        outcome = service.cancel(BookingId(value=1))

        assert outcome.kind == OutcomeKind.ERROR
        assert outcome.message == "Error cancelling a booking: boom"
