from hotel_booking.guest.applications.delete_guest import DeleteGuestService
from hotel_booking.shared.applications import OutcomeKind


class TestDeleteGuestService:
    def test_delete_guest(self, mock_repository, create_guest, guest_id):
        guest = create_guest()
        mock_repository.find_by_id.return_value = guest

        outcome = DeleteGuestService(mock_repository).delete(guest_id)

        assert outcome.is_success
        assert outcome.message == "successful"
        mock_repository.delete.assert_called_once_with(guest)

    def test_guest_not_found(self, mock_repository, guest_id):
        mock_repository.find_by_id.return_value = None

        outcome = DeleteGuestService(mock_repository).delete(guest_id)

        assert outcome.kind == OutcomeKind.GUEST_NOT_FOUND
        assert outcome.status_code == 404
        mock_repository.delete.assert_not_called()

    def test_delete_failure(self, mock_repository, create_guest, guest_id):
        mock_repository.find_by_id.return_value = create_guest()
        mock_repository.delete.side_effect = RuntimeError("boom")

        outcome = DeleteGuestService(mock_repository).delete(guest_id)

        assert outcome.kind == OutcomeKind.ERROR
        assert outcome.message == "Error deleting a guest: boom"
