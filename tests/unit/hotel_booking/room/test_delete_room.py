from hotel_booking.room.applications.delete_room import DeleteRoomService
from hotel_booking.shared.applications import OutcomeKind


class TestDeleteRoomService:
    def test_delete_room(self, mock_repository, create_room, room_id):
        room = create_room()
        mock_repository.find_by_id.return_value = room

        outcome = DeleteRoomService(mock_repository).delete(room_id)

        assert outcome.is_success
        mock_repository.delete.assert_called_once_with(room)

    def test_room_not_found(self, mock_repository, room_id):
        mock_repository.find_by_id.return_value = None

        outcome = DeleteRoomService(mock_repository).delete(room_id)

        assert outcome.kind == OutcomeKind.ROOM_NOT_FOUND
        mock_repository.delete.assert_not_called()

    def test_delete_failure(self, mock_repository, create_room, room_id):
        mock_repository.find_by_id.return_value = create_room()
        mock_repository.delete.side_effect = RuntimeError("boom")

        outcome = DeleteRoomService(mock_repository).delete(room_id)

        assert outcome.kind == OutcomeKind.ERROR
        assert outcome.message == "Error deleting a room: boom"
