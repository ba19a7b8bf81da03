import json
from unittest.mock import MagicMock

import pytest

from hotel_booking.booking.domain.value_object import BookingId
from hotel_booking.booking.handlers import cancel, create, find, list_bookings
from hotel_booking.shared.applications import Outcome, OutcomeKind
from hotel_booking.shared.domain import GuestId, RoomId


@pytest.fixture
def mock_service(monkeypatch):
    """Handler モジュールのユースケースを差し替える Factory fixture"""

    def _factory(module) -> MagicMock:
        service = MagicMock()
        monkeypatch.setattr(module, "service", service)
        return service

    return _factory


class TestCreateHandler:
    def test_creates_booking(
        self, mock_service, api_event, lambda_context, create_booking
    ):
        service = mock_service(create)
        service.create.return_value = Outcome.success(create_booking(booking_id=9))
        event = api_event(
            body=json.dumps(
                {
                    "check_in_date": "2024-05-10",
                    "check_out_date": "2024-05-12",
                    "num_of_adults": 2,
                }
            ),
            path_parameters={"room_id": "1", "guest_id": "3"},
        )

        response = create.lambda_handler(event, lambda_context)

        body = json.loads(response["body"])
        assert response["statusCode"] == 200
        assert body["data"]["booking_id"] == 9
        assert body["data"]["confirmation_code"] == "ABCDE12345"
        assert body["data"]["nights"] == 2
        room_id, guest_id, details = service.create.call_args.args
        assert room_id == RoomId(value=1)
        assert guest_id == GuestId(value=3)
        assert details["num_of_children"] == 0

    def test_failure_outcome_maps_to_status_code(
        self, mock_service, api_event, lambda_context
    ):
        service = mock_service(create)
        service.create.return_value = Outcome.failure(
            OutcomeKind.ROOM_NOT_AVAILABLE, "Room not Available for selected date range"
        )
        event = api_event(
            body=json.dumps(
                {
                    "check_in_date": "2024-05-10",
                    "check_out_date": "2024-05-12",
                    "num_of_adults": 1,
                }
            ),
            path_parameters={"room_id": "1", "guest_id": "3"},
        )

        response = create.lambda_handler(event, lambda_context)

        body = json.loads(response["body"])
        assert response["statusCode"] == 404
        assert body == {
            "status": "error",
            "message": "Room not Available for selected date range",
        }

    def test_invalid_request_returns_400(self, mock_service, api_event, lambda_context):
        service = mock_service(create)
        event = api_event(
            body=json.dumps({"check_in_date": "10/05/2024", "num_of_adults": 0}),
            path_parameters={"room_id": "1", "guest_id": "3"},
        )

        response = create.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
        service.create.assert_not_called()


class TestFindHandler:
    def test_find_booking(
        self, mock_service, api_event, lambda_context, create_booking
    ):
        service = mock_service(find)
        service.find_by_confirmation_code.return_value = Outcome.success(
            create_booking()
        )
        event = api_event(path_parameters={"confirmation_code": "ABCDE12345"})

        response = find.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        service.find_by_confirmation_code.assert_called_once_with("ABCDE12345")

    def test_booking_not_found(self, mock_service, api_event, lambda_context):
        service = mock_service(find)
        service.find_by_confirmation_code.return_value = Outcome.failure(
            OutcomeKind.BOOKING_NOT_FOUND, "Booking Not Found"
        )
        event = api_event(path_parameters={"confirmation_code": "ZZZZZZZZZZ"})

        response = find.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 404
        assert json.loads(response["body"])["message"] == "Booking Not Found"


class TestListBookingsHandler:
    def test_list_all(self, mock_service, api_event, lambda_context, create_booking):
        service = mock_service(list_bookings)
        service.list_all.return_value = Outcome.success(
            [create_booking(booking_id=2), create_booking(booking_id=1)]
        )

        response = list_bookings.lambda_handler(api_event(), lambda_context)

        body = json.loads(response["body"])
        assert [b["booking_id"] for b in body["data"]] == [2, 1]
        service.list_for_guest.assert_not_called()

    def test_list_for_guest(self, mock_service, api_event, lambda_context):
        service = mock_service(list_bookings)
        service.list_for_guest.return_value = Outcome.success([])
        event = api_event(query_string_parameters={"guest_id": "4"})

        response = list_bookings.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        service.list_for_guest.assert_called_once_with(GuestId(value=4))


class TestCancelHandler:
    def test_cancel_booking(self, mock_service, api_event, lambda_context):
        service = mock_service(cancel)
        service.cancel.return_value = Outcome.success()
        event = api_event(path_parameters={"booking_id": "5"})

        response = cancel.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        service.cancel.assert_called_once_with(BookingId(value=5))

    def test_non_numeric_booking_id_returns_400(
        self, mock_service, api_event, lambda_context
    ):
        service = mock_service(cancel)
        event = api_event(path_parameters={"booking_id": "abc"})

        response = cancel.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
        service.cancel.assert_not_called()
