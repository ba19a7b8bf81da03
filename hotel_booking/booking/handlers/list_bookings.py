from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_booking.booking.applications.list_bookings import ListBookingsService
from hotel_booking.booking.handlers.request_models import ListBookingsRequest
from hotel_booking.booking.handlers.response_models import to_booking_data
from hotel_booking.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel_booking.guest.infrastructure.dynamodb_guest_repository import (
    DynamoDBGuestRepository,
)
from hotel_booking.shared.domain import GuestId
from hotel_booking.shared.utils import bad_request, outcome_response, parse_request

logger = Logger()


service = ListBookingsService(
    booking_repository=DynamoDBBookingRepository(),
    guest_repository=DynamoDBGuestRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約一覧 Lambda ハンドラ"""
    try:
        request = parse_request(ListBookingsRequest, event)
    except ValueError as e:
        return bad_request(e)

    if request.guest_id is None:
        outcome = service.list_all()
    else:
        outcome = service.list_for_guest(GuestId(value=request.guest_id))

    data = [to_booking_data(b) for b in outcome.data] if outcome.is_success else None
    return outcome_response(outcome, data)
