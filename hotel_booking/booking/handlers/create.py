from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_booking.booking.applications.create_booking import CreateBookingService
from hotel_booking.booking.domain.factory import BookingDetails, BookingFactory
from hotel_booking.booking.handlers.request_models import CreateBookingRequest
from hotel_booking.booking.handlers.response_models import to_booking_data
from hotel_booking.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel_booking.booking.infrastructure.powertools_booking_metrics import (
    PowertoolsBookingMetrics,
)
from hotel_booking.guest.infrastructure.dynamodb_guest_repository import (
    DynamoDBGuestRepository,
)
from hotel_booking.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from hotel_booking.shared.domain import GuestId, RoomId
from hotel_booking.shared.utils import bad_request, outcome_response, parse_request

logger = Logger()
metrics = Metrics()


service = CreateBookingService(
    room_repository=DynamoDBRoomRepository(),
    guest_repository=DynamoDBGuestRepository(),
    booking_repository=DynamoDBBookingRepository(),
    factory=BookingFactory(),
    metrics=PowertoolsBookingMetrics(metrics),
)


@logger.inject_lambda_context
@metrics.log_metrics
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda ハンドラ"""
    try:
        request = parse_request(CreateBookingRequest, event)
    except ValueError as e:
        logger.warning("Invalid create booking request", extra={"error": str(e)})
        return bad_request(e)

    logger.info(
        "Received create booking request",
        extra={"room_id": request.room_id, "guest_id": request.guest_id},
    )
    details: BookingDetails = {
        "check_in_date": request.check_in_date,
        "check_out_date": request.check_out_date,
        "num_of_adults": request.num_of_adults,
        "num_of_children": request.num_of_children,
    }
    outcome = service.create(
        RoomId(value=request.room_id), GuestId(value=request.guest_id), details
    )
    data = to_booking_data(outcome.data) if outcome.data is not None else None
    return outcome_response(outcome, data)
