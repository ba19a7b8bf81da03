from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_booking.booking.applications.cancel_booking import CancelBookingService
from hotel_booking.booking.domain.value_object import BookingId
from hotel_booking.booking.handlers.request_models import CancelBookingRequest
from hotel_booking.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel_booking.shared.utils import bad_request, outcome_response, parse_request

logger = Logger()


service = CancelBookingService(repository=DynamoDBBookingRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約キャンセル Lambda ハンドラ"""
    try:
        request = parse_request(CancelBookingRequest, event)
    except ValueError as e:
        return bad_request(e)

    return outcome_response(service.cancel(BookingId(value=request.booking_id)))
