from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_booking.booking.applications.find_booking import FindBookingService
from hotel_booking.booking.handlers.request_models import FindBookingRequest
from hotel_booking.booking.handlers.response_models import to_booking_data
from hotel_booking.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from hotel_booking.shared.utils import bad_request, outcome_response, parse_request

logger = Logger()


service = FindBookingService(repository=DynamoDBBookingRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """確認コードによる予約照会 Lambda ハンドラ"""
    try:
        request = parse_request(FindBookingRequest, event)
    except ValueError as e:
        return bad_request(e)

    outcome = service.find_by_confirmation_code(request.confirmation_code)
    data = to_booking_data(outcome.data) if outcome.data is not None else None
    return outcome_response(outcome, data)
