from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_booking.room.applications.search_available_rooms import (
    SearchAvailableRoomsService,
)
from hotel_booking.room.handlers.request_models import SearchRoomsRequest
from hotel_booking.room.handlers.response_models import to_room_data
from hotel_booking.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from hotel_booking.shared.utils import bad_request, outcome_response, parse_request

logger = Logger()


service = SearchAvailableRoomsService(repository=DynamoDBRoomRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """空室検索 Lambda ハンドラ"""
    try:
        request = parse_request(SearchRoomsRequest, event)
    except ValueError as e:
        return bad_request(e)

    logger.info(
        "Searching available rooms",
        extra={
            "check_in_date": request.check_in_date,
            "check_out_date": request.check_out_date,
            "room_type": request.room_type,
        },
    )
    outcome = service.search(
        request.check_in_date, request.check_out_date, request.room_type
    )
    data = [to_room_data(room) for room in outcome.data] if outcome.is_success else None
    return outcome_response(outcome, data)
