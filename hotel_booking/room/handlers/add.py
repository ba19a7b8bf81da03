import base64
import binascii

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_booking.room.applications.add_room import AddRoomService
from hotel_booking.room.domain.factory import RoomDetails, RoomFactory
from hotel_booking.room.domain.media import Photo
from hotel_booking.room.handlers.request_models import AddRoomRequest
from hotel_booking.room.handlers.response_models import to_room_data
from hotel_booking.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from hotel_booking.room.infrastructure.s3_media_store import S3MediaStore
from hotel_booking.shared.utils import bad_request, outcome_response, parse_request

logger = Logger()


service = AddRoomService(
    repository=DynamoDBRoomRepository(),
    factory=RoomFactory(),
    media_store=S3MediaStore(),
)


def _to_photo(request: AddRoomRequest) -> Photo | None:
    if request.photo is None:
        return None
    try:
        content = base64.b64decode(request.photo, validate=True)
    except binascii.Error as e:
        raise ValueError(f"photo must be base64 encoded: {e}") from e
    return Photo(
        content=content,
        filename=request.photo_filename,
        content_type=request.photo_content_type,
    )


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """客室登録 Lambda ハンドラ"""
    try:
        request = parse_request(AddRoomRequest, event)
        photo = _to_photo(request)
    except ValueError as e:
        return bad_request(e)

    details: RoomDetails = {
        "room_type": request.room_type,
        "room_price": request.room_price,
        "room_description": request.room_description,
    }
    outcome = service.add(details, photo)
    data = to_room_data(outcome.data) if outcome.data is not None else None
    return outcome_response(outcome, data)
