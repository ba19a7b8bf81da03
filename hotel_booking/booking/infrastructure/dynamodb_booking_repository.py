from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.domain.exception import DuplicateConfirmationCodeException
from hotel_booking.booking.domain.repository import BookingRepository
from hotel_booking.booking.domain.value_object import BookingId, ConfirmationCode
from hotel_booking.booking.infrastructure.booking_item import (
    booking_keys,
    booking_sk,
    code_key,
    id_key,
    room_pk,
    to_entity,
    to_item,
)
from hotel_booking.shared.domain import GuestId, RoomId
from hotel_booking.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)
from hotel_booking.shared.infrastructure import (
    DynamoDBSequence,
    get_table,
    query_all,
    serialize_item,
)

# TransactWriteItems 内の位置（CancellationReasons の添字に対応）
_CODE_INDEX = 1
_ROOM_INDEX = 3


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    予約本体に加えて、確認コードと予約IDから予約本体を引くためのポインタ
    アイテムを同じトランザクションで書き込む。確認コードのポインタは
    attribute_not_exists 条件により一意制約を兼ねる。
    """

    def __init__(self, table_name: str | None = None, dynamodb=None) -> None:
        self.table = get_table(table_name, dynamodb)
        self._sequence = DynamoDBSequence(self.table, "BOOKING")

    def next_id(self) -> BookingId:
        return BookingId(value=self._sequence.next_value())

    def save(
        self, booking: Booking, expected_room_version: int | None = None
    ) -> None:
        """予約をDBに保存する"""
        pointer = {
            "room_id": booking.room_id.value,
            "booking_id": booking.id.value,
        }
        transact_items = [
            self._put(to_item(booking)),
            self._put(
                {
                    **code_key(booking.confirmation_code),
                    **pointer,
                    "entity_type": "CONFIRMATION_CODE",
                }
            ),
            self._put({**id_key(booking.id), **pointer, "entity_type": "BOOKING_REF"}),
        ]
        if expected_room_version is not None:
            transact_items.append(
                {
                    "Update": {
                        "TableName": self.table.name,
                        "Key": serialize_item(
                            {"PK": room_pk(booking.room_id), "SK": "ROOM"}
                        ),
                        "UpdateExpression": "SET #version = #version + :one",
                        "ConditionExpression": "#version = :expected",
                        "ExpressionAttributeNames": {"#version": "version"},
                        "ExpressionAttributeValues": serialize_item(
                            {":one": 1, ":expected": expected_room_version}
                        ),
                    }
                }
            )

        try:
            self.table.meta.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            if e.response["Error"]["Code"] != "TransactionCanceledException":
                raise
            reasons = [r.get("Code") for r in e.response.get("CancellationReasons", [])]
            if _failed(reasons, _ROOM_INDEX):
                raise OptimisticLockException(
                    f"Room was modified concurrently: room_id={booking.room_id}, "
                    f"expected version {expected_room_version}"
                )
            if _failed(reasons, _CODE_INDEX):
                raise DuplicateConfirmationCodeException(
                    f"Confirmation code already in use: {booking.confirmation_code}"
                )
            raise DuplicateResourceException(f"Booking already exists: {booking.id}")

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        return self._find_by_pointer(id_key(booking_id))

    def find_by_confirmation_code(self, code: ConfirmationCode) -> Booking | None:
        """確認コードで検索"""
        return self._find_by_pointer(code_key(code))

    def find_all(self) -> list[Booking]:
        """全予約を予約IDの降順で取得する"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("BOOKINGS"),
            ScanIndexForward=False,
        )
        return [to_entity(item) for item in items]

    def find_by_guest_id(self, guest_id: GuestId) -> list[Booking]:
        """宿泊者の予約を予約IDの降順で取得する"""
        items = query_all(
            self.table,
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(f"GUEST#{guest_id}"),
            ScanIndexForward=False,
        )
        return [to_entity(item) for item in items]

    def delete(self, booking: Booking) -> None:
        """予約と、そのポインタアイテムを削除する"""
        self.table.meta.client.transact_write_items(
            TransactItems=[
                {"Delete": {"TableName": self.table.name, "Key": serialize_item(key)}}
                for key in booking_keys(booking)
            ]
        )

    def _find_by_pointer(self, key: dict) -> Booking | None:
        response = self.table.get_item(Key=key, ConsistentRead=True)
        pointer = response.get("Item")
        if not pointer:
            return None
        response = self.table.get_item(
            Key={
                "PK": room_pk(RoomId(value=int(pointer["room_id"]))),
                "SK": booking_sk(BookingId(value=int(pointer["booking_id"]))),
            },
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return to_entity(item)

    def _put(self, item: dict) -> dict:
        return {
            "Put": {
                "TableName": self.table.name,
                "Item": serialize_item(item),
                "ConditionExpression": "attribute_not_exists(PK)",
            }
        }


def _failed(reasons: list[str | None], index: int) -> bool:
    return index < len(reasons) and reasons[index] == "ConditionalCheckFailed"
