from decimal import Decimal

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from hotel_booking.booking.infrastructure import booking_item
from hotel_booking.room.domain.entity import Room
from hotel_booking.room.domain.repository import RoomRepository
from hotel_booking.room.domain.value_object import Price, RoomType
from hotel_booking.shared.domain import RoomId
from hotel_booking.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from hotel_booking.shared.infrastructure import DynamoDBSequence, get_table, query_all


class DynamoDBRoomRepository(RoomRepository):
    """DynamoDBを使用したRoomRepository の具象実装

    客室アイテム (SK=ROOM) と予約アイテム (SK=BOOKING#...) は同じパーティションに
    あり、1回の Query で予約一覧を含む集約を組み立てる。
    """

    def __init__(self, table_name: str | None = None, dynamodb=None) -> None:
        self.table = get_table(table_name, dynamodb)
        self._sequence = DynamoDBSequence(self.table, "ROOM")

    def next_id(self) -> RoomId:
        return RoomId(value=self._sequence.next_value())

    def save(self, room: Room) -> None:
        """客室をDBに保存する"""
        item = {
            "PK": booking_item.room_pk(room.id),
            "SK": "ROOM",
            "entity_type": "ROOM",
            "room_id": room.id.value,
            "room_type": str(room.room_type),
            "room_price": str(room.price.amount),
            "room_description": room.description,
            "room_photo_url": room.photo_url,
            "version": room.version,
            "GSI1PK": "ROOMS",
            "GSI1SK": f"ROOM#{room.id.value:010d}",
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Room already exists: {room.id}")
            raise

    def update(self, room: Room) -> None:
        """客室情報を更新する"""
        try:
            self.table.update_item(
                Key={"PK": booking_item.room_pk(room.id), "SK": "ROOM"},
                UpdateExpression=(
                    "SET room_type = :room_type, room_price = :room_price, "
                    "room_description = :room_description, "
                    "room_photo_url = :room_photo_url"
                ),
                ExpressionAttributeValues={
                    ":room_type": str(room.room_type),
                    ":room_price": str(room.price.amount),
                    ":room_description": room.description,
                    ":room_photo_url": room.photo_url,
                },
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException(f"Room not found: {room.id}")
            raise

    def find_by_id(self, room_id: RoomId) -> Room | None:
        """客室IDで検索（予約一覧を含む）"""
        items = query_all(
            self.table,
            KeyConditionExpression=Key("PK").eq(booking_item.room_pk(room_id)),
            ConsistentRead=True,
        )
        room_items = [item for item in items if item["SK"] == "ROOM"]
        if not room_items:
            return None
        bookings = tuple(
            booking_item.to_entity(item)
            for item in items
            if item["SK"].startswith(booking_item.BOOKING_SK_PREFIX)
        )
        return self._to_entity(room_items[0], bookings)

    def find_all(self) -> list[Room]:
        """全客室を客室IDの昇順で取得する"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("ROOMS"),
        )
        return [self._to_entity(item) for item in items]

    def find_room_types(self) -> list[str]:
        return sorted({str(room.room_type) for room in self.find_all()})

    def delete(self, room: Room) -> None:
        """客室と、その客室に属する予約・ポインタアイテムを削除する

        読み込んだ時点の version を条件に客室アイテムを先に削除する。
        その後に確定する予約は客室のバージョン条件で失敗するため、
        削除対象の予約一覧はこの時点で確定する。
        """
        items = query_all(
            self.table,
            KeyConditionExpression=Key("PK").eq(booking_item.room_pk(room.id)),
            ConsistentRead=True,
        )
        room_items = [item for item in items if item["SK"] == "ROOM"]
        if not room_items:
            raise ResourceNotFoundException(f"Room not found: {room.id}")

        version = int(room_items[0].get("version", 0))
        try:
            self.table.delete_item(
                Key={"PK": booking_item.room_pk(room.id), "SK": "ROOM"},
                ConditionExpression=Attr("version").eq(version),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Room was modified concurrently: room_id={room.id}, "
                    f"expected version {version}"
                )
            raise

        with self.table.batch_writer() as batch:
            for item in items:
                if not item["SK"].startswith(booking_item.BOOKING_SK_PREFIX):
                    continue
                for key in booking_item.booking_keys(booking_item.to_entity(item)):
                    batch.delete_item(Key=key)

    def _to_entity(self, item: dict, bookings: tuple = ()) -> Room:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Room(
            id=RoomId(value=int(item["room_id"])),
            room_type=RoomType(item["room_type"]),
            price=Price(Decimal(item["room_price"])),
            description=item.get("room_description", ""),
            photo_url=item.get("room_photo_url"),
            bookings=bookings,
            version=int(item.get("version", 0)),
        )
