from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from hotel_booking.booking.infrastructure import booking_item
from hotel_booking.guest.domain.entity import Guest
from hotel_booking.guest.domain.repository import GuestRepository
from hotel_booking.shared.domain import GuestId
from hotel_booking.shared.domain.exception import DuplicateResourceException
from hotel_booking.shared.infrastructure import (
    DynamoDBSequence,
    get_table,
    query_all,
    serialize_item,
)


def _guest_key(guest_id: GuestId) -> dict:
    return {"PK": f"GUEST#{guest_id}", "SK": "GUEST"}


def _email_key(email: str) -> dict:
    return {"PK": f"EMAIL#{email}", "SK": "EMAIL"}


class DynamoDBGuestRepository(GuestRepository):
    """DynamoDBを使用したGuestRepository の具象実装

    メールアドレスの一意性は EMAIL#<email> アイテムの条件付き書き込みで保証する。
    """

    def __init__(self, table_name: str | None = None, dynamodb=None) -> None:
        self.table = get_table(table_name, dynamodb)
        self._sequence = DynamoDBSequence(self.table, "GUEST")

    def next_id(self) -> GuestId:
        return GuestId(value=self._sequence.next_value())

    def save(self, guest: Guest) -> None:
        """宿泊者とメールアドレスのポインタを保存する"""
        item = {
            **_guest_key(guest.id),
            "entity_type": "GUEST",
            "guest_id": guest.id.value,
            "name": guest.name,
            "email": guest.email,
            "phone_number": guest.phone_number,
            "password_hash": guest.password_hash,
            "role": guest.role,
            "GSI1PK": "GUESTS",
            "GSI1SK": f"GUEST#{guest.id.value:010d}",
        }
        pointer = {**_email_key(guest.email), "guest_id": guest.id.value}
        try:
            self.table.meta.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table.name,
                            "Item": serialize_item(new_item),
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    }
                    for new_item in (item, pointer)
                ]
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                raise DuplicateResourceException(
                    f"Guest already exists: {guest.email}"
                )
            raise

    def find_by_id(self, guest_id: GuestId) -> Guest | None:
        response = self.table.get_item(Key=_guest_key(guest_id), ConsistentRead=True)
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_email(self, email: str) -> Guest | None:
        response = self.table.get_item(Key=_email_key(email), ConsistentRead=True)
        pointer = response.get("Item")
        if not pointer:
            return None
        return self.find_by_id(GuestId(value=int(pointer["guest_id"])))

    def exists_by_email(self, email: str) -> bool:
        response = self.table.get_item(Key=_email_key(email), ConsistentRead=True)
        return "Item" in response

    def find_all(self) -> list[Guest]:
        """全宿泊者を宿泊者ID順に取得する"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("GUESTS"),
        )
        return [self._to_entity(item) for item in items]

    def delete(self, guest: Guest) -> None:
        """宿泊者と、その宿泊者の予約・ポインタアイテムを削除する"""
        items = query_all(
            self.table,
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(f"GUEST#{guest.id}"),
        )
        with self.table.batch_writer() as batch:
            for item in items:
                for key in booking_item.booking_keys(booking_item.to_entity(item)):
                    batch.delete_item(Key=key)

        self.table.meta.client.transact_write_items(
            TransactItems=[
                {"Delete": {"TableName": self.table.name, "Key": serialize_item(key)}}
                for key in (_guest_key(guest.id), _email_key(guest.email))
            ]
        )

    def _to_entity(self, item: dict) -> Guest:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Guest(
            id=GuestId(value=int(item["guest_id"])),
            name=item["name"],
            email=item["email"],
            phone_number=item["phone_number"],
            password_hash=item["password_hash"],
            role=item["role"],
        )
