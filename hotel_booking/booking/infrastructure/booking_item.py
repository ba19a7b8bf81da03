"""Booking エンティティと DynamoDB アイテムの相互変換

予約アイテムは客室と同じパーティション (ROOM#<room_id>) に置き、
客室の読み込み時に予約一覧をまとめて取得できるようにする。
"""

from datetime import date

from hotel_booking.booking.domain.entity import Booking
from hotel_booking.booking.domain.value_object import (
    BookingId,
    ConfirmationCode,
    StayPeriod,
)
from hotel_booking.shared.domain import GuestId, RoomId

BOOKING_SK_PREFIX = "BOOKING#"


def room_pk(room_id: RoomId) -> str:
    return f"ROOM#{room_id}"


def booking_sk(booking_id: BookingId) -> str:
    # 辞書順と数値順を一致させるためゼロ埋めする
    return f"{BOOKING_SK_PREFIX}{booking_id.value:010d}"


def code_key(code: ConfirmationCode) -> dict:
    """確認コードから予約を引くポインタアイテムのキー"""
    return {"PK": f"CODE#{code}", "SK": "CODE"}


def id_key(booking_id: BookingId) -> dict:
    """予約IDから予約を引くポインタアイテムのキー"""
    return {"PK": f"BOOKING#{booking_id}", "SK": "BOOKING"}


def booking_keys(booking: Booking) -> list[dict]:
    """予約本体とポインタアイテムのキー（削除時にまとめて消す）"""
    return [
        {"PK": room_pk(booking.room_id), "SK": booking_sk(booking.id)},
        code_key(booking.confirmation_code),
        id_key(booking.id),
    ]


def to_item(booking: Booking) -> dict:
    """予約エンティティを DynamoDB アイテムに変換する"""
    return {
        "PK": room_pk(booking.room_id),
        "SK": booking_sk(booking.id),
        "entity_type": "BOOKING",
        "booking_id": booking.id.value,
        "room_id": booking.room_id.value,
        "guest_id": booking.guest_id.value,
        "check_in_date": booking.stay_period.check_in.isoformat(),
        "check_out_date": booking.stay_period.check_out.isoformat(),
        "num_of_adults": booking.num_of_adults,
        "num_of_children": booking.num_of_children,
        "total_num_of_guests": booking.total_num_of_guests,
        "confirmation_code": str(booking.confirmation_code),
        "GSI1PK": "BOOKINGS",
        "GSI1SK": booking_sk(booking.id),
        "GSI2PK": f"GUEST#{booking.guest_id}",
        "GSI2SK": booking_sk(booking.id),
    }


def to_entity(item: dict) -> Booking:
    """DynamoDB アイテムを予約エンティティに変換する"""
    return Booking(
        id=BookingId(value=int(item["booking_id"])),
        room_id=RoomId(value=int(item["room_id"])),
        guest_id=GuestId(value=int(item["guest_id"])),
        stay_period=StayPeriod(
            check_in=date.fromisoformat(item["check_in_date"]),
            check_out=date.fromisoformat(item["check_out_date"]),
        ),
        num_of_adults=int(item["num_of_adults"]),
        num_of_children=int(item["num_of_children"]),
        confirmation_code=ConfirmationCode(item["confirmation_code"]),
    )
