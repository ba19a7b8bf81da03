from typing import NotRequired, TypedDict

from hotel_booking.guest.domain.entity.guest import Guest
from hotel_booking.shared.domain import GuestId

DEFAULT_ROLE = "USER"


class RegistrationDetails(TypedDict):
    """宿泊者登録の入力データ"""

    name: str
    email: str
    phone_number: str
    password: str
    role: NotRequired[str | None]


def normalize_registration(details: RegistrationDetails) -> RegistrationDetails:
    """永続化前に入力を正規化する

    - role が未指定・空白なら USER、指定があれば大文字に揃える
    - email は前後の空白を除いて小文字に揃える
    """
    role = (details.get("role") or "").strip().upper()
    return RegistrationDetails(
        name=details["name"].strip(),
        email=details["email"].strip().lower(),
        phone_number=details["phone_number"].strip(),
        password=details["password"],
        role=role or DEFAULT_ROLE,
    )


class GuestFactory:
    """宿泊者エンティティを生成する Factory"""

    def create(
        self, guest_id: GuestId, details: RegistrationDetails, password_hash: str
    ) -> Guest:
        """正規化済みの入力から宿泊者を作成する"""
        return Guest(
            id=guest_id,
            name=details["name"],
            email=details["email"],
            phone_number=details["phone_number"],
            password_hash=password_hash,
            role=details.get("role") or DEFAULT_ROLE,
        )
