from hotel_booking.shared.domain import AggregateRoot, GuestId


class Guest(AggregateRoot[GuestId]):
    """宿泊者エンティティ

    予約一覧は保持せず、必要なときに BookingRepository.find_by_guest_id で取得する。
    """

    def __init__(
        self,
        id: GuestId,
        name: str,
        email: str,
        phone_number: str,
        password_hash: str,
        role: str,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._email = email
        self._phone_number = phone_number
        self._password_hash = password_hash
        self._role = role

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def phone_number(self) -> str:
        return self._phone_number

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> str:
        return self._role
