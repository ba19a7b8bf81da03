from hotel_booking.booking.domain.value_object import (
    BookingId,
    ConfirmationCode,
    StayPeriod,
)
from hotel_booking.shared.domain import AggregateRoot, GuestId, RoomId
from hotel_booking.shared.domain.exception import BusinessRuleViolationException


class Booking(AggregateRoot[BookingId]):
    """予約エンティティ

    Room / Guest はオブジェクトではなく ID で参照する。
    総宿泊人数は大人と子供の人数から常に導出する。
    """

    def __init__(
        self,
        id: BookingId,
        room_id: RoomId,
        guest_id: GuestId,
        stay_period: StayPeriod,
        num_of_adults: int,
        num_of_children: int,
        confirmation_code: ConfirmationCode,
    ) -> None:
        super().__init__(id)
        self._room_id = room_id
        self._guest_id = guest_id
        self._stay_period = stay_period
        self._confirmation_code = confirmation_code
        self.change_guest_count(num_of_adults, num_of_children)

    @property
    def room_id(self) -> RoomId:
        return self._room_id

    @property
    def guest_id(self) -> GuestId:
        return self._guest_id

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def num_of_adults(self) -> int:
        return self._num_of_adults

    @property
    def num_of_children(self) -> int:
        return self._num_of_children

    @property
    def total_num_of_guests(self) -> int:
        return self._num_of_adults + self._num_of_children

    @property
    def confirmation_code(self) -> ConfirmationCode:
        return self._confirmation_code

    def change_guest_count(self, num_of_adults: int, num_of_children: int) -> None:
        """宿泊人数を変更する"""
        if num_of_adults < 1:
            raise BusinessRuleViolationException(
                "Number of adults must be at least 1"
            )
        if num_of_children < 0:
            raise BusinessRuleViolationException(
                "Number of children cannot be negative"
            )
        self._num_of_adults = num_of_adults
        self._num_of_children = num_of_children
