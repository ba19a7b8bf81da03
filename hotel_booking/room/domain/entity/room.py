from hotel_booking.booking.domain.entity import Booking
from hotel_booking.room.domain.value_object import Price, RoomType
from hotel_booking.shared.domain import AggregateRoot, RoomId


class Room(AggregateRoot[RoomId]):
    """客室エンティティ

    bookings はリポジトリが読み込み時に組み立てる現時点の予約一覧。
    version は予約が確定するたびに進み、同時予約の検出に使う。
    """

    def __init__(
        self,
        id: RoomId,
        room_type: RoomType,
        price: Price,
        description: str = "",
        photo_url: str | None = None,
        bookings: tuple[Booking, ...] = (),
        version: int = 0,
    ) -> None:
        super().__init__(id)
        self._room_type = room_type
        self._price = price
        self._description = description
        self._photo_url = photo_url
        self._bookings = tuple(bookings)
        self._version = version

    @property
    def room_type(self) -> RoomType:
        return self._room_type

    @property
    def price(self) -> Price:
        return self._price

    @property
    def description(self) -> str:
        return self._description

    @property
    def photo_url(self) -> str | None:
        return self._photo_url

    @property
    def bookings(self) -> tuple[Booking, ...]:
        return self._bookings

    @property
    def version(self) -> int:
        return self._version

    def update_details(
        self,
        room_type: RoomType | None = None,
        price: Price | None = None,
        description: str | None = None,
        photo_url: str | None = None,
    ) -> None:
        """指定された項目だけを更新する"""
        if room_type is not None:
            self._room_type = room_type
        if price is not None:
            self._price = price
        if description is not None:
            self._description = description
        if photo_url is not None:
            self._photo_url = photo_url
