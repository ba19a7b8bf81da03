from abc import abstractmethod

from hotel_booking.booking.domain.entity.booking import Booking
from hotel_booking.booking.domain.value_object import BookingId, ConfirmationCode
from hotel_booking.shared.domain import GuestId, Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def next_id(self) -> BookingId:
        """予約IDを採番する"""
        raise NotImplementedError

    @abstractmethod
    def save(
        self, booking: Booking, expected_room_version: int | None = None
    ) -> None:
        """予約を保存する

        expected_room_version が指定された場合、客室のバージョンが一致するときだけ
        書き込み、同時に客室のバージョンを進める。一致しなければ
        OptimisticLockException、確認コードが衝突した場合は
        DuplicateConfirmationCodeException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_confirmation_code(self, code: ConfirmationCode) -> Booking | None:
        """確認コードで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全予約を予約IDの降順で取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_guest_id(self, guest_id: GuestId) -> list[Booking]:
        """宿泊者の予約履歴を取得する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking: Booking) -> None:
        """予約を削除する"""
        raise NotImplementedError
