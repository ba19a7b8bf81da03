from abc import abstractmethod

from hotel_booking.guest.domain.entity.guest import Guest
from hotel_booking.shared.domain import GuestId, Repository


class GuestRepository(Repository[Guest, GuestId]):
    """宿泊者レポジトリのインターフェース"""

    @abstractmethod
    def next_id(self) -> GuestId:
        """宿泊者IDを採番する"""
        raise NotImplementedError

    @abstractmethod
    def save(self, guest: Guest) -> None:
        """宿泊者を保存する（メールアドレスが重複する場合は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, guest_id: GuestId) -> Guest | None:
        """宿泊者IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: str) -> Guest | None:
        """メールアドレスで検索する"""
        raise NotImplementedError

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """メールアドレスが登録済みか"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Guest]:
        """全宿泊者を取得する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, guest: Guest) -> None:
        """宿泊者と、その宿泊者の予約をすべて削除する"""
        raise NotImplementedError
