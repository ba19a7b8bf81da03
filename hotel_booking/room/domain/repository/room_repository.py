from abc import abstractmethod

from hotel_booking.room.domain.entity.room import Room
from hotel_booking.shared.domain import Repository, RoomId


class RoomRepository(Repository[Room, RoomId]):
    """客室レポジトリのインターフェース"""

    @abstractmethod
    def next_id(self) -> RoomId:
        """客室IDを採番する"""
        raise NotImplementedError

    @abstractmethod
    def save(self, room: Room) -> None:
        """新しい客室を保存する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, room: Room) -> None:
        """客室情報を更新する（予約とバージョンは変更しない）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, room_id: RoomId) -> Room | None:
        """客室IDで検索する（予約一覧を含む）"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Room]:
        """全客室を客室IDの昇順で取得する（予約一覧は含まない）"""
        raise NotImplementedError

    @abstractmethod
    def find_room_types(self) -> list[str]:
        """登録済みの客室タイプを重複なしで取得する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, room: Room) -> None:
        """客室と、その客室の予約を削除する"""
        raise NotImplementedError
