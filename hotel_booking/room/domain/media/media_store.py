from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Photo:
    """アップロードする客室写真"""

    content: bytes
    filename: str
    content_type: str = "image/jpeg"


class MediaStore(ABC):
    """画像ストレージのインターフェース"""

    @abstractmethod
    def store(self, photo: Photo) -> str:
        """画像を保存して取得用 URL を返す

        失敗した場合は MediaUploadException を送出する。
        """
        raise NotImplementedError
