from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """パスワードハッシュ化のインターフェース（実装は認証基盤側）"""

    @abstractmethod
    def hash(self, password: str) -> str:
        raise NotImplementedError
