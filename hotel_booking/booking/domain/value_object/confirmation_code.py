from __future__ import annotations

import re
import secrets
import string
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ConfirmationCode:
    """予約確認コード

    英大文字と数字からなる固定長の文字列。宿泊者が共有しやすい短い識別子で、
    数値の予約IDとは独立している。
    """

    LENGTH: ClassVar[int] = 10
    ALPHABET: ClassVar[str] = string.ascii_uppercase + string.digits
    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z0-9]+$")

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != self.LENGTH or not self._PATTERN.match(self.value):
            raise ValueError(f"Invalid confirmation code: {self.value}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> ConfirmationCode:
        """ランダムな確認コードを生成する（一意性は永続化時に保証する）"""
        return cls("".join(secrets.choice(cls.ALPHABET) for _ in range(cls.LENGTH)))
