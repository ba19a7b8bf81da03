from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class OutcomeKind(str, Enum):
    """ユースケース実行結果の種別"""

    SUCCESS = "SUCCESS"
    INVALID = "INVALID"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    GUEST_NOT_FOUND = "GUEST_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    ROOM_NOT_AVAILABLE = "ROOM_NOT_AVAILABLE"
    ERROR = "ERROR"


_STATUS_CODES: dict[OutcomeKind, int] = {
    OutcomeKind.SUCCESS: 200,
    OutcomeKind.INVALID: 400,
    OutcomeKind.ALREADY_EXISTS: 400,
    OutcomeKind.ROOM_NOT_FOUND: 404,
    OutcomeKind.GUEST_NOT_FOUND: 404,
    OutcomeKind.BOOKING_NOT_FOUND: 404,
    # 重複予約も 404 として返す（409 ではない）
    OutcomeKind.ROOM_NOT_AVAILABLE: 404,
    OutcomeKind.ERROR: 500,
}


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """ユースケースの実行結果

    成功・失敗のどちらか一つだけを表す。Handler 層は status_code と
    message をそのままレスポンスに変換する。
    """

    kind: OutcomeKind
    message: str
    data: T | None = None

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self.kind]

    @property
    def is_success(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    @classmethod
    def success(cls, data: T | None = None) -> Outcome[T]:
        """成功結果を生成する"""
        return cls(kind=OutcomeKind.SUCCESS, message="successful", data=data)

    @classmethod
    def failure(cls, kind: OutcomeKind, message: str) -> Outcome[T]:
        """失敗結果を生成する"""
        if kind == OutcomeKind.SUCCESS:
            raise ValueError("A failure outcome cannot have the SUCCESS kind")
        return cls(kind=kind, message=message)
