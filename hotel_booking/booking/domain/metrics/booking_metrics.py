from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TimerSample:
    """計測開始時点（time.perf_counter の値）"""

    started_at: float


class BookingMetrics(ABC):
    """予約作成のメトリクス送信先

    プロセス全体のシングルトンではなく、ユースケースに注入して使う。
    """

    @abstractmethod
    def increment_created(self) -> None:
        """予約作成の成功件数を加算する"""
        raise NotImplementedError

    @abstractmethod
    def increment_error(self) -> None:
        """予約作成の失敗件数を加算する"""
        raise NotImplementedError

    @abstractmethod
    def start_timer(self) -> TimerSample:
        """処理時間の計測を開始する"""
        raise NotImplementedError

    @abstractmethod
    def stop_timer(self, sample: TimerSample) -> None:
        """処理時間の計測を終了して記録する"""
        raise NotImplementedError
