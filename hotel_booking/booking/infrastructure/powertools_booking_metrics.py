import time

from aws_lambda_powertools import Metrics
from aws_lambda_powertools.metrics import MetricUnit

from hotel_booking.booking.domain.metrics import BookingMetrics, TimerSample

CREATED_METRIC = "booking.create.count"
ERROR_METRIC = "booking.create.error.count"
DURATION_METRIC = "booking.create.time"


class PowertoolsBookingMetrics(BookingMetrics):
    """Powertools Metrics (CloudWatch EMF) を使った BookingMetrics の実装

    メトリクスの出力は Handler 側の @metrics.log_metrics で行う。
    """

    def __init__(self, metrics: Metrics | None = None) -> None:
        self._metrics = metrics or Metrics()

    def increment_created(self) -> None:
        self._metrics.add_metric(name=CREATED_METRIC, unit=MetricUnit.Count, value=1)

    def increment_error(self) -> None:
        self._metrics.add_metric(name=ERROR_METRIC, unit=MetricUnit.Count, value=1)

    def start_timer(self) -> TimerSample:
        return TimerSample(started_at=time.perf_counter())

    def stop_timer(self, sample: TimerSample) -> None:
        elapsed_ms = (time.perf_counter() - sample.started_at) * 1000
        self._metrics.add_metric(
            name=DURATION_METRIC, unit=MetricUnit.Milliseconds, value=elapsed_ms
        )
