from .booking_metrics import BookingMetrics, TimerSample

__all__ = ["BookingMetrics", "TimerSample"]
