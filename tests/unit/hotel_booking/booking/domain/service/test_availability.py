from datetime import date, timedelta

import pytest

from hotel_booking.booking.domain.service import is_available, overlaps
from hotel_booking.booking.domain.value_object import StayPeriod

BASE = date(2024, 5, 10)


def stay(start: int, end: int) -> StayPeriod:
    """BASE からの相対日数で滞在期間を作る"""
    return StayPeriod(
        check_in=BASE + timedelta(days=start), check_out=BASE + timedelta(days=end)
    )


class TestIsAvailable:
    def test_no_existing_bookings_is_always_available(self):
        assert is_available(stay(0, 3), [])

    @pytest.mark.parametrize(
        "candidate",
        [stay(0, 3), stay(0, 1), stay(0, 10)],
    )
    def test_same_check_in_conflicts(self, candidate):
        assert not is_available(candidate, [stay(0, 5)])

    @pytest.mark.parametrize(
        "candidate",
        [stay(2, 5), stay(-3, 5), stay(4, 5)],
    )
    def test_same_check_out_conflicts(self, candidate):
        assert not is_available(candidate, [stay(0, 5)])

    def test_back_to_back_turnover_is_available(self):
        assert is_available(stay(3, 5), [stay(1, 3)])

    def test_check_out_on_existing_check_in_is_available(self):
        assert is_available(stay(0, 1), [stay(1, 3)])

    @pytest.mark.parametrize(
        "candidate",
        [stay(0, 6), stay(-1, 6), stay(-5, 20)],
    )
    def test_spanning_candidate_conflicts(self, candidate):
        assert not is_available(candidate, [stay(1, 5)])

    def test_check_in_strictly_inside_conflicts(self):
        assert not is_available(stay(2, 8), [stay(1, 5)])

    def test_stays_before_and_after_are_available(self):
        existing = [stay(5, 7), stay(10, 12)]

        assert is_available(stay(0, 2), existing)
        assert is_available(stay(7, 10), existing)
        assert is_available(stay(12, 15), existing)

    def test_any_overlapping_booking_makes_room_unavailable(self):
        existing = [stay(0, 2), stay(10, 12)]

        assert not is_available(stay(11, 14), existing)


class TestOverlaps:
    def test_candidate_inside_existing_without_shared_boundaries(self):
        # チェックイン日が既存の滞在中なら重複
        assert overlaps(stay(2, 3), stay(1, 5))

    def test_existing_check_in_inside_candidate_is_not_detected(self):
        # 非対称なルール: candidate が existing の開始日を跨いでも、
        # 包含・境界一致のいずれでもなければ重複とはみなさない
        assert not overlaps(stay(0, 3), stay(1, 5))
