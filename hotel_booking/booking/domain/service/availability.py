"""客室の空き判定

新しい滞在期間 (candidate) が既存予約 (existing) と重なるかを判定する。
一般的な半開区間の交差判定とは異なる非対称なルールで、以下のいずれかを
満たすと重複とみなす。

- candidate のチェックインが existing の滞在中（両端を含まない）
- チェックイン日が同じ
- チェックアウト日が同じ
- candidate が existing を包含する

existing のチェックアウト日にチェックインする連続予約は許可される。
"""

from collections.abc import Iterable

from hotel_booking.booking.domain.value_object import StayPeriod


def overlaps(candidate: StayPeriod, existing: StayPeriod) -> bool:
    """candidate が existing と重複するか"""
    return (
        existing.check_in < candidate.check_in < existing.check_out
        or candidate.check_in == existing.check_in
        or candidate.check_out == existing.check_out
        or (
            candidate.check_in <= existing.check_in
            and candidate.check_out >= existing.check_out
        )
    )


def is_available(candidate: StayPeriod, existing: Iterable[StayPeriod]) -> bool:
    """既存予約のいずれとも重複しなければ空室とみなす"""
    return not any(overlaps(candidate, stay) for stay in existing)
