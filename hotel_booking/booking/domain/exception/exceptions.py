from hotel_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    ResourceNotFoundException,
)


class RoomNotFoundException(ResourceNotFoundException):
    """予約対象の客室が存在しない"""

    pass


class GuestNotFoundException(ResourceNotFoundException):
    """予約する宿泊者が存在しない"""

    pass


class RoomNotAvailableException(BusinessRuleViolationException):
    """指定期間が既存予約と重複している"""

    pass


class DuplicateConfirmationCodeException(DuplicateResourceException):
    """確認コードが既存の予約と衝突した"""

    pass
