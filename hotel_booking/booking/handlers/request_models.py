from pydantic import BaseModel, Field


class CreateBookingRequest(BaseModel):
    """予約作成リクエストモデル（パスの room_id / guest_id とボディを結合したもの）"""

    room_id: int = Field(..., ge=1)
    guest_id: int = Field(..., ge=1)
    check_in_date: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2024-01-01"],
    )
    check_out_date: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2024-01-03"],
    )
    num_of_adults: int = Field(..., ge=1, description="大人の人数")
    num_of_children: int = Field(default=0, ge=0, description="子供の人数")


class FindBookingRequest(BaseModel):
    confirmation_code: str = Field(..., min_length=1)


class ListBookingsRequest(BaseModel):
    """予約一覧リクエストモデル（guest_id 指定時はその宿泊者の履歴のみ）"""

    guest_id: int | None = Field(default=None, ge=1)


class CancelBookingRequest(BaseModel):
    booking_id: int = Field(..., ge=1)
