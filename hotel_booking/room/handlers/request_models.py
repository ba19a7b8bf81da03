from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from hotel_booking.shared.utils import to_decimal


class AddRoomRequest(BaseModel):
    """客室登録リクエストモデル"""

    room_type: str = Field(..., min_length=1, max_length=50, description="客室タイプ")
    room_price: Decimal = Field(..., ge=0, description="料金")
    room_description: str = Field(default="", description="説明")
    photo: str | None = Field(
        default=None, description="客室写真（Base64 エンコード）"
    )
    photo_filename: str = Field(default="photo.jpg", min_length=1)
    photo_content_type: str = Field(default="image/jpeg", pattern=r"^image/[\w.+-]+$")

    @field_validator("room_price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)


class SearchRoomsRequest(BaseModel):
    """空室検索リクエストモデル（クエリパラメータ）"""

    check_in_date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    check_out_date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    room_type: str | None = Field(default=None, min_length=1)
