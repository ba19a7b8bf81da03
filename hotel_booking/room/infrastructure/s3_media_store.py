import os
import uuid
from urllib.parse import quote

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from hotel_booking.room.domain.media import MediaStore, Photo
from hotel_booking.shared.domain.exception import MediaUploadException


class S3MediaStore(MediaStore):
    """S3 に客室写真を保存する MediaStore の実装"""

    def __init__(
        self,
        bucket_name: str | None = None,
        region: str | None = None,
        s3_client=None,
    ) -> None:
        self.bucket_name = bucket_name or os.getenv("PHOTO_BUCKET_NAME")
        self.region = region or os.getenv("AWS_REGION", "us-east-1")
        self.s3 = s3_client or boto3.client("s3", region_name=self.region)

    def store(self, photo: Photo) -> str:
        """写真をアップロードして公開 URL を返す"""
        key = f"rooms/{uuid.uuid4().hex}-{photo.filename}"
        try:
            self.s3.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=photo.content,
                ContentType=photo.content_type,
            )
        except (BotoCoreError, ClientError) as e:
            raise MediaUploadException(
                f"Unable to upload image to s3 bucket: {e}"
            ) from e
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{quote(key)}"
