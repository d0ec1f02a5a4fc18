# /app/services/image_store.py
import logging
import os
from dataclasses import dataclass
from uuid import uuid4

import boto3
from botocore.exceptions import ClientError, NoCredentialsError
from fastapi import UploadFile

from app.core.config import settings
from app.core.errors import ExternalServiceError

logger = logging.getLogger(__name__)


@dataclass
class RemoteImage:
    public_id: str
    url: str


class ImageStore:
    """S3 버킷에 프로필 이미지를 올리고 삭제합니다."""

    def __init__(self, bucket_name: str, region: str, prefix: str = "alumni_image", client=None):
        self.bucket_name = bucket_name
        self.region = region
        self.prefix = prefix.strip("/")
        self.s3_client = client or boto3.client(
            "s3",
            aws_access_key_id=settings.AWS_ACCESS_KEY,
            aws_secret_access_key=settings.AWS_SECRET_KEY,
            region_name=region,
        )

    def url_for(self, key: str) -> str:
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"

    def upload(self, file: UploadFile) -> RemoteImage:
        """
        멀티파트로 받은 이미지를 S3 에 업로드하고 (key, URL) 을 반환합니다.
        """
        ext = os.path.splitext(file.filename or "")[1]
        key = f"{self.prefix}/{uuid4().hex}{ext}"
        try:
            self.s3_client.upload_fileobj(
                file.file,
                self.bucket_name,
                key,
                ExtraArgs={"ContentType": file.content_type or "application/octet-stream"},
            )
        except NoCredentialsError:
            raise ExternalServiceError("S3 credentials are not configured")
        except ClientError as e:
            logger.error(f"Profile image upload failed: {e}")
            raise ExternalServiceError(f"Profile image upload failed: {e}")
        logger.info(f"Uploaded profile image: {key}")
        return RemoteImage(public_id=key, url=self.url_for(key))

    def destroy(self, public_id: str) -> None:
        try:
            self.s3_client.delete_object(Bucket=self.bucket_name, Key=public_id)
        except NoCredentialsError:
            raise ExternalServiceError("S3 credentials are not configured")
        except ClientError as e:
            logger.error(f"Profile image delete failed: {public_id} - {e}")
            raise ExternalServiceError(f"Profile image delete failed: {e}")
        logger.info(f"Deleted profile image: {public_id}")
