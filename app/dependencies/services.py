from functools import lru_cache

from app.core.config import settings
from app.services.image_store import ImageStore
from app.services.mail_service import Mailer


@lru_cache
def get_image_store() -> ImageStore:
    return ImageStore(
        bucket_name=settings.AWS_S3_BUCKET_NAME,
        region=settings.AWS_REGION,
        prefix=settings.AWS_S3_IMAGE_PREFIX,
    )


@lru_cache
def get_mailer() -> Mailer:
    return Mailer(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASSWORD,
        sender=settings.SMTP_FROM,
        use_tls=settings.SMTP_USE_TLS,
    )
