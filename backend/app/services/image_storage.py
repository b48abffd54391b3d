"""
Clinic image storage - Firebase Storage (GCS bucket)
- uploads owner-supplied images under clinics/{clinic_id}/
- returns the public URL stored on the clinic document
- deletes an upload whose clinic document could not be updated
"""
import asyncio
import logging
import uuid
from io import BytesIO
from typing import NamedTuple

from google.api_core.exceptions import GoogleAPIError, NotFound

from app.core.exceptions import ProviderError
from app.core.firebase import get_bucket

logger = logging.getLogger(__name__)

EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}


class UploadedImage(NamedTuple):
    path: str
    url: str


async def upload_clinic_image(clinic_id: str, data: bytes, content_type: str) -> UploadedImage:
    """Upload in a worker thread (the Storage SDK is blocking)."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, lambda: _upload(clinic_id, data, content_type))


async def delete_clinic_image(path: str) -> None:
    """Best-effort removal. Failures are logged, never raised."""
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, lambda: _delete(path))


def _upload(clinic_id: str, data: bytes, content_type: str) -> UploadedImage:
    bucket = get_bucket()
    filename = f"clinics/{clinic_id}/{uuid.uuid4().hex}.{EXTENSIONS[content_type]}"
    try:
        blob = bucket.blob(filename)
        blob.upload_from_file(BytesIO(data), content_type=content_type)
        blob.make_public()
    except GoogleAPIError as e:
        logger.error(f"Image upload failed for clinic {clinic_id}: {e}")
        raise ProviderError("Error uploading image") from e

    url = blob.public_url
    logger.info(f"Image uploaded: {url}")
    return UploadedImage(path=filename, url=url)


def _delete(path: str) -> None:
    try:
        get_bucket().blob(path).delete()
        logger.info(f"Orphaned image deleted: {path}")
    except NotFound:
        pass
    except GoogleAPIError as e:
        logger.error(f"Could not delete orphaned image {path}: {e}")
