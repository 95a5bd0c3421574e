from __future__ import annotations

import logging
import secrets
import string
import time
from dataclasses import dataclass
from uuid import UUID

from la_motors.domain.errors import InternalError, ValidationError
from la_motors.ports.image_storage import ImageStorage

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}
MAX_IMAGE_BYTES = 5 * 1024 * 1024  # 5MB

_EXTENSION_BY_TYPE = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}
_NAME_ALPHABET = string.ascii_lowercase + string.digits


def _is_uuid(value: str) -> bool:
    try:
        UUID(value)
    except ValueError:
        return False
    return True


@dataclass(frozen=True, slots=True)
class UploadVehicleImageRequest:
    vehicle_id: str
    filename: str
    content_type: str
    content: bytes


@dataclass(frozen=True, slots=True)
class UploadVehicleImageResponse:
    url: str
    path: str


def build_object_path(vehicle_id: str, content_type: str) -> str:
    """<vehicle_id>/<epoch-ms>-<7 random chars>.<ext>, unique per upload.

    The extension comes from the content type, never from the client filename.
    """
    extension = _EXTENSION_BY_TYPE[content_type]
    stamp = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_NAME_ALPHABET) for _ in range(7))
    return f"{vehicle_id}/{stamp}-{suffix}.{extension}"


class UploadVehicleImage:
    """Validate an image file and store it under the vehicle's prefix."""

    def __init__(self, image_storage: ImageStorage) -> None:
        self._storage = image_storage

    def execute(self, request: UploadVehicleImageRequest) -> UploadVehicleImageResponse:
        """
        Raises:
            ValidationError: Malformed vehicle id, empty file, unsupported type
                or larger than 5MB
            PersistenceError: If storage refuses the object
            InternalError: If storage cannot produce a public URL
        """
        self._validate(request)

        path = build_object_path(request.vehicle_id, request.content_type)
        stored_path = self._storage.upload(path, request.content, request.content_type)

        url = self._storage.public_url(stored_path)
        if not url:
            raise InternalError("Could not resolve a public URL for the image", path=stored_path)

        logger.info(
            "Vehicle image uploaded",
            extra={
                "vehicle_id": request.vehicle_id,
                "object_path": stored_path,
                "original_filename": request.filename,
            },
        )
        return UploadVehicleImageResponse(url=url, path=stored_path)

    def _validate(self, request: UploadVehicleImageRequest) -> None:
        errors: list[dict[str, str]] = []

        if not request.vehicle_id.strip():
            errors.append(
                {"field": "vehicle_id", "message": "Must not be empty", "code": "REQUIRED"}
            )
        elif not _is_uuid(request.vehicle_id):
            errors.append(
                {
                    "field": "vehicle_id",
                    "message": "Must be a valid UUID format",
                    "code": "INVALID_UUID",
                }
            )
        if not request.content:
            errors.append({"field": "file", "message": "No file provided", "code": "REQUIRED"})
        if request.content_type not in ALLOWED_CONTENT_TYPES:
            errors.append(
                {
                    "field": "file",
                    "message": "Unsupported file type. Use JPG, PNG or WEBP",
                    "code": "INVALID_CONTENT_TYPE",
                }
            )
        if len(request.content) > MAX_IMAGE_BYTES:
            errors.append(
                {
                    "field": "file",
                    "message": "File is too large. Maximum 5MB",
                    "code": "FILE_TOO_LARGE",
                }
            )

        if errors:
            raise ValidationError(errors=errors)
