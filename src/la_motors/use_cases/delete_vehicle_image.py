from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import unquote, urlparse

from la_motors.domain.errors import PersistenceError
from la_motors.ports.image_storage import PUBLIC_OBJECT_PREFIX, ImageStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteVehicleImageRequest:
    url: str


@dataclass(frozen=True, slots=True)
class DeleteVehicleImageResponse:
    removed: bool


class DeleteVehicleImage:
    """
    Remove a stored image given its public URL.

    Best effort: an unparseable URL or a storage failure is logged and
    reported as removed=False, never raised, so callers cleaning up after a
    record delete are not blocked by it.
    """

    def __init__(self, image_storage: ImageStorage) -> None:
        self._storage = image_storage

    def object_path(self, url: str) -> str | None:
        """Path inside the bucket, or None if the URL is not one of ours."""
        marker = f"{PUBLIC_OBJECT_PREFIX}/{self._storage.bucket}/"
        _, found, path = urlparse(url).path.partition(marker)
        if not found or not path:
            return None
        return unquote(path)

    def execute(self, request: DeleteVehicleImageRequest) -> DeleteVehicleImageResponse:
        path = self.object_path(request.url)
        if path is None:
            logger.warning("Not a stored image URL, skipping removal", extra={"url": request.url})
            return DeleteVehicleImageResponse(removed=False)

        try:
            self._storage.remove([path])
        except PersistenceError as exc:
            logger.warning(
                "Image removal failed, continuing",
                extra={"url": request.url, "diagnostic": exc.diagnostic},
            )
            return DeleteVehicleImageResponse(removed=False)

        return DeleteVehicleImageResponse(removed=True)
