"""Filesystem implementation of ImageStorage."""

from __future__ import annotations

import logging
from pathlib import Path

from la_motors.domain.errors import PersistenceError
from la_motors.ports.image_storage import PUBLIC_OBJECT_PREFIX, ImageStorage

logger = logging.getLogger(__name__)


class LocalImageStorage(ImageStorage):
    """
    Stores objects under <root>/<bucket>/<path>.

    The HTTP app mounts the bucket directory at the public object prefix, so
    public_url() points at a route that actually serves the file.
    """

    def __init__(self, root: Path, public_base_url: str, bucket: str) -> None:
        self.bucket = bucket
        self._bucket_dir = (root / bucket).resolve()
        self._public_base_url = public_base_url.rstrip("/")

    @property
    def bucket_dir(self) -> Path:
        return self._bucket_dir

    def upload(self, path: str, content: bytes, content_type: str) -> str:
        target = self._resolve(path)
        if target.exists():
            raise PersistenceError("upload image", f"object '{path}' already exists")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as exc:
            raise PersistenceError("upload image", str(exc)) from exc

        logger.info(
            "Stored image",
            extra={"bucket": self.bucket, "path": path, "content_type": content_type},
        )
        return path

    def public_url(self, path: str) -> str | None:
        return f"{self._public_base_url}{PUBLIC_OBJECT_PREFIX}/{self.bucket}/{path}"

    def remove(self, paths: list[str]) -> None:
        for path in paths:
            target = self._resolve(path)
            try:
                target.unlink(missing_ok=True)
            except OSError as exc:
                raise PersistenceError("remove image", str(exc)) from exc

    def _resolve(self, path: str) -> Path:
        target = (self._bucket_dir / path).resolve()
        if not target.is_relative_to(self._bucket_dir):
            raise PersistenceError("resolve image path", f"'{path}' escapes the bucket")
        return target
