from __future__ import annotations

from abc import ABC, abstractmethod

# Public URLs look like <base>/storage/v1/object/public/<bucket>/<path>
PUBLIC_OBJECT_PREFIX = "/storage/v1/object/public"


class ImageStorage(ABC):
    """
    Port for the keyed object store holding vehicle images.

    Keys are relative paths inside a single bucket. Failures raise
    PersistenceError with the storage diagnostic.
    """

    bucket: str

    @abstractmethod
    def upload(self, path: str, content: bytes, content_type: str) -> str:
        """Store an object without overwriting. Returns the stored path."""
        ...

    @abstractmethod
    def public_url(self, path: str) -> str | None:
        """Publicly retrievable reference for a stored path."""
        ...

    @abstractmethod
    def remove(self, paths: list[str]) -> None:
        """Delete the objects at the given paths."""
        ...
