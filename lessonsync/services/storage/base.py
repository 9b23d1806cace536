"""
Object storage interface.

The synchronizer only needs to put bytes under a key with overwrite
semantics and to report where published objects can be fetched from.
Backends raise :class:`~lessonsync.exceptions.TransportError` on failure.
"""
from abc import ABC, abstractmethod


class ObjectStorage(ABC):
    """Abstract base class for storage backends."""

    @abstractmethod
    def upload(self, key: str, data: bytes, content_type: str = "application/json") -> None:
        """
        Create or overwrite the object at ``key``.

        Args:
            key: Storage key (forward-slash separated)
            data: Payload bytes
            content_type: MIME type declared for the object

        Raises:
            TransportError: If the backend rejects or cannot complete the upload
        """
        pass

    @abstractmethod
    def public_url(self, key: str = "") -> str:
        """Public URL of ``key``, or of the bucket root when ``key`` is empty."""
        pass
