"""Supabase Storage backend.

Wraps the ``supabase`` client's storage API. Uploads always use
``upsert`` so re-publishing unchanged content overwrites in place.
"""
from typing import Optional
from ...exceptions import ConfigurationError, TransportError
from ...utils.logger import get_logger
from .base import ObjectStorage

log = get_logger(__name__)


def _import_supabase():
    """Import the supabase client, turning a broken install into a ConfigurationError."""
    try:
        import supabase
    except ImportError as e:
        raise ConfigurationError(
            "supabase is required for uploads but could not be imported",
            {"hint": "pip install supabase", "cause": str(e)},
        ) from e
    return supabase


class SupabaseStorage(ObjectStorage):
    """Uploads objects to one Supabase Storage bucket.

    Args:
        url: Supabase project URL
        service_key: Service-role key
        bucket: Bucket name
        client: Pre-built client (tests inject a stub here)
    """

    def __init__(self, url: str, service_key: str, bucket: str, client: Optional[object] = None):
        self.url = url.rstrip('/')
        self.bucket = bucket

        if client is None:
            if not service_key:
                raise ConfigurationError("Supabase service key is not set")
            supabase = _import_supabase()
            try:
                client = supabase.create_client(self.url, service_key)
            except Exception as e:
                raise ConfigurationError(f"Could not create Supabase client: {e}") from e

        self.client = client

    @classmethod
    def from_sync_config(cls, sync_config, client=None):
        return cls(sync_config.supabase_url, sync_config.service_key, sync_config.bucket, client=client)

    def _bucket(self):
        return self.client.storage.from_(self.bucket)

    def upload(self, key, data, content_type="application/json"):
        if not key:
            raise TransportError("Refusing to upload with an empty storage key")

        file_options = {
            "content-type": content_type,
            "upsert": "true",
        }
        try:
            self._bucket().upload(path=key, file=data, file_options=file_options)
        except Exception as e:
            # storage3 raises StorageException with a dict payload; keep its message
            message = getattr(e, 'message', None) or str(e)
            raise TransportError(str(message), {"key": key, "bucket": self.bucket}) from e

        log.debug("PUT %s/%s (%d bytes, %s)", self.bucket, key, len(data), content_type)

    def public_url(self, key=""):
        base = f"{self.url}/storage/v1/object/public/{self.bucket}/"
        return f"{base}{key.lstrip('/')}" if key else base
