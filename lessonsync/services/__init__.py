"""
Content publishing services for lessonsync.

- sync_engine - discover, validate and publish content files
- storage/ - object storage backends
"""
from .sync_engine import ContentSynchronizer
from .storage import ObjectStorage, SupabaseStorage

__all__ = [
    'ContentSynchronizer',
    'ObjectStorage',
    'SupabaseStorage',
]
