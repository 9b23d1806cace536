"""
Object storage backends.

- :mod:`base`             — abstract upload interface
- :mod:`supabase_storage` — Supabase Storage implementation
"""
from .base import ObjectStorage
from .supabase_storage import SupabaseStorage

__all__ = [
    'ObjectStorage',
    'SupabaseStorage',
]
