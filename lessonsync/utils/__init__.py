"""Utility modules for lessonsync."""

from .config_loader import ConfigLoader, SyncConfig, handle_config_update
from .file_utils import ensure_dir, save_json, find_content_files, storage_key_for
from .logger import get_logger, setup_logging
from .validation import validate_json_bytes

__all__ = [
    'ConfigLoader',
    'SyncConfig',
    'handle_config_update',
    'ensure_dir',
    'save_json',
    'find_content_files',
    'storage_key_for',
    'get_logger',
    'setup_logging',
    'validate_json_bytes',
]
