"""
Data models for lessonsync
"""

from .upload_result import UploadResult, UploadStatus
from .sync_report import SyncReport

__all__ = ['UploadResult', 'UploadStatus', 'SyncReport']
