"""Exception hierarchy for lessonsync.

Only :class:`ConfigurationError` aborts a run. Validation and transport
errors are recorded per file and surface through the sync report.
"""
from typing import Dict, Optional


class LessonSyncError(Exception):
    """Base exception for all lessonsync errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(LessonSyncError):
    """Raised when the content root, credentials or config file are unusable."""
    pass


class TransportError(LessonSyncError):
    """Raised by a storage backend when an upload does not go through."""
    pass


__all__ = [
    'LessonSyncError',
    'ConfigurationError',
    'TransportError',
]
