"""
Upload result model for a single content file
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UploadStatus(str, Enum):
    """Outcome of processing one content file.

    Inherits from ``str`` so results serialize as plain strings.
    """
    SUCCEEDED = "succeeded"
    FAILED_VALIDATION = "failed_validation"
    FAILED_READ = "failed_read"
    FAILED_TRANSPORT = "failed_transport"
    SKIPPED = "skipped"
    CANCELLED = "cancelled"

    @property
    def is_failure(self) -> bool:
        return self in (
            UploadStatus.FAILED_VALIDATION,
            UploadStatus.FAILED_READ,
            UploadStatus.FAILED_TRANSPORT,
        )


@dataclass(frozen=True)
class UploadResult:
    """
    Outcome for one discovered file.

    Attributes:
        storage_key: Key the file maps to in the bucket
        status: UploadStatus value
        local_path: Path of the source file
        message: Diagnostic for failures, None on success
    """
    storage_key: str
    status: UploadStatus
    local_path: str = ""
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == UploadStatus.SUCCEEDED

    def to_dict(self):
        """Serialize to dictionary"""
        return {
            "storage_key": self.storage_key,
            "status": self.status.value,
            "local_path": self.local_path,
            "message": self.message,
        }
