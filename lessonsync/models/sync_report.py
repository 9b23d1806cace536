"""
Sync report model aggregating every upload result of a run
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .upload_result import UploadResult, UploadStatus


@dataclass(frozen=True)
class SyncReport:
    """
    Immutable summary of one synchronizer run.

    Results are kept in discovery order.
    """
    results: Tuple[UploadResult, ...] = field(default_factory=tuple)
    public_base_url: str = ""
    dry_run: bool = False

    @classmethod
    def from_results(cls, results: Iterable[UploadResult], public_base_url="", dry_run=False):
        return cls(results=tuple(results), public_base_url=public_base_url, dry_run=dry_run)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.status.is_failure)

    @property
    def skipped(self) -> int:
        return self._count(UploadStatus.SKIPPED)

    @property
    def cancelled(self) -> int:
        return self._count(UploadStatus.CANCELLED)

    @property
    def ok(self) -> bool:
        """True when nothing failed and nothing was left unprocessed."""
        return self.failed == 0 and self.cancelled == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    @property
    def storage_keys(self) -> List[str]:
        return [r.storage_key for r in self.results]

    def failures(self) -> List[UploadResult]:
        return [r for r in self.results if r.status.is_failure]

    def _count(self, status):
        return sum(1 for r in self.results if r.status == status)

    def to_dict(self):
        """Serialize to dictionary"""
        return {
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "skipped": self.skipped,
            "cancelled": self.cancelled,
            "dry_run": self.dry_run,
            "public_base_url": self.public_base_url,
            "results": [r.to_dict() for r in self.results],
        }
