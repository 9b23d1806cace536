"""
Content synchronization engine.

Provides :class:`ContentSynchronizer`, which walks a content root,
validates every data file and publishes the valid ones to object storage
under their relative path. Per-file failures are recorded and never stop
the rest of the queue; only configuration errors abort a run.
"""
import queue
import threading
from typing import List, Optional

from ..exceptions import ConfigurationError, TransportError
from ..models import SyncReport, UploadResult, UploadStatus
from ..utils.config_loader import SyncConfig
from ..utils.file_utils import (
    check_content_root, find_content_files, read_file_bytes, storage_key_for
)
from ..utils.logger import get_logger
from ..utils.validation import validate_json_bytes
from .storage.base import ObjectStorage

log = get_logger(__name__)


class ContentSynchronizer:
    """Publishes a tree of JSON content files to a storage bucket.

    Args:
        config: Explicit run settings
        storage: Storage backend; may be ``None`` for dry runs
    """

    def __init__(self, config: SyncConfig, storage: Optional[ObjectStorage] = None):
        self.config = config
        self.storage = storage
        self._cancel_event = threading.Event()
        self._results_lock = threading.Lock()

    # ── Cancellation ───────────────────────────────────────────────────

    def cancel(self):
        """Stop scheduling new files. In-flight uploads finish normally."""
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    # ── Single-file operations ─────────────────────────────────────────

    def discover(self, root: Optional[str] = None) -> List[str]:
        """Return every content file under ``root`` (defaults to the configured root).

        Raises:
            ConfigurationError: If the root does not exist
        """
        root = root or self.config.content_root
        return find_content_files(
            root,
            suffix=self.config.content_suffix,
            follow_links=self.config.follow_links,
        )

    def storage_key(self, path: str, root: str) -> str:
        return storage_key_for(path, root, prefix=self.config.storage_prefix)

    @staticmethod
    def validate(data: bytes):
        """Validate raw content. Returns ``(is_valid, diagnostic)``."""
        return validate_json_bytes(data)

    def publish(self, key: str, data: bytes, local_path: str = "") -> UploadResult:
        """Upload one validated payload with overwrite semantics."""
        if not key:
            return UploadResult(key, UploadStatus.FAILED_TRANSPORT, local_path, "empty storage key")

        try:
            self.storage.upload(key, data, content_type=self.config.content_type)
        except TransportError as e:
            log.error("Failed to upload %s: %s", key, e.message)
            return UploadResult(key, UploadStatus.FAILED_TRANSPORT, local_path, e.message)
        except Exception as e:
            log.error("Failed to upload %s: %s", key, e)
            return UploadResult(key, UploadStatus.FAILED_TRANSPORT, local_path, str(e) or type(e).__name__)

        log.info("Uploaded: %s", key)
        return UploadResult(key, UploadStatus.SUCCEEDED, local_path)

    def process_file(self, path: str, root: str, dry_run: bool = False) -> UploadResult:
        """Read, validate and (unless ``dry_run``) publish a single file."""
        key = self.storage_key(path, root)

        try:
            data = read_file_bytes(path)
        except OSError as e:
            log.error("Error reading %s: %s", path, e.strerror or e)
            return UploadResult(key, UploadStatus.FAILED_READ, path, str(e.strerror or e))

        is_valid, diagnostic = self.validate(data)
        if not is_valid:
            log.error("Invalid JSON in %s: %s", key, diagnostic)
            return UploadResult(key, UploadStatus.FAILED_VALIDATION, path, diagnostic)

        if dry_run:
            log.info("Validated: %s", key)
            return UploadResult(key, UploadStatus.SKIPPED, path, "dry run")

        return self.publish(key, data, local_path=path)

    # ── Run ────────────────────────────────────────────────────────────

    def run(self, root: Optional[str] = None, dry_run: bool = False) -> SyncReport:
        """Discover, validate and publish every content file under ``root``.

        Args:
            root: Content root (defaults to the configured root)
            dry_run: Validate only; valid files are recorded as skipped

        Returns:
            SyncReport with one result per discovered file

        Raises:
            ConfigurationError: If the root is missing or no storage is set
                for a real run. Raised before any file is processed.
        """
        root = check_content_root(root or self.config.content_root)
        if self.storage is None and not dry_run:
            raise ConfigurationError("No storage backend configured")

        files = self.discover(root)
        log.info("Found %d %s file(s) to %s", len(files), self.config.content_suffix,
                 "validate" if dry_run else "upload")

        results: List[Optional[UploadResult]] = [None] * len(files)
        workers = min(self.config.max_workers, len(files))

        if workers <= 1:
            for index, path in enumerate(files):
                results[index] = self._next_result(path, root, dry_run)
        else:
            self._run_pool(files, root, dry_run, results, workers)

        public_base = self.storage.public_url() if self.storage else self.config.public_base_url
        return SyncReport.from_results(results, public_base_url=public_base, dry_run=dry_run)

    def _next_result(self, path, root, dry_run):
        if self.cancelled:
            return UploadResult(self.storage_key(path, root), UploadStatus.CANCELLED, path, "cancelled")
        return self.process_file(path, root, dry_run)

    def _run_pool(self, files, root, dry_run, results, num_workers):
        """Process files on a bounded pool of worker threads.

        Returns only after every queued file has a result.
        """
        work_queue = queue.Queue()
        for item in enumerate(files):
            work_queue.put(item)

        def worker():
            while True:
                try:
                    index, path = work_queue.get_nowait()
                except queue.Empty:
                    return
                try:
                    result = self._next_result(path, root, dry_run)
                except Exception as e:
                    log.error("Unexpected error processing %s: %s", path, e)
                    result = UploadResult(self.storage_key(path, root), UploadStatus.FAILED_TRANSPORT, path, str(e))
                with self._results_lock:
                    results[index] = result
                work_queue.task_done()

        threads = []
        for _ in range(num_workers):
            t = threading.Thread(target=worker, daemon=True)
            t.start()
            threads.append(t)

        work_queue.join()
        for t in threads:
            t.join()
