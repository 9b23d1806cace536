"""Handler for the 'push' subcommand.

Usage:
    lessonsync push [--root DIR] [--workers N] [--dry-run] [--report PATH]
"""
import signal
import threading
from colorama import Fore, Style
from .base_handler import ModeHandler
from ..services.storage import SupabaseStorage
from ..services.sync_engine import ContentSynchronizer
from ..utils.config_loader import SyncConfig
from ..utils.display_utils import print_section, print_sync_summary
from ..utils.file_utils import save_json


class PushHandler(ModeHandler):
    """Handles ``lessonsync push`` — publish the content tree to Supabase."""

    def __init__(self, config, args=None, storage_factory=None):
        super().__init__(config, args)
        self.storage_factory = storage_factory or SupabaseStorage.from_sync_config
        self.synchronizer = None

    # ── Template-method steps ──────────────────────────────────────────

    def display_banner(self):
        print_section("Supabase Content Upload")

    def prepare_context(self) -> dict:
        dry_run = bool(self._arg('dry_run', False))
        overrides = {
            'content_dir': self._arg('root'),
            'bucket': self._arg('bucket'),
            'supabase_url': self._arg('url'),
            'storage_prefix': self._arg('prefix'),
            'max_workers': self._arg('workers'),
        }
        sync_config = SyncConfig.from_config(
            self.config, overrides, require_credentials=not dry_run
        )
        storage = None if dry_run else self.storage_factory(sync_config)

        print(f"  Content root : {sync_config.content_root}")
        print(f"  Bucket       : {sync_config.bucket}")
        if sync_config.storage_prefix:
            print(f"  Key prefix   : {sync_config.storage_prefix}")
        if sync_config.max_workers > 1:
            print(f"  Workers      : {sync_config.max_workers}")
        if dry_run:
            print(f"  {Fore.YELLOW}Dry run: nothing will be uploaded{Style.RESET_ALL}")
        print()

        return {'sync_config': sync_config, 'storage': storage, 'dry_run': dry_run}

    def execute_workflow(self, context: dict):
        self.synchronizer = ContentSynchronizer(context['sync_config'], context['storage'])

        previous = self._install_interrupt_handler()
        try:
            report = self.synchronizer.run(dry_run=context['dry_run'])
        finally:
            if previous is not None:
                signal.signal(signal.SIGINT, previous)

        report_path = self._arg('report')
        if report_path:
            if save_json(report_path, report.to_dict(), compact=False):
                print(f"{Fore.CYAN}[INFO] Report written to {report_path}{Style.RESET_ALL}")

        return report

    def display_completion(self, report):
        print_sync_summary(report)
        print()

    def exit_code(self, report) -> int:
        return report.exit_code

    # ── Interrupt handling ─────────────────────────────────────────────

    def _install_interrupt_handler(self):
        """Route Ctrl+C to cancellation. Returns the previous handler, if replaced."""
        if threading.current_thread() is not threading.main_thread():
            return None

        def _on_interrupt(sig, frame):
            print(f"\n\n{Fore.YELLOW}[INFO] Cancelling. Waiting for in-flight uploads...{Style.RESET_ALL}")
            self.synchronizer.cancel()

        return signal.signal(signal.SIGINT, _on_interrupt)
