"""List handler — shows which files would be published and under which keys.

Usage:
    lessonsync list [--root DIR]
"""
from colorama import Fore, Style
from .base_handler import ModeHandler
from ..services.sync_engine import ContentSynchronizer
from ..utils.config_loader import SyncConfig
from ..utils.display_utils import print_section


class ListHandler(ModeHandler):
    """Handles ``lessonsync list`` — discovery only, no uploads."""

    def display_banner(self):
        print_section("Content Files")

    def prepare_context(self) -> dict:
        overrides = {
            'content_dir': self._arg('root'),
            'storage_prefix': self._arg('prefix'),
        }
        sync_config = SyncConfig.from_config(self.config, overrides, require_credentials=False)
        return {'sync_config': sync_config}

    def execute_workflow(self, context: dict):
        sync_config = context['sync_config']
        synchronizer = ContentSynchronizer(sync_config)
        root = sync_config.content_root

        files = synchronizer.discover(root)
        if not files:
            print(f"  {Fore.YELLOW}No {sync_config.content_suffix} files found under {root}{Style.RESET_ALL}")
            return []

        for path in files:
            key = synchronizer.storage_key(path, root)
            print(f"  {Fore.WHITE}{key}{Style.RESET_ALL}")

        return files

    def display_completion(self, files):
        if files:
            print(f"\n  {Fore.GREEN}{len(files)} file(s){Style.RESET_ALL}\n")

    def exit_code(self, files) -> int:
        return 0
