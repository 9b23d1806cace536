"""
lessonsync - Main CLI interface

Publishes the course's JSON lesson and manifest files to Supabase Storage.
"""
import sys
import argparse
from colorama import init, Fore, Style
from .exceptions import ConfigurationError
from .utils.config_loader import ConfigLoader, handle_config_update, mask_value
from .utils.display_utils import print_banner

# Initialize colorama
init(autoreset=True)

# ── Help-text epilogs for subcommands ──────────────────────────────────────

PUSH_EXAMPLES = """\
Examples:
  lessonsync push
  lessonsync push --root ./supabase_content --bucket content
  lessonsync push --workers 4 --report upload-report.json
  lessonsync push --dry-run

The service-role key is read from the environment variable named by
'service_key_env' in config.json (default SUPABASE_SERVICE_ROLE_KEY).
"""

LIST_EXAMPLES = """\
Examples:
  lessonsync list
  lessonsync list --root ./supabase_content
"""


# ── Argument Parser ────────────────────────────────────────────────────────

def create_argument_parser():
    """Create and configure the subparser-based argument parser."""
    parser = argparse.ArgumentParser(
        prog='lessonsync',
        description='lessonsync — publish lesson content to Supabase Storage',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--quiet', action='store_true', help='Only show warnings and errors')
    parser.add_argument('--config', help='Update config.json with JSON string')

    # Shared parent so --verbose works after the subcommand name too
    _verbose_parent = argparse.ArgumentParser(add_help=False)
    _verbose_parent.add_argument('--verbose', action='store_true', default=argparse.SUPPRESS,
                                 help='Enable verbose output')
    _verbose_parent.add_argument('--root', help='Content directory (overrides content_dir)')
    _verbose_parent.add_argument('--prefix', help='Key prefix inside the bucket')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # ── push ───────────────────────────────────────────────────────────
    push_parser = subparsers.add_parser(
        'push',
        parents=[_verbose_parent],
        help='Validate and upload all content files',
        description='Upload every JSON file under the content root with upsert semantics.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=PUSH_EXAMPLES,
    )
    push_parser.add_argument('--bucket', help='Storage bucket (overrides bucket)')
    push_parser.add_argument('--url', help='Supabase project URL (overrides supabase_url)')
    push_parser.add_argument('--workers', type=int, help='Concurrent uploads (default: 1)')
    push_parser.add_argument('--dry-run', action='store_true',
                             help='Validate only; do not upload')
    push_parser.add_argument('--report', help='Write the run report as JSON to this path')

    # ── list ───────────────────────────────────────────────────────────
    subparsers.add_parser(
        'list',
        parents=[_verbose_parent],
        help='List content files and their storage keys',
        description='Discover content files without uploading anything.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=LIST_EXAMPLES,
    )

    return parser


# ── Dashboard ──────────────────────────────────────────────────────────────

def display_dashboard(config):
    """Show the current configuration and available commands."""
    print_banner()

    print(f"  Configuration:")
    for key in sorted(config.keys()):
        print(f"    {key:<16}: {mask_value(key, config[key])}")

    print(f"\n  Available Commands:")
    print(f"    lessonsync push          Validate and upload content")
    print(f"    lessonsync list          List content files and keys")
    print(f"    lessonsync --config '{{\"bucket\": \"content\"}}'  Update config.json\n")
    return 0


# ── Main Entry Point ──────────────────────────────────────────────────────

def main(argv=None):
    """Main CLI entry point."""
    from .utils.logger import setup_logging

    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=getattr(args, 'verbose', False), quiet=args.quiet)

    if args.config:
        return handle_config_update(args.config)

    try:
        config = ConfigLoader.load_config_json()
    except ConfigurationError as e:
        print(f"{Fore.RED}[ERROR] {e.message}{Style.RESET_ALL}")
        return 1

    if args.command is None:
        return display_dashboard(config)

    from .modes.push_handler import PushHandler
    from .modes.list_handler import ListHandler

    handlers = {
        'push': lambda: PushHandler(config, args),
        'list': lambda: ListHandler(config, args),
    }

    handler_factory = handlers.get(args.command)
    if not handler_factory:
        parser.print_help()
        return 1

    return handler_factory().execute()


if __name__ == '__main__':
    sys.exit(main())
