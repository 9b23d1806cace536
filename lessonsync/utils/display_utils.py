"""
Console display helpers
"""
from colorama import Fore, Style


def print_banner():
    """Display lessonsync banner."""
    banner = (
        f"\n{Fore.CYAN}  ╺┳╸ lessonsync{Style.RESET_ALL}"
        f"  {Fore.WHITE}— Lesson content publisher{Style.RESET_ALL}\n"
    )
    print(banner)


def print_section(title):
    print(f"\n{Fore.CYAN}  ▸ {title}{Style.RESET_ALL}\n")


def print_sync_summary(report):
    """
    Print the end-of-run summary.

    Args:
        report: SyncReport from the synchronizer
    """
    failures = report.failures()
    if failures:
        print(f"\n{Fore.RED}Failed files:{Style.RESET_ALL}")
        for result in failures:
            status = result.status.value.replace('_', ' ')
            print(f"  {Fore.RED}✗{Style.RESET_ALL} {result.storage_key} [{status}] {result.message or ''}")

    print(f"\n{Fore.CYAN}--- Upload Summary ---{Style.RESET_ALL}")
    print(f"  Success: {report.succeeded}")
    print(f"  Failed: {report.failed}")
    if report.skipped:
        print(f"  Skipped (dry run): {report.skipped}")
    if report.cancelled:
        print(f"  Cancelled: {report.cancelled}")
    print(f"  Total: {report.total}")

    if not report.ok:
        print(f"\n{Fore.RED}Some files failed to upload. Check the errors above.{Style.RESET_ALL}")
        return

    if report.dry_run:
        print(f"\n{Fore.GREEN}[SUCCESS] All files are valid. Nothing was uploaded (dry run).{Style.RESET_ALL}")
    else:
        print(f"\n{Fore.GREEN}[SUCCESS] All files uploaded successfully!{Style.RESET_ALL}")
    print(f"\n  Public URL base: {report.public_base_url}")
