"""Base mode handler with template method pattern."""
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
from colorama import Fore, Style
from ..exceptions import ConfigurationError


class ModeHandler(ABC):
    """Abstract base class for all subcommand handlers."""

    def __init__(self, config: Dict[str, Any], args=None):
        """Initialize mode handler.

        Args:
            config: Loaded config.json dictionary
            args: Parsed argparse namespace for the subcommand
        """
        self.config = config
        self.args = args

    def execute(self) -> int:
        """Execute mode workflow (Template Method).

        Configuration errors raised by any step abort the workflow
        with a non-zero exit code before a result is displayed.

        Returns:
            Exit code (0 for success, 1 for failure)
        """
        self.display_banner()

        try:
            if not self.validate_prerequisites():
                return 1

            context = self.prepare_context()
            if context is None:
                return 1

            result = self.execute_workflow(context)
        except ConfigurationError as e:
            print(f"{Fore.RED}[ERROR] {e.message}{Style.RESET_ALL}")
            for key, value in e.details.items():
                print(f"{Fore.YELLOW}        {key}: {value}{Style.RESET_ALL}")
            return 1

        self.display_completion(result)
        return self.exit_code(result)

    @abstractmethod
    def display_banner(self):
        """Display mode-specific banner."""
        pass

    def validate_prerequisites(self) -> bool:
        """Check that the mode can run. Defaults to True."""
        return True

    @abstractmethod
    def prepare_context(self) -> Optional[Dict[str, Any]]:
        """Gather everything the workflow needs.

        Returns:
            Context dictionary, or None if preparation failed
        """
        pass

    @abstractmethod
    def execute_workflow(self, context: Dict[str, Any]) -> Any:
        """Run the mode and return its result (falsy on failure)."""
        pass

    def display_completion(self, result: Any):
        """Display completion message. Override for custom output."""
        if result:
            print(f"\n{Fore.GREEN}[SUCCESS] Done.{Style.RESET_ALL}\n")

    def exit_code(self, result: Any) -> int:
        return 0 if result else 1

    # ── Shared helpers ─────────────────────────────────────────────────

    def _arg(self, name, default=None):
        return getattr(self.args, name, default) if self.args is not None else default
