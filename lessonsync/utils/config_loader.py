"""
Configuration loader for the lessonsync config.json file
"""
import os
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any
from colorama import Fore, Style
from ..exceptions import ConfigurationError


# Default configuration with placeholder values.
# Used to bootstrap config.json when it does not exist yet.
DEFAULT_CONFIG: Dict[str, Any] = {
    "supabase_url": "https://jnimcsiushnsonyvfrtt.supabase.co",
    "bucket": "content",
    "content_dir": "./supabase_content",
    "service_key_env": "SUPABASE_SERVICE_ROLE_KEY",
    "content_suffix": ".json",
    "content_type": "application/json",
    "storage_prefix": "",
    "max_workers": 1,
    "follow_links": True
}

CONFIG_ENV_VAR = "LESSONSYNC_CONFIG"


@dataclass(frozen=True)
class SyncConfig:
    """Explicit settings for a single synchronizer run."""

    content_root: str
    supabase_url: str
    bucket: str
    service_key: str = ""
    content_suffix: str = ".json"
    content_type: str = "application/json"
    storage_prefix: str = ""
    max_workers: int = 1
    follow_links: bool = True

    @property
    def public_base_url(self) -> str:
        """Base URL under which published objects are publicly reachable."""
        return f"{self.supabase_url.rstrip('/')}/storage/v1/object/public/{self.bucket}/"

    @classmethod
    def from_config(
        cls,
        config: Dict[str, Any],
        overrides: Optional[Dict[str, Any]] = None,
        require_credentials: bool = True,
        environ: Optional[Dict[str, str]] = None
    ) -> 'SyncConfig':
        """
        Build a SyncConfig from a loaded config dictionary.

        Args:
            config: Dictionary as returned by :meth:`ConfigLoader.load_config_json`
            overrides: Values from the command line; ``None`` entries are ignored
            require_credentials: Raise if the service key is absent from the environment
            environ: Environment mapping (defaults to ``os.environ``)

        Returns:
            SyncConfig instance

        Raises:
            ConfigurationError: If a setting is invalid or the credential is missing
        """
        merged = dict(DEFAULT_CONFIG)
        merged.update(config or {})
        for key, value in (overrides or {}).items():
            if value is not None:
                merged[key] = value

        environ = os.environ if environ is None else environ
        key_env = merged.get('service_key_env') or DEFAULT_CONFIG['service_key_env']
        service_key = environ.get(key_env, '').strip()

        if require_credentials and not service_key:
            raise ConfigurationError(
                f"{key_env} environment variable is required",
                {"hint": "Supabase Dashboard > Settings > API > service_role key"}
            )

        workers = merged.get('max_workers')
        try:
            max_workers = 1 if workers is None else int(workers)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"max_workers must be an integer: {e}") from e
        if max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1")

        suffix = merged.get('content_suffix') or ''
        if not suffix:
            raise ConfigurationError("content_suffix must not be empty")

        for required in ('supabase_url', 'bucket', 'content_dir'):
            if not str(merged.get(required) or '').strip():
                raise ConfigurationError(f"'{required}' is not configured")

        return cls(
            content_root=str(merged['content_dir']),
            supabase_url=str(merged['supabase_url']).strip(),
            bucket=str(merged['bucket']).strip(),
            service_key=service_key,
            content_suffix=suffix,
            content_type=merged.get('content_type') or DEFAULT_CONFIG['content_type'],
            storage_prefix=str(merged.get('storage_prefix') or '').strip('/'),
            max_workers=max_workers,
            follow_links=bool(merged.get('follow_links', True)),
        )


class ConfigLoader:
    """Handles loading and saving configuration files."""

    @staticmethod
    def get_config_path(filename="config.json"):
        """
        Get full path to configuration file.

        ``LESSONSYNC_CONFIG`` overrides the packaged location.

        Args:
            filename: Configuration filename

        Returns:
            Full path to config file
        """
        override = os.environ.get(CONFIG_ENV_VAR, '').strip()
        if override:
            return override

        base_dir = Path(__file__).parent.parent
        return str(base_dir / "config" / filename)

    @staticmethod
    def ensure_config_exists():
        """
        Ensure config.json exists, creating it with defaults if missing.

        Returns:
            Path to the config.json file
        """
        config_path = Path(ConfigLoader.get_config_path())

        if not config_path.exists():
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, 'w') as f:
                json.dump(DEFAULT_CONFIG, f, indent=2)
            print(
                f"{Fore.YELLOW}[INFO] Created default config.json at "
                f"{config_path}{Style.RESET_ALL}"
            )

        return config_path

    @staticmethod
    def load_config_json():
        """
        Load main config.json file.
        Creates the file with default values if it does not exist.

        Returns:
            Configuration dictionary with defaults filled in

        Raises:
            ConfigurationError: If the file exists but is not a JSON object
        """
        config_path = ConfigLoader.ensure_config_exists()

        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Error loading {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"{config_path} must contain a JSON object")

        config = dict(DEFAULT_CONFIG)
        config.update(data)
        return config


def handle_config_update(config_json_string):
    """Handle the ``--config`` update command.

    Args:
        config_json_string: JSON string with config updates

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        config_updates = json.loads(config_json_string)
    except json.JSONDecodeError as e:
        print(f"{Fore.RED}[ERROR] Invalid JSON in --config argument: {e}{Style.RESET_ALL}")
        return 1

    if not isinstance(config_updates, dict):
        print(f"{Fore.RED}[ERROR] --config must be a JSON object (dictionary){Style.RESET_ALL}")
        return 1

    try:
        config_path = ConfigLoader.ensure_config_exists()
        current_config = ConfigLoader.load_config_json()
    except ConfigurationError as e:
        print(f"{Fore.RED}[ERROR] {e.message}{Style.RESET_ALL}")
        return 1

    invalid_keys = [key for key in config_updates if key not in current_config]
    if invalid_keys:
        print(f"{Fore.RED}[ERROR] Invalid configuration key(s): {', '.join(invalid_keys)}{Style.RESET_ALL}")
        print(f"\n{Fore.YELLOW}Valid keys in config.json:{Style.RESET_ALL}")
        for key in sorted(current_config.keys()):
            print(f"  • {key}")
        return 1

    current_config.update(config_updates)

    try:
        with open(config_path, 'w') as f:
            json.dump(current_config, f, indent=2)
    except OSError as e:
        print(f"{Fore.RED}[ERROR] Failed to update configuration: {e}{Style.RESET_ALL}")
        return 1

    print(f"\n{Fore.GREEN}[SUCCESS] Configuration updated successfully{Style.RESET_ALL}")
    print(f"\n{Fore.CYAN}Updated values:{Style.RESET_ALL}")
    for key, value in config_updates.items():
        print(f"  {key}: {mask_value(key, value)}")

    print(f"\n{Fore.CYAN}Config file: {config_path}{Style.RESET_ALL}\n")
    return 0


def mask_value(key: str, value: Any) -> Any:
    """Mask values whose key looks sensitive.

    Example:
        >>> mask_value('service_key', 'eyJhbGciOi')
        'eyJh...********'
        >>> mask_value('bucket', 'content')
        'content'
    """
    if any(sensitive in key.lower() for sensitive in ['token', 'key', 'password', 'secret']):
        if key.lower().endswith('_env'):
            return value
        if value and len(str(value)) > 4:
            return f"{str(value)[:4]}...{'*' * 8}"
    return value
