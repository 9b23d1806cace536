"""
File system utilities
"""
import json
import os
from typing import List

from ..exceptions import ConfigurationError
from .logger import get_logger

log = get_logger(__name__)


def ensure_dir(directory):
    """
    Ensure directory exists, create if it doesn't.

    Args:
        directory: Directory path
    """
    if directory:
        os.makedirs(directory, exist_ok=True)


def save_json(filepath, data, compact=True):
    """
    Save data to JSON file.

    Args:
        filepath: Path to JSON file
        data: Data to serialize
        compact: If True, use single-line format (default)

    Returns:
        True if successful
    """
    try:
        ensure_dir(os.path.dirname(filepath))

        with open(filepath, 'w', encoding='utf-8') as f:
            if compact:
                json.dump(data, f, separators=(',', ':'), ensure_ascii=False)
            else:
                json.dump(data, f, indent=2, ensure_ascii=False)
        return True
    except (OSError, TypeError, ValueError) as e:
        log.error("Error saving JSON to %s: %s", filepath, e)
        return False


def check_content_root(root):
    """
    Make sure the content root is an existing directory.

    Args:
        root: Content root path

    Returns:
        Absolute path of the content root

    Raises:
        ConfigurationError: If the path is missing or not a directory
    """
    if not root or not os.path.exists(root):
        raise ConfigurationError(f"Content directory not found: {root}", {"root": str(root)})
    if not os.path.isdir(root):
        raise ConfigurationError(f"Content path is not a directory: {root}", {"root": str(root)})
    return os.path.abspath(root)


def find_content_files(root, suffix=".json", follow_links=True) -> List[str]:
    """
    Recursively find all files under ``root`` whose name ends with ``suffix``.

    Symlinked directories are followed by default. Each directory is entered
    at most once by its real path, so link cycles are skipped with a warning.
    With ``follow_links=False`` linked directories are not entered, and each
    one is logged.

    Args:
        root: Content root directory
        suffix: Required filename suffix (case-sensitive)
        follow_links: Descend into symlinked directories

    Returns:
        Sorted list of absolute file paths

    Raises:
        ConfigurationError: If ``root`` is not an existing directory
    """
    root = check_content_root(root)
    found = []
    seen_dirs = set()

    def _on_error(err):
        log.warning("Cannot list %s: %s", err.filename, err.strerror)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error, followlinks=follow_links):
        if follow_links:
            real = os.path.realpath(dirpath)
            if real in seen_dirs:
                log.warning("Skipping %s: symlink cycle back to %s", dirpath, real)
                dirnames[:] = []
                continue
            seen_dirs.add(real)
        else:
            for name in dirnames:
                if os.path.islink(os.path.join(dirpath, name)):
                    log.warning("Not following symlinked directory %s", os.path.join(dirpath, name))

        dirnames.sort()
        for filename in filenames:
            if not filename.endswith(suffix):
                continue
            path = os.path.join(dirpath, filename)
            if os.path.isfile(path):
                found.append(path)

    return sorted(found)


def storage_key_for(path, root, prefix=""):
    """
    Map a content file to its storage key.

    The key is the path relative to ``root`` with the platform separators
    replaced by forward slashes, optionally under ``prefix``. Other
    characters, backslashes included on POSIX, are kept as they are.

    Example:
        >>> storage_key_for('/data/content/manifests/global_manifest.json', '/data/content')
        'manifests/global_manifest.json'
        >>> storage_key_for('/data/content/lessons/01.json', '/data/content', prefix='v2')
        'v2/lessons/01.json'
    """
    rel_path = os.path.relpath(os.path.abspath(path), os.path.abspath(root))
    key = rel_path.replace(os.sep, '/')
    if os.altsep:
        key = key.replace(os.altsep, '/')
    prefix = (prefix or '').strip('/')
    return f"{prefix}/{key}" if prefix else key


def read_file_bytes(path) -> bytes:
    """Read a content file. ``OSError`` propagates to the caller."""
    with open(path, 'rb') as f:
        return f.read()
