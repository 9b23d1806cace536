"""
Content validation utilities
"""
import json
from typing import Tuple, Optional


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def validate_json_bytes(data: bytes) -> Tuple[bool, Optional[str]]:
    """
    Validate that raw file content is well-formed JSON.

    A UTF-8 byte-order mark is tolerated for parsing only; the bytes are
    published unchanged, so the stored object keeps its BOM. The
    ``NaN``/``Infinity`` literals Python would otherwise accept are rejected.

    Args:
        data: Raw file content

    Returns:
        Tuple of (is_valid, error_message)
        error_message carries the line/column of the parse error when known

    Example:
        >>> validate_json_bytes(b'{"title": "Variables"}')
        (True, None)
        >>> validate_json_bytes(b'{"title": ')
        (False, 'line 1 column 11: Expecting value')
    """
    try:
        text = data.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        return False, f"byte {e.start}: not valid UTF-8 ({e.reason})"

    try:
        json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        return False, f"line {e.lineno} column {e.colno}: {e.msg}"
    except ValueError as e:
        return False, str(e)
    except RecursionError:
        return False, "nesting too deep"

    return True, None
