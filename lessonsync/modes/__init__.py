"""Mode handlers for the lessonsync CLI.

Subcommand handlers:
  - PushHandler  → lessonsync push
  - ListHandler  → lessonsync list
"""
from .base_handler import ModeHandler
from .push_handler import PushHandler
from .list_handler import ListHandler

__all__ = [
    'ModeHandler',
    'PushHandler',
    'ListHandler',
]
