"""Utility modules for Rayas.

Provides:
- text: escape_text, unescape_text, is_safe_identifier
- logger: get_logger for logging
"""

from rayas.utils.logger import get_logger
from rayas.utils.text import escape_text, is_safe_identifier, unescape_text

__all__ = [
    "escape_text",
    "get_logger",
    "is_safe_identifier",
    "unescape_text",
]
