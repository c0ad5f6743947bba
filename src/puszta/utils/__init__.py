"""Utility modules for Puszta.

Provides:
- text: split_words, is_blank for text-run handling
- logger: get_logger for logging
"""

from puszta.utils.logger import get_logger
from puszta.utils.text import is_blank, split_words

__all__ = [
    "get_logger",
    "is_blank",
    "split_words",
]
