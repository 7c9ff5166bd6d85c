"""
Text Utilities

Helper functions for display strings and file names.
"""

import re

# Characters not allowed in file names on common filesystems
_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def safe_filename(text: str, fallback: str = "Products") -> str:
    """
    Make text usable as a file name component.

    Args:
        text: Raw text (e.g., a collection title)
        fallback: Value used when nothing printable remains

    Returns:
        Text with path separators and reserved characters replaced by "_"
    """
    if not text:
        return fallback

    cleaned = _UNSAFE_FILENAME_CHARS.sub('_', text).strip().strip('.')
    return cleaned or fallback


def format_number(value) -> str:
    """
    Format a measurement for display.

    Integral floats lose their trailing ".0" (2.0 -> "2"), other values are
    printed as-is (0.25 -> "0.25").
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
