"""
Text sanitization utilities for asset filenames.
File: asset_renamer/renamer/sanitizer.py
"""

import re

from pathlib import Path

from asset_renamer.constants import DEFAULT_SUFFIXES, WHITESPACE_REPLACEMENT


# One hyphen per whitespace character, runs are NOT collapsed.
# ECMAScript whitespace and line terminators: includes U+FEFF, excludes
# the \x1c-\x1f separators and U+0085 that Python's \s also matches.
WHITESPACE_PATTERN = re.compile(
    r'[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]'
)


def normalize_filename(name: str) -> str:
    """
    Convert a filename to its lowercase, hyphenated form.

    Every whitespace character (space, tab, no-break space, byte order
    mark and the other Unicode space separators) is replaced with a
    single hyphen, then the whole name is lowercased.
    Punctuation and non-ASCII characters are left alone.

    Examples:
        "Screen Shot.png" -> "screen-shot.png"
        "a b\\tc.png"      -> "a-b-c.png"
        "Two  Spaces.png" -> "two--spaces.png"

    Args:
        name: Original entry name (no directory part)

    Returns:
        Normalized entry name
    """
    return WHITESPACE_PATTERN.sub(WHITESPACE_REPLACEMENT, name).lower()


def matches_suffix(name: str, suffixes: tuple[str, ...] = DEFAULT_SUFFIXES) -> bool:
    """Case-sensitive suffix match ("logo.PNG" does not match ".png")."""
    return any(name.endswith(suffix) for suffix in suffixes)


def validate_suffix(suffix: str) -> tuple[bool, str]:
    """
    Validate a user-supplied suffix.

    Args:
        suffix: Suffix such as ".png" or ".jpg"

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not suffix:
        return False, "Suffix cannot be empty"

    if not suffix.startswith('.'):
        return False, f"Suffix must start with a dot: '{suffix}'"

    if len(suffix) < 2:
        return False, "Suffix must contain at least one character after the dot"

    if '/' in suffix or '\\' in suffix:
        return False, f"Suffix cannot contain path separators: '{suffix}'"

    if WHITESPACE_PATTERN.search(suffix):
        return False, f"Suffix cannot contain whitespace: '{suffix}'"

    return True, ""


def validate_entry_name(name: str) -> tuple[bool, str]:
    """
    Validate a user-typed entry name (no suffix, no directory part).

    Renames stay inside the folder being processed, so path separators
    and parent references are refused.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not name or not name.strip():
        return False, "Name cannot be empty"

    if '/' in name or '\\' in name:
        return False, f"Name cannot contain path separators: '{name}'"

    if '..' in name or name == '.':
        return False, f"Name cannot refer to another folder: '{name}'"

    if Path(name).name != name:
        return False, f"Name must be a plain filename: '{name}'"

    return True, ""


# End of file #
