"""
Filename normalization for asset renaming.
File: asset_renamer/renamer/__init__.py

Provides the whitespace-to-hyphen, lowercase transform and the
case-sensitive suffix match used to pick rename targets.
"""

from asset_renamer.renamer.sanitizer import (
    normalize_filename,
    matches_suffix,
    validate_suffix,
    validate_entry_name
)


__all__ = [
    'normalize_filename',
    'matches_suffix',
    'validate_suffix',
    'validate_entry_name'
]

# End of file #
