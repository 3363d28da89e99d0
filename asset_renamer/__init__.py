"""Asset Renamer - Normalize image asset filenames to lowercase, hyphenated form."""

from ._version import __version__
from .cli import main

__all__ = ['main', '__version__']
