"""File system scanning for rename targets."""

import os

from pathlib import Path
from rich.console import Console

from asset_renamer.constants import DEFAULT_SUFFIXES
from asset_renamer.renamer.sanitizer import matches_suffix

console = Console()


def list_entries(folder_path: Path) -> list[str]:
    """
    List entry names in a folder, single level, in listing order.

    The order is whatever the filesystem returns and is not sorted.
    Listing errors (missing folder, permission denied) propagate.
    """
    return os.listdir(folder_path)


def scan_folder(folder_path: Path, suffixes: tuple[str, ...] = DEFAULT_SUFFIXES) -> list[Path]:
    """
    Scan folder for entries whose names end with one of the suffixes.

    Matching is by name only: a directory named "icons.png" is a target,
    "logo.PNG" is not.
    """
    targets = []

    for name in list_entries(folder_path):
        if matches_suffix(name, suffixes):
            targets.append(folder_path / name)

    return targets


def describe_scan(folder_path: Path, targets: list[Path], suffixes: tuple[str, ...]) -> None:
    """Print a one-line summary of what the scan found."""
    suffix_list = ', '.join(suffixes)
    if not targets:
        console.print(f"[yellow]No entries ending in {suffix_list} found in {folder_path}[/yellow]")
        return
    console.print(f"[cyan]Found {len(targets)} entr{'y' if len(targets) == 1 else 'ies'} "
                  f"ending in {suffix_list} in {folder_path}[/cyan]")
