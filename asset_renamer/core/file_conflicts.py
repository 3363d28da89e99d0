"""
File conflict resolution for asset rename operations.
File: asset_renamer/core/file_conflicts.py
"""

import os
import re

from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.prompt import Prompt, Confirm

from asset_renamer.constants import MAX_UNIQUE_ATTEMPTS, UNIQUE_SUFFIX_SEPARATOR
from asset_renamer.core.exceptions import FileConflictError
from asset_renamer.renamer.sanitizer import normalize_filename, validate_entry_name

console = Console()


class ConflictResolutionStrategy:
    """Enumeration of conflict resolution strategies."""
    OVERWRITE   = "overwrite"   # Replace the existing entry (last write wins)
    SKIP        = "skip"        # Leave the source entry alone
    RENAME      = "rename"      # Auto-rename with numeric suffix
    FAIL        = "fail"        # Stop on first conflict
    ASK         = "ask"         # Ask user for each conflict


def is_same_entry(source: Path, target: Path) -> bool:
    """
    Check whether source and target refer to the same directory entry.

    Covers identical names and case-only renames on case-insensitive
    filesystems, where "Logo.png" and "logo.png" are one file.
    """
    if source.name == target.name:
        return True
    try:
        return os.path.samefile(source, target)
    except OSError:
        return False


def is_conflict(source: Path, target: Path) -> bool:
    """A conflict exists when the target is present and is not the source itself."""
    if not os.path.lexists(target):
        return False
    return not is_same_entry(source, target)


def check_file_conflicts(renames: list[tuple[Path, Path]]) -> list[Path]:
    """
    Check which planned targets already exist.
    
    Only reflects the directory as it is now; renames earlier in the
    same batch can create further conflicts.
    
    Args:
        renames: List of (source, target) pairs
        
    Returns:
        List of target paths that already exist (conflicts)
    """
    conflicts = []
    for source, target in renames:
        if is_conflict(source, target):
            conflicts.append(target)
    return conflicts


def resolve_conflict(source: Path,
                        target: Path,
                        strategy: str = ConflictResolutionStrategy.OVERWRITE,
                        interactive: bool = True) -> Optional[Path]:
    """
    Resolve a single rename conflict according to the strategy.
    
    Args:
        source: Entry being renamed
        target: Planned destination that already exists
        strategy: Conflict resolution strategy
        interactive: Whether to allow interactive prompts
        
    Returns:
        Destination path to use, or None to skip this entry
        
    Raises:
        FileConflictError: If strategy is 'fail' or no unique name can be found
    """
    if strategy == ConflictResolutionStrategy.FAIL:
        raise FileConflictError(target, strategy,
                                f"File conflict: {source.name} -> {target.name} already exists. "
                                "Use --conflicts to choose how existing files are handled.")
    
    if strategy == ConflictResolutionStrategy.OVERWRITE:
        console.print(f"[yellow]Overwriting existing file: {target.name}[/yellow]")
        return target
    
    if strategy == ConflictResolutionStrategy.SKIP:
        console.print(f"[dim]Skipping {source.name}: {target.name} already exists[/dim]")
        return None
    
    if strategy == ConflictResolutionStrategy.ASK and interactive:
        return ask_user_conflict_resolution(source, target)
    
    # RENAME, and non-interactive ASK
    new_path = generate_unique_filename(target)
    console.print(f"[cyan]Renaming to avoid conflict: {target.name} → {new_path.name}[/cyan]")
    return new_path


def ask_user_conflict_resolution(source: Path, target: Path) -> Optional[Path]:
    """
    Ask user how to resolve a specific file conflict.
    
    Args:
        source: Entry being renamed
        target: Conflicting destination path
        
    Returns:
        Resolved path or None if user chooses to skip
    """
    console.print(f"\n[yellow]{source.name} → {target.name}: file already exists[/yellow]")
    
    choices = {
        "o": "Overwrite existing file",
        "r": "Rename (add suffix)",
        "c": "Choose new name",
        "s": "Skip this file"
    }
    
    for key, description in choices.items():
        console.print(f"  {key}: {description}")
    
    choice = Prompt.ask("Choose action", choices=list(choices.keys()), default="r")
    
    if choice == "o":
        return target
    elif choice == "r":
        return generate_unique_filename(target)
    elif choice == "c":
        return ask_custom_filename(target)
    return None


def ask_custom_filename(original_path: Path) -> Optional[Path]:
    """
    Ask user for a custom filename.
    
    The typed name is normalized like any other target and must stay in
    the same folder; anything else is refused and asked again.
    
    Args:
        original_path: Conflicting destination path
        
    Returns:
        New path with custom name or None if cancelled
    """
    default_name = original_path.stem
    suffix = original_path.suffix
    
    while True:
        new_name = Prompt.ask(
            f"Enter new filename (without {suffix})",
            default=default_name
        )
        
        if not new_name:
            return None
        
        is_valid, error_msg = validate_entry_name(new_name)
        if not is_valid:
            console.print(f"[red]{error_msg}[/red]")
            continue
            
        new_path = original_path.parent / normalize_filename(f"{new_name}{suffix}")
        
        if os.path.lexists(new_path):
            console.print(f"[yellow]File {new_path.name} also exists![/yellow]")
            if not Confirm.ask("Try again?", default=True):
                return generate_unique_filename(new_path)
        else:
            return new_path


def generate_unique_filename(path: Path, max_attempts: int = MAX_UNIQUE_ATTEMPTS) -> Path:
    """
    Generate a unique filename by adding a numeric suffix.
    
    "photo-one.png" becomes "photo-one-1.png", "photo-one-1.png" becomes
    "photo-one-2.png", and so on.
    
    Args:
        path: Original file path
        max_attempts: Maximum number of suffix attempts
        
    Returns:
        Unique file path
        
    Raises:
        FileConflictError: If unable to generate unique name within max_attempts
    """
    if not os.path.lexists(path):
        return path
    
    stem = path.stem
    suffix = path.suffix
    parent = path.parent
    sep = UNIQUE_SUFFIX_SEPARATOR
    
    # Check if filename already has a numeric suffix
    match = re.search(rf'{re.escape(sep)}(\d+)$', stem)
    if match:
        base_stem = stem[:match.start()]
        start_num = int(match.group(1)) + 1
    else:
        base_stem = stem
        start_num = 1
    
    for i in range(start_num, start_num + max_attempts):
        candidate = parent / f"{base_stem}{sep}{i}{suffix}"
        if not os.path.lexists(candidate):
            return candidate
    
    raise FileConflictError(path, ConflictResolutionStrategy.RENAME,
                            f"Unable to generate unique filename for {path.name} "
                            f"after {max_attempts} attempts")


# End of file #
