"""
Rename operations for asset filename normalization.
File: asset_renamer/core/operations.py

Renames are planned from a single directory listing and then executed one
at a time, in listing order. A failure aborts the batch; entries renamed
before it stay renamed.
"""

import os

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from rich.console import Console

from asset_renamer.constants import DEFAULT_SUFFIXES
from asset_renamer.core.scanner import scan_folder
from asset_renamer.core.exceptions import FileConflictError, RenameBatchError
from asset_renamer.core.file_conflicts import (
    ConflictResolutionStrategy,
    is_conflict,
    resolve_conflict
)
from asset_renamer.renamer.sanitizer import normalize_filename

console = Console()


class RenameStatus:
    """Outcome of a single entry."""
    RENAMED         = "renamed"
    UNCHANGED       = "unchanged"
    OVERWRITTEN     = "overwritten"
    SKIPPED         = "skipped"
    WOULD_RENAME    = "would-rename"
    WOULD_CONFLICT  = "would-conflict"


@dataclass
class RenamePlan:
    source: Path
    target: Path

    @property
    def is_noop(self) -> bool:
        return self.source.name == self.target.name


@dataclass
class RenameResult:
    source: Path
    target: Optional[Path]  # destination actually used, None when skipped
    status: str


def plan_renames(folder_path: Path, suffixes: tuple[str, ...] = DEFAULT_SUFFIXES) -> list[RenamePlan]:
    """Build one rename plan per matching entry, in listing order."""
    plans = []
    for source in scan_folder(folder_path, suffixes):
        target = source.parent / normalize_filename(source.name)
        plans.append(RenamePlan(source, target))
    return plans


def rename_entry(plan: RenamePlan,
                    conflict_strategy: str = ConflictResolutionStrategy.OVERWRITE,
                    interactive: bool = False,
                    dry_run: bool = False) -> RenameResult:
    """
    Rename a single entry to its planned target.
    
    No-op renames (target name equal to source name) are still issued so
    that a vanished entry fails the same way as any other.
    
    Args:
        plan: Source and planned target
        conflict_strategy: How to handle existing targets
        interactive: Whether conflict prompts are allowed
        dry_run: Report what would happen without renaming
        
    Returns:
        RenameResult describing what happened
        
    Raises:
        FileConflictError: If the strategy refuses the conflict
        RenameBatchError: If the filesystem rename fails
    """
    source, target = plan.source, plan.target
    conflict = not plan.is_noop and is_conflict(source, target)
    
    if dry_run:
        if plan.is_noop:
            return RenameResult(source, target, RenameStatus.UNCHANGED)
        status = RenameStatus.WOULD_CONFLICT if conflict else RenameStatus.WOULD_RENAME
        return RenameResult(source, target, status)
    
    destination = target
    if conflict:
        destination = resolve_conflict(source, target, conflict_strategy, interactive)
        if destination is None:
            return RenameResult(source, None, RenameStatus.SKIPPED)
    
    try:
        # os.replace overwrites on every platform, os.rename does not on Windows
        os.replace(source, destination)
    except OSError as e:
        raise RenameBatchError(source, destination,
                                message=f"Failed to rename {source.name} -> {destination.name}: {e}") from e
    
    if plan.is_noop:
        status = RenameStatus.UNCHANGED
    elif conflict and destination == target:
        status = RenameStatus.OVERWRITTEN
    else:
        status = RenameStatus.RENAMED
    return RenameResult(source, destination, status)


def normalize_folder(folder_path: Path = Path('.'),
                        suffixes: tuple[str, ...] = DEFAULT_SUFFIXES,
                        conflict_strategy: str = ConflictResolutionStrategy.OVERWRITE,
                        interactive: bool = False,
                        dry_run: bool = False,
                        plans: Optional[list[RenamePlan]] = None) -> list[RenameResult]:
    """
    Normalize every matching entry name in a folder.
    
    With the default 'overwrite' strategy this is last-write-wins: a rename
    onto an existing name, including one produced earlier in the same run,
    replaces it.
    
    Args:
        folder_path: Folder to process (default: current directory)
        suffixes: Case-sensitive suffixes selecting the entries
        conflict_strategy: 'overwrite', 'skip', 'rename', 'fail' or 'ask'
        interactive: Whether conflict prompts are allowed
        dry_run: Report what would happen without renaming
        plans: Precomputed plans (from plan_renames) to execute instead of rescanning
        
    Returns:
        One RenameResult per planned entry
        
    Raises:
        OSError: If the folder cannot be listed (nothing is renamed)
        FileConflictError: If the strategy refuses a conflict; carries the results completed so far
        RenameBatchError: If a rename fails; carries the results completed so far
    """
    if plans is None:
        plans = plan_renames(folder_path, suffixes)
    
    results = []
    claimed = set()
    for plan in plans:
        try:
            result = rename_entry(plan, conflict_strategy, interactive, dry_run)
        except (FileConflictError, RenameBatchError) as e:
            e.completed = list(results)
            raise
        
        # Dry runs cannot see targets created by earlier renames in the batch
        if result.status == RenameStatus.WOULD_RENAME and result.target.name in claimed:
            result.status = RenameStatus.WOULD_CONFLICT
        if result.target is not None:
            claimed.add(result.target.name)
        results.append(result)
    
    return results


def summarize_results(results: list[RenameResult]) -> dict[str, int]:
    """Count results per status."""
    counts = {}
    for result in results:
        counts[result.status] = counts.get(result.status, 0) + 1
    return counts


# End of file #
