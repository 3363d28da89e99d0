"""Command-line interface for normalizing asset filenames."""

import sys
import signal
import argparse

from pathlib import Path
from rich.console import Console

from asset_renamer._version import __version__
from asset_renamer.constants import (
    CONFLICT_STRATEGIES,
    DEFAULT_CONFLICT_STRATEGY,
    DEFAULT_SUFFIXES,
    EXIT_ERROR,
    EXIT_INTERRUPTED
)
from asset_renamer.core.scanner import describe_scan
from asset_renamer.core.exceptions import FileConflictError, RenameBatchError
from asset_renamer.core.file_conflicts import ConflictResolutionStrategy
from asset_renamer.core.operations import plan_renames, normalize_folder
from asset_renamer.renamer.sanitizer import validate_suffix
from asset_renamer.ui import (
    confirm_renames,
    display_completed_before_failure,
    display_rename_plan,
    display_results
)


console = Console()


def setup_signal_handlers():
    """Setup graceful handling of Ctrl+C interruptions."""
    def signal_handler(sig, frame):
        console.print("\n[yellow]Operation interrupted by user[/yellow]")
        sys.exit(EXIT_INTERRUPTED)  # Standard exit code for Ctrl+C
    
    signal.signal(signal.SIGINT, signal_handler)


epilog_for_argparse = """
Renaming rule:
    Every entry whose name ends with the suffix (case-sensitive, default .png)
    has each whitespace character replaced with "-" and is then lowercased.

        "Screen Shot.png"   ->  screen-shot.png
        "a b<TAB>c.png"     ->  a-b-c.png
        "My Picture.PNG"    ->  unchanged (suffix does not match)

Conflict strategies (--conflicts):
    overwrite   Replace the existing entry, last write wins (default)
    skip        Leave the source entry as it is
    rename      Add a numeric suffix: photo-one-1.png, photo-one-2.png, ...
    fail        Stop at the first conflict
    ask         Ask for each conflict (becomes 'rename' with --batch)

Examples:
    %(prog)s                            # Normalize .png names in current directory
    %(prog)s /path/to/images            # Normalize a specific folder
    %(prog)s --dry-run                  # Show what would be renamed
    %(prog)s --preview                  # Show plan and confirm first
    %(prog)s --conflicts=rename         # Never overwrite, add numeric suffix
    %(prog)s --suffix=.png --suffix=.jpg

Note: No short arguments are provided to ensure clarity and prevent accidents.
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="asset-renamer",
        description="Asset Renamer - Normalize image filenames to lowercase, hyphenated form",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog_for_argparse
    )

    parser.add_argument('path', type=Path, default=Path('.'), nargs='?',
        help='Folder containing the files to rename (default: current directory)')

    # Version
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}',
        help='Show program version and exit')

    # Matching
    matching = parser.add_argument_group('matching')
    matching.add_argument('--suffix', action='append', metavar='SUFFIX', dest='suffixes',
        help=('Case-sensitive filename suffix to match (can be used multiple times). '
            f'Default: {", ".join(DEFAULT_SUFFIXES)}'))

    # Conflict resolution
    conflicts = parser.add_argument_group('conflict resolution')
    conflicts.add_argument('--conflicts',
        choices=CONFLICT_STRATEGIES,
        default=DEFAULT_CONFLICT_STRATEGY,
        metavar='STRATEGY',
        help=('Existing file handling: overwrite (last write wins, default), '
            'skip (keep existing), rename (add suffix), fail (stop on conflict), ask (interactive)'))

    # Processing modes
    modes = parser.add_argument_group('processing modes')
    modes.add_argument('--batch', action='store_true',
        help='Never prompt; interactive choices fall back to safe defaults')
    modes.add_argument('--dry-run', action='store_true',
        help='Show what would be done without actually doing it')
    modes.add_argument('--preview', action='store_true',
        help='Show the planned renames and confirm before executing')

    return parser


def extract_conflict_settings(args: argparse.Namespace) -> dict:
    """
    Work out the effective conflict strategy and interactivity.
    
    In batch mode 'ask' becomes 'rename', since nobody is there to answer.
    """
    strategy = args.conflicts
    interactive = not args.batch
    
    if args.batch and strategy == ConflictResolutionStrategy.ASK:
        console.print("[dim]Batch mode: converting 'ask' conflict strategy to 'rename'[/dim]")
        strategy = ConflictResolutionStrategy.RENAME
    
    return {
        'conflict_strategy': strategy,
        'interactive': interactive
    }


def resolve_suffixes(args: argparse.Namespace) -> tuple[str, ...]:
    """Validate --suffix values, falling back to the defaults."""
    if not args.suffixes:
        return DEFAULT_SUFFIXES
    
    for suffix in args.suffixes:
        is_valid, error_msg = validate_suffix(suffix)
        if not is_valid:
            console.print(f"[red]Error: {error_msg}[/red]")
            sys.exit(EXIT_ERROR)
    
    # Keep order, drop repeats
    return tuple(dict.fromkeys(args.suffixes))


def main(argv: list[str] = None):
    """
    Main entry point for the Asset Renamer.

    With no arguments this renames every .png entry in the current
    directory, overwriting on conflict. Any filesystem error aborts the
    run with exit status 1; entries renamed before it stay renamed.
    """
    setup_signal_handlers()

    parser = build_parser()
    args = parser.parse_args(argv)

    suffixes = resolve_suffixes(args)
    settings = extract_conflict_settings(args)

    if not args.path.is_dir():
        console.print(f"[red]Error: {args.path} is not a valid directory[/red]")
        sys.exit(EXIT_ERROR)

    # Listing failure aborts before anything is renamed
    try:
        plans = plan_renames(args.path, suffixes)
    except OSError as e:
        console.print(f"[red]Error: Cannot read {args.path}: {e}[/red]")
        sys.exit(EXIT_ERROR)

    describe_scan(args.path, [plan.source for plan in plans], suffixes)
    if not plans:
        return

    if args.dry_run:
        results = normalize_folder(args.path, suffixes=suffixes, dry_run=True, plans=plans)
        display_results(results, title="Dry Run - Planned Renames")
        console.print("[dim]Dry run: no files were renamed[/dim]")
        return

    if args.preview and not args.batch:
        display_rename_plan(plans)
        if not confirm_renames(len(plans)):
            console.print("[yellow]Cancelled[/yellow]")
            return

    try:
        results = normalize_folder(
            args.path,
            suffixes=suffixes,
            conflict_strategy=settings['conflict_strategy'],
            interactive=settings['interactive'],
            plans=plans
        )
    except (FileConflictError, RenameBatchError) as e:
        # Renames before the failure are not rolled back
        console.print(f"[red]Error: {e}[/red]")
        display_completed_before_failure(e.completed)
        sys.exit(EXIT_ERROR)

    display_results(results)


if __name__ == "__main__":
    main()

# End of file #
