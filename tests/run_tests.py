#!/usr/bin/env python3
"""
Simple test runner for Asset Renamer test modules.
Usage: python run_tests.py [test_module_name]

Runs from tests/ directory and discovers test modules automatically.
"""

import sys
import time
import subprocess
import importlib.util

from pathlib import Path
from rich.console import Console
from rich.table import Table


console = Console()


def find_test_modules() -> list[Path]:
    """Find all test modules in the current directory."""
    skip_modules = {
        "test_asset_utils.py",  # Shared helpers, no tests
    }
    
    return sorted(path for path in Path('.').glob('test_*.py') if path.name not in skip_modules)


def run_single_test(test_file: Path) -> tuple[bool, float, str]:
    """Run a single test module's main() and return (success, duration, details)."""
    module_name = test_file.stem
    start_time = time.time()
    
    spec = importlib.util.spec_from_file_location(module_name, test_file)
    if spec is None or spec.loader is None:
        return False, 0.0, f"Could not load module {module_name}"
    
    module = importlib.util.module_from_spec(spec)
    
    try:
        spec.loader.exec_module(module)
    except ImportError as e:
        return False, time.time() - start_time, f"Import error: {e}"
    
    if not hasattr(module, 'main'):
        return False, time.time() - start_time, "No main() function found"
    
    try:
        result = module.main()
    except KeyboardInterrupt:
        raise
    except BaseException as e:
        # pytest outcomes (Failed, Skipped) and SystemExit are not Exceptions
        return False, time.time() - start_time, f"Main function error: {e!r}"
    
    return result == 0, time.time() - start_time, f"Exit code: {result}"


def run_with_pytest(test_file: Path) -> tuple[bool, float, str]:
    """Run test with pytest as fallback."""
    start_time = time.time()
    
    try:
        result = subprocess.run(
            [sys.executable, '-m', 'pytest', str(test_file), '-v'],
            capture_output=True,
            text=True,
            timeout=60
        )
    except subprocess.TimeoutExpired:
        return False, 60.0, "Test timed out (60s)"
    
    return result.returncode == 0, time.time() - start_time, f"pytest exit code: {result.returncode}"


def run_all_tests() -> tuple[int, int]:
    """Run all test modules and return (passed, total)."""
    test_files = find_test_modules()
    
    if not test_files:
        console.print("[yellow]No test modules found (test_*.py)[/yellow]")
        return 0, 0
    
    console.print(f"\n[bold blue]Running {len(test_files)} test modules[/bold blue]")
    
    table = Table(title="Test Results")
    table.add_column("Module", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Duration", justify="right", style="blue")
    table.add_column("Details", style="dim")
    
    passed = 0
    total = len(test_files)
    
    for test_file in test_files:
        console.print(f"\n[cyan]Running {test_file.name}...[/cyan]")
        
        success, duration, details = run_single_test(test_file)
        
        # If direct run failed, try pytest
        if not success and "Could not load module" not in details:
            console.print(f"[dim]  Direct run failed, trying pytest...[/dim]")
            success, duration, details = run_with_pytest(test_file)
        
        if success:
            passed += 1
            status = "[green]PASS[/green]"
        else:
            status = "[red]FAIL[/red]"
        
        table.add_row(test_file.stem, status, f"{duration:.2f}s", details)
    
    console.print(f"\n")
    console.print(table)
    
    return passed, total


def run_specific_test(module_name: str) -> bool:
    """Run a specific test module."""
    test_file = Path(f"{module_name}.py")
    
    if not test_file.exists():
        # Try with test_ prefix if not provided
        test_file = Path(f"test_{module_name}.py")
        
    if not test_file.exists():
        console.print(f"[red]Test module not found: {module_name}[/red]")
        console.print("[dim]Available modules:[/dim]")
        for f in find_test_modules():
            console.print(f"  {f.stem}")
        return False
    
    console.print(f"\n[bold blue]Running {test_file.name}[/bold blue]")
    
    success, duration, details = run_single_test(test_file)
    
    if success:
        console.print(f"[bold green]✓ {test_file.stem} passed ({duration:.2f}s)[/bold green]")
    else:
        console.print(f"[bold red]✗ {test_file.stem} failed ({duration:.2f}s)[/bold red]")
        console.print(f"[dim]{details}[/dim]")
    
    return success


def main() -> int:
    """Main entry point."""
    console.print("[bold]Asset Renamer Test Runner[/bold]")
    
    current_path = Path('.').absolute()
    if current_path.name != 'tests':
        console.print(f"[yellow]Warning: Not running from tests/ directory[/yellow]")
        console.print(f"[dim]Current directory: {current_path}[/dim]")
    
    if len(sys.argv) > 1:
        return 0 if run_specific_test(sys.argv[1]) else 1
    
    passed, total = run_all_tests()
    
    if total and passed == total:
        console.print(f"\n[bold green]All {total} test modules passed[/bold green]")
        return 0
    
    console.print(f"\n[bold red]{total - passed} of {total} test modules failed[/bold red]")
    return 1


if __name__ == "__main__":
    sys.exit(main())


# End of file #
