#!/usr/bin/env python3
"""
Test module for folder scanning.
File: tests/test_scanner.py

Usage:  python tests/test_scanner.py
        pytest tests/test_scanner.py
"""

import sys
import tempfile
from pathlib import Path

# Add project root and tests folder to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

import pytest

from asset_renamer.core.scanner import list_entries, scan_folder
from test_asset_utils import create_test_files


def test_scan_selects_png_entries_only():
    """Only names ending in .png (case-sensitive) are selected."""
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        create_test_files(temp_path, [
            "Screen Shot.png", "logo.png", "My Picture.PNG", "photo.Png", "notes.txt"
        ])
        
        names = {path.name for path in scan_folder(temp_path)}
        print(f"  Selected: {sorted(names)}")
        assert names == {"Screen Shot.png", "logo.png"}


def test_scan_includes_directory_named_like_png():
    """Filtering is by name, so a directory ending in .png is a target."""
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        (temp_path / "Icon Set.png").mkdir()
        (temp_path / "Other Dir").mkdir()
        
        names = {path.name for path in scan_folder(temp_path)}
        assert names == {"Icon Set.png"}


def test_scan_is_single_level():
    """Entries inside subfolders are not listed."""
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        sub = temp_path / "nested"
        sub.mkdir()
        create_test_files(sub, ["Deep File.png"])
        create_test_files(temp_path, ["Top File.png"])
        
        assert [path.name for path in scan_folder(temp_path)] == ["Top File.png"]


def test_scan_follows_listing_order():
    """Targets come back in directory listing order, unsorted."""
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        create_test_files(temp_path, ["b.png", "a.png", "c.txt", "C.png"])
        
        expected = [name for name in list_entries(temp_path) if name.endswith('.png')]
        assert [path.name for path in scan_folder(temp_path)] == expected


def test_scan_custom_suffixes():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        create_test_files(temp_path, ["a.png", "b.jpg", "c.gif"])
        
        names = {path.name for path in scan_folder(temp_path, ('.jpg', '.gif'))}
        assert names == {"b.jpg", "c.gif"}


def test_scan_missing_folder_raises():
    """Listing errors propagate to the caller."""
    with tempfile.TemporaryDirectory() as temp_dir:
        missing = Path(temp_dir) / "does-not-exist"
        with pytest.raises(FileNotFoundError):
            scan_folder(missing)


def main():
    """Run all tests and report results."""
    print("Running scanner tests...\n")
    
    tests = [
        ("PNG selection", test_scan_selects_png_entries_only),
        ("Directory named .png", test_scan_includes_directory_named_like_png),
        ("Single level", test_scan_is_single_level),
        ("Listing order", test_scan_follows_listing_order),
        ("Custom suffixes", test_scan_custom_suffixes),
        ("Missing folder", test_scan_missing_folder_raises),
    ]
    
    passed = 0
    total = len(tests)
    
    for test_name, test_func in tests:
        print(f"\n=== {test_name} ===")
        try:
            test_func()
            print(f"✓ {test_name}: PASSED")
            passed += 1
        except (AssertionError, pytest.fail.Exception) as e:
            print(f"✗ {test_name}: FAILED - {e}")
        except Exception as e:
            print(f"✗ {test_name}: ERROR - {e}")
    
    print(f"\n=== Final Results ===")
    print(f"Passed: {passed}/{total}")
    
    return 0 if passed == total else 1


if __name__ == "__main__":
    sys.exit(main())


# End of file #
