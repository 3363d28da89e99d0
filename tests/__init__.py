"""
Asset Renamer Test Suite
File: tests/__init__.py

Test modules for filename normalization, scanning, conflict handling,
rename operations and the command-line interface.
"""

__all__ = [
    'test_sanitizer',
    'test_scanner',
    'test_file_conflicts',
    'test_operations',
    'test_cli',
    'test_runner',
    'run_tests'
]
