"""Shared constants and configuration."""

# Console styling
CONSOLE_STYLES = {
    'success': 'green',
    'error': 'red',
    'warning': 'yellow',
    'info': 'cyan',
    'dim': 'dim'
}

# Entries are matched on these suffixes, case-sensitively
DEFAULT_SUFFIXES = ('.png',)

WHITESPACE_REPLACEMENT = '-'

# Separator used for "photo-one-1.png" style unique names
UNIQUE_SUFFIX_SEPARATOR = '-'
MAX_UNIQUE_ATTEMPTS = 100

CONFLICT_STRATEGIES = ['overwrite', 'skip', 'rename', 'fail', 'ask']
DEFAULT_CONFLICT_STRATEGY = 'overwrite'

# Exit codes
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130
