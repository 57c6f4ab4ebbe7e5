"""Utility modules."""

from .colors import Colors
from .config import (
    Config,
    ConfigValidationError,
    ConfigValidationWarning,
    DEFAULT_PATTERNS,
    create_default_config,
)
from .logging import LogStream, configure_logging, get_logger
from .validators import (
    compile_pattern,
    is_language_directory,
)
from .backup import create_backup, list_backups

__all__ = [
    'Colors',
    'Config',
    'ConfigValidationError',
    'ConfigValidationWarning',
    'DEFAULT_PATTERNS',
    'create_default_config',
    'LogStream',
    'configure_logging',
    'get_logger',
    'compile_pattern',
    'is_language_directory',
    'create_backup',
    'list_backups',
]
