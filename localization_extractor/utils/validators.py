"""Validation utilities."""

import re
from typing import Optional, Tuple

LANGUAGE_DIR_SUFFIX = '.lproj'


def is_language_directory(name: str, suffix: str = LANGUAGE_DIR_SUFFIX) -> bool:
    """
    Check if a directory name follows the locale folder convention.

    Examples: en.lproj, pt-BR.lproj, Base.lproj
    """
    return bool(name) and name.endswith(suffix) and len(name) > len(suffix)


def compile_pattern(pattern: str) -> Tuple[Optional[re.Pattern], Optional[str]]:
    """
    Compile a regex pattern without raising.

    Returns:
        (compiled pattern, None) on success, (None, error message) on failure
    """
    if not pattern:
        return None, "empty pattern"

    try:
        return re.compile(pattern), None
    except re.error as e:
        return None, str(e)
