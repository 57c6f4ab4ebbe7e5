"""Swift/iOS adapter: .swift sources, .lproj folders, .strings and .stringsdict catalogs."""

import plistlib
import re
from typing import Dict, List, Optional
from xml.parsers.expat import ExpatError

from .base import BaseAdapter
from ..utils.config import DEFAULT_PATTERNS


class SwiftAdapter(BaseAdapter):
    """Adapter for Swift/iOS projects using .strings files."""

    # "key" = "value";  (escaped characters allowed in both)
    ENTRY_PATTERN = re.compile(
        r'^[ \t]*"((?:[^"\\]|\\.)+)"\s*=\s*"((?:[^"\\]|\\.)*)"\s*;',
        re.MULTILINE
    )

    # /* comment */ directly followed by an entry; the comment may not contain "*/"
    COMMENTED_ENTRY_PATTERN = re.compile(
        r'/\*((?:(?!\*/).)*)\*/[ \t]*\r?\n?\s*"((?:[^"\\]|\\.)+)"\s*=',
        re.DOTALL
    )

    def get_file_extensions(self) -> List[str]:
        """Return Swift file extensions."""
        return ['.swift']

    def get_language_dir_suffix(self) -> str:
        return '.lproj'

    def get_format_variant_extension(self) -> str:
        return '.stringsdict'

    def get_default_patterns(self) -> List[str]:
        return list(DEFAULT_PATTERNS)

    def parse_values(self, content: str) -> Dict[str, str]:
        """
        Parse .strings file content.

        Format: "key" = "value";

        Note: Supports escaped characters in keys and values (e.g., \\", \\\\, \\n).
        Values are returned exactly as written, escapes included.
        """
        values = {}
        for match in self.ENTRY_PATTERN.finditer(content):
            key, value = match.groups()
            values[key] = value
        return values

    def parse_comments(self, content: str) -> Dict[str, str]:
        """
        Parse /* comment */ blocks that sit directly above an entry.

        Section headers are skipped because they are followed by another
        comment, not by an entry.
        """
        comments = {}
        for match in self.COMMENTED_ENTRY_PATTERN.finditer(content):
            comment, key = match.groups()
            comments[key] = comment.strip()
        return comments

    def parse_format_variant_keys(self, content: bytes) -> List[str]:
        """
        Parse a .stringsdict property list and return its top-level keys.

        Raises:
            plistlib.InvalidFileException: content is not a property list
            ValueError: the XML is malformed, or the root object is not a dictionary
        """
        try:
            payload = plistlib.loads(content)
        except ExpatError as e:
            raise ValueError(f"malformed property list: {e}") from e
        if not isinstance(payload, dict):
            raise ValueError(f"expected a dictionary at the root, got {type(payload).__name__}")
        return list(payload.keys())

    def format_entry(self, key: str, value: str, comment: Optional[str] = None) -> str:
        """
        Render a .strings entry.

        Keys and values are written verbatim; escapes captured from source
        code are already in .strings form.
        """
        entry = f'"{key}" = "{value}";'
        if comment is None:
            return entry
        # "*/" would end the block early
        safe_comment = comment.replace('*/', '* /')
        return f'/* {safe_comment} */\n{entry}'

    def format_section_header(self, file_name: str) -> str:
        return f'\n/* ===== {file_name} ===== */'
