"""Regex-based key and comment extraction."""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from ..utils.logging import LogStream, get_logger
from ..utils.validators import compile_pattern

logger = get_logger().get_logger('extractor')


@dataclass(frozen=True)
class ExtractedComment:
    """A developer comment and the source file it was found in."""
    text: str
    file_name: Optional[str] = None

    def __str__(self) -> str:
        if self.file_name:
            return f"[{self.file_name}] {self.text}"
        return self.text


class KeyExtractor:
    """
    Applies an ordered list of regex patterns to source text.

    Group 1 of each pattern is the key, group 2 (optional) the developer
    comment. A pattern without groups yields the whole match as key.
    Patterns that do not compile are reported once and skipped.
    """

    def __init__(self, patterns: Iterable[str], log: Optional[LogStream] = None):
        """
        Args:
            patterns: Regex pattern strings, in priority order
            log: Run log stream for warnings
        """
        self.log = log
        self.patterns: List[str] = list(patterns)
        self.compiled: List[re.Pattern] = []
        self.invalid: List[str] = []

        for pattern in self.patterns:
            compiled, error = compile_pattern(pattern)
            if compiled is None:
                self.invalid.append(pattern)
                self._warning(f"Invalid regex skipped: {pattern} ({error})")
            else:
                self.compiled.append(compiled)

    @staticmethod
    def _key_of(match: re.Match) -> str:
        return match.group(1) if match.re.groups >= 1 else match.group(0)

    @staticmethod
    def _comment_of(match: re.Match) -> Optional[str]:
        if match.re.groups >= 2:
            return match.group(2)
        return None

    def extract_keys(self, text: str) -> Set[str]:
        """
        Extract unique keys from text.

        Args:
            text: Source file content

        Returns:
            Set of keys matched by any pattern
        """
        keys: Set[str] = set()
        for regex in self.compiled:
            for match in regex.finditer(text):
                key = self._key_of(match)
                if key:
                    keys.add(key)
        return keys

    def extract_keys_with_comments(
        self,
        text: str,
        file_name: Optional[str] = None
    ) -> Dict[str, ExtractedComment]:
        """
        Extract keys mapped to their developer comment.

        An empty or absent comment falls back to the key itself. When several
        matches yield the same key, the last one wins.

        Args:
            text: Source file content
            file_name: Origin file recorded on each comment

        Returns:
            Dictionary of key -> ExtractedComment
        """
        comments: Dict[str, ExtractedComment] = {}
        for regex in self.compiled:
            for match in regex.finditer(text):
                key = self._key_of(match)
                if not key:
                    continue
                comment = self._comment_of(match) or key
                comments[key] = ExtractedComment(text=comment, file_name=file_name)
        return comments

    def _warning(self, message: str):
        if self.log is not None:
            self.log.warning(message)
        else:
            logger.warning(message)


def extract_keys(text: str, patterns: Iterable[str]) -> Set[str]:
    """Extract unique keys from text with the given patterns."""
    return KeyExtractor(patterns).extract_keys(text)


def extract_keys_with_comments(text: str, patterns: Iterable[str]) -> Dict[str, str]:
    """Extract keys mapped to their comment text (key when no comment)."""
    extracted = KeyExtractor(patterns).extract_keys_with_comments(text)
    return {key: comment.text for key, comment in extracted.items()}
