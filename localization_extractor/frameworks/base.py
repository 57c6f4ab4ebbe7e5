"""Base adapter interface for different catalog formats."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional


class BaseAdapter(ABC):
    """
    Framework-specific knowledge the extraction engine needs.

    The engine itself is format-agnostic: which files are source files,
    what a language directory is called, how a catalog line looks and
    which files hold format variants all come from the adapter.
    """

    @abstractmethod
    def get_file_extensions(self) -> List[str]:
        """Return list of source file extensions to scan (e.g., ['.swift'])."""
        pass

    @abstractmethod
    def get_language_dir_suffix(self) -> str:
        """Return the suffix of per-language directories (e.g., '.lproj')."""
        pass

    @abstractmethod
    def get_format_variant_extension(self) -> str:
        """Return the extension of pluralization/format-variant catalogs."""
        pass

    @abstractmethod
    def get_default_patterns(self) -> List[str]:
        """Return the regex patterns used when none are configured."""
        pass

    @abstractmethod
    def parse_values(self, content: str) -> Dict[str, str]:
        """
        Parse catalog text into key-value pairs.

        Args:
            content: Catalog file content

        Returns:
            Dictionary of key-value pairs (last occurrence wins)
        """
        pass

    @abstractmethod
    def parse_comments(self, content: str) -> Dict[str, str]:
        """
        Parse the comment block directly above each entry.

        Args:
            content: Catalog file content

        Returns:
            Dictionary of key -> comment, only for keys that have one
        """
        pass

    @abstractmethod
    def parse_format_variant_keys(self, content: bytes) -> List[str]:
        """Return the top-level keys of a format-variant catalog."""
        pass

    @abstractmethod
    def format_entry(self, key: str, value: str, comment: Optional[str] = None) -> str:
        """
        Render one catalog entry.

        Args:
            key: Localization key
            value: Localized text
            comment: Optional developer comment written above the entry

        Returns:
            Entry text (may span two lines when a comment is given)
        """
        pass

    @abstractmethod
    def format_section_header(self, file_name: str) -> str:
        """Render the header that precedes one source file's entries."""
        pass

    def is_source_file(self, file_path: Path) -> bool:
        """Check if a file should be scanned for keys."""
        return file_path.suffix in self.get_file_extensions()
