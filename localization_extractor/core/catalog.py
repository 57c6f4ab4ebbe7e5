"""Catalog reading and writing."""

import plistlib
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Set

from ..frameworks.base import BaseAdapter
from ..utils.logging import LogStream, get_logger
from .extractor import ExtractedComment

logger = get_logger().get_logger('catalog')


class CatalogReader:
    """
    Reads existing catalogs.

    A catalog that does not exist or cannot be read is treated as empty;
    reading never aborts a run.
    """

    def __init__(self, adapter: BaseAdapter, log: Optional[LogStream] = None):
        self.adapter = adapter
        self.log = log

    def _read_text(self, path: Path) -> Optional[str]:
        path = Path(path)
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            self._warning(f"Could not read catalog {path}: {e}")
            return None

    def load_values(self, path: Path) -> Dict[str, str]:
        """
        Load key -> value pairs from a catalog.

        Args:
            path: Catalog file path

        Returns:
            Dictionary of existing values (empty when the file is missing)
        """
        content = self._read_text(path)
        if content is None:
            return {}
        return self.adapter.parse_values(content)

    def load_comments(self, path: Path) -> Dict[str, str]:
        """
        Load key -> comment pairs from a catalog.

        Only keys with a comment block directly above them are returned.
        """
        content = self._read_text(path)
        if content is None:
            return {}
        return self.adapter.parse_comments(content)

    def load_duplicate_format_keys(self, base_path: Path) -> Set[str]:
        """
        Collect top-level keys from every format-variant catalog under a directory.

        Args:
            base_path: Localization base directory (searched recursively)

        Returns:
            Set of keys that must not appear in flat catalogs
        """
        base_path = Path(base_path)
        keys: Set[str] = set()
        if not base_path.is_dir():
            return keys

        extension = self.adapter.get_format_variant_extension()
        for file_path in sorted(base_path.rglob(f'*{extension}')):
            if not file_path.is_file():
                continue
            try:
                file_keys = self.adapter.parse_format_variant_keys(file_path.read_bytes())
            except (OSError, ValueError, plistlib.InvalidFileException) as e:
                self._warning(f"Could not parse {file_path}: {e}")
                continue
            self._debug(f"Loaded {len(file_keys)} format-variant keys from {file_path.name}")
            keys.update(file_keys)

        return keys

    def _warning(self, message: str):
        if self.log is not None:
            self.log.warning(message)
        else:
            logger.warning(message)

    def _debug(self, message: str):
        if self.log is not None:
            self.log.debug(message)
        else:
            logger.debug(message)


class CatalogWriter:
    """Renders and persists flat catalogs."""

    def __init__(self, adapter: BaseAdapter):
        self.adapter = adapter

    def render(
        self,
        keys_grouped_by_file: Mapping[str, Iterable[str]],
        existing_values: Mapping[str, str],
        extracted_comments: Optional[Mapping[str, ExtractedComment]] = None,
        duplicate_format_keys: Optional[Set[str]] = None,
        include_comments: bool = False,
    ) -> str:
        """
        Render catalog text.

        Files are emitted in name order, keys in key order. A key keeps its
        existing value; a new key gets itself as placeholder value.

        Args:
            keys_grouped_by_file: Source file name -> keys found in it
            existing_values: Current catalog values for this language
            extracted_comments: Key -> comment tracked during extraction
            duplicate_format_keys: Keys defined in format-variant catalogs (skipped)
            include_comments: Write a comment block above each entry

        Returns:
            Full catalog content
        """
        excluded = duplicate_format_keys or set()
        comments = extracted_comments or {}
        lines = []

        for file_name in sorted(keys_grouped_by_file):
            keys = sorted(k for k in set(keys_grouped_by_file[file_name]) if k not in excluded)
            if not keys:
                continue

            lines.append(self.adapter.format_section_header(file_name))
            for key in keys:
                value = existing_values.get(key, key)
                comment = None
                if include_comments:
                    tracked = comments.get(key)
                    comment = tracked.text if tracked is not None else key
                lines.append(self.adapter.format_entry(key, value, comment))

        return '\n'.join(lines)

    def write(self, path: Path, content: str) -> None:
        """
        Overwrite a catalog, creating its directory first.

        Content goes to a temporary sibling that replaces the catalog, so a
        failed write leaves the previous catalog untouched.

        Raises:
            OSError: directory creation or write failed
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            tmp_path.write_text(content, encoding='utf-8')
            tmp_path.replace(path)
        except OSError:
            if tmp_path.exists():
                tmp_path.unlink()
            raise
