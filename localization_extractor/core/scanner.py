"""Recursive source tree scanning."""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Set

from ..frameworks.base import BaseAdapter
from ..utils.logging import LogStream, get_logger

logger = get_logger().get_logger('scanner')


class SourceScanner:
    """
    Finds source files under a root directory.

    Depth-first, entries visited in name order, hidden entries skipped.
    Symlinked directories are followed once: a directory whose real path
    was already visited is not entered again, so link cycles terminate.
    """

    def __init__(
        self,
        adapter: BaseAdapter,
        exclude_dirs: Optional[Iterable[str]] = None,
        log: Optional[LogStream] = None,
    ):
        """
        Args:
            adapter: Framework adapter deciding which files are sources
            exclude_dirs: Directory names never entered (e.g., 'Pods', 'build')
            log: Run log stream for progress messages
        """
        self.adapter = adapter
        self.exclude_dirs: Set[str] = {d.rstrip('/') for d in (exclude_dirs or [])}
        self.log = log

    def scan(self, root_path) -> List[Path]:
        """
        Recursively collect source files.

        Args:
            root_path: Directory to scan

        Returns:
            Source file paths in discovery order
        """
        found: List[Path] = []
        visited: Set[str] = set()
        self._scan_directory(Path(root_path), found, visited)
        return found

    def _scan_directory(self, directory: Path, found: List[Path], visited: Set[str]):
        real_path = os.path.realpath(directory)
        if real_path in visited:
            self._debug(f"Skipping already visited directory: {directory}")
            return
        visited.add(real_path)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            self._warning(f"Could not access contents of: {directory} ({e})")
            return

        self._debug(f"Scanning folder: {directory}")

        for entry in entries:
            if entry.name.startswith('.'):
                continue

            try:
                is_dir = entry.is_dir()
            except OSError as e:
                self._warning(f"Could not stat: {entry.path} ({e})")
                continue

            if is_dir:
                if entry.name in self.exclude_dirs:
                    continue
                self._scan_directory(Path(entry.path), found, visited)
            elif self.adapter.is_source_file(Path(entry.path)):
                self._debug(f"Source file detected: {entry.path}")
                found.append(Path(entry.path))

    def _debug(self, message: str):
        if self.log is not None:
            self.log.debug(message)
        else:
            logger.debug(message)

    def _warning(self, message: str):
        if self.log is not None:
            self.log.warning(message)
        else:
            logger.warning(message)
