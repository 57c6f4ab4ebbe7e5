"""Extraction orchestrator: scan, extract, reconcile and regenerate catalogs."""

import os
from collections import OrderedDict
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..frameworks.base import BaseAdapter
from ..frameworks.swift import SwiftAdapter
from ..utils.backup import create_backup
from ..utils.logging import LogStream, get_logger
from ..utils.progress import ProgressBar
from ..utils.validators import is_language_directory
from .catalog import CatalogReader, CatalogWriter
from .extractor import ExtractedComment, KeyExtractor
from .reconciler import ChangeSummary, analyze
from .scanner import SourceScanner

logger = get_logger().get_logger('engine')


@dataclass
class ExtractionRequest:
    """Everything one run needs. Mirrors what the CLI collects from config."""
    source_root: str
    catalog_base_dir: str
    language_dirs: List[str]
    catalog_file_name: str = "Localizable.strings"
    patterns: List[str] = field(default_factory=list)
    include_comments: bool = False
    dry_run: bool = False
    backup: bool = False
    exclude_dirs: List[str] = field(default_factory=list)


@dataclass
class RunResult:
    """Outcome of one extraction run."""
    summaries: Dict[str, ChangeSummary] = field(default_factory=OrderedDict)
    change_log: Dict[str, List[str]] = field(default_factory=OrderedDict)
    messages: List[str] = field(default_factory=list)
    written: Dict[str, Path] = field(default_factory=OrderedDict)
    failures: Dict[str, str] = field(default_factory=OrderedDict)
    comments: Dict[str, ExtractedComment] = field(default_factory=dict)
    source_file_count: int = 0
    extracted_key_count: int = 0
    completed: bool = False
    dry_run: bool = False
    finished_at: Optional[datetime] = None

    @property
    def last_summary(self) -> ChangeSummary:
        """Summary of the first language directory (empty when none ran)."""
        for summary in self.summaries.values():
            return summary
        return ChangeSummary()

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)


def _language_change_log(summary: ChangeSummary) -> List[str]:
    lines = [f"Language: {summary.language}"]
    for label, keys in (
        ('New', summary.new),
        ('Missing', summary.missing),
        ('Changed', summary.changed),
        ('Excluded (format variants)', summary.duplicate_format_excluded),
    ):
        lines.append(f"  {label} keys ({len(keys)}): {', '.join(keys) if keys else '-'}")
    return lines


def detect_languages(base_path, suffix: str = '.lproj') -> List[str]:
    """
    List immediate subdirectories of ``base_path`` named like language directories.

    Args:
        base_path: Localization base directory
        suffix: Language directory suffix

    Returns:
        Sorted directory names; empty when the directory cannot be read
    """
    try:
        with os.scandir(base_path) as it:
            names = [
                entry.name for entry in it
                if is_language_directory(entry.name, suffix) and entry.is_dir()
            ]
    except OSError as e:
        logger.debug(f"Could not list {base_path}: {e}")
        return []
    return sorted(names)


class ExtractionEngine:
    """
    Runs full extractions and keeps the most recent result.

    ``last_result`` is replaced under a lock once a run has finished, so
    readers see either the previous complete result or the new one.

    Usage:
        engine = ExtractionEngine()
        result = engine.run_extraction(
            source_root='./App',
            catalog_base_dir='./App/Resources',
            language_dirs=['en.lproj', 'fr.lproj'],
            catalog_file_name='Localizable.strings',
            patterns=[r'"([^"]+)"\\s*\\.localized'],
            include_comments=False,
        )
        print(result.last_summary.new)
    """

    def __init__(
        self,
        adapter: Optional[BaseAdapter] = None,
        use_threads: bool = False,
        max_workers: int = 4,
        show_progress: bool = False,
    ):
        """
        Args:
            adapter: Framework adapter (default: SwiftAdapter)
            use_threads: Extract files on a thread pool
            max_workers: Thread pool size for extraction and background runs
            show_progress: Show a tqdm bar while extracting
        """
        self.adapter = adapter or SwiftAdapter()
        self.use_threads = use_threads
        self.max_workers = max_workers
        self.show_progress = show_progress

        self._lock = Lock()
        self._last_result: Optional[RunResult] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def last_result(self) -> Optional[RunResult]:
        with self._lock:
            return self._last_result

    @property
    def last_summary(self) -> ChangeSummary:
        result = self.last_result
        return result.last_summary if result is not None else ChangeSummary()

    def run(self, request: ExtractionRequest, log: Optional[LogStream] = None) -> RunResult:
        """Run an extraction described by an ExtractionRequest."""
        return self.run_extraction(
            source_root=request.source_root,
            catalog_base_dir=request.catalog_base_dir,
            language_dirs=request.language_dirs,
            catalog_file_name=request.catalog_file_name,
            patterns=request.patterns,
            include_comments=request.include_comments,
            log=log,
            dry_run=request.dry_run,
            backup=request.backup,
            exclude_dirs=request.exclude_dirs,
        )

    def run_in_background(
        self,
        request: ExtractionRequest,
        log: Optional[LogStream] = None
    ) -> 'Future[RunResult]':
        """
        Submit a run to the engine's thread pool.

        The log stream is closed when the run ends, so a caller can iterate
        it on its own thread while the run is in progress.
        """
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='extraction')
            executor = self._executor
        return executor.submit(self.run, request, log)

    def shutdown(self, wait: bool = True):
        """Stop the background executor."""
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=wait)

    def run_extraction(
        self,
        source_root: str,
        catalog_base_dir: str,
        language_dirs: Sequence[str],
        catalog_file_name: str,
        patterns: Sequence[str],
        include_comments: bool = False,
        log: Optional[LogStream] = None,
        dry_run: bool = False,
        backup: bool = False,
        exclude_dirs: Optional[Sequence[str]] = None,
    ) -> RunResult:
        """
        Execute the full extraction process.

        Never raises for configuration or I/O problems: they are reported on
        the log stream and in the returned result.

        Args:
            source_root: Source code directory to scan
            catalog_base_dir: Directory holding the language directories
            language_dirs: Language directory names, processed in this order
            catalog_file_name: Catalog file inside each language directory
            patterns: Regex patterns (group 1 = key, group 2 = comment)
            include_comments: Track comments and write them into catalogs
            log: Stream receiving progress messages (closed at the end)
            dry_run: Reconcile and render, but do not write
            backup: Back up each existing catalog before overwriting it
            exclude_dirs: Directory names the scanner skips

        Returns:
            RunResult, also stored as ``last_result``
        """
        log = log or LogStream(logger=logger)
        result = RunResult(dry_run=dry_run)

        try:
            self._run(
                result, log, source_root, catalog_base_dir, language_dirs,
                catalog_file_name, patterns, include_comments, dry_run, backup,
                exclude_dirs,
            )
        finally:
            result.messages = log.messages
            log.close()

        with self._lock:
            self._last_result = result
        return result

    def _run(
        self,
        result: RunResult,
        log: LogStream,
        source_root: str,
        catalog_base_dir: str,
        language_dirs: Sequence[str],
        catalog_file_name: str,
        patterns: Sequence[str],
        include_comments: bool,
        dry_run: bool,
        backup: bool,
        exclude_dirs: Optional[Sequence[str]],
    ):
        if not source_root or not str(source_root).strip():
            log.error("Please select a project path first.")
            return

        if not catalog_base_dir or not str(catalog_base_dir).strip():
            log.error("Please select a localization base folder first.")
            return

        base_dir = Path(catalog_base_dir)

        scanner = SourceScanner(self.adapter, exclude_dirs=exclude_dirs, log=log)
        source_files = scanner.scan(source_root)
        result.source_file_count = len(source_files)
        log.emit(f"Found {len(source_files)} source files to scan.")

        extractor = KeyExtractor(patterns, log=log)
        keys_grouped_by_file, comments = self._extract_all(
            source_files, extractor, include_comments, log
        )

        all_keys: Set[str] = set()
        for keys in keys_grouped_by_file.values():
            all_keys.update(keys)
        result.comments = comments

        reader = CatalogReader(self.adapter, log=log)
        duplicate_format_keys = reader.load_duplicate_format_keys(base_dir)
        if duplicate_format_keys:
            log.emit(f"Found {len(duplicate_format_keys)} keys in format-variant catalogs; "
                     f"they are excluded from {catalog_file_name}.")

        flat_keys = all_keys - duplicate_format_keys
        result.extracted_key_count = len(flat_keys)
        log.emit(f"Extracted {len(flat_keys)} unique localizable keys.")

        if not language_dirs:
            log.warning("No language directories configured; nothing to write.")

        writer = CatalogWriter(self.adapter)
        for lang_dir in language_dirs:
            catalog_path = base_dir / lang_dir / catalog_file_name

            existing_values = reader.load_values(catalog_path)
            existing_comments = reader.load_comments(catalog_path) if include_comments else None

            summary = analyze(
                flat_keys,
                existing_values,
                extracted_comments=comments if include_comments else None,
                existing_comments=existing_comments,
                duplicate_format_keys=duplicate_format_keys,
                language=lang_dir,
            )
            result.summaries[lang_dir] = summary
            result.change_log[lang_dir] = _language_change_log(summary)
            for line in result.change_log[lang_dir]:
                log.emit(line)

            content = writer.render(
                keys_grouped_by_file,
                existing_values,
                extracted_comments=comments,
                duplicate_format_keys=duplicate_format_keys,
                include_comments=include_comments,
            )

            if dry_run:
                log.emit(f"[DRY RUN] Would update {catalog_path}")
                continue

            try:
                if backup:
                    backup_path = create_backup(catalog_path, base_dir)
                    if backup_path is not None:
                        log.emit(f"Backup created: {backup_path}")
                writer.write(catalog_path, content)
            except OSError as e:
                result.failures[lang_dir] = str(e)
                log.error(f"Failed to write to {catalog_path}: {e}")
                continue

            result.written[lang_dir] = catalog_path
            log.emit(f"Updated {catalog_path}")

        result.completed = True
        result.finished_at = datetime.now()
        log.emit(f"Extraction completed at {result.finished_at.isoformat(timespec='seconds')}.")

    def _extract_all(
        self,
        source_files: List[Path],
        extractor: KeyExtractor,
        include_comments: bool,
        log: LogStream,
    ) -> Tuple[Dict[str, Set[str]], Dict[str, ExtractedComment]]:
        """
        Extract keys from every source file.

        Per-file results are merged in discovery order whether or not a
        thread pool is used: keys are grouped by file name, and a key's
        comment comes from the first file that mentions it.
        """
        def extract_file(path: Path):
            try:
                content = path.read_text(encoding='utf-8')
            except (OSError, UnicodeDecodeError) as e:
                log.warning(f"Could not read {path}: {e}")
                return None
            if include_comments:
                found = extractor.extract_keys_with_comments(content, file_name=path.name)
                return set(found), found
            return extractor.extract_keys(content), {}

        def with_progress(iterable):
            return ProgressBar(
                iterable,
                desc="Extracting",
                total=len(source_files),
                unit="files",
                disable=not self.show_progress,
            )

        if self.use_threads and len(source_files) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                # map() yields in submission order
                per_file = list(with_progress(executor.map(extract_file, source_files)))
        else:
            per_file = [extract_file(path) for path in with_progress(source_files)]

        keys_grouped_by_file: Dict[str, Set[str]] = {}
        comments: Dict[str, ExtractedComment] = {}
        for path, extracted in zip(source_files, per_file):
            if extracted is None:
                continue
            keys, file_comments = extracted
            keys_grouped_by_file.setdefault(path.name, set()).update(keys)
            for key, comment in file_comments.items():
                comments.setdefault(key, comment)

        return keys_grouped_by_file, comments


_default_engine: Optional[ExtractionEngine] = None
_default_engine_lock = Lock()


def get_engine() -> ExtractionEngine:
    """Process-wide engine, for callers that poll ``last_result``."""
    global _default_engine
    with _default_engine_lock:
        if _default_engine is None:
            _default_engine = ExtractionEngine()
        return _default_engine


def run_extraction(
    source_root: str,
    catalog_base_dir: str,
    language_dirs: Sequence[str],
    catalog_file_name: str,
    patterns: Sequence[str],
    include_comments: bool = False,
    log: Optional[LogStream] = None,
    **kwargs,
) -> RunResult:
    """Run an extraction on the process-wide engine."""
    return get_engine().run_extraction(
        source_root, catalog_base_dir, language_dirs, catalog_file_name,
        patterns, include_comments=include_comments, log=log, **kwargs
    )
