"""Core extraction modules."""

from .scanner import SourceScanner
from .extractor import ExtractedComment, KeyExtractor, extract_keys, extract_keys_with_comments
from .catalog import CatalogReader, CatalogWriter
from .reconciler import ChangeSummary, analyze
from .engine import (
    ExtractionEngine,
    ExtractionRequest,
    RunResult,
    detect_languages,
    get_engine,
    run_extraction,
)

__all__ = [
    'SourceScanner',
    'ExtractedComment',
    'KeyExtractor',
    'extract_keys',
    'extract_keys_with_comments',
    'CatalogReader',
    'CatalogWriter',
    'ChangeSummary',
    'analyze',
    'ExtractionEngine',
    'ExtractionRequest',
    'RunResult',
    'detect_languages',
    'get_engine',
    'run_extraction',
]
