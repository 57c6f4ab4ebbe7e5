"""
Localization Extractor
======================

Scans Swift sources for localization keys, compares them with each
language's .strings catalog and regenerates the catalogs, keeping
translated values and reporting new, missing and changed keys.

Usage:
    from localization_extractor import ExtractionEngine

    engine = ExtractionEngine()
    result = engine.run_extraction(
        source_root='./App',
        catalog_base_dir='./App/Resources',
        language_dirs=['en.lproj', 'fr.lproj'],
        catalog_file_name='Localizable.strings',
        patterns=[r'NSLocalizedString\\(\\s*"([^"]+)"'],
    )
    print(result.last_summary.new)

CLI:
    localization-extractor init
    localization-extractor extract --detect
    localization-extractor patterns '"key".localized(comment: "c")'
"""

from .__version__ import __version__, __author__, __description__

# Core exports
from .core.engine import ExtractionEngine, ExtractionRequest, RunResult, detect_languages, run_extraction
from .core.reconciler import ChangeSummary, analyze
from .core.extractor import KeyExtractor, ExtractedComment
from .core.catalog import CatalogReader, CatalogWriter
from .core.scanner import SourceScanner

# Framework adapters
from .frameworks.swift import SwiftAdapter
from .frameworks.base import BaseAdapter

# Features
from .features.pattern_generator import PatternGenerator

from .utils.logging import LogStream

__all__ = [
    '__version__',
    '__author__',
    '__description__',
    'ExtractionEngine',
    'ExtractionRequest',
    'RunResult',
    'detect_languages',
    'run_extraction',
    'ChangeSummary',
    'analyze',
    'KeyExtractor',
    'ExtractedComment',
    'CatalogReader',
    'CatalogWriter',
    'SourceScanner',
    'SwiftAdapter',
    'BaseAdapter',
    'PatternGenerator',
    'LogStream',
]
