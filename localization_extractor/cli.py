"""Command-line interface for localization extractor."""

import sys
import argparse
from pathlib import Path

from .__version__ import __version__
from .utils.colors import Colors
from .utils.config import Config, create_default_config, ConfigValidationError, CONFIG_FILE_NAME
from .utils.logging import LogStream, configure_logging, get_logger
from .frameworks.swift import SwiftAdapter
from .features.pattern_generator import PatternGenerator
from .core.engine import ExtractionEngine, ExtractionRequest, detect_languages
from .reports.console_reporter import ConsoleReporter
from .reports.json_reporter import JSONReporter


def load_and_validate_config(validate: bool = True, verbose: bool = False) -> Config:
    """
    Load configuration and optionally validate it.

    Args:
        validate: Whether to validate the config
        verbose: Whether to print warnings

    Returns:
        Loaded Config object

    Raises:
        ConfigValidationError: If validation fails with errors
    """
    config = Config.from_file()

    if validate:
        errors, warnings = config.validate()

        if verbose and warnings:
            for warning in warnings:
                print(f"{Colors.warning('⚠️')}  Config warning: {warning}")

        if errors:
            print(f"{Colors.error('❌')} Configuration errors:")
            for error in errors:
                print(f"   • {error}")
            raise ConfigValidationError(errors)

    return config


def resolve_patterns(config: Config, adapter: SwiftAdapter, args=None) -> list:
    """
    Pick the extraction patterns: explicit regexes, then a usage example,
    then the adapter defaults.
    """
    cli_patterns = getattr(args, 'pattern', None) or []
    cli_example = getattr(args, 'example', None)

    if cli_patterns:
        return list(cli_patterns)
    if cli_example:
        return PatternGenerator.generate_or_default(cli_example, adapter.get_default_patterns())
    if config.patterns.regex:
        return list(config.patterns.regex)
    if config.patterns.example:
        return PatternGenerator.generate_or_default(config.patterns.example, adapter.get_default_patterns())
    return adapter.get_default_patterns()


def cmd_init(args):
    """Initialize configuration file."""
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not args.force:
        print(f"{Colors.error('❌')} Config already exists: {config_path}")
        print(f"   Use --force to overwrite")
        return 1

    config = create_default_config()
    config.save(config_path)

    print(f"{Colors.success('✅')} Created: {config_path}")
    print(f"\n{Colors.bold('Next steps:')}")
    print(f"1. Edit {CONFIG_FILE_NAME} to point at your sources and .lproj folders")
    print(f"2. Run: localization-extractor extract")

    return 0


def cmd_extract(args):
    """Extract keys and regenerate catalogs."""
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = load_and_validate_config(validate=True, verbose=args.verbose)
    except ConfigValidationError:
        return 1

    adapter = SwiftAdapter()

    source_root = args.source or config.paths.source
    localization_dir = args.localization or config.paths.localization

    if args.lang:
        language_dirs = list(args.lang)
    elif args.detect or config.languages.auto_detect:
        language_dirs = detect_languages(localization_dir, adapter.get_language_dir_suffix())
        print(f"{Colors.info('🔍')} Detected languages: {', '.join(language_dirs) or 'none'}")
    else:
        language_dirs = list(config.languages.directories)

    patterns = resolve_patterns(config, adapter, args)

    request = ExtractionRequest(
        source_root=source_root,
        catalog_base_dir=localization_dir,
        language_dirs=language_dirs,
        catalog_file_name=args.file_name or config.catalog.file_name,
        patterns=patterns,
        include_comments=config.catalog.include_comments and not args.no_comments,
        dry_run=args.dry_run,
        backup=args.backup or config.catalog.backup,
        exclude_dirs=config.paths.exclude,
    )

    engine = ExtractionEngine(
        adapter=adapter,
        use_threads=not args.no_threads,
        show_progress=not args.quiet,
    )
    result = engine.run(request, LogStream(logger=get_logger().get_logger('run')))

    if 'console' in config.reports.formats or args.verbose:
        ConsoleReporter.print_full_report(result, show_details=args.verbose)

    if args.json or 'json' in config.reports.formats:
        output = Path(args.json) if args.json else Path(config.reports.output) / 'extraction.json'
        JSONReporter.generate(result, output)

    if args.markdown or 'markdown' in config.reports.formats:
        output = Path(args.markdown) if args.markdown else Path(config.reports.output) / 'extraction.md'
        JSONReporter.generate_markdown(result, output)

    if not result.completed or result.has_failures:
        return 1

    return 0


def cmd_detect(args):
    """List language directories."""
    config = Config.from_file()
    adapter = SwiftAdapter()
    localization_dir = args.localization or config.paths.localization

    languages = detect_languages(localization_dir, adapter.get_language_dir_suffix())

    print(f"\n{Colors.bold('🌍 LANGUAGE DIRECTORIES')}")
    print("=" * 70)
    print(f"Localization base: {localization_dir}")
    print()

    if not languages:
        print(f"{Colors.warning('⚠️')}  No {adapter.get_language_dir_suffix()} directories found")
        return 1

    for name in languages:
        print(f"  {Colors.success('✓')} {name}")

    return 0


def cmd_patterns(args):
    """Print the patterns generated from a usage example."""
    patterns = PatternGenerator.generate_patterns(args.example)

    if not patterns:
        print(f"{Colors.warning('⚠️')}  Could not auto-detect localization format from example.")
        print(f"   Default patterns will be used:")
        for pattern in SwiftAdapter().get_default_patterns():
            print(f"   {pattern}")
        return 1

    print(f"\n{Colors.bold('🔎 GENERATED PATTERNS')}")
    print("=" * 70)
    for pattern in patterns:
        print(pattern)

    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='localization-extractor',
        description='Extract localization keys from Swift sources and regenerate .strings catalogs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # init command
    init_parser = subparsers.add_parser('init', help='Initialize configuration file')
    init_parser.add_argument('--force', action='store_true', help='Overwrite existing config')

    # extract command
    extract_parser = subparsers.add_parser('extract', help='Extract keys and regenerate catalogs')
    extract_parser.add_argument('--source', metavar='PATH', help='Source root (default: paths.source)')
    extract_parser.add_argument('--localization', metavar='PATH',
                                help='Localization base directory (default: paths.localization)')
    extract_parser.add_argument('--lang', metavar='DIR', action='append',
                                help='Language directory, repeatable (e.g., --lang en.lproj)')
    extract_parser.add_argument('--detect', action='store_true',
                                help='Use every .lproj directory under the localization base')
    extract_parser.add_argument('--file-name', metavar='NAME',
                                help='Catalog file name (default: catalog.file_name)')
    extract_parser.add_argument('--pattern', metavar='REGEX', action='append',
                                help='Extraction regex, repeatable (group 1 = key, group 2 = comment)')
    extract_parser.add_argument('--example', metavar='TEXT',
                                help='Usage example to generate patterns from')
    extract_parser.add_argument('--no-comments', action='store_true', help='Do not write comments')
    extract_parser.add_argument('--dry-run', action='store_true', help='Preview only')
    extract_parser.add_argument('--backup', action='store_true', help='Back up catalogs before writing')
    extract_parser.add_argument('--json', metavar='PATH', help='Export JSON report')
    extract_parser.add_argument('--markdown', metavar='PATH', help='Export Markdown report')
    extract_parser.add_argument('--verbose', '-v', action='store_true', help='Show detailed output')
    extract_parser.add_argument('--quiet', '-q', action='store_true', help='Minimal output')
    extract_parser.add_argument('--no-threads', action='store_true', help='Disable multi-threading')

    # detect command
    detect_parser = subparsers.add_parser('detect', help='List language directories')
    detect_parser.add_argument('--localization', metavar='PATH', help='Localization base directory')

    # patterns command
    patterns_parser = subparsers.add_parser('patterns', help='Generate patterns from a usage example')
    patterns_parser.add_argument('example', help='e.g. \'NSLocalizedString("key", comment: "c")\'')

    args = parser.parse_args()

    if args.command == 'init':
        return cmd_init(args)
    elif args.command == 'extract':
        return cmd_extract(args)
    elif args.command == 'detect':
        return cmd_detect(args)
    elif args.command == 'patterns':
        return cmd_patterns(args)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
