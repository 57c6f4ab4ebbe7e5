"""Console report generator."""

from ..core.engine import RunResult
from ..core.reconciler import ChangeSummary
from ..utils.colors import Colors


class ConsoleReporter:
    """Print extraction results to the terminal."""

    CATEGORIES = [
        ('new', '🟢 New'),
        ('missing', '🔴 Missing'),
        ('changed', '🟡 Changed'),
        ('duplicate_format_excluded', '⚪ Excluded (.stringsdict)'),
    ]

    @staticmethod
    def print_full_report(result: RunResult, show_details: bool = False, limit: int = 20):
        """
        Print the run summary and one section per language.

        Args:
            result: Extraction result
            show_details: List the keys in each category
            limit: Maximum keys listed per category
        """
        ConsoleReporter._print_header(result)

        if not result.completed:
            print(f"{Colors.error('❌')} Extraction did not run. See the log above.")
            return

        for summary in result.summaries.values():
            ConsoleReporter._print_language(summary, show_details, limit)

        ConsoleReporter._print_footer(result)

    @staticmethod
    def _print_header(result: RunResult):
        mode = Colors.warning("[DRY RUN]") if result.dry_run else ""
        print("\n" + "=" * 70)
        print(f"{Colors.bold('📊 LOCALIZATION EXTRACTION REPORT')} {mode}")
        print("=" * 70)
        print(f"Source files scanned: {result.source_file_count}")
        print(f"Unique keys extracted: {result.extracted_key_count}")
        print(f"Languages processed: {len(result.summaries)}")

    @staticmethod
    def _print_language(summary: ChangeSummary, show_details: bool, limit: int):
        print(f"\n{Colors.bold('🌍 ' + summary.language)}")
        print("-" * 70)

        if not summary.has_changes and not summary.duplicate_format_excluded:
            print(f"  {Colors.success('✓')} In sync")
            return

        for attr, label in ConsoleReporter.CATEGORIES:
            keys = getattr(summary, attr)
            color = Colors.for_change(attr)
            print(f"  {label}: {color}{len(keys)}{Colors.ENDC}")

            if show_details and keys:
                for key in keys[:limit]:
                    print(f"      {key}")
                if len(keys) > limit:
                    print(f"      ... and {len(keys) - limit} more")

    @staticmethod
    def _print_footer(result: RunResult):
        print("\n" + "=" * 70)
        if result.failures:
            for lang, error in result.failures.items():
                print(f"{Colors.error('❌')} {lang}: {error}")
        elif result.dry_run:
            print(f"{Colors.warning('No files were modified (dry run)')}")
        else:
            print(f"{Colors.success('✅')} Updated {len(result.written)} catalog(s)")
