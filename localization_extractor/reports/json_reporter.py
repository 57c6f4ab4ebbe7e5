"""JSON and Markdown report generator."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..__version__ import __version__
from ..core.engine import RunResult
from ..utils.logging import get_logger

logger = get_logger().get_logger('reports')


class JSONReporter:
    """Export extraction results as JSON or Markdown."""

    @staticmethod
    def build(result: RunResult) -> Dict[str, Any]:
        """Build the report structure for a run."""
        return {
            'metadata': {
                'generated_at': datetime.now().isoformat(),
                'version': __version__,
                'finished_at': result.finished_at.isoformat() if result.finished_at else None,
                'dry_run': result.dry_run,
                'completed': result.completed,
            },
            'summary': {
                'source_files': result.source_file_count,
                'extracted_keys': result.extracted_key_count,
                'languages': len(result.summaries),
                'written': len(result.written),
                'failures': len(result.failures),
            },
            'languages': [summary.to_dict() for summary in result.summaries.values()],
            'written': {lang: str(path) for lang, path in result.written.items()},
            'failures': dict(result.failures),
        }

    @staticmethod
    def generate(
        result: RunResult,
        output_path: Optional[Path] = None,
        pretty: bool = True
    ) -> Path:
        """
        Write a JSON report.

        Args:
            result: Extraction result
            output_path: Output file path
            pretty: Pretty print JSON

        Returns:
            Path to generated report
        """
        if output_path is None:
            output_path = Path.cwd() / 'localization_extraction.json'

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(
                JSONReporter.build(result),
                f,
                indent=2 if pretty else None,
                ensure_ascii=False
            )

        logger.info(f"JSON report saved: {output_path}")
        return output_path

    @staticmethod
    def generate_markdown(result: RunResult, output_path: Path, limit: int = 50) -> Path:
        """Write a Markdown report with one section per language."""
        lines = [
            "# Localization Extraction Report",
            "",
            f"**Generated:** {datetime.now().isoformat(timespec='seconds')}",
            f"**Dry Run:** {result.dry_run}",
            "",
            "## Summary",
            "",
            "| Language | New | Missing | Changed | Excluded |",
            "|----------|-----|---------|---------|----------|",
        ]

        for summary in result.summaries.values():
            lines.append(
                f"| {summary.language} | {len(summary.new)} | {len(summary.missing)} "
                f"| {len(summary.changed)} | {len(summary.duplicate_format_excluded)} |"
            )
        lines.append("")

        for summary in result.summaries.values():
            if not summary.has_changes:
                continue
            lines.extend([f"## {summary.language}", ""])
            for title, keys in (
                ("New", summary.new),
                ("Missing", summary.missing),
                ("Changed", summary.changed),
            ):
                if not keys:
                    continue
                lines.append(f"**{title}:**")
                for key in keys[:limit]:
                    lines.append(f"- `{key}`")
                if len(keys) > limit:
                    lines.append(f"- ... and {len(keys) - limit} more")
                lines.append("")

        if result.failures:
            lines.extend(["## Failures", ""])
            for lang, error in result.failures.items():
                lines.append(f"- {lang}: {error}")
            lines.append("")

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text('\n'.join(lines), encoding='utf-8')

        logger.info(f"Markdown report saved: {output_path}")
        return output_path
