"""
ReportGenerator - Write exploration reports in multiple formats.

Produces JSON, Markdown and a plain-text summary from an ExplorationResult.
"""

from pathlib import Path
from typing import Dict, List, Optional
import json
import logging

from ..core.classifier import PathKind
from .engine import ExplorationResult
from .summary import PathCondition, describe_paths

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Generate exploration reports in multiple formats."""

    def __init__(self, output_dir: str):
        """
        Initialize the report generator.

        Args:
            output_dir: Directory to save reports (created if missing)
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def _stem(self, result: ExplorationResult) -> str:
        safe_timestamp = result.timestamp.replace(":", "-").replace(".", "-")
        return f"explore_{safe_timestamp}"

    def generate_all(self, result: ExplorationResult) -> Dict[str, Path]:
        """
        Generate all report formats.

        Returns:
            Dict with paths to generated files, keyed by format
        """
        return {
            "json": self.generate_json(result),
            "markdown": self.generate_markdown(result),
            "summary": self.generate_summary(result),
        }

    def generate_json(self, result: ExplorationResult) -> Path:
        """Export the complete result, with path conditions, as JSON."""
        output_path = self.output_dir / f"{self._stem(result)}.json"

        report_dict = result.to_dict()
        report_dict["path_conditions"] = [
            c.to_dict() for c in describe_paths(signed=result.config.signed)
        ]

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report_dict, f, indent=2, ensure_ascii=False)

        logger.info(f"JSON report saved to {output_path}")
        return output_path

    def generate_markdown(
        self,
        result: ExplorationResult,
        conditions: Optional[List[PathCondition]] = None,
    ) -> Path:
        """Generate a detailed markdown report."""
        output_path = self.output_dir / f"{self._stem(result)}.md"
        if conditions is None:
            conditions = describe_paths(signed=result.config.signed)
        config = result.config

        lines = [
            "# Exploration Report",
            "",
            f"**Timestamp:** {result.timestamp}",
            f"**Strategy:** {config.strategy}",
            f"**Config hash:** `{result.config_hash[:12]}`",
            f"**Overall Result:** {'PASSED' if result.passed else 'FAILED'}",
            "",
            "## Summary",
            "",
            "| Metric | Value |",
            "|--------|-------|",
            f"| Inputs explored | {result.inputs_explored} / {result.space_size} |",
            f"| Flagged (exit 0) | {result.flagged} |",
            f"| Discrepancies | {len(result.discrepancies)} |",
            f"| Elapsed | {result.elapsed_seconds:.2f}s |",
            f"| Truncated | {result.truncation_reason or 'no'} |",
            "",
            "## Paths",
            "",
            "| Path | Inputs | Flagged | Observed sums | Witness |",
            "|------|--------|---------|---------------|---------|",
        ]

        for kind in PathKind:
            stats = result.paths[kind]
            sums = _format_ranges(stats.observed_sums.to_list()) if stats.observed_sums.ranges else "-"
            witness = stats.to_dict()["witness"]
            lines.append(
                f"| {kind.value} | {stats.count} | {stats.flagged} | {sums} | "
                f"{'`' + witness + '`' if witness is not None else '-'} |"
            )
        lines.append("")

        lines.extend(["## Path Conditions", ""])
        for condition in conditions:
            lines.append(
                f"- **{condition.path.value}** (exit {condition.exit_code}): `{condition.render()}`"
            )
        lines.append("")

        if result.missed_paths:
            lines.extend(["## Paths Not Reached", ""])
            for kind in result.missed_paths:
                lines.append(f"- {kind.value}")
            lines.append("")

        if result.discrepancies:
            lines.extend(["## Discrepancies", ""])
            for d in result.discrepancies:
                lines.append(
                    f"- `{d.buffer.hex()}`: exit {d.exit_code} via {d.path.value}, "
                    f"expected exit {d.expected_exit_code} via {d.expected_path.value}"
                )
            lines.append("")

        with open(output_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines))

        logger.info(f"Markdown report saved to {output_path}")
        return output_path

    def generate_summary(self, result: ExplorationResult) -> Path:
        """Generate a short plain-text summary."""
        output_path = self.output_dir / f"{self._stem(result)}_summary.txt"
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(format_summary(result))

        logger.info(f"Summary saved to {output_path}")
        return output_path


def _format_ranges(ranges: List[List[int]]) -> str:
    return ", ".join(f"{a}" if a == b else f"{a}..{b}" for a, b in ranges)


def format_summary(result: ExplorationResult) -> str:
    """Plain-text summary, also printed by the CLI."""
    lines = [
        "=" * 60,
        "EXPLORATION COMPLETE",
        "=" * 60,
        f"Strategy: {result.config.strategy}",
        f"Result: {'PASSED' if result.passed else 'FAILED'}",
        f"Inputs explored: {result.inputs_explored} / {result.space_size}",
        f"Flagged (exit 0): {result.flagged}",
        f"Discrepancies: {len(result.discrepancies)}",
    ]
    if result.truncated:
        lines.append(f"Truncated: {result.truncation_reason}")
    for kind in PathKind:
        lines.append(f"  {kind.value:<24}{result.paths[kind].count}")
    lines.append("=" * 60)
    return "\n".join(lines) + "\n"
