"""Output formatters for run reports."""

from __future__ import annotations

import json
from pathlib import Path

from rich.table import Table

from localetranslator.reporting.report import LanguageState, RunReport

_STATE_STYLES = {
    LanguageState.persisted: "green",
    LanguageState.unchanged: "dim",
    LanguageState.skipped: "yellow",
    LanguageState.failed: "red",
}


def to_json(report: RunReport, indent: int = 2) -> str:
    """Format report as JSON string."""
    return json.dumps(report.to_dict(), indent=indent, default=str)


def to_markdown(report: RunReport) -> str:
    """Format report as Markdown."""
    ceiling = "unlimited" if report.quota_ceiling == float("inf") else f"{report.quota_ceiling:g}"
    lines = [
        "# Translation Report",
        "",
        "| Field | Value |",
        "|-------|-------|",
        f"| Source language | {report.source_lang} |",
        f"| Backend | {report.backend} |",
        f"| Quota used | {report.quota_consumed} / {ceiling} |",
        f"| Duration | {report.duration_seconds:.1f}s |",
        "",
        "## Languages",
        "",
        "| Language | State | Translated | Kept | Removed | Characters | File |",
        "|----------|-------|------------|------|---------|------------|------|",
    ]
    for lr in report.languages:
        lines.append(
            f"| {lr.lang} | {lr.state.value} | {lr.strings_translated} | {lr.strings_kept} "
            f"| {lr.keys_removed} | {lr.characters_sent} | `{lr.file_path}` |"
        )

    errors = [lr for lr in report.languages if lr.error]
    if errors:
        lines.extend(["", "## Errors", ""])
        for lr in errors:
            lines.append(f"- {lr.lang}: {lr.error}")

    return "\n".join(lines) + "\n"


def to_table(report: RunReport) -> Table:
    """Build a rich Table with one row per language."""
    table = Table(title=f"Translations from {report.source_lang} ({report.backend})")
    table.add_column("Language", style="cyan")
    table.add_column("State")
    table.add_column("Translated", justify="right")
    table.add_column("Kept", justify="right")
    table.add_column("Removed", justify="right")
    table.add_column("Characters", justify="right")

    for lr in report.languages:
        style = _STATE_STYLES.get(lr.state, "")
        state = f"[{style}]{lr.state.value}[/{style}]" if style else lr.state.value
        table.add_row(
            lr.lang,
            state,
            str(lr.strings_translated),
            str(lr.strings_kept),
            str(lr.keys_removed),
            str(lr.characters_sent),
        )
    return table


def save_report(report: RunReport, path: str | Path) -> None:
    """Save report to file, auto-detecting format from extension."""
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in (".md", ".markdown"):
        content = to_markdown(report)
    else:
        content = to_json(report)

    path.write_text(content, encoding="utf-8")
