"""Persist and present a :class:`~ref_sync.validation.ValidationReport`.

The JSON report is the machine-readable artifact CI keeps; the Markdown
summary is rendered from ``templates/summary.md.jinja`` for job summaries, and
:func:`summary_lines` produces the console output printed by the CLI.
"""

from __future__ import annotations

import collections.abc as cabc
import enum
import typing as typ
from pathlib import Path

import msgspec
from jinja2 import Environment, FileSystemLoader

from .validation import IssueKind, Severity

if typ.TYPE_CHECKING:
    from .validation import ValidationIssue, ValidationReport

PREVIEW_LIMIT = 5
RULE = "=" * 60


class Verdict(enum.StrEnum):
    FAILED = "Validation FAILED"
    PASSED_WITH_WARNINGS = "Validation passed with warnings"
    PASSED = "Validation PASSED"


def is_failure(report: ValidationReport, *, strict: bool) -> bool:
    return report.has_errors or (strict and report.has_warnings)


def exit_code(report: ValidationReport, *, strict: bool) -> int:
    """Return 1 for errors (or warnings under ``strict``), else 0."""
    return 1 if is_failure(report, strict=strict) else 0


def verdict(report: ValidationReport, *, strict: bool) -> Verdict:
    if is_failure(report, strict=strict):
        return Verdict.FAILED
    if report.has_warnings:
        return Verdict.PASSED_WITH_WARNINGS
    return Verdict.PASSED


def encode_report(report: ValidationReport) -> bytes:
    return msgspec.json.format(msgspec.json.encode(report), indent=2)


def write_report(report: ValidationReport, path: Path) -> Path:
    """Write the JSON report to ``path`` and return it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_report(report))
    return path


def group_issues(
    issues: cabc.Iterable[ValidationIssue],
) -> dict[IssueKind, list[ValidationIssue]]:
    """Group issues by kind, keeping first-seen kind order."""
    grouped: dict[IssueKind, list[ValidationIssue]] = {}
    for issue in issues:
        grouped.setdefault(issue.type, []).append(issue)
    return grouped


def summary_lines(report: ValidationReport, *, strict: bool) -> list[str]:
    """Return the console summary, previewing a few issues of each kind."""
    summary = report.summary
    lines = [
        RULE,
        "VALIDATION SUMMARY",
        RULE,
        f"Total issues: {summary.total_issues}",
        f"  Broken references: {summary.broken_references}",
        f"  Missing documentation: {summary.missing_documentation}",
        f"  Private APIs exposed: {summary.private_apis_exposed}",
    ]
    for kind, issues in group_issues(report.issues).items():
        lines.append(f"{kind.upper()}:")
        for issue in issues[:PREVIEW_LIMIT]:
            marker = "x" if issue.severity is Severity.ERROR else "!"
            lines.append(f"  [{marker}] {issue.message}")
        if len(issues) > PREVIEW_LIMIT:
            lines.append(f"  ... and {len(issues) - PREVIEW_LIMIT} more")
    lines.extend([RULE, verdict(report, strict=strict).value])
    return lines


class MarkdownSummaryRenderer:
    """Render a report into Markdown using a Jinja template."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,  # noqa: S701 - renders Markdown, not HTML
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template("summary.md.jinja")

    def render(self, report: ValidationReport, *, strict: bool) -> str:
        return self.template.render(
            report=report,
            groups=group_issues(report.issues),
            verdict=verdict(report, strict=strict).value,
            strict=strict,
            error=Severity.ERROR,
        )

    def write(self, report: ValidationReport, path: Path, *, strict: bool) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(report, strict=strict), encoding="utf-8")
        return path


__all__ = [
    "MarkdownSummaryRenderer",
    "Verdict",
    "encode_report",
    "exit_code",
    "group_issues",
    "is_failure",
    "summary_lines",
    "verdict",
    "write_report",
]
