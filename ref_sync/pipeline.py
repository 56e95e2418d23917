"""Run one full reference sync: load, reconcile, fix, and persist.

Every run recomputes everything from the two snapshots. Both inputs are
loaded before anything is written, so an unreadable snapshot or spec aborts
the run without leaving a partial report behind.

>>> from ref_sync.config import SyncConfig
>>> from ref_sync.pipeline import ReferenceSyncRunner
>>> result = ReferenceSyncRunner(SyncConfig(fix=True)).run()  # doctest: +SKIP
>>> result.report.summary.total_issues  # doctest: +SKIP
0
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .report import MarkdownSummaryRenderer, write_report
from .sections import sync_client_library_sections
from .spec import SpecDocument
from .stubs import append_stubs, generate_stub_entries
from .sync import sync_descriptions_and_examples
from .typedoc import load_api_snapshot
from .validation import build_report, reconcile

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SyncConfig
    from .validation import ValidationReport


@dc.dataclass(slots=True)
class SyncResult:
    """Outcome of :meth:`ReferenceSyncRunner.run`.

    Attributes
    ----------
    report : ValidationReport
        Issues found by the reconciliation passes.
    library_count : int
        Number of libraries in the API snapshot.
    function_count : int
        Number of entries in the reference spec before stubs were added.
    stubs_appended : int
        Stub entries added when ``fix`` is enabled.
    spec_written : bool
        Whether the reference spec was rewritten.
    written : list[Path]
        Every file written, in order.
    """

    report: ValidationReport
    library_count: int = 0
    function_count: int = 0
    stubs_appended: int = 0
    spec_written: bool = False
    written: list[Path] = dc.field(default_factory=list)


class ReferenceSyncRunner:
    """Drive the reconciliation pipeline for one configuration."""

    def __init__(
        self,
        config: SyncConfig,
        *,
        summary_renderer: MarkdownSummaryRenderer | None = None,
    ) -> None:
        self.config = config
        self._summary_renderer = summary_renderer

    def run(self) -> SyncResult:
        """Execute the pipeline and return what it found and wrote."""
        config = self.config
        snapshot = load_api_snapshot(config.json_path)
        document = SpecDocument.load(config.yaml_path, style=config.yaml_style)

        result = reconcile(snapshot, document.documentation_index())
        sync_descriptions_and_examples(document, result.full_map)
        report = build_report(result)
        outcome = SyncResult(
            report=report,
            library_count=len(snapshot.children),
            function_count=len(document.functions),
        )

        outcome.written.append(write_report(report, config.report_path))
        if config.summary_path is not None:
            renderer = self._summary_renderer or MarkdownSummaryRenderer()
            outcome.written.append(
                renderer.write(report, config.summary_path, strict=config.strict)
            )

        if config.fix and result.missing_documentation:
            stubs = generate_stub_entries(result.missing_documentation, result.full_map)
            outcome.stubs_appended = append_stubs(document, stubs)

        if document.changed:
            document.save(config.yaml_path)
            outcome.spec_written = True
            outcome.written.append(config.yaml_path)

        sections_path = config.resolved_sections_path
        sync_client_library_sections(document.functions, sections_path)
        outcome.written.append(sections_path)
        return outcome


__all__ = ["ReferenceSyncRunner", "SyncResult"]
