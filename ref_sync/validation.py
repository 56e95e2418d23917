"""Reconcile the reference spec against the TypeDoc snapshot.

Three independent passes produce the issue list:

* broken references: spec ``$ref`` values with no symbol in the snapshot;
* missing documentation: public, non-inherited methods and constructors of
  documentable classes that no spec entry references;
* private API exposure: spec references that resolve only to non-public
  symbols.

:func:`reconcile` runs all three and returns them alongside the indices they
were computed from, so later stages (stub generation, the description sync)
reuse the same lookups.

Examples
--------
>>> from ref_sync.typedoc import CombinedSpec
>>> result = reconcile(CombinedSpec(name="empty"), {})
>>> result.issues
[]
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import datetime as dt
import enum
import typing as typ

import msgspec

from .indexer import DocumentableClass, build_reference_map, find_documentable_classes
from .paths import is_internal_implementation, split_ref_path
from .rules import is_callable_member, is_documented_reexport
from .typedoc import kind_label

if typ.TYPE_CHECKING:
    from .spec import DocFunction
    from .typedoc import CombinedSpec, TypeDocNode


class IssueKind(enum.StrEnum):
    BROKEN_REFERENCE = "broken-reference"
    MISSING_DOCUMENTATION = "missing-documentation"
    PRIVATE_API_EXPOSED = "private-api-exposed"


class Severity(enum.StrEnum):
    ERROR = "error"
    WARNING = "warning"


class ValidationIssue(msgspec.Struct, frozen=True, omit_defaults=True):
    """One finding of the reconciliation passes."""

    type: IssueKind
    severity: Severity
    message: str
    ref: str | None = None
    path: str | None = None
    location: str | None = None

    @property
    def target(self) -> str:
        """Return the offending reference or symbol path."""
        return self.ref or self.path or ""


class ReportSummary(msgspec.Struct, frozen=True):
    total_issues: int
    broken_references: int
    missing_documentation: int
    private_apis_exposed: int


class ValidationReport(msgspec.Struct, frozen=True):
    """Serializable result of a validation run."""

    timestamp: str
    summary: ReportSummary
    issues: list[ValidationIssue]

    @property
    def has_errors(self) -> bool:
        return any(issue.severity is Severity.ERROR for issue in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(issue.severity is Severity.WARNING for issue in self.issues)


@dc.dataclass(slots=True)
class Reconciliation:
    """Indices and issue streams produced by :func:`reconcile`."""

    public_map: dict[str, TypeDocNode]
    full_map: dict[str, TypeDocNode]
    doc_refs: dict[str, DocFunction]
    broken_references: list[ValidationIssue]
    missing_documentation: list[ValidationIssue]
    private_exposures: list[ValidationIssue]

    @property
    def issues(self) -> list[ValidationIssue]:
        return [
            *self.broken_references,
            *self.missing_documentation,
            *self.private_exposures,
        ]


def validate_broken_references(
    doc_refs: cabc.Mapping[str, DocFunction],
    full_map: cabc.Mapping[str, TypeDocNode],
) -> list[ValidationIssue]:
    """Report documented references that do not resolve to any symbol."""
    issues: list[ValidationIssue] = []
    for ref, fn in doc_refs.items():
        if ref in full_map:
            continue
        issues.append(
            ValidationIssue(
                type=IssueKind.BROKEN_REFERENCE,
                severity=Severity.ERROR,
                ref=ref,
                message=(
                    f"Reference '{ref}' in YAML (id: '{fn.id}') does not exist in "
                    "the API snapshot. This API may have been removed."
                ),
                location=f'functions[id="{fn.id}"]',
            )
        )
    return issues


def validate_missing_documentation(
    public_map: cabc.Mapping[str, TypeDocNode],
    doc_refs: cabc.Mapping[str, DocFunction],
    documentable_classes: cabc.Mapping[str, DocumentableClass],
) -> list[ValidationIssue]:
    """Report public methods and constructors no spec entry documents."""
    issues: list[ValidationIssue] = []
    for path, node in public_map.items():
        if path in doc_refs:
            continue
        if is_documented_reexport(path, doc_refs):
            continue
        if is_internal_implementation(path):
            continue
        if not is_callable_member(node) or node.is_inherited:
            continue

        owner = _nearest_documentable_class(path, documentable_classes)
        if owner is None:
            continue

        depth = len(split_ref_path(path)) - len(split_ref_path(owner.path))
        severity = (
            Severity.ERROR if owner.is_user_facing and depth == 1 else Severity.WARNING
        )
        issues.append(
            ValidationIssue(
                type=IssueKind.MISSING_DOCUMENTATION,
                severity=severity,
                path=path,
                message=(
                    f"Public API '{path}' (kind: {kind_label(node.kind)}) exists in "
                    "the API snapshot but is not documented in YAML."
                ),
            )
        )
    return issues


def _nearest_documentable_class(
    path: str, documentable_classes: cabc.Mapping[str, DocumentableClass]
) -> DocumentableClass | None:
    parts = split_ref_path(path)
    for end in range(len(parts) - 1, 1, -1):
        owner = documentable_classes.get(".".join(parts[:end]))
        if owner is not None:
            return owner
    return None


def validate_private_exposure(
    doc_refs: cabc.Mapping[str, DocFunction],
    public_map: cabc.Mapping[str, TypeDocNode],
    full_map: cabc.Mapping[str, TypeDocNode],
) -> list[ValidationIssue]:
    """Report documented references that resolve only to non-public symbols."""
    return [
        ValidationIssue(
            type=IssueKind.PRIVATE_API_EXPOSED,
            severity=Severity.WARNING,
            ref=ref,
            message=(
                f"Reference '{ref}' is documented in YAML but appears to be a "
                "private/internal API."
            ),
        )
        for ref in doc_refs
        if ref not in public_map and ref in full_map
    ]


def reconcile(
    spec: CombinedSpec, doc_refs: cabc.Mapping[str, DocFunction]
) -> Reconciliation:
    """Index ``spec`` and run the three validation passes against ``doc_refs``."""
    public_map = build_reference_map(spec, public_only=True)
    full_map = build_reference_map(spec, public_only=False)
    documentable_classes = find_documentable_classes(spec, doc_refs)
    return Reconciliation(
        public_map=public_map,
        full_map=full_map,
        doc_refs=dict(doc_refs),
        broken_references=validate_broken_references(doc_refs, full_map),
        missing_documentation=validate_missing_documentation(
            public_map, doc_refs, documentable_classes
        ),
        private_exposures=validate_private_exposure(doc_refs, public_map, full_map),
    )


def build_report(
    result: Reconciliation, *, now: dt.datetime | None = None
) -> ValidationReport:
    """Summarize ``result`` into a timestamped report."""
    moment = (now or dt.datetime.now(dt.UTC)).astimezone(dt.UTC)
    timestamp = moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    issues = result.issues
    return ValidationReport(
        timestamp=timestamp,
        summary=ReportSummary(
            total_issues=len(issues),
            broken_references=len(result.broken_references),
            missing_documentation=len(result.missing_documentation),
            private_apis_exposed=len(result.private_exposures),
        ),
        issues=issues,
    )


__all__ = [
    "IssueKind",
    "Reconciliation",
    "ReportSummary",
    "Severity",
    "ValidationIssue",
    "ValidationReport",
    "build_report",
    "reconcile",
    "validate_broken_references",
    "validate_missing_documentation",
    "validate_private_exposure",
]
