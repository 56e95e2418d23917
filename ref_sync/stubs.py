"""Generate placeholder spec entries for undocumented methods.

Stubs are produced only for error-severity missing-documentation issues. Each
stub borrows whatever the TypeDoc comment offers (summary text and
``@example`` blocks) and is appended to the end of the spec's ``functions``
list under a collision-free id. Symbols resolve through
:func:`~ref_sync.sync.resolve_symbol`, so an uncommented constructor takes its
class comment exactly as the description sync would on the next run.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ._constants import (
    EXAMPLE_NAME_TEMPLATE,
    PLACEHOLDER_DESCRIPTION,
    STUB_EXAMPLE_ID_TEMPLATE,
)
from .paths import create_stub_id, split_ref_path, unique_id
from .spec import DocExample, DocFunction
from .sync import resolve_symbol
from .tables import CONSTRUCTOR_NAME
from .typedoc import extract_examples
from .validation import IssueKind, Severity

if typ.TYPE_CHECKING:
    from .spec import SpecDocument
    from .typedoc import TypeDocNode
    from .validation import ValidationIssue


def stub_title(path: str) -> str:
    """Return ``new Class()`` for constructors, ``Class.method()`` otherwise."""
    parts = split_ref_path(path)
    member = parts[-1]
    owner = parts[-2] if len(parts) > 1 else member
    if member == CONSTRUCTOR_NAME:
        return f"new {owner}()"
    return f"{owner}.{member}()"


def generate_stub_entries(
    issues: cabc.Iterable[ValidationIssue],
    reference_map: cabc.Mapping[str, TypeDocNode],
) -> list[DocFunction]:
    """Draft one spec entry per error-severity missing-documentation issue.

    ``reference_map`` should be the same map the description sync resolves
    against, so the drafted text and examples survive the next sync untouched.
    """
    stubs: list[DocFunction] = []
    for issue in issues:
        if issue.type is not IssueKind.MISSING_DOCUMENTATION:
            continue
        if issue.severity is not Severity.ERROR or not issue.path:
            continue
        stubs.append(_build_stub(issue.path, reference_map))
    return stubs


def _build_stub(
    path: str, reference_map: cabc.Mapping[str, TypeDocNode]
) -> DocFunction:
    member = split_ref_path(path)[-1]
    stub_id = create_stub_id(path)
    details = resolve_symbol(path, reference_map)
    description = details.description if details is not None else None
    bodies = extract_examples(details.node) if details is not None else []
    examples = [
        DocExample(
            id=STUB_EXAMPLE_ID_TEMPLATE.format(stub_id=stub_id, index=index),
            name=EXAMPLE_NAME_TEMPLATE.format(index=index),
            code=code,
        )
        for index, code in enumerate(bodies, start=1)
    ]
    return DocFunction(
        id=stub_id,
        title=stub_title(path),
        ref=path,
        description=description or PLACEHOLDER_DESCRIPTION.format(member=member),
        examples=examples or None,
    )


def append_stubs(document: SpecDocument, stubs: cabc.Iterable[DocFunction]) -> int:
    """Append ``stubs`` to ``document`` under unique ids; return the count."""
    taken = document.existing_ids()
    appended = 0
    for stub in stubs:
        stub.id = unique_id(stub.id, taken)
        taken.add(stub.id)
        document.append_function(stub)
        appended += 1
    return appended


__all__ = ["append_stubs", "generate_stub_entries", "stub_title"]
