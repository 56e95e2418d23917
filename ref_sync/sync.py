"""Pull descriptions and examples from TypeDoc comments into the spec.

Once a symbol carries a doc comment, that comment is the source of truth for
its description, so hand-written ``description`` fields are dropped from the
matching spec entry. ``@example`` blocks are appended to the entry unless the
same code is already present; existing examples are never reordered or
removed.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from ._constants import EXAMPLE_ID_TEMPLATE, EXAMPLE_NAME_TEMPLATE
from .paths import normalize_ref_path, unique_id
from .spec import DocExample
from .tables import CONSTRUCTOR_NAME
from .typedoc import extract_description, extract_examples

if typ.TYPE_CHECKING:
    from .spec import DocFunction, SpecDocument
    from .typedoc import TypeDocNode

_CONSTRUCTOR_SUFFIX = f".{CONSTRUCTOR_NAME}"


@dc.dataclass(slots=True, frozen=True)
class SymbolDetails:
    """The node a spec entry resolves to and its doc-comment summary."""

    node: TypeDocNode
    description: str | None


def resolve_symbol(
    ref: str, full_map: cabc.Mapping[str, TypeDocNode]
) -> SymbolDetails | None:
    """Resolve ``ref`` to a node, falling back from a constructor to its class.

    A constructor without its own comment resolves to the owning class, whose
    comment then supplies both the description and the examples.
    """
    normalized = normalize_ref_path(ref)
    owner = _constructor_owner(normalized, full_map)
    node = full_map.get(normalized)
    if node is None:
        if owner is None:
            return None
        return SymbolDetails(owner, extract_description(owner))

    description = extract_description(node)
    if description:
        return SymbolDetails(node, description)
    if owner is not None:
        return SymbolDetails(owner, extract_description(owner))
    return SymbolDetails(node, None)


def _constructor_owner(
    path: str, full_map: cabc.Mapping[str, TypeDocNode]
) -> TypeDocNode | None:
    if not path.endswith(_CONSTRUCTOR_SUFFIX):
        return None
    return full_map.get(path.removesuffix(_CONSTRUCTOR_SUFFIX))


def sync_descriptions_and_examples(
    document: SpecDocument, full_map: cabc.Mapping[str, TypeDocNode]
) -> bool:
    """Apply doc-comment descriptions and examples to ``document``.

    Returns True when the document was modified. A ``description`` whose text
    already equals the doc comment is kept, which keeps repeated runs stable
    for entries generated from that comment.
    """
    changed = False
    for fn in list(document.functions):
        if not fn.id or not fn.ref:
            continue
        details = resolve_symbol(fn.ref, full_map)
        if details is None or document.node_for(fn.id) is None:
            continue

        if (
            details.description
            and document.has_description(fn)
            and (fn.description or "").strip() != details.description
            and document.remove_description(fn)
        ):
            changed = True

        bodies = extract_examples(details.node)
        if bodies and merge_examples(document, fn, bodies):
            changed = True
    return changed


def merge_examples(
    document: SpecDocument, fn: DocFunction, bodies: cabc.Sequence[str]
) -> bool:
    """Append doc-comment examples whose code ``fn`` does not already show."""
    existing = fn.examples or []
    known_codes = {
        example.code.strip()
        for example in existing
        if example.code and example.code.strip()
    }
    taken_ids = {example.id for example in existing if example.id}

    additions: list[DocExample] = []
    for index, code in enumerate(bodies, start=1):
        trimmed = code.strip()
        if not trimmed or trimmed in known_codes:
            continue
        example_id = unique_id(
            EXAMPLE_ID_TEMPLATE.format(entry_id=fn.id, index=index), taken_ids
        )
        taken_ids.add(example_id)
        known_codes.add(trimmed)
        additions.append(
            DocExample(
                id=example_id,
                name=EXAMPLE_NAME_TEMPLATE.format(
                    index=len(existing) + len(additions) + 1
                ),
                code=code,
            )
        )

    if not additions:
        return False
    document.append_examples(fn, additions)
    return True


__all__ = [
    "SymbolDetails",
    "merge_examples",
    "resolve_symbol",
    "sync_descriptions_and_examples",
]
