"""Index the TypeDoc tree by normalized reference path.

Two traversals run over the snapshot. :func:`build_reference_map` registers
every symbol (or only public ones) under its normalized path; keeping both a
public and an unfiltered map lets the validator tell "does not exist" apart
from "exists but is private". :func:`find_documentable_classes` records the
classes whose methods are expected to be documented.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from .paths import is_top_level_export, normalize_ref_path
from .rules import (
    is_class_like,
    is_documentable_member,
    is_error_class,
    is_public_api,
    is_user_facing_class,
)

if typ.TYPE_CHECKING:
    from .spec import DocFunction
    from .typedoc import CombinedSpec, TypeDocNode


@dc.dataclass(slots=True, frozen=True)
class DocumentableClass:
    """A public class or interface that owns public methods.

    Attributes
    ----------
    path : str
        Normalized reference path of the class.
    class_name : str
        Bare class name.
    has_documentation : bool
        Whether any of its members is already referenced from the spec.
    is_user_facing : bool
        Whether undocumented direct methods should be reported as errors.
    """

    path: str
    class_name: str
    has_documentation: bool
    is_user_facing: bool


def _join(ancestors: cabc.Sequence[str], name: str) -> str:
    return ".".join([*ancestors, name])


def build_reference_map(
    spec: CombinedSpec, *, public_only: bool = True
) -> dict[str, TypeDocNode]:
    """Return ``normalized path -> node`` for every symbol in ``spec``.

    With ``public_only`` set, symbols failing :func:`is_public_api` are not
    registered, but their children are still visited.
    """
    references: dict[str, TypeDocNode] = {}

    def visit(node: TypeDocNode, ancestors: tuple[str, ...]) -> None:
        if not public_only or is_public_api(node):
            references[normalize_ref_path(_join(ancestors, node.name))] = node
        lineage = (*ancestors, node.name)
        for child in node.children:
            visit(child, lineage)

    for library in spec.children:
        visit(library, ())
    return references


def find_documentable_classes(
    spec: CombinedSpec, doc_refs: cabc.Mapping[str, DocFunction]
) -> dict[str, DocumentableClass]:
    """Return the documentable classes of ``spec`` keyed by normalized path.

    Error classes are neither recorded nor descended into.
    """
    classes: dict[str, DocumentableClass] = {}

    def visit(node: TypeDocNode, ancestors: tuple[str, ...]) -> None:
        raw_path = _join(ancestors, node.name)
        lineage = (*ancestors, node.name)
        if is_class_like(node) and is_public_api(node):
            if is_error_class(node.name):
                return
            if any(is_documentable_member(child) for child in node.children):
                has_documentation = any(
                    normalize_ref_path(_join(lineage, child.name)) in doc_refs
                    for child in node.children
                )
                path = normalize_ref_path(raw_path)
                classes[path] = DocumentableClass(
                    path=path,
                    class_name=node.name,
                    has_documentation=has_documentation,
                    is_user_facing=(
                        is_user_facing_class(node.name)
                        or is_top_level_export(raw_path)
                        or has_documentation
                    ),
                )
        for child in node.children:
            visit(child, lineage)

    for library in spec.children:
        visit(library, ())
    return classes


__all__ = ["DocumentableClass", "build_reference_map", "find_documentable_classes"]
