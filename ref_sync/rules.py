"""Classification predicates used by the reconciliation passes.

Each predicate answers one question about a symbol or a reference path and is
backed by the tables in :mod:`ref_sync.tables`.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .tables import (
    ERROR_SUFFIX,
    INTERNAL_NAME_PREFIX,
    INTERNAL_TAG,
    REEXPORT_PACKAGE,
    SOURCE_PACKAGES,
    UMBRELLA_ONLY_CLASSES,
    USER_FACING_SUFFIXES,
)
from .typedoc.models import (
    CALLABLE_MEMBER_KINDS,
    CLASS_LIKE_KINDS,
    TypeDocNode,
    has_block_tag,
)

if typ.TYPE_CHECKING:
    from .spec import DocFunction


def is_public_api(node: TypeDocNode) -> bool:
    """Return True unless the symbol is underscored, non-public or ``@internal``."""
    if node.name.startswith(INTERNAL_NAME_PREFIX):
        return False
    if node.is_protected or node.is_private:
        return False
    return not has_block_tag(node, INTERNAL_TAG)


def is_error_class(name: str) -> bool:
    return name.endswith(ERROR_SUFFIX)


def is_user_facing_class(name: str) -> bool:
    """Return True for entry-point style names such as ``GoTrueClient``."""
    if is_error_class(name):
        return False
    return name.endswith(USER_FACING_SUFFIXES)


def is_class_like(node: TypeDocNode) -> bool:
    return node.kind in CLASS_LIKE_KINDS


def is_callable_member(node: TypeDocNode) -> bool:
    return node.kind in CALLABLE_MEMBER_KINDS


def is_documentable_member(node: TypeDocNode) -> bool:
    """Return True for public methods and constructors."""
    return is_callable_member(node) and is_public_api(node)


def is_documented_reexport(
    path: str, doc_refs: cabc.Mapping[str, DocFunction]
) -> bool:
    """Return True when ``path`` is an umbrella-package copy of a source symbol.

    A symbol under the umbrella package counts as a re-export when the same
    suffix is documented under any source package. Members of classes owned
    only by the umbrella package are never re-exports. Anything else under the
    umbrella package is assumed to be a re-export so a missing source-package
    entry is not reported twice.
    """
    prefix = f"{REEXPORT_PACKAGE}."
    if not path.startswith(prefix):
        return False

    suffix = path.removeprefix(prefix)
    if any(f"{package}.{suffix}" in doc_refs for package in SOURCE_PACKAGES):
        return True

    return not any(suffix.startswith(f"{name}.") for name in UMBRELLA_ONLY_CLASSES)


__all__ = [
    "is_callable_member",
    "is_class_like",
    "is_documentable_member",
    "is_documented_reexport",
    "is_error_class",
    "is_public_api",
    "is_user_facing_class",
]
