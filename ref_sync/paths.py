"""Canonical dotted reference paths.

TypeDoc builds symbol paths from the module tree, so barrel files surface as
``index`` segments (``@supabase/auth-js.index.GoTrueClient``) while the YAML
spec references the same symbol without them. Every path comparison in the
tool goes through :func:`normalize_ref_path` first.

Examples
--------
>>> normalize_ref_path("@supabase/auth-js.index.GoTrueClient.signUp")
'@supabase/auth-js.GoTrueClient.signUp'
>>> is_top_level_export("@supabase/auth-js.GoTrueClient")
True
>>> create_stub_id("@supabase/auth-js.GoTrueClient.signUp")
'auth-js-gotrueclient-signup'
"""

from __future__ import annotations

import collections.abc as cabc
import re

from .tables import (
    DEFAULT_EXPORT_MARKER,
    INDEX_SEGMENT,
    MODULE_SEPARATOR,
    PACKAGE_SCOPE,
)

_INDEX_SEGMENT_PATTERN = re.compile(rf"\.{INDEX_SEGMENT}(?=\.|$)")
_REPEATED_DOTS = re.compile(r"\.\.+")
_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]+")
_REPEATED_DASHES = re.compile(r"-+")


def normalize_ref_path(path: str | None) -> str:
    """Return ``path`` with barrel-file ``index`` segments removed.

    ``None`` and the empty string both normalize to ``""``. The function is
    idempotent.
    """
    if not path:
        return ""
    normalized = _INDEX_SEGMENT_PATTERN.sub("", path)
    return _REPEATED_DOTS.sub(".", normalized)


def split_ref_path(path: str) -> list[str]:
    """Return the dot-separated segments of ``path``."""
    return path.split(".")


def is_top_level_export(path: str) -> bool:
    """Return True for ``pkg.Name`` or ``pkg.index.Name`` paths."""
    parts = split_ref_path(path)
    return len(parts) == 2 or (len(parts) == 3 and parts[1] == INDEX_SEGMENT)


def is_internal_implementation(path: str) -> bool:
    """Return True when ``path`` points into a module's private structure.

    Default-export wrappers (``Foo.default.bar``) and sub-module qualified
    segments (``packages/BlobDownloadBuilder``) are implementation details of
    the package layout. The first segment is the package name and may contain
    a scope separator, so it is not inspected.
    """
    if DEFAULT_EXPORT_MARKER in path:
        return True
    return any(MODULE_SEPARATOR in part for part in split_ref_path(path)[1:])


def unique_id(candidate: str, taken: cabc.Container[str]) -> str:
    """Return ``candidate`` or the first ``candidate-N`` not in ``taken``."""
    unique = candidate
    suffix = 1
    while unique in taken:
        unique = f"{candidate}-{suffix}"
        suffix += 1
    return unique


def create_stub_id(path: str) -> str:
    """Derive a deterministic documentation id from a reference path."""
    sanitized = normalize_ref_path(path).removeprefix(PACKAGE_SCOPE)
    segments = (
        _NON_ALPHANUMERIC.sub("-", segment).lower()
        for segment in split_ref_path(sanitized)
    )
    joined = "-".join(segment for segment in segments if segment)
    return _REPEATED_DASHES.sub("-", joined)


__all__ = [
    "create_stub_id",
    "is_internal_implementation",
    "is_top_level_export",
    "normalize_ref_path",
    "split_ref_path",
    "unique_id",
]
