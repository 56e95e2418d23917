"""Lookup tables driving symbol classification.

The reconciliation rules are heuristics about how the client SDK is packaged:
which package re-exports the others, which class names read as user-facing
entry points, and which doc-comment tags mark a symbol as internal. Keeping
them here as data means :mod:`ref_sync.rules` stays a set of lookups.
"""

from __future__ import annotations

REEXPORT_PACKAGE = "@supabase/supabase-js"
"""Umbrella package that re-exports symbols owned by the source packages."""

SOURCE_PACKAGES: tuple[str, ...] = (
    "@supabase/auth-js",
    "@supabase/storage-js",
    "@supabase/postgrest-js",
    "@supabase/realtime-js",
    "@supabase/functions-js",
)

# Classes defined only by the umbrella package; never treated as re-exports.
UMBRELLA_ONLY_CLASSES: tuple[str, ...] = ("SupabaseClient",)

PACKAGE_SCOPE = "@supabase/"

ERROR_SUFFIX = "Error"
USER_FACING_SUFFIXES: tuple[str, ...] = (
    "Client",
    "Api",
    "Builder",
    "Channel",
    "Scope",
    "Manager",
)

INTERNAL_NAME_PREFIX = "_"
INTERNAL_TAG = "@internal"
EXAMPLE_TAG = "@example"

INDEX_SEGMENT = "index"
DEFAULT_EXPORT_MARKER = ".default."
MODULE_SEPARATOR = "/"
CONSTRUCTOR_NAME = "constructor"

__all__ = [
    "CONSTRUCTOR_NAME",
    "DEFAULT_EXPORT_MARKER",
    "ERROR_SUFFIX",
    "EXAMPLE_TAG",
    "INDEX_SEGMENT",
    "INTERNAL_NAME_PREFIX",
    "INTERNAL_TAG",
    "MODULE_SEPARATOR",
    "PACKAGE_SCOPE",
    "REEXPORT_PACKAGE",
    "SOURCE_PACKAGES",
    "UMBRELLA_ONLY_CLASSES",
    "USER_FACING_SUFFIXES",
]
