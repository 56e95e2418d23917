"""Model and loader for TypeDoc API snapshots.

The snapshot is the ``combined.json`` file emitted by the SDK's TypeDoc build:
a named list of library reflections, each a recursive tree of classes,
interfaces, methods and so on. :func:`load_api_snapshot` decodes it into
frozen msgspec structs.

Examples
--------
>>> from pathlib import Path
>>> from ref_sync.typedoc import load_api_snapshot
>>> snapshot = load_api_snapshot(Path("combined.json"))  # doctest: +SKIP
>>> [library.name for library in snapshot.children]  # doctest: +SKIP
['@supabase/auth-js', '@supabase/supabase-js']
"""

from .loader import SnapshotError, load_api_snapshot
from .models import (
    CALLABLE_MEMBER_KINDS,
    CLASS_LIKE_KINDS,
    CombinedSpec,
    Comment,
    CommentPart,
    CommentTag,
    ReflectionFlags,
    SourceLocation,
    TypeDocKind,
    TypeDocNode,
    effective_comment,
    extract_description,
    extract_examples,
    has_block_tag,
    kind_label,
)

__all__ = [
    "CALLABLE_MEMBER_KINDS",
    "CLASS_LIKE_KINDS",
    "CombinedSpec",
    "Comment",
    "CommentPart",
    "CommentTag",
    "ReflectionFlags",
    "SnapshotError",
    "SourceLocation",
    "TypeDocKind",
    "TypeDocNode",
    "effective_comment",
    "extract_description",
    "extract_examples",
    "has_block_tag",
    "kind_label",
    "load_api_snapshot",
]
