"""Typed view of TypeDoc's ``combined.json`` reflection tree.

Only the fields the reconciliation passes read are modelled; msgspec ignores
everything else in the payload. Nodes are frozen structs and own their
children outright, so a decoded snapshot can be shared freely between the
indexing passes.
"""

from __future__ import annotations

import enum

import msgspec

from ..tables import EXAMPLE_TAG


class TypeDocKind(enum.IntEnum):
    """Reflection kind codes emitted by TypeDoc."""

    PROJECT = 1
    MODULE = 2
    NAMESPACE = 4
    ENUM = 8
    ENUM_MEMBER = 16
    VARIABLE = 32
    FUNCTION = 64
    CLASS = 128
    INTERFACE = 256
    CONSTRUCTOR = 512
    PROPERTY = 1024
    METHOD = 2048
    CALL_SIGNATURE = 4096
    INDEX_SIGNATURE = 8192
    CONSTRUCTOR_SIGNATURE = 16384
    PARAMETER = 32768
    TYPE_LITERAL = 65536
    TYPE_PARAMETER = 131072
    ACCESSOR = 262144
    GET_SIGNATURE = 524288
    SET_SIGNATURE = 1048576
    TYPE_ALIAS = 2097152
    REFERENCE = 4194304


CLASS_LIKE_KINDS = frozenset({TypeDocKind.CLASS, TypeDocKind.INTERFACE})
CALLABLE_MEMBER_KINDS = frozenset({TypeDocKind.METHOD, TypeDocKind.CONSTRUCTOR})


def kind_label(code: int) -> str:
    """Return a readable label such as ``Method`` for a kind code."""
    try:
        member = TypeDocKind(code)
    except ValueError:
        return str(code)
    return member.name.replace("_", " ").title().replace(" ", "")


class CommentPart(msgspec.Struct, frozen=True):
    """A run of text inside a doc comment (``text``, ``code`` or ``inline-tag``)."""

    kind: str
    text: str = ""


class CommentTag(msgspec.Struct, frozen=True):
    """A block tag such as ``@example`` or ``@internal``."""

    tag: str
    content: list[CommentPart] = []


class Comment(msgspec.Struct, frozen=True, rename="camel"):
    summary: list[CommentPart] = []
    block_tags: list[CommentTag] = []


class ReflectionFlags(msgspec.Struct, frozen=True, rename="camel"):
    is_protected: bool = False
    is_private: bool = False
    is_optional: bool = False
    is_inherited: bool = False


class SourceLocation(msgspec.Struct, frozen=True, rename="camel"):
    file_name: str
    line: int | None = None


class TypeDocNode(msgspec.Struct, frozen=True, kw_only=True):
    """One reflection in the TypeDoc tree.

    Attributes
    ----------
    name : str
        Reflection name; path segments are built from it.
    kind : int
        Raw TypeDoc kind code, compared against :class:`TypeDocKind`.
    flags : ReflectionFlags or None
        Visibility flags; ``None`` when TypeDoc omitted the object.
    children : list[TypeDocNode]
        Owned child reflections.
    signatures : list[TypeDocNode]
        Call signatures; methods and constructors keep their comment here.
    comment : Comment or None
        Doc comment attached directly to the reflection.
    """

    name: str
    kind: int
    id: int | None = None
    flags: ReflectionFlags | None = None
    children: list[TypeDocNode] = []
    signatures: list[TypeDocNode] = []
    sources: list[SourceLocation] = []
    comment: Comment | None = None

    @property
    def is_protected(self) -> bool:
        return bool(self.flags and self.flags.is_protected)

    @property
    def is_private(self) -> bool:
        return bool(self.flags and self.flags.is_private)

    @property
    def is_inherited(self) -> bool:
        return bool(self.flags and self.flags.is_inherited)


class CombinedSpec(msgspec.Struct, frozen=True):
    """Root of the snapshot: one child per published library."""

    name: str = ""
    children: list[TypeDocNode] = []


def effective_comment(node: TypeDocNode) -> Comment | None:
    """Return the node's comment, falling back to its first signature's."""
    if node.comment is not None:
        return node.comment
    if node.signatures:
        return node.signatures[0].comment
    return None


def extract_description(node: TypeDocNode) -> str | None:
    """Return the summary text of the node's doc comment, or None."""
    comment = effective_comment(node)
    if comment is None or not comment.summary:
        return None
    description = "".join(
        part.text for part in comment.summary if part.kind == "text"
    ).strip()
    return description or None


def extract_examples(node: TypeDocNode) -> list[str]:
    """Return the trimmed bodies of every ``@example`` tag on the node."""
    comment = effective_comment(node)
    if comment is None:
        return []
    examples: list[str] = []
    for tag in comment.block_tags:
        if tag.tag != EXAMPLE_TAG:
            continue
        body = "".join(part.text for part in tag.content).strip()
        if body:
            examples.append(body)
    return examples


def has_block_tag(node: TypeDocNode, tag: str) -> bool:
    """Return True when the node's effective comment carries ``tag``."""
    comment = effective_comment(node)
    if comment is None:
        return False
    return any(block.tag == tag for block in comment.block_tags)


__all__ = [
    "CALLABLE_MEMBER_KINDS",
    "CLASS_LIKE_KINDS",
    "CombinedSpec",
    "Comment",
    "CommentPart",
    "CommentTag",
    "ReflectionFlags",
    "SourceLocation",
    "TypeDocKind",
    "TypeDocNode",
    "effective_comment",
    "extract_description",
    "extract_examples",
    "has_block_tag",
    "kind_label",
]
