"""Unit tests for decoding TypeDoc snapshots and reading doc comments."""

from __future__ import annotations

import typing as typ

import pytest

from ref_sync.typedoc import (
    SnapshotError,
    TypeDocKind,
    extract_description,
    extract_examples,
    has_block_tag,
    kind_label,
    load_api_snapshot,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from conftest import Payload, TypeDocBuilder


def test_load_api_snapshot_decodes_tree(
    typedoc: TypeDocBuilder,
    write_snapshot: cabc.Callable[[Payload], Path],
) -> None:
    """camelCase fields decode and unmodelled fields are ignored."""
    payload = typedoc.payload(
        typedoc.library(
            "@supabase/auth-js",
            typedoc.klass(
                "GoTrueClient",
                typedoc.method(
                    "signUp",
                    signature_comment=typedoc.comment("Creates a user."),
                ),
                typedoc.method("_refresh", isPrivate=True),
            ),
        )
    )
    payload["packageVersion"] = "2.0.0"
    path = write_snapshot(payload)

    snapshot = load_api_snapshot(path)

    library = snapshot.children[0]
    assert library.name == "@supabase/auth-js", f"got {library.name!r}"
    client = library.children[0]
    assert client.kind == TypeDocKind.CLASS, f"expected a class, got {client.kind}"
    sign_up, refresh = client.children
    assert extract_description(sign_up) == "Creates a user.", (
        "expected the signature comment to supply the description"
    )
    assert refresh.is_private, "expected isPrivate to decode onto the flags"
    assert not sign_up.is_private, "expected missing flags to read as public"


def test_load_api_snapshot_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_api_snapshot(tmp_path / "combined.json")


@pytest.mark.parametrize(
    "content",
    [
        b"{not json",
        b'{"name": "combined", "children": {"oops": 1}}',
        b'{"children": [{"name": "lib"}]}',
    ],
)
def test_load_api_snapshot_rejects_malformed_input(
    tmp_path: Path, content: bytes
) -> None:
    """Invalid JSON and shape mismatches both surface as SnapshotError."""
    path = tmp_path / "combined.json"
    path.write_bytes(content)
    with pytest.raises(SnapshotError, match="could not be decoded"):
        load_api_snapshot(path)


def test_extract_description_keeps_text_parts_only(typedoc: TypeDocBuilder) -> None:
    comment = {
        "summary": [
            {"kind": "text", "text": "  Uploads a file "},
            {"kind": "inline-tag", "text": "StorageFileApi"},
            {"kind": "text", "text": "to a bucket.  "},
        ]
    }
    snapshot = typedoc.snapshot(
        typedoc.library("lib", typedoc.method("upload", comment=comment))
    )
    node = snapshot.children[0].children[0]

    assert extract_description(node) == "Uploads a file to a bucket.", (
        f"got {extract_description(node)!r}"
    )


def test_extract_description_is_none_for_blank_summary(
    typedoc: TypeDocBuilder,
) -> None:
    snapshot = typedoc.snapshot(
        typedoc.library(
            "lib",
            typedoc.method("blank", comment=typedoc.comment("   ")),
            typedoc.method("bare"),
        )
    )
    blank, bare = snapshot.children[0].children
    assert extract_description(blank) is None, "expected whitespace to read as None"
    assert extract_description(bare) is None, "expected no comment to read as None"


def test_extract_examples_reads_example_tags_only(typedoc: TypeDocBuilder) -> None:
    comment = typedoc.comment(
        "Summary",
        examples=["```js\nconst a = 1\n```\n", "   "],
        tags=["@deprecated"],
    )
    snapshot = typedoc.snapshot(
        typedoc.library("lib", typedoc.method("run", signature_comment=comment))
    )
    node = snapshot.children[0].children[0]

    examples = extract_examples(node)

    assert examples == ["```js\nconst a = 1\n```"], f"got {examples!r}"
    assert has_block_tag(node, "@deprecated"), "expected the tag to be found"
    assert not has_block_tag(node, "@internal"), "expected no @internal tag"


def test_node_comment_takes_precedence_over_signature(
    typedoc: TypeDocBuilder,
) -> None:
    snapshot = typedoc.snapshot(
        typedoc.library(
            "lib",
            typedoc.method(
                "run",
                comment=typedoc.comment("From the node."),
                signature_comment=typedoc.comment("From the signature."),
            ),
        )
    )
    node = snapshot.children[0].children[0]
    assert extract_description(node) == "From the node.", (
        f"got {extract_description(node)!r}"
    )


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (2048, "Method"),
        (512, "Constructor"),
        (4096, "CallSignature"),
        (3, "3"),
    ],
)
def test_kind_label(code: int, expected: str) -> None:
    assert kind_label(code) == expected, f"got {kind_label(code)!r}"
