"""Shared fixtures for the ref_sync test suite.

The ``typedoc`` fixture builds TypeDoc payloads as plain dictionaries (the
shape found in ``combined.json``) and converts them into
:class:`~ref_sync.typedoc.CombinedSpec` values, so tests read like the JSON
they model. ``write_spec`` writes dedented YAML specs into ``tmp_path``.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import msgspec
import pytest

from ref_sync.typedoc import CombinedSpec, TypeDocKind

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

Payload = dict[str, typ.Any]


class TypeDocBuilder:
    """Factory for TypeDoc reflection payloads."""

    def node(
        self,
        name: str,
        kind: TypeDocKind,
        *children: Payload,
        comment: Payload | None = None,
        signature_comment: Payload | None = None,
        **flags: bool,
    ) -> Payload:
        payload: Payload = {"id": abs(hash((name, kind))) % 10_000, "name": name}
        payload["kind"] = int(kind)
        if children:
            payload["children"] = list(children)
        if flags:
            payload["flags"] = flags
        if comment is not None:
            payload["comment"] = comment
        if signature_comment is not None:
            payload["signatures"] = [
                {
                    "name": name,
                    "kind": int(TypeDocKind.CALL_SIGNATURE),
                    "comment": signature_comment,
                }
            ]
        return payload

    def library(self, name: str, *children: Payload) -> Payload:
        return self.node(name, TypeDocKind.MODULE, *children)

    def module(self, name: str, *children: Payload) -> Payload:
        return self.node(name, TypeDocKind.MODULE, *children)

    def klass(self, name: str, *children: Payload, **kwargs: typ.Any) -> Payload:
        return self.node(name, TypeDocKind.CLASS, *children, **kwargs)

    def method(self, name: str, **kwargs: typ.Any) -> Payload:
        return self.node(name, TypeDocKind.METHOD, **kwargs)

    def constructor(self, **kwargs: typ.Any) -> Payload:
        return self.node("constructor", TypeDocKind.CONSTRUCTOR, **kwargs)

    def prop(self, name: str, *children: Payload, **kwargs: typ.Any) -> Payload:
        return self.node(name, TypeDocKind.PROPERTY, *children, **kwargs)

    def comment(
        self,
        summary: str | None = None,
        *,
        examples: cabc.Sequence[str] = (),
        tags: cabc.Sequence[str] = (),
    ) -> Payload:
        payload: Payload = {}
        if summary is not None:
            payload["summary"] = [{"kind": "text", "text": summary}]
        block_tags = [
            {"tag": "@example", "content": [{"kind": "code", "text": body}]}
            for body in examples
        ]
        block_tags.extend({"tag": tag, "content": []} for tag in tags)
        if block_tags:
            payload["blockTags"] = block_tags
        return payload

    def payload(self, *libraries: Payload, name: str = "combined") -> Payload:
        return {"name": name, "children": list(libraries)}

    def snapshot(self, *libraries: Payload, name: str = "combined") -> CombinedSpec:
        return msgspec.convert(self.payload(*libraries, name=name), CombinedSpec)


@pytest.fixture
def typedoc() -> TypeDocBuilder:
    """Return a builder for TypeDoc payloads and snapshots."""
    return TypeDocBuilder()


@pytest.fixture
def write_spec(tmp_path: Path) -> cabc.Callable[[str], Path]:
    """Return a helper that writes dedented YAML to ``tmp_path/spec.yml``."""

    def _write(text: str, *, name: str = "spec.yml") -> Path:
        path = tmp_path / name
        path.write_text(dedent(text).lstrip("\n"), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_snapshot(
    tmp_path: Path,
) -> cabc.Callable[[Payload], Path]:
    """Return a helper that encodes a TypeDoc payload into ``combined.json``."""

    def _write(payload: Payload, *, name: str = "combined.json") -> Path:
        path = tmp_path / name
        path.write_bytes(msgspec.json.encode(payload))
        return path

    return _write
