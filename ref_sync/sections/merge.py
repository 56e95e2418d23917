"""Merge the canonical categories into the persisted sidebar file.

The sidebar JSON is partly hand-curated: static markdown pages, the Misc
category, and extra fields on individual items. Merging matches categories by
title and items by id, keeps every field of an existing item, and only
replaces nested item lists with the freshly computed ones.
"""

from __future__ import annotations

import collections.abc as cabc
import copy
import typing as typ

import msgspec

from .builder import build_canonical_categories
from .tables import (
    CATEGORY_TYPE,
    DYNAMIC_CATEGORY_TITLES,
    STATIC_BOTTOM_SECTIONS,
    STATIC_TOP_SECTIONS,
    SectionCategory,
    SectionItem,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from ..spec import DocFunction

SectionEntry = SectionCategory | SectionItem


def default_sections() -> list[SectionEntry]:
    """Return a fresh copy of the static sidebar scaffolding."""
    return copy.deepcopy([*STATIC_TOP_SECTIONS, *STATIC_BOTTOM_SECTIONS])


def load_existing_sections(path: Path) -> list[SectionEntry]:
    """Read the sidebar file, falling back to the static scaffolding.

    A missing, unreadable or non-list file yields :func:`default_sections`.
    """
    try:
        parsed = msgspec.json.decode(path.read_bytes())
    except (OSError, msgspec.DecodeError):
        return default_sections()
    if not isinstance(parsed, list):
        return default_sections()
    return parsed


def is_category_entry(entry: object) -> bool:
    return (
        isinstance(entry, cabc.Mapping)
        and entry.get("type") == CATEGORY_TYPE
        and isinstance(entry.get("items"), list)
    )


def merge_category_items(
    existing: cabc.Sequence[SectionItem], canonical: cabc.Sequence[SectionItem]
) -> list[SectionItem]:
    """Return ``canonical`` with existing items' fields carried over by id."""
    existing_by_id = {
        item["id"]: item
        for item in existing
        if isinstance(item, cabc.Mapping) and "id" in item
    }
    merged_items: list[SectionItem] = []
    for canonical_item in canonical:
        current = existing_by_id.get(canonical_item.get("id", ""))
        if current is None:
            merged_items.append(canonical_item)
            continue
        merged: SectionItem = dict(current)  # type: ignore[assignment]
        nested = canonical_item.get("items")
        if nested:
            merged["items"] = merge_category_items(current.get("items") or [], nested)
        else:
            merged.pop("items", None)
        merged_items.append(merged)
    return merged_items


def merge_category(
    existing: SectionCategory | None, canonical: SectionCategory
) -> SectionCategory | None:
    """Merge one canonical category into its persisted counterpart."""
    canonical_items = canonical.get("items") or []
    if not canonical_items:
        return None
    if existing is None:
        return canonical
    merged: SectionCategory = dict(existing)  # type: ignore[assignment]
    merged["items"] = merge_category_items(existing.get("items") or [], canonical_items)
    return merged


def insert_categories(
    existing_sections: cabc.Sequence[SectionEntry],
    categories: cabc.Sequence[SectionCategory],
) -> list[SectionEntry]:
    """Place ``categories`` where the first matching category used to be.

    Existing categories with the same titles are replaced; when none existed
    the categories are appended. With no categories at all, stale dynamic
    categories are dropped and everything else is kept.
    """
    if not categories:
        return [
            entry
            for entry in existing_sections
            if not is_category_entry(entry)
            or entry.get("title") not in DYNAMIC_CATEGORY_TITLES
        ]

    target_titles = {category["title"] for category in categories}
    final_sections: list[SectionEntry] = []
    inserted = False
    for entry in existing_sections:
        if is_category_entry(entry) and entry.get("title") in target_titles:
            if not inserted:
                final_sections.extend(categories)
                inserted = True
            continue
        final_sections.append(entry)

    if not inserted:
        final_sections.extend(categories)
    return final_sections


def merge_sections(
    existing_sections: cabc.Sequence[SectionEntry],
    functions: cabc.Iterable[DocFunction],
) -> list[SectionEntry]:
    """Return ``existing_sections`` with the dynamic categories recomputed."""
    existing_categories = {
        entry["title"]: entry
        for entry in existing_sections
        if is_category_entry(entry) and entry.get("title") is not None
    }
    merged_categories: list[SectionCategory] = []
    for canonical in build_canonical_categories(functions):
        merged = merge_category(existing_categories.get(canonical["title"]), canonical)
        if merged is not None and merged.get("items"):
            merged_categories.append(merged)
    return insert_categories(existing_sections, merged_categories)


def encode_sections(sections: cabc.Sequence[SectionEntry]) -> bytes:
    """Serialize ``sections`` as two-space indented JSON with a final newline."""
    return msgspec.json.format(msgspec.json.encode(sections), indent=2) + b"\n"


def sync_client_library_sections(
    functions: cabc.Iterable[DocFunction], path: Path
) -> list[SectionEntry]:
    """Regenerate the sidebar file at ``path`` from ``functions``."""
    sections = merge_sections(load_existing_sections(path), functions)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_sections(sections))
    return sections


__all__ = [
    "SectionEntry",
    "default_sections",
    "encode_sections",
    "insert_categories",
    "is_category_entry",
    "load_existing_sections",
    "merge_category",
    "merge_category_items",
    "merge_sections",
    "sync_client_library_sections",
]
