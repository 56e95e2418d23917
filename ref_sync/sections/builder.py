"""Build the canonical category tree from the spec's documented functions."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..paths import split_ref_path
from ..tables import REEXPORT_PACKAGE
from .tables import (
    ADMIN_CLASS_PREFIXES,
    AUTH_PACKAGE,
    CATEGORY_CONFIG,
    CATEGORY_ORDER,
    CATEGORY_TYPE,
    GROUP_CHILD_PATTERNS,
    GROUP_PARENT_CONFIG,
    ID_CATEGORY_OVERRIDES,
    PACKAGE_CATEGORIES,
    STATIC_SECTION_IDS,
    UMBRELLA_MEMBER_CATEGORIES,
    UMBRELLA_SKIPPED_IDS,
    CategoryKey,
    CategoryMeta,
    SectionCategory,
    SectionItem,
)

if typ.TYPE_CHECKING:
    from ..spec import DocFunction


def category_for(fn: DocFunction) -> CategoryMeta | None:
    """Return the sidebar category for ``fn``, or None to leave it out.

    The id override table wins; otherwise the ``$ref`` package decides, with
    member-level routing for auth-js admin classes and the umbrella package.
    The returned placement always carries a product.
    """
    meta = _route(fn)
    return meta.resolved() if meta is not None else None


def _route(fn: DocFunction) -> CategoryMeta | None:
    override = ID_CATEGORY_OVERRIDES.get(fn.id)
    if override is not None:
        return override
    if not fn.ref:
        return None

    segments = split_ref_path(fn.ref)
    package = segments[0]
    class_name = segments[1] if len(segments) > 1 else ""

    if package in PACKAGE_CATEGORIES:
        return PACKAGE_CATEGORIES[package]
    if package == AUTH_PACKAGE:
        is_admin = class_name.startswith(ADMIN_CLASS_PREFIXES)
        return CategoryMeta(CategoryKey.AUTH, "auth-admin" if is_admin else None)
    if package == REEXPORT_PACKAGE:
        return _umbrella_category(fn)
    return None


def _umbrella_category(fn: DocFunction) -> CategoryMeta | None:
    if fn.id in UMBRELLA_SKIPPED_IDS or not fn.ref:
        return None
    for members, meta in UMBRELLA_MEMBER_CATEGORIES:
        if fn.ref.endswith(members):
            return meta
    return None


def create_nav_item(fn: DocFunction, product: str | None = None) -> SectionItem:
    item: SectionItem = {
        "id": fn.id,
        "title": fn.title or fn.id,
        "slug": fn.id,
        "type": "function",
    }
    if product:
        item["product"] = product
    return item


def build_canonical_categories(
    functions: cabc.Iterable[DocFunction],
) -> list[SectionCategory]:
    """Return the non-empty dynamic categories in display order."""
    categories: dict[CategoryKey, SectionCategory] = {
        key: {"type": CATEGORY_TYPE, "title": CATEGORY_CONFIG[key].title, "items": []}
        for key in CATEGORY_ORDER
    }
    group_parents: dict[str, SectionItem] = {}

    for fn in functions:
        if not fn.id or fn.id in STATIC_SECTION_IDS:
            continue

        parent_config = GROUP_PARENT_CONFIG.get(fn.id)
        if parent_config is not None:
            parent = create_nav_item(fn, parent_config.resolved().product)
            parent["isFunc"] = False
            parent["items"] = []
            group_parents[fn.id] = parent
            categories[parent_config.category]["items"].append(parent)
            continue

        meta = category_for(fn)
        if meta is None:
            continue

        item = create_nav_item(fn, meta.product)
        group = next(
            (pattern for pattern in GROUP_CHILD_PATTERNS if pattern.matches(fn.ref)),
            None,
        )
        if group is not None and group.parent_id in group_parents:
            group_parents[group.parent_id]["items"].append(item)
            continue

        categories[meta.category]["items"].append(item)

    return [categories[key] for key in CATEGORY_ORDER if categories[key]["items"]]


__all__ = ["build_canonical_categories", "category_for", "create_nav_item"]
