"""Regenerate the client-library sidebar from the reference spec.

Documented functions are sorted into five product categories (Database, Auth,
Edge Functions, Realtime, Storage) using id overrides and ``$ref`` package
rules, then merged into ``common-client-libs-sections.json`` without
disturbing hand-curated entries.

Examples
--------
>>> from pathlib import Path
>>> from ref_sync.sections import sync_client_library_sections
>>> sync_client_library_sections(document.functions, Path("sections.json"))  # doctest: +SKIP
"""

from .builder import build_canonical_categories, category_for, create_nav_item
from .merge import (
    default_sections,
    encode_sections,
    insert_categories,
    is_category_entry,
    load_existing_sections,
    merge_category,
    merge_category_items,
    merge_sections,
    sync_client_library_sections,
)
from .tables import CategoryKey, CategoryMeta, SectionCategory, SectionItem

__all__ = [
    "CategoryKey",
    "CategoryMeta",
    "SectionCategory",
    "SectionItem",
    "build_canonical_categories",
    "category_for",
    "create_nav_item",
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
