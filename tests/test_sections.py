"""Unit tests for sidebar categorization and merging."""

from __future__ import annotations

import json
import typing as typ

import pytest

from ref_sync.sections import (
    CategoryKey,
    CategoryMeta,
    build_canonical_categories,
    category_for,
    default_sections,
    insert_categories,
    load_existing_sections,
    merge_sections,
    sync_client_library_sections,
)
from ref_sync.sections.tables import ID_CATEGORY_OVERRIDES
from ref_sync.spec import DocFunction

if typ.TYPE_CHECKING:
    from pathlib import Path


def _fn(entry_id: str, ref: str | None = None, title: str | None = None) -> DocFunction:
    return DocFunction(id=entry_id, title=title or entry_id, ref=ref)


FUNCTIONS = [
    _fn("introduction"),
    _fn("initializing", "@supabase/supabase-js.SupabaseClient.constructor"),
    _fn("select", "@supabase/postgrest-js.PostgrestQueryBuilder.select"),
    _fn("using-filters", title="Using filters"),
    _fn("eq", "@supabase/postgrest-js.PostgrestFilterBuilder.eq"),
    _fn("auth-signup", "@supabase/auth-js.GoTrueClient.signUp"),
    _fn("admin-api", title="Overview"),
    _fn("admin-list-users", "@supabase/auth-js.GoTrueAdminApi.listUsers"),
    _fn("subscribe", "@supabase/supabase-js.SupabaseClient.channel"),
    _fn("from", "@supabase/supabase-js.SupabaseClient.from"),
    _fn("unrelated", "@other/pkg.Thing.run"),
]


@pytest.mark.parametrize(
    ("fn", "category", "product"),
    [
        (_fn("using-modifiers"), CategoryKey.DATABASE, "database"),
        (
            _fn("x", "@supabase/storage-js.StorageFileApi.upload"),
            CategoryKey.STORAGE,
            "storage",
        ),
        (
            _fn("x", "@supabase/functions-js.FunctionsClient.invoke"),
            CategoryKey.EDGE_FUNCTIONS,
            "functions",
        ),
        (
            _fn("x", "@supabase/auth-js.GoTrueAdminApi.deleteUser"),
            CategoryKey.AUTH,
            "auth-admin",
        ),
        (
            _fn("x", "@supabase/auth-js.GoTrueClient.signOut"),
            CategoryKey.AUTH,
            "auth",
        ),
        (
            _fn("x", "@supabase/supabase-js.SupabaseClient.removeAllChannels"),
            CategoryKey.REALTIME,
            "realtime",
        ),
        (
            _fn("x", "@supabase/supabase-js.SupabaseClient.rpc"),
            CategoryKey.DATABASE,
            "database",
        ),
    ],
)
def test_category_for(fn: DocFunction, category: CategoryKey, product: str) -> None:
    meta = category_for(fn)
    assert meta is not None, f"expected {fn.ref!r} to be categorized"
    assert (meta.category, meta.product) == (category, product), f"got {meta!r}"


def test_category_for_fills_product_from_category_default(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setitem(
        ID_CATEGORY_OVERRIDES, "storage-overview", CategoryMeta(CategoryKey.STORAGE)
    )

    meta = category_for(_fn("storage-overview"))

    assert meta == CategoryMeta(CategoryKey.STORAGE, "storage"), (
        f"expected the storage default product, got {meta!r}"
    )
    admin = CategoryMeta(CategoryKey.AUTH, "auth-admin")
    assert admin.resolved() is admin, "expected an explicit product to be kept"


@pytest.mark.parametrize(
    "fn",
    [
        _fn("initializing", "@supabase/supabase-js.SupabaseClient.constructor"),
        _fn("x", "@supabase/supabase-js.SupabaseClient.auth"),
        _fn("x", "@other/pkg.Thing.run"),
        _fn("markdown-only"),
    ],
)
def test_category_for_leaves_entries_out(fn: DocFunction) -> None:
    assert category_for(fn) is None, f"expected {fn!r} to be left out"


def test_build_canonical_categories_groups_children() -> None:
    categories = build_canonical_categories(FUNCTIONS)

    titles = [category["title"] for category in categories]
    assert titles == ["Database", "Auth", "Realtime"], f"got {titles!r}"

    database = categories[0]["items"]
    assert [item["id"] for item in database] == ["select", "using-filters", "from"], (
        f"got {database!r}"
    )
    filters = database[1]
    assert filters["isFunc"] is False, "expected group parents to be non-function"
    assert [child["id"] for child in filters["items"]] == ["eq"]

    auth = categories[1]["items"]
    assert [item["id"] for item in auth] == ["auth-signup", "admin-api"]
    admin = auth[1]
    assert admin["product"] == "auth-admin", f"got {admin!r}"
    assert [child["id"] for child in admin["items"]] == ["admin-list-users"]
    assert admin["items"][0]["product"] == "auth-admin"

    realtime = categories[2]["items"]
    assert realtime == [
        {
            "id": "subscribe",
            "title": "subscribe",
            "slug": "subscribe",
            "type": "function",
            "product": "realtime",
        }
    ], f"got {realtime!r}"


def test_merge_preserves_unknown_fields_and_static_entries() -> None:
    existing = [
        {"id": "introduction", "title": "Introduction", "type": "markdown"},
        {
            "type": "category",
            "title": "Database",
            "collapsed": True,
            "items": [
                {
                    "id": "select",
                    "title": "Fetch data",
                    "slug": "select",
                    "type": "function",
                    "beta": True,
                },
                {"id": "removed", "title": "Removed", "type": "function"},
            ],
        },
        {"type": "category", "title": "Misc", "items": [{"id": "release-notes"}]},
    ]
    functions = [_fn("select", "@supabase/postgrest-js.PostgrestQueryBuilder.select")]

    merged = merge_sections(existing, functions)

    assert [entry["title"] for entry in merged] == [
        "Introduction",
        "Database",
        "Misc",
    ], f"got {merged!r}"
    database = merged[1]
    assert database["collapsed"] is True, "expected category fields to survive"
    assert database["items"] == [
        {
            "id": "select",
            "title": "Fetch data",
            "slug": "select",
            "type": "function",
            "beta": True,
        }
    ], f"expected hand-edited fields to win, got {database['items']!r}"


def test_insert_categories_appends_when_none_existed() -> None:
    existing = default_sections()
    categories = build_canonical_categories(
        [_fn("upload", "@supabase/storage-js.StorageFileApi.upload")]
    )

    merged = insert_categories(existing, categories)

    assert merged[: len(existing)] == existing, "expected existing entries untouched"
    assert merged[-1]["title"] == "Storage", f"got {merged[-1]!r}"


def test_empty_canonical_set_drops_only_dynamic_categories() -> None:
    existing = [
        {"id": "introduction", "title": "Introduction", "type": "markdown"},
        {"type": "category", "title": "Auth", "items": [{"id": "auth-signup"}]},
        {"type": "category", "title": "Misc", "items": [{"id": "release-notes"}]},
    ]

    merged = merge_sections(existing, [_fn("introduction")])

    assert [entry["title"] for entry in merged] == ["Introduction", "Misc"], (
        f"got {merged!r}"
    )


def test_merge_sections_keeps_untitled_category() -> None:
    untitled = {"type": "category", "items": [{"id": "hand-picked"}]}
    existing = [
        {"id": "introduction", "title": "Introduction", "type": "markdown"},
        untitled,
        {"type": "category", "title": "Database", "items": []},
    ]
    functions = [_fn("select", "@supabase/postgrest-js.PostgrestQueryBuilder.select")]

    merged = merge_sections(existing, functions)

    assert merged[:2] == existing[:2], (
        f"expected the untitled category to be carried over, got {merged!r}"
    )
    assert merged[2]["title"] == "Database", f"got {merged[2]!r}"
    assert [item["id"] for item in merged[2]["items"]] == ["select"], (
        f"got {merged[2]!r}"
    )


def test_load_existing_sections_falls_back(tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"
    broken = tmp_path / "broken.json"
    broken.write_text("{oops", encoding="utf-8")
    mapping = tmp_path / "mapping.json"
    mapping.write_text('{"title": "not a list"}', encoding="utf-8")

    for path in (missing, broken, mapping):
        assert load_existing_sections(path) == default_sections(), (
            f"expected the static scaffolding for {path.name}"
        )


def test_sync_client_library_sections_writes_formatted_json(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "sections.json"

    sync_client_library_sections(FUNCTIONS, path)

    text = path.read_text(encoding="utf-8")
    assert text.endswith("}\n]\n"), "expected a trailing newline after the array"
    assert text.startswith('[\n  {\n    "title": "Introduction"'), (
        f"expected two-space indentation, got {text[:60]!r}"
    )
    titles = [entry["title"] for entry in json.loads(text)]
    assert titles == [
        "Introduction",
        "Installing",
        "Initializing",
        "TypeScript support",
        "Upgrade guide",
        "Misc",
        "Database",
        "Auth",
        "Realtime",
    ], f"got {titles!r}"
