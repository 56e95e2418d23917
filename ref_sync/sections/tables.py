"""Static scaffolding and routing tables for the client-library sidebar."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ


class SectionItem(typ.TypedDict, total=False):
    """A sidebar entry; unknown keys added by hand are carried through merges."""

    id: str
    title: str
    slug: str
    type: str
    product: str
    isFunc: bool
    items: list[SectionItem]
    excludes: list[str]


class SectionCategory(typ.TypedDict, total=False):
    type: str
    title: str
    items: list[SectionItem]
    excludes: list[str]


class CategoryKey(enum.StrEnum):
    DATABASE = "database"
    AUTH = "auth"
    EDGE_FUNCTIONS = "edgeFunctions"
    REALTIME = "realtime"
    STORAGE = "storage"


@dc.dataclass(slots=True, frozen=True)
class CategoryConfig:
    title: str
    default_product: str


@dc.dataclass(slots=True, frozen=True)
class CategoryMeta:
    """Where a documented function lands in the sidebar.

    An unset ``product`` stands for the category's default product.
    """

    category: CategoryKey
    product: str | None = None

    def resolved(self) -> CategoryMeta:
        """Return this placement with ``product`` filled from the category."""
        if self.product is not None:
            return self
        default = CATEGORY_CONFIG[self.category].default_product
        return dc.replace(self, product=default)


@dc.dataclass(slots=True, frozen=True)
class GroupChildPattern:
    """Route entries whose ``$ref`` contains any of ``needles`` under a group."""

    parent_id: str
    needles: tuple[str, ...]

    def matches(self, ref: str | None) -> bool:
        return bool(ref) and any(needle in ref for needle in self.needles)


CATEGORY_TYPE = "category"

_V1_AND_LEGACY_REFS = (
    "reference_javascript_v1",
    "reference_dart_v1",
    "reference_dart_v2",
    "reference_python_v2",
    "reference_csharp_v0",
    "reference_csharp_v1",
    "reference_swift_v1",
    "reference_swift_v2",
    "reference_kotlin_v1",
    "reference_kotlin_v2",
    "reference_kotlin_v3",
)

STATIC_TOP_SECTIONS: tuple[SectionItem, ...] = (
    {
        "title": "Introduction",
        "id": "introduction",
        "slug": "introduction",
        "type": "markdown",
    },
    {
        "title": "Installing",
        "id": "installing",
        "slug": "installing",
        "type": "markdown",
        "excludes": [
            "reference_javascript_v1",
            "reference_kotlin_v1",
            "reference_swift_v1",
        ],
    },
    {
        "title": "Initializing",
        "id": "initializing",
        "slug": "initializing",
        "type": "function",
    },
    {
        "title": "TypeScript support",
        "id": "typescript-support",
        "slug": "typescript-support",
        "type": "markdown",
        "excludes": list(_V1_AND_LEGACY_REFS),
    },
    {
        "title": "Upgrade guide",
        "id": "upgrade-guide",
        "slug": "upgrade-guide",
        "type": "markdown",
        "excludes": [
            "reference_javascript_v2",
            "reference_dart_v1",
            "reference_python_v2",
            "reference_csharp_v0",
            "reference_csharp_v1",
            "reference_swift_v1",
            "reference_swift_v2",
            "reference_kotlin_v1",
            "reference_kotlin_v2",
            "reference_kotlin_v3",
        ],
    },
)

STATIC_BOTTOM_SECTIONS: tuple[SectionCategory, ...] = (
    {
        "type": CATEGORY_TYPE,
        "title": "Misc",
        "excludes": [
            "reference_dart_v1",
            "reference_dart_v2",
            "reference_javascript_v1",
            "reference_javascript_v2",
            "reference_kotlin_v1",
            "reference_kotlin_v2",
            "reference_python_v2",
            "reference_swift_v1",
            "reference_swift_v2",
            "reference_kotlin_v3",
        ],
        "items": [
            {
                "title": "Release Notes",
                "id": "release-notes",
                "slug": "release-notes",
                "isFunc": False,
                "type": "markdown",
            }
        ],
    },
)

STATIC_SECTION_IDS: frozenset[str] = frozenset(
    [
        *(section["id"] for section in STATIC_TOP_SECTIONS),
        *(
            item["id"]
            for category in STATIC_BOTTOM_SECTIONS
            for item in category.get("items", [])
        ),
    ]
)

CATEGORY_CONFIG: dict[CategoryKey, CategoryConfig] = {
    CategoryKey.DATABASE: CategoryConfig("Database", "database"),
    CategoryKey.AUTH: CategoryConfig("Auth", "auth"),
    CategoryKey.EDGE_FUNCTIONS: CategoryConfig("Edge Functions", "functions"),
    CategoryKey.REALTIME: CategoryConfig("Realtime", "realtime"),
    CategoryKey.STORAGE: CategoryConfig("Storage", "storage"),
}

CATEGORY_ORDER: tuple[CategoryKey, ...] = (
    CategoryKey.DATABASE,
    CategoryKey.AUTH,
    CategoryKey.EDGE_FUNCTIONS,
    CategoryKey.REALTIME,
    CategoryKey.STORAGE,
)

DYNAMIC_CATEGORY_TITLES: frozenset[str] = frozenset(
    CATEGORY_CONFIG[key].title for key in CATEGORY_ORDER
)

ID_CATEGORY_OVERRIDES: dict[str, CategoryMeta] = {
    "auth-api": CategoryMeta(CategoryKey.AUTH),
    "auth-mfa-api": CategoryMeta(CategoryKey.AUTH),
    "admin-api": CategoryMeta(CategoryKey.AUTH, "auth-admin"),
    "using-filters": CategoryMeta(CategoryKey.DATABASE),
    "using-modifiers": CategoryMeta(CategoryKey.DATABASE),
}

GROUP_PARENT_CONFIG: dict[str, CategoryMeta] = {
    "using-filters": CategoryMeta(CategoryKey.DATABASE),
    "using-modifiers": CategoryMeta(CategoryKey.DATABASE),
    "auth-mfa-api": CategoryMeta(CategoryKey.AUTH),
    "admin-api": CategoryMeta(CategoryKey.AUTH, "auth-admin"),
}

GROUP_CHILD_PATTERNS: tuple[GroupChildPattern, ...] = (
    GroupChildPattern("using-filters", ("PostgrestFilterBuilder.",)),
    GroupChildPattern("using-modifiers", ("PostgrestTransformBuilder.",)),
    GroupChildPattern("auth-mfa-api", ("GoTrueMFAApi.",)),
    GroupChildPattern(
        "admin-api",
        ("GoTrueAdmin", "GoTrueAdminOAuthApi", "AuthOAuthServerApi."),
    ),
)

# Source packages route wholesale; auth-js and the umbrella package need the
# member-level rules in ``builder.category_for``.
PACKAGE_CATEGORIES: dict[str, CategoryMeta] = {
    "@supabase/postgrest-js": CategoryMeta(CategoryKey.DATABASE),
    "@supabase/storage-js": CategoryMeta(CategoryKey.STORAGE),
    "@supabase/functions-js": CategoryMeta(CategoryKey.EDGE_FUNCTIONS),
    "@supabase/realtime-js": CategoryMeta(CategoryKey.REALTIME),
}

AUTH_PACKAGE = "@supabase/auth-js"
ADMIN_CLASS_PREFIXES: tuple[str, ...] = (
    "GoTrueAdmin",
    "GoTrueAdminOAuth",
    "AuthOAuthServer",
)

UMBRELLA_SKIPPED_IDS: frozenset[str] = frozenset({"initializing"})
UMBRELLA_MEMBER_CATEGORIES: tuple[tuple[tuple[str, ...], CategoryMeta], ...] = (
    (
        (
            "SupabaseClient.channel",
            "SupabaseClient.getChannels",
            "SupabaseClient.removeChannel",
            "SupabaseClient.removeAllChannels",
        ),
        CategoryMeta(CategoryKey.REALTIME),
    ),
    (
        (
            "SupabaseClient.from",
            "SupabaseClient.rpc",
            "SupabaseClient.schema",
        ),
        CategoryMeta(CategoryKey.DATABASE),
    ),
)

__all__ = [
    "ADMIN_CLASS_PREFIXES",
    "AUTH_PACKAGE",
    "CATEGORY_CONFIG",
    "CATEGORY_ORDER",
    "CATEGORY_TYPE",
    "DYNAMIC_CATEGORY_TITLES",
    "GROUP_CHILD_PATTERNS",
    "GROUP_PARENT_CONFIG",
    "ID_CATEGORY_OVERRIDES",
    "PACKAGE_CATEGORIES",
    "STATIC_BOTTOM_SECTIONS",
    "STATIC_SECTION_IDS",
    "STATIC_TOP_SECTIONS",
    "UMBRELLA_MEMBER_CATEGORIES",
    "UMBRELLA_SKIPPED_IDS",
    "CategoryConfig",
    "CategoryKey",
    "CategoryMeta",
    "GroupChildPattern",
    "SectionCategory",
    "SectionItem",
]
