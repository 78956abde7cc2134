"""Registry of the files written into a freshly created Next.js project."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from pathlib import PurePosixPath
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import CatalogError
from .templates import common, env_groups_for, firebase, render_env_file, supabase
from .variants import ProviderVariant

__all__ = [
    "DEFAULT_ROLES",
    "TemplateCatalog",
    "TemplateEntry",
    "TemplateGroup",
    "TemplateRole",
    "entries_for",
    "groups_for",
]


class TemplateGroup(str, Enum):
    """Materialization stages, declared in the order they run."""

    DATABASE_AND_AUTH = "database-and-auth"
    PAYMENTS = "payments"
    EMAIL = "email"
    CONSTANTS = "constants"
    SUCCESS_CANCEL_PAGES = "success-cancel-pages"
    COMPONENTS = "components"
    EXISTING_FILE_OVERRIDES = "existing-file-overrides"
    ENV_FILE = "env-file"
    ASSETS = "assets"


class TemplateEntry(BaseModel):
    """A file, or an empty directory, to create below the project root."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: tuple[str, ...] = Field(..., min_length=1, description="Path segments relative to the project root.")
    content: str | None = Field(None, description="File text; ``None`` marks a directory-only entry.")
    group: TemplateGroup = Field(..., description="Stage that writes this entry.")

    @field_validator("path")
    @classmethod
    def _check_segments(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for segment in value:
            if not segment or segment in {".", ".."} or "/" in segment or "\\" in segment:
                raise ValueError(f"invalid path segment {segment!r}")
        return value

    @property
    def relative_path(self) -> str:
        return PurePosixPath(*self.path).as_posix()

    @property
    def is_directory(self) -> bool:
        return self.content is None


Content = Union[str, None, Mapping[ProviderVariant, Union[str, None]]]


class TemplateRole(BaseModel):
    """One logical file of the generated app.

    ``content`` is either a single blob shared by every variant or a mapping
    from variant to blob; variants missing from the mapping skip the role.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    group: TemplateGroup
    path: str
    content: Content = None

    def resolve(self, variant: ProviderVariant) -> TemplateEntry | None:
        if isinstance(self.content, Mapping):
            if variant not in self.content:
                return None
            blob = self.content[variant]
        else:
            blob = self.content
        return TemplateEntry(path=tuple(self.path.split("/")), content=blob, group=self.group)


def _only(variant: ProviderVariant, blob: str | None) -> dict[ProviderVariant, str | None]:
    return {variant: blob}


def _per_variant(firebase_blob: str, supabase_blob: str) -> dict[ProviderVariant, str | None]:
    return {
        ProviderVariant.FIREBASE: firebase_blob,
        ProviderVariant.SUPABASE: supabase_blob,
    }


FIREBASE = ProviderVariant.FIREBASE
SUPABASE = ProviderVariant.SUPABASE
G = TemplateGroup

DEFAULT_ROLES: tuple[TemplateRole, ...] = (
    TemplateRole(group=G.DATABASE_AND_AUTH, path="lib/database.ts", content=_per_variant(firebase.DATABASE, supabase.DATABASE)),
    TemplateRole(group=G.DATABASE_AND_AUTH, path="lib/auth.ts", content=_per_variant(firebase.AUTH, supabase.AUTH)),
    TemplateRole(group=G.DATABASE_AND_AUTH, path="app/api/auth/route.ts", content=_only(FIREBASE, firebase.AUTH_ROUTE)),
    TemplateRole(group=G.DATABASE_AND_AUTH, path="utils/supabase/client.ts", content=_only(SUPABASE, supabase.BROWSER_CLIENT)),
    TemplateRole(group=G.DATABASE_AND_AUTH, path="utils/supabase/middleware.ts", content=_only(SUPABASE, supabase.MIDDLEWARE)),
    TemplateRole(group=G.PAYMENTS, path="lib/payments.ts", content=common.PAYMENTS_CLIENT),
    TemplateRole(group=G.PAYMENTS, path="app/api/payments/route.ts", content=common.PAYMENTS_ROUTE),
    TemplateRole(group=G.PAYMENTS, path="app/api/payments/webhook/route.ts", content=common.PAYMENTS_WEBHOOK_ROUTE),
    TemplateRole(group=G.EMAIL, path="lib/email.ts", content=common.EMAIL_CLIENT),
    TemplateRole(group=G.CONSTANTS, path="app/constants/Constants.ts", content=common.CONSTANTS),
    TemplateRole(group=G.SUCCESS_CANCEL_PAGES, path="app/success/page.tsx", content=common.SUCCESS_PAGE),
    TemplateRole(group=G.SUCCESS_CANCEL_PAGES, path="app/cancel/page.tsx", content=common.CANCEL_PAGE),
    TemplateRole(group=G.COMPONENTS, path="app/components/Footer.tsx", content=common.FOOTER),
    TemplateRole(group=G.COMPONENTS, path="app/components/Home.tsx", content=common.HOME),
    TemplateRole(group=G.COMPONENTS, path="app/components/Navbar.tsx", content=_per_variant(firebase.NAVBAR, supabase.NAVBAR)),
    TemplateRole(group=G.COMPONENTS, path="app/components/Pricing.tsx", content=_per_variant(firebase.PRICING, supabase.PRICING)),
    TemplateRole(group=G.COMPONENTS, path="app/components/Testimonials.tsx", content=common.TESTIMONIALS),
    TemplateRole(group=G.COMPONENTS, path="app/components/VideoDemo.tsx", content=common.VIDEO_DEMO),
    TemplateRole(group=G.COMPONENTS, path="app/components/Availableservices.tsx", content=common.AVAILABLE_SERVICES),
    TemplateRole(group=G.COMPONENTS, path="app/components/PortalButton.tsx", content=_only(SUPABASE, supabase.PORTAL_BUTTON)),
    TemplateRole(group=G.COMPONENTS, path="app/portal", content=_only(SUPABASE, None)),
    TemplateRole(group=G.EXISTING_FILE_OVERRIDES, path="app/page.tsx", content=common.PAGE),
    TemplateRole(group=G.EXISTING_FILE_OVERRIDES, path="app/globals.css", content=common.GLOBALS_CSS),
    TemplateRole(group=G.EXISTING_FILE_OVERRIDES, path="app/layout.tsx", content=common.LAYOUT),
    TemplateRole(
        group=G.ENV_FILE,
        path=".env.local",
        content=_per_variant(render_env_file(env_groups_for(FIREBASE)), render_env_file(env_groups_for(SUPABASE))),
    ),
    TemplateRole(group=G.ASSETS, path="app/assets/verified.tsx", content=common.VERIFIED_ICON),
)


class TemplateCatalog:
    """Resolve template roles into the ordered entries for one variant."""

    def __init__(self, roles: Iterable[TemplateRole] = DEFAULT_ROLES) -> None:
        self._roles = tuple(roles)
        self._cache: dict[ProviderVariant, tuple[TemplateEntry, ...]] = {}

    def entries_for(self, variant: ProviderVariant) -> tuple[TemplateEntry, ...]:
        """Return the entries for ``variant`` in materialization order.

        Entries are ordered by :class:`TemplateGroup` first and declaration
        order second. Raises :class:`CatalogError` when two roles resolve to
        the same path.
        """

        variant = ProviderVariant(variant)
        if variant not in self._cache:
            self._cache[variant] = self._build(variant)
        return self._cache[variant]

    def groups_for(self, variant: ProviderVariant) -> dict[TemplateGroup, tuple[TemplateEntry, ...]]:
        grouped: dict[TemplateGroup, list[TemplateEntry]] = {group: [] for group in TemplateGroup}
        for entry in self.entries_for(variant):
            grouped[entry.group].append(entry)
        return {group: tuple(entries) for group, entries in grouped.items()}

    def paths_for(self, variant: ProviderVariant) -> list[str]:
        return [entry.relative_path for entry in self.entries_for(variant)]

    def _build(self, variant: ProviderVariant) -> tuple[TemplateEntry, ...]:
        order = {group: index for index, group in enumerate(TemplateGroup)}
        resolved = [entry for role in self._roles if (entry := role.resolve(variant)) is not None]
        resolved.sort(key=lambda entry: order[entry.group])
        _check_unique(resolved, variant)
        return tuple(resolved)


def _check_unique(entries: Sequence[TemplateEntry], variant: ProviderVariant) -> None:
    seen: set[str] = set()
    for entry in entries:
        if entry.relative_path in seen:
            raise CatalogError(f"duplicate template path '{entry.relative_path}' for variant '{variant.value}'")
        seen.add(entry.relative_path)


_DEFAULT_CATALOG = TemplateCatalog()


def entries_for(variant: ProviderVariant) -> tuple[TemplateEntry, ...]:
    return _DEFAULT_CATALOG.entries_for(variant)


def groups_for(variant: ProviderVariant) -> dict[TemplateGroup, tuple[TemplateEntry, ...]]:
    return _DEFAULT_CATALOG.groups_for(variant)
