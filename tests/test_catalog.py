from __future__ import annotations

import pytest
from pydantic import ValidationError

from saasstart.catalog import (
    DEFAULT_ROLES,
    TemplateCatalog,
    TemplateEntry,
    TemplateGroup,
    TemplateRole,
    entries_for,
    groups_for,
)
from saasstart.errors import CatalogError
from saasstart.variants import ProviderVariant

SHARED_PATHS = {
    "app/page.tsx",
    "app/layout.tsx",
    "app/globals.css",
    "app/components/Footer.tsx",
    "app/components/Home.tsx",
    "app/components/Navbar.tsx",
    "app/components/Pricing.tsx",
    "app/components/Testimonials.tsx",
    "app/components/VideoDemo.tsx",
    "app/components/Availableservices.tsx",
    "app/assets/verified.tsx",
    "app/success/page.tsx",
    "app/cancel/page.tsx",
    "app/constants/Constants.ts",
    "app/api/payments/route.ts",
    "app/api/payments/webhook/route.ts",
    "lib/database.ts",
    "lib/auth.ts",
    "lib/payments.ts",
    "lib/email.ts",
    ".env.local",
}

EXPECTED_PATHS = {
    ProviderVariant.FIREBASE: SHARED_PATHS | {"app/api/auth/route.ts"},
    ProviderVariant.SUPABASE: SHARED_PATHS
    | {
        "utils/supabase/client.ts",
        "utils/supabase/middleware.ts",
        "app/components/PortalButton.tsx",
        "app/portal",
    },
}


@pytest.mark.parametrize("variant", list(ProviderVariant))
def test_path_set_is_exact_and_unique(variant):
    paths = [entry.relative_path for entry in entries_for(variant)]
    assert len(paths) == len(set(paths))
    assert set(paths) == EXPECTED_PATHS[variant]


def test_only_supabase_has_directory_entry():
    firebase_dirs = [entry for entry in entries_for(ProviderVariant.FIREBASE) if entry.is_directory]
    supabase_dirs = [entry for entry in entries_for(ProviderVariant.SUPABASE) if entry.is_directory]
    assert firebase_dirs == []
    assert [entry.relative_path for entry in supabase_dirs] == ["app/portal"]


@pytest.mark.parametrize("variant", list(ProviderVariant))
def test_entries_follow_stage_order(variant):
    order = list(TemplateGroup)
    indices = [order.index(entry.group) for entry in entries_for(variant)]
    assert indices == sorted(indices)
    assert list(groups_for(variant)) == order


def test_groups_match_original_stage_contents():
    groups = groups_for(ProviderVariant.FIREBASE)
    assert [e.relative_path for e in groups[TemplateGroup.EXISTING_FILE_OVERRIDES]] == [
        "app/page.tsx",
        "app/globals.css",
        "app/layout.tsx",
    ]
    assert [e.relative_path for e in groups[TemplateGroup.ENV_FILE]] == [".env.local"]
    assert [e.relative_path for e in groups[TemplateGroup.ASSETS]] == ["app/assets/verified.tsx"]


def test_env_file_starts_with_stripe_then_mailgun_keys():
    env = next(e for e in entries_for(ProviderVariant.FIREBASE) if e.relative_path == ".env.local")
    lines = env.content.splitlines()
    assert lines[:8] == [
        "#Stripe Keys",
        "NEXT_PUBLIC_STRIPE_PUBLISHABLE_KEY=",
        "STRIPE_SECRET_KEY=",
        "STRIPE_WEBHOOK_SECRET=",
        "",
        "#Mailgun keys",
        "NEXT_PUBLIC_MAILGUN_API_KEY=",
        "NEXT_PUBLIC_MAILGUN_DOMAIN=",
    ]
    assert "#Your firebase config" in lines


def test_variant_specific_glue_code():
    firebase_db = next(e for e in entries_for(ProviderVariant.FIREBASE) if e.relative_path == "lib/database.ts")
    supabase_db = next(e for e in entries_for(ProviderVariant.SUPABASE) if e.relative_path == "lib/database.ts")
    assert "firebase/app" in firebase_db.content
    assert "@/utils/supabase/client" in supabase_db.content


def test_constants_embed_app_title():
    constants = next(
        e for e in entries_for(ProviderVariant.SUPABASE) if e.relative_path == "app/constants/Constants.ts"
    )
    assert constants.content.startswith("// ")
    assert '"title": "Your App Name"' in constants.content
    assert constants.content.rstrip().endswith("};")


@pytest.mark.parametrize("variant", list(ProviderVariant))
def test_components_reference_generated_routes(variant):
    pricing = next(e for e in entries_for(variant) if e.relative_path == "app/components/Pricing.tsx")
    assert 'fetch("/api/payments"' in pricing.content
    assert 'from "../assets/verified"' in pricing.content


def test_duplicate_paths_are_rejected():
    roles = list(DEFAULT_ROLES) + [
        TemplateRole(group=TemplateGroup.ASSETS, path="lib/email.ts", content="// duplicate\n")
    ]
    catalog = TemplateCatalog(roles)
    with pytest.raises(CatalogError):
        catalog.entries_for(ProviderVariant.FIREBASE)


def test_variant_only_roles_do_not_collide_across_variants():
    roles = [
        TemplateRole(group=TemplateGroup.EMAIL, path="lib/x.ts", content={ProviderVariant.FIREBASE: "a"}),
        TemplateRole(group=TemplateGroup.EMAIL, path="lib/x.ts", content={ProviderVariant.SUPABASE: "b"}),
    ]
    catalog = TemplateCatalog(roles)
    assert [e.content for e in catalog.entries_for(ProviderVariant.FIREBASE)] == ["a"]
    assert [e.content for e in catalog.entries_for("supabase")] == ["b"]


@pytest.mark.parametrize("path", [(), ("..", "etc"), ("app", ""), ("a/b",)])
def test_entry_rejects_unsafe_paths(path):
    with pytest.raises(ValidationError):
        TemplateEntry(path=path, content="x", group=TemplateGroup.ASSETS)


def test_entries_are_immutable():
    entry = entries_for(ProviderVariant.FIREBASE)[0]
    with pytest.raises(ValidationError):
        entry.content = "changed"
