"""Environment variable stubs written to ``.env.local``."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from ..variants import ProviderVariant

__all__ = ["EnvGroup", "env_groups_for", "render_env_file"]


class EnvGroup(BaseModel):
    """A commented block of empty-valued keys for one provider."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    header: str = Field(..., description="Comment line written above the keys, including '#'.")
    keys: tuple[str, ...] = Field(..., min_length=1, description="Variable names, in file order.")


STRIPE_KEYS = EnvGroup(
    header="#Stripe Keys",
    keys=(
        "NEXT_PUBLIC_STRIPE_PUBLISHABLE_KEY",
        "STRIPE_SECRET_KEY",
        "STRIPE_WEBHOOK_SECRET",
    ),
)

MAILGUN_KEYS = EnvGroup(
    header="#Mailgun keys",
    keys=(
        "NEXT_PUBLIC_MAILGUN_API_KEY",
        "NEXT_PUBLIC_MAILGUN_DOMAIN",
        "MAILGUN_FROM_EMAIL",
    ),
)

IDENTITY_KEYS = {
    ProviderVariant.FIREBASE: EnvGroup(
        header="#Your firebase config",
        keys=(
            "NEXT_PUBLIC_FIREBASE_API_KEY",
            "NEXT_PUBLIC_FIREBASE_AUTH_DOMAIN",
            "NEXT_PUBLIC_FIREBASE_PROJECT_ID",
            "NEXT_PUBLIC_FIREBASE_STORAGE_BUCKET",
            "NEXT_PUBLIC_FIREBASE_MESSAGING_SENDER_ID",
            "NEXT_PUBLIC_FIREBASE_APP_ID",
        ),
    ),
    ProviderVariant.SUPABASE: EnvGroup(
        header="#Your supabase config",
        keys=(
            "NEXT_PUBLIC_SUPABASE_URL",
            "NEXT_PUBLIC_SUPABASE_ANON_KEY",
            "SUPABASE_SERVICE_ROLE_KEY",
        ),
    ),
}


def env_groups_for(variant: ProviderVariant) -> tuple[EnvGroup, ...]:
    return (STRIPE_KEYS, MAILGUN_KEYS, IDENTITY_KEYS[variant])


def render_env_file(groups: Iterable[EnvGroup]) -> str:
    """Render ``groups`` as dotenv text with every value left empty."""

    blocks = []
    for group in groups:
        lines = [group.header, *(f"{key}=" for key in group.keys)]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"
