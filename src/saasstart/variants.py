"""Backend provider variants supported by the generator."""

from __future__ import annotations

from enum import Enum

__all__ = ["ProviderVariant"]


class ProviderVariant(str, Enum):
    """Backend-as-a-service integration emitted into the generated app."""

    FIREBASE = "firebase"
    SUPABASE = "supabase"

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def dependencies(self) -> tuple[str, ...]:
        """Server side SDKs installed right after ``create-next-app``."""

        return _DEPENDENCIES[self]

    @property
    def client_dependencies(self) -> tuple[str, ...]:
        """Browser SDKs installed in a second ``npm install`` call."""

        return ("@stripe/stripe-js",)


_TITLES = {
    ProviderVariant.FIREBASE: "Firebase",
    ProviderVariant.SUPABASE: "Supabase",
}

_DEPENDENCIES = {
    ProviderVariant.FIREBASE: ("firebase", "stripe", "mailgun.js"),
    ProviderVariant.SUPABASE: ("@supabase/supabase-js", "@supabase/ssr", "stripe", "mailgun.js"),
}
