"""Project name rules shared by the prompt and the CLI."""

from __future__ import annotations

import re
import unicodedata

from .errors import ProjectNameError

__all__ = [
    "check_project_name",
    "slugify",
    "suggest_project_name",
    "validate_project_name",
]


EMPTY_NAME = "Project name cannot be empty."
UPPERCASE_NAME = "Project name cannot contain uppercase letters."
WHITESPACE_NAME = "Project name cannot contain spaces."
INVALID_CHARACTERS = (
    "Project name can only contain lowercase letters, numbers, hyphens, and underscores."
)
LEADING_DIGIT = "Project name cannot start with a number."

_UPPERCASE = re.compile(r"[A-Z]")
_WHITESPACE = re.compile(r"\s")
_ALLOWED = re.compile(r"[a-z0-9_-]+")
_LEADING_DIGIT = re.compile(r"[0-9]")
_SEPARATORS = re.compile(r"[\s\-]+")


def check_project_name(candidate: str) -> tuple[bool, str]:
    """Validate *candidate* and return a tuple of success flag and reason.

    The checks run in a fixed order and stop at the first failure, so a name
    such as ``"My App"`` is reported for its uppercase letter rather than its
    space.
    """

    if not candidate.strip():
        return False, EMPTY_NAME
    if _UPPERCASE.search(candidate):
        return False, UPPERCASE_NAME
    if _WHITESPACE.search(candidate):
        return False, WHITESPACE_NAME
    if not _ALLOWED.fullmatch(candidate):
        return False, INVALID_CHARACTERS
    if _LEADING_DIGIT.match(candidate):
        return False, LEADING_DIGIT
    return True, ""


def validate_project_name(candidate: str) -> str:
    """Return ``candidate`` unchanged or raise :class:`ProjectNameError`."""

    ok, reason = check_project_name(candidate)
    if not ok:
        raise ProjectNameError(candidate, reason)
    return candidate


def slugify(value: str, *, separator: str = "-") -> str:
    """Create a lowercase ASCII slug from ``value``."""

    text = unicodedata.normalize("NFKD", str(value))
    text = text.encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^\w\- ]", "", text)
    text = text.strip().lower()

    if not text:
        return ""

    collapsed = _SEPARATORS.sub(separator, text)
    collapsed = re.sub(rf"{re.escape(separator)}+", separator, collapsed)
    return collapsed.strip(separator)


def suggest_project_name(candidate: str, *, default: str = "my-app") -> str:
    """Return the closest name to ``candidate`` that passes the naming rules."""

    suggestion = slugify(candidate)
    if not suggestion:
        return default
    if suggestion[0].isdigit():
        suggestion = f"app-{suggestion}"
    return suggestion
