"""Command line entry points for the saasstart generators."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .commands import DEFAULT_SCAFFOLD_TIMEOUT
from .config import ScaffoldConfig
from .errors import ProjectNameError
from .orchestrator import ScaffoldOrchestrator
from .variants import ProviderVariant

LOGGER = logging.getLogger(__name__)


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number '{value}'") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError("timeout must be greater than zero")
    return number


def build_parser(variant: ProviderVariant) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"saasstart-{variant.value}",
        description=f"Scaffold a Next.js SaaS starter wired to {variant.title}, Stripe and Mailgun",
    )
    parser.add_argument("--name", help="Project name; skips the interactive prompt")
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory in which the project folder is created (defaults to the current directory)",
    )
    parser.add_argument(
        "--atomic",
        action="store_true",
        help="Undo every template write if any one of them fails",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=DEFAULT_SCAFFOLD_TIMEOUT,
        help="Seconds to wait for create-next-app before giving up",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None, *, variant: ProviderVariant = ProviderVariant.FIREBASE) -> int:
    parser = build_parser(variant)
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ScaffoldConfig.create(
            variant,
            parent_directory=args.directory,
            name=args.name,
            atomic=args.atomic,
            scaffold_timeout=args.timeout,
        )
    except ProjectNameError as exc:
        parser.error(str(exc))

    try:
        return ScaffoldOrchestrator(config).run()
    except Exception:
        LOGGER.exception("unexpected failure while scaffolding")
        return 1


def firebase_main(argv: Sequence[str] | None = None) -> int:
    return main(argv, variant=ProviderVariant.FIREBASE)


def supabase_main(argv: Sequence[str] | None = None) -> int:
    return main(argv, variant=ProviderVariant.SUPABASE)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
