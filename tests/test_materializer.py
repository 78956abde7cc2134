from __future__ import annotations

import logging
from pathlib import Path

import pytest

from saasstart.catalog import TemplateEntry, TemplateGroup, entries_for
from saasstart.errors import MaterializationError
from saasstart.materializer import FileMaterializer, WritePolicy
from saasstart.variants import ProviderVariant


def _snapshot(root: Path) -> dict[str, bytes | None]:
    return {
        path.relative_to(root).as_posix(): (path.read_bytes() if path.is_file() else None)
        for path in sorted(root.rglob("*"))
    }


def _entry(path: str, content: str | None = "x", group: TemplateGroup = TemplateGroup.COMPONENTS) -> TemplateEntry:
    return TemplateEntry(path=tuple(path.split("/")), content=content, group=group)


@pytest.mark.parametrize("variant", list(ProviderVariant))
def test_materialize_writes_every_entry(tmp_path: Path, variant):
    entries = entries_for(variant)
    report = FileMaterializer().materialize(tmp_path, entries)

    assert report.ok
    for entry in entries:
        target = tmp_path.joinpath(*entry.path)
        if entry.is_directory:
            assert target.is_dir()
        else:
            assert target.read_text(encoding="utf-8") == entry.content
    assert len(report.written) == sum(1 for entry in entries if not entry.is_directory)


def test_materialize_is_idempotent(tmp_path: Path):
    entries = entries_for(ProviderVariant.SUPABASE)
    materializer = FileMaterializer()

    materializer.materialize(tmp_path, entries)
    first = _snapshot(tmp_path)
    second_report = materializer.materialize(tmp_path, entries)

    assert second_report.ok
    assert second_report.directories == []
    assert _snapshot(tmp_path) == first


def test_existing_files_are_overwritten(tmp_path: Path):
    page = tmp_path / "app" / "page.tsx"
    page.parent.mkdir(parents=True)
    page.write_text("a much longer default page that must be truncated", encoding="utf-8")

    FileMaterializer().materialize(tmp_path, [_entry("app/page.tsx", "short")])

    assert page.read_text(encoding="utf-8") == "short"


def test_env_file_contents(tmp_path: Path):
    FileMaterializer().materialize(tmp_path, entries_for(ProviderVariant.FIREBASE))

    text = (tmp_path / ".env.local").read_text(encoding="utf-8")
    assert text.startswith(
        "#Stripe Keys\n"
        "NEXT_PUBLIC_STRIPE_PUBLISHABLE_KEY=\n"
        "STRIPE_SECRET_KEY=\n"
        "STRIPE_WEBHOOK_SECRET=\n"
        "\n"
        "#Mailgun keys\n"
        "NEXT_PUBLIC_MAILGUN_API_KEY=\n"
        "NEXT_PUBLIC_MAILGUN_DOMAIN=\n"
        "MAILGUN_FROM_EMAIL=\n"
    )


def test_best_effort_continues_after_failure(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    # A directory squatting on the file path makes the write fail.
    (tmp_path / "app" / "components" / "Footer.tsx").mkdir(parents=True)
    entries = [
        _entry("app/components/Footer.tsx", "footer"),
        _entry("lib/database.ts", "db", TemplateGroup.DATABASE_AND_AUTH),
    ]

    with caplog.at_level(logging.ERROR, logger="saasstart.materializer"):
        report = FileMaterializer().materialize(tmp_path, entries)

    assert not report.ok
    assert [failure.path for failure in report.failures] == [tmp_path / "app" / "components" / "Footer.tsx"]
    assert (tmp_path / "lib" / "database.ts").read_text(encoding="utf-8") == "db"
    assert "Footer.tsx" in caplog.text


def test_best_effort_full_catalog_with_injected_failure(tmp_path: Path):
    def writer(path: Path, content: str) -> None:
        if path.name == "Footer.tsx":
            raise PermissionError(13, "Permission denied", str(path))
        path.write_text(content, encoding="utf-8")

    report = FileMaterializer(writer=writer).materialize(tmp_path, entries_for(ProviderVariant.FIREBASE))

    assert len(report.failures) == 1
    assert not (tmp_path / "app" / "components" / "Footer.tsx").exists()
    assert (tmp_path / "lib" / "database.ts").is_file()
    assert (tmp_path / "app" / "assets" / "verified.tsx").is_file()


def test_atomic_rolls_back_created_and_overwritten_files(tmp_path: Path):
    layout = tmp_path / "app" / "layout.tsx"
    layout.parent.mkdir(parents=True)
    layout.write_text("original layout", encoding="utf-8")
    (tmp_path / "app" / "components" / "Footer.tsx").mkdir(parents=True)
    before = _snapshot(tmp_path)

    entries = [
        _entry("lib/database.ts", "db", TemplateGroup.DATABASE_AND_AUTH),
        _entry("app/layout.tsx", "new layout", TemplateGroup.EXISTING_FILE_OVERRIDES),
        _entry("app/portal", None),
        _entry("app/components/Footer.tsx", "footer"),
        _entry("app/assets/verified.tsx", "icon", TemplateGroup.ASSETS),
    ]

    with pytest.raises(MaterializationError) as excinfo:
        FileMaterializer(WritePolicy.ATOMIC).materialize(tmp_path, entries)

    assert [path for path, _ in excinfo.value.failures] == [tmp_path / "app" / "components" / "Footer.tsx"]
    assert _snapshot(tmp_path) == before
    assert layout.read_text(encoding="utf-8") == "original layout"
    assert not (tmp_path / "lib").exists()
    assert not (tmp_path / "app" / "assets").exists()


def test_atomic_success_matches_best_effort(tmp_path: Path):
    atomic_root = tmp_path / "atomic"
    best_effort_root = tmp_path / "best"
    entries = entries_for(ProviderVariant.FIREBASE)

    FileMaterializer(WritePolicy.ATOMIC).materialize(atomic_root, entries)
    FileMaterializer(WritePolicy.BEST_EFFORT).materialize(best_effort_root, entries)

    assert _snapshot(atomic_root) == _snapshot(best_effort_root)
