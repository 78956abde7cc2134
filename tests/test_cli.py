from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from saasstart import cli
from saasstart.cli import _positive_float, build_parser, main
from saasstart.materializer import WritePolicy
from saasstart.variants import ProviderVariant


class RecordingOrchestrator:
    instances: list["RecordingOrchestrator"] = []

    def __init__(self, config) -> None:
        self.config = config
        RecordingOrchestrator.instances.append(self)

    def run(self) -> int:
        return 0


@pytest.fixture()
def recorded(monkeypatch: pytest.MonkeyPatch) -> list[RecordingOrchestrator]:
    RecordingOrchestrator.instances = []
    monkeypatch.setattr(cli, "ScaffoldOrchestrator", RecordingOrchestrator)
    return RecordingOrchestrator.instances


def test_positive_float():
    assert _positive_float("2.5") == 2.5
    with pytest.raises(argparse.ArgumentTypeError):
        _positive_float("0")
    with pytest.raises(argparse.ArgumentTypeError):
        _positive_float("soon")


def test_defaults_match_interactive_run(tmp_path: Path, recorded, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    assert cli.firebase_main([]) == 0

    config = recorded[0].config
    assert config.variant is ProviderVariant.FIREBASE
    assert config.name is None
    assert config.parent_directory == tmp_path.resolve()
    assert config.write_policy is WritePolicy.BEST_EFFORT
    assert config.scaffold_timeout == 300


def test_supabase_entry_point_with_flags(tmp_path: Path, recorded):
    exit_code = cli.supabase_main(
        ["--name", "my-app", "--directory", str(tmp_path), "--atomic", "--timeout", "60"]
    )

    assert exit_code == 0
    config = recorded[0].config
    assert config.variant is ProviderVariant.SUPABASE
    assert config.name == "my-app"
    assert config.write_policy is WritePolicy.ATOMIC
    assert config.scaffold_timeout == 60


def test_invalid_preset_name_is_a_usage_error(tmp_path: Path, recorded, capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["--name", "My App", "--directory", str(tmp_path)])

    assert excinfo.value.code == 2
    assert "Project name cannot contain uppercase letters." in capsys.readouterr().err
    assert recorded == []


def test_unexpected_exception_exits_one(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    class Exploding:
        def __init__(self, config) -> None:
            pass

        def run(self) -> int:
            raise RuntimeError("boom")

    monkeypatch.setattr(cli, "ScaffoldOrchestrator", Exploding)
    assert main(["--name", "my-app", "--directory", str(tmp_path)]) == 1


def test_parser_prog_names_variant():
    assert build_parser(ProviderVariant.SUPABASE).prog == "saasstart-supabase"
