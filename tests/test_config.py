from __future__ import annotations

from pathlib import Path

import pytest

from saasstart.config import ScaffoldConfig
from saasstart.errors import ProjectNameError
from saasstart.materializer import WritePolicy
from saasstart.variants import ProviderVariant


def test_create_resolves_directory_and_policy(tmp_path: Path):
    config = ScaffoldConfig.create("supabase", parent_directory=tmp_path, name="demo", atomic=True)

    assert config.variant is ProviderVariant.SUPABASE
    assert config.parent_directory == tmp_path.resolve()
    assert config.write_policy is WritePolicy.ATOMIC
    assert config.project_root("demo") == tmp_path.resolve() / "demo"


def test_create_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    config = ScaffoldConfig.create(ProviderVariant.FIREBASE)

    assert config.parent_directory == tmp_path.resolve()
    assert config.name is None
    assert config.write_policy is WritePolicy.BEST_EFFORT


def test_create_rejects_invalid_name():
    with pytest.raises(ProjectNameError):
        ScaffoldConfig.create(ProviderVariant.FIREBASE, name="1abc")


def test_create_rejects_non_positive_timeout():
    with pytest.raises(ValueError):
        ScaffoldConfig.create(ProviderVariant.FIREBASE, scaffold_timeout=0)


def test_unknown_variant_is_rejected():
    with pytest.raises(ValueError):
        ScaffoldConfig.create("appwrite")
