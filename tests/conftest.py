from __future__ import annotations

import pytest

from config.loader import reset_config_loader
from tests.helpers import API_ROOT, ClientFactory


@pytest.fixture(autouse=True)
def _test_env(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    root = tmp_path_factory.mktemp("carwash_test")
    monkeypatch.setenv("CARWASH_ENV_FILE", str(root / "missing.env"))
    monkeypatch.setenv("CARWASH_TOKEN_FILE", str(root / "tokens.json"))
    monkeypatch.setenv("CARWASH_API_URL", API_ROOT)
    reset_config_loader()


@pytest.fixture
def make_client() -> ClientFactory:
    return ClientFactory()
