from __future__ import annotations

from config.loader import ConfigLoader, get_config_loader, reset_config_loader


def test_environment_overrides_env_file(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("CARWASH_TEST_URL=http://from-file:5000/\nCARWASH_TEST_TIMEOUT=12.5\n")
    monkeypatch.setenv("CARWASH_TEST_URL", "http://from-env:5000/")
    monkeypatch.delenv("CARWASH_TEST_TIMEOUT", raising=False)

    loader = ConfigLoader(str(env_file))

    assert loader.get_url("CARWASH_TEST_URL", "http://localhost:5000") == "http://from-env:5000"
    assert loader.get("CARWASH_TEST_TIMEOUT", 30.0) == 12.5


def test_values_are_coerced_to_default_type(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("CARWASH_TEST_WIDTH", "58")
    monkeypatch.setenv("CARWASH_TEST_FLAG", "yes")
    monkeypatch.setenv("CARWASH_TEST_BAD", "wide")
    monkeypatch.setenv("CARWASH_TEST_BLANK", "  ")

    loader = ConfigLoader(str(tmp_path / "missing.env"))

    assert loader.get("CARWASH_TEST_WIDTH", 80) == 58
    assert loader.get("CARWASH_TEST_FLAG", False) is True
    assert loader.get("CARWASH_TEST_BAD", 80) == 80
    assert loader.get("CARWASH_TEST_BLANK", "info") == "info"
    assert loader.get("CARWASH_TEST_UNSET", "~/tokens.json").endswith("tokens.json")


def test_env_file_location_from_environment(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("CARWASH_TEST_LEVEL=debug\n")
    monkeypatch.setenv("CARWASH_ENV_FILE", str(env_file))
    monkeypatch.delenv("CARWASH_TEST_LEVEL", raising=False)
    reset_config_loader()

    loader = get_config_loader()
    assert loader.env_path == env_file
    assert loader.get("CARWASH_TEST_LEVEL", "info") == "debug"
    assert get_config_loader() is loader
