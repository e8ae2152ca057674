from __future__ import annotations

import json

import pytest

from carwash_auth.credentials import CredentialStore
from tests.helpers import make_jwt
from utils.storage import MemoryTokenStorage, TokenStorage


def test_get_hydrates_from_durable_store_once() -> None:
    storage = MemoryTokenStorage({"accessToken": "A1", "refreshToken": "R1"})
    store = CredentialStore(storage)

    assert not store.hydrated
    first = store.get()
    second = store.get()

    assert first.access_token == "A1"
    assert first.refresh_token == "R1"
    assert second == first
    assert storage.loads == 1


def test_set_is_visible_without_reading_durable_store() -> None:
    storage = MemoryTokenStorage()
    store = CredentialStore(storage)

    store.set("A2", "R2")
    pair = store.get()

    assert (pair.access_token, pair.refresh_token) == ("A2", "R2")
    assert storage.loads == 0
    assert storage.load_tokens() == {"accessToken": "A2", "refreshToken": "R2"}


def test_set_requires_both_tokens() -> None:
    store = CredentialStore(MemoryTokenStorage())
    with pytest.raises(ValueError):
        store.set("A1", "")
    with pytest.raises(ValueError):
        store.set("", "R1")


def test_clear_wins_over_stale_durable_file(tmp_path) -> None:
    token_file = tmp_path / "tokens.json"
    store = CredentialStore(TokenStorage(str(token_file)))
    store.set("A1", "R1")

    store.clear()
    assert not token_file.exists()

    # Another process writes the file back; memory stays authoritative
    token_file.write_text(json.dumps({"accessToken": "A9", "refreshToken": "R9"}))
    assert not store.get().is_present


def test_new_store_restores_pair_written_by_previous_process(tmp_path) -> None:
    token_file = str(tmp_path / "tokens.json")
    CredentialStore(TokenStorage(token_file)).set("A1", "R1")

    pair = CredentialStore(TokenStorage(token_file)).get()
    assert (pair.access_token, pair.refresh_token) == ("A1", "R1")


def test_status_without_tokens() -> None:
    status = CredentialStore(MemoryTokenStorage()).get_status()
    assert status["has_tokens"] is False
    assert status["is_expired"] is True
    assert status["time_until_expiry"] == "No tokens"
    assert status["location"] == "memory"


def test_status_reports_access_token_expiry() -> None:
    store = CredentialStore(MemoryTokenStorage())
    store.set(make_jwt(expires_in=2 * 3600 + 120), "R1")

    status = store.get_status()
    assert status["has_tokens"] is True
    assert status["is_expired"] is False
    assert status["expires_at"] is not None
    assert status["time_until_expiry"].startswith("2h ")


def test_status_flags_expired_access_token() -> None:
    store = CredentialStore(MemoryTokenStorage())
    store.set(make_jwt(expires_in=-60), "R1")
    assert store.get_status()["is_expired"] is True


def test_status_with_opaque_token() -> None:
    store = CredentialStore(MemoryTokenStorage())
    store.set("opaque-token", "R1")

    status = store.get_status()
    assert status["has_tokens"] is True
    assert status["expires_at"] is None
    assert status["time_until_expiry"] == "unknown"
