import pytest

import vehicles.db.supabase as supabase_db
from vehicles import main
from vehicles.exceptions import ServiceConfigurationError
from vehicles.persistence.repository import InMemoryCarRepository, SupabaseCarRepository


@pytest.fixture(autouse=True)
def fresh_client_cache():
    supabase_db.get_supabase_client.cache_clear()
    yield
    supabase_db.get_supabase_client.cache_clear()


def _configure_supabase(monkeypatch, url="https://example.supabase.co", key="service-role-key"):
    monkeypatch.setattr(supabase_db.settings, "supabase_url", url)
    monkeypatch.setattr(supabase_db.settings, "supabase_key", key)


def test_missing_credentials_use_in_memory_store(monkeypatch):
    _configure_supabase(monkeypatch, url=None, key=None)

    def unexpected(*args, **kwargs):
        raise AssertionError("create_client must not be called without credentials")

    monkeypatch.setattr(supabase_db, "create_client", unexpected)

    assert isinstance(main.build_repository(), InMemoryCarRepository)


def test_configured_supabase_is_used_as_car_store(monkeypatch):
    _configure_supabase(monkeypatch)
    fake_client = object()
    monkeypatch.setattr(supabase_db, "create_client", lambda url, key: fake_client)

    repository = main.build_repository()

    assert isinstance(repository, SupabaseCarRepository)


def test_startup_fails_when_configured_supabase_client_cannot_be_created(monkeypatch):
    _configure_supabase(monkeypatch)

    def broken(url, key):
        raise RuntimeError("invalid api key")

    monkeypatch.setattr(supabase_db, "create_client", broken)

    with pytest.raises(ServiceConfigurationError, match="invalid api key"):
        main.build_repository()
    with pytest.raises(ServiceConfigurationError):
        main.create_app()
