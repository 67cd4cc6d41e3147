import httpx
import pytest

from app.utils import supa
from app.utils.supa import SupabaseConfigError, SupabaseConnectionError

CFG = {"url": "https://example.supabase.co", "anon_key": "anon-key"}


@pytest.fixture(autouse=True)
def _no_secrets(monkeypatch):
    monkeypatch.setattr(supa, "st", None)
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    supa._cached_client.cache_clear()  # pylint: disable=protected-access
    yield
    supa._cached_client.cache_clear()  # pylint: disable=protected-access


def test_missing_config_disables_client():
    assert supa.read_supabase_config() is None
    assert supa.is_configured() is False
    assert supa.get_client() is None


def test_env_config(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", CFG["url"])
    monkeypatch.setenv("SUPABASE_ANON_KEY", CFG["anon_key"])
    assert supa.read_supabase_config() == CFG


def test_create_supabase_client_http_status_error(monkeypatch):
    request = httpx.Request("GET", CFG["url"])
    response = httpx.Response(404, request=request, text="Not Found")

    def _raise_http_status(*args, **kwargs):  # pragma: no cover - helper for test
        raise httpx.HTTPStatusError("not found", request=request, response=response)

    monkeypatch.setattr(supa, "create_client", _raise_http_status)

    with pytest.raises(SupabaseConfigError) as excinfo:
        supa.create_supabase_client(CFG)

    assert "HTTP 404" in str(excinfo.value)


def test_create_supabase_client_connect_error(monkeypatch):
    def _raise_connect(*args, **kwargs):  # pragma: no cover - helper for test
        raise httpx.ConnectError("down")

    monkeypatch.setattr(supa, "create_client", _raise_connect)

    with pytest.raises(SupabaseConnectionError):
        supa.create_supabase_client(CFG)


def test_get_client_is_cached(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", CFG["url"])
    monkeypatch.setenv("SUPABASE_ANON_KEY", CFG["anon_key"])
    calls = []

    def _fake_create(url, key, options=None):
        calls.append((url, key))
        return object()

    monkeypatch.setattr(supa, "create_client", _fake_create)
    first = supa.get_client()
    assert supa.get_client() is first
    assert calls == [(CFG["url"], CFG["anon_key"])]
