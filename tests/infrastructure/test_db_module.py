"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("HOUSEHOLD_DB_URL", "postgresql://example")

    assert db_module._get_env_var("HOUSEHOLD_DB_URL") == "postgresql://example"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("HOUSEHOLD_DB_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module._get_env_var("HOUSEHOLD_DB_URL")


def test_get_env_var_returns_default_when_missing(monkeypatch):
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("HOUSEHOLD_DB_URL", raising=False)

    assert db_module._get_env_var("HOUSEHOLD_DB_URL", default="") == ""


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://household")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://household"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_get_household_engine_caches_engine(monkeypatch):
    """get_household_engine should memoize the created engine."""
    db_module._household_engine = None
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("HOUSEHOLD_DB_URL", "postgresql://household")

    engine_one = db_module.get_household_engine()
    engine_two = db_module.get_household_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://household"
    assert created == ["postgresql://household"]
    db_module._household_engine = None


def test_get_household_engine_defaults_to_sqlite(monkeypatch, tmp_path):
    """Without HOUSEHOLD_DB_URL a SQLite file under data/ is used."""
    db_module._household_engine = None
    created = []
    monkeypatch.setattr(
        db_module,
        "_create_engine",
        lambda url: created.append(url) or "engine",
    )
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(db_module, "get_project_root", lambda: tmp_path)
    monkeypatch.delenv("HOUSEHOLD_DB_URL", raising=False)

    db_module.get_household_engine()

    expected = tmp_path / "data" / db_module.DEFAULT_DB_FILENAME
    assert created == [f"sqlite:///{expected}"]
    assert expected.parent.is_dir()
    db_module._household_engine = None


def test_adapter_returns_shared_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    monkeypatch.setattr(
        db_module,
        "get_household_engine",
        lambda: "household_engine",
    )

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_household_engine() == "household_engine"


def test_adapter_with_explicit_url_builds_own_engine(monkeypatch):
    created = []
    monkeypatch.setattr(
        db_module,
        "_create_engine",
        lambda url: created.append(url) or f"engine:{url}",
    )

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter("sqlite:///x.db")

    assert adapter.get_household_engine() == "engine:sqlite:///x.db"
    assert adapter.get_household_engine() == "engine:sqlite:///x.db"
    assert created == ["sqlite:///x.db"]
