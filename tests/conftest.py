import pytest

from elkaliases_docs.config import config


@pytest.fixture(autouse=True)
def default_active_class(monkeypatch):
    """Pin the active class so a local ACTIVE_CLASS does not leak into tests."""
    monkeypatch.setitem(config._attributes, "ACTIVE_CLASS", "active")
    monkeypatch.setitem(config._attributes, "active_class", "active")
