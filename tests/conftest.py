# tests/conftest.py
import httpx
import pytest
from rich.console import Console

from catalog_sdk.client import CatalogClient
from tests import fake_store


@pytest.fixture
def store():
    fake_store.reset()
    return fake_store


@pytest.fixture
def client(store):
    return CatalogClient(base_url="http://fakestore.test", transport=httpx.ASGITransport(app=store.app))


@pytest.fixture
def consoles():
    out = Console(record=True, width=200, force_terminal=False, color_system=None)
    err = Console(record=True, width=200, force_terminal=False, color_system=None, stderr=True)
    return out, err
