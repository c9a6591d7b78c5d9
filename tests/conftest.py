"""Shared fixtures: apps built on the bundled site or on a throwaway copy of it."""

import json
import shutil

import pytest
from fastapi.testclient import TestClient

from farmstand.core.config import DEFAULT_SITE_DIR, Settings
from farmstand.main import create_app


def make_settings(site_dir=DEFAULT_SITE_DIR) -> Settings:
    return Settings(_env_file=None, SITE_DIR=site_dir)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def products():
    """Raw product records of the bundled catalog, in order."""
    with open(DEFAULT_SITE_DIR / "dev-data" / "data.json", encoding="utf-8") as f:
        return json.load(f)["products"]


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def site_dir(tmp_path):
    """Writable copy of the bundled site, placed one level below tmp_path."""
    target = tmp_path / "site"
    shutil.copytree(DEFAULT_SITE_DIR, target)
    return target


@pytest.fixture
def site_client(site_dir):
    with TestClient(create_app(make_settings(site_dir))) as c:
        yield c
