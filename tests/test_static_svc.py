import asyncio

import pytest

from farmstand.domain.services.static_svc import read_asset, resolve_within


@pytest.fixture
def root(tmp_path):
    public = tmp_path / "public"
    (public / "css").mkdir(parents=True)
    (public / "css" / "site.css").write_text("body{}", encoding="utf-8")
    (tmp_path / "secret.txt").write_text("top secret", encoding="utf-8")
    return public


def test_resolve_within_joins_inside_root(root):
    assert resolve_within(root, "css/site.css") == (root / "css" / "site.css").resolve()


@pytest.mark.parametrize("relative", ["../secret.txt", "css/../../secret.txt", "a/b/../../../secret.txt"])
def test_resolve_within_blocks_escapes(root, relative):
    assert resolve_within(root, relative) is None


def test_leading_slash_stays_inside_root(root):
    assert resolve_within(root, "/css/site.css") == (root / "css" / "site.css").resolve()


def test_read_asset_returns_bytes_and_type(root):
    assert asyncio.run(read_asset(root, "css/site.css")) == (b"body{}", "text/css")


@pytest.mark.parametrize("relative", ["css/missing.css", "css", "", "../secret.txt", "bad\x00name.css"])
def test_read_asset_failures_are_none(root, relative):
    assert asyncio.run(read_asset(root, relative)) is None
