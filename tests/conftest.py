"""Shared fixtures for jinjawire tests."""

from __future__ import annotations

import pytest

from tests.doubles import FakeServerUrlHelper, FakeUrlHelper


@pytest.fixture
def url_helper():
    return FakeUrlHelper()


@pytest.fixture
def server_url_helper():
    return FakeServerUrlHelper()


@pytest.fixture
def template_dir(tmp_path):
    """Directory with a couple of simple templates."""
    d = tmp_path / "templates"
    d.mkdir()
    (d / "hello.html").write_text("Hello {{ name }}!")
    (d / "plain.txt").write_text("plain {{ value }}")
    return d
