"""Tests for UrlExtension."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from jinjawire.extension import UrlExtension


@pytest.fixture
def helpers():
    server_url_helper = MagicMock()
    url_helper = MagicMock()
    return server_url_helper, url_helper


def make_extension(helpers, assets_url="", assets_version="", globals=None):
    server_url_helper, url_helper = helpers
    return UrlExtension(server_url_helper, url_helper, assets_url, assets_version, globals)


class TestRegistration:
    def test_registers_functions(self, helpers):
        functions = make_extension(helpers).get_functions()
        assert sorted(functions) == ["absolute_url", "asset", "path", "url"]

    def test_maps_functions_to_methods(self, helpers):
        extension = make_extension(helpers)
        functions = extension.get_functions()
        assert functions["absolute_url"] == extension.render_url_from_path
        assert functions["asset"] == extension.render_asset_url
        assert functions["path"] == extension.render_uri
        assert functions["url"] == extension.render_url

    def test_globals_are_returned_verbatim(self, helpers):
        globals = {"ga_tracking": "UA-XXXXX-X", "nested": {"a": [1, 2]}}
        assert make_extension(helpers, globals=globals).get_globals() == globals

    def test_globals_default_to_empty(self, helpers):
        assert make_extension(helpers).get_globals() == {}

    def test_name(self, helpers):
        assert make_extension(helpers).name == "jinjawire"


class TestUrls:
    def test_render_uri_delegates_to_url_helper(self, helpers):
        _, url_helper = helpers
        url_helper.generate.return_value = "/article/3"
        extension = make_extension(helpers)

        assert extension.render_uri("article_show", {"id": 3}) == "/article/3"
        url_helper.generate.assert_called_once_with("article_show", {"id": 3}, {}, None, {})

    def test_render_uri_passes_all_arguments_in_order(self, helpers):
        _, url_helper = helpers
        url_helper.generate.return_value = "/a?b=c#d"
        extension = make_extension(helpers)

        extension.render_uri("a", {"x": 1}, {"b": "c"}, "d", {"reuse_result_params": False})
        url_helper.generate.assert_called_once_with(
            "a", {"x": 1}, {"b": "c"}, "d", {"reuse_result_params": False}
        )

    def test_render_url_uses_both_helpers(self, helpers):
        server_url_helper, url_helper = helpers
        url_helper.generate.return_value = "/article/3"
        server_url_helper.generate.return_value = "http://example.com/article/3"
        extension = make_extension(helpers)

        assert extension.render_url("article_show", {"id": 3}) == "http://example.com/article/3"
        url_helper.generate.assert_called_once_with("article_show", {"id": 3}, {}, None, {})
        server_url_helper.generate.assert_called_once_with("/article/3")

    def test_render_url_from_path_delegates_to_server_url_helper(self, helpers):
        server_url_helper, _ = helpers
        server_url_helper.generate.return_value = "http://example.com/foo/bar"
        extension = make_extension(helpers)

        assert extension.render_url_from_path("foo/bar") == "http://example.com/foo/bar"
        server_url_helper.generate.assert_called_once_with("foo/bar")

    def test_render_url_from_path_without_path(self, helpers):
        server_url_helper, _ = helpers
        make_extension(helpers).render_url_from_path()
        server_url_helper.generate.assert_called_once_with(None)


class TestAssets:
    def test_uses_configured_url_and_version(self, helpers):
        extension = make_extension(helpers, "https://images.example.com/", "XYZ")
        assert extension.render_asset_url("foo.png") == "https://images.example.com/foo.png?v=XYZ"

    def test_explicit_version_wins(self, helpers):
        extension = make_extension(helpers, "https://images.example.com/", "XYZ")
        assert extension.render_asset_url("foo.png", "ABC") == "https://images.example.com/foo.png?v=ABC"

    @pytest.mark.parametrize("empty", [None, ""])
    def test_no_version(self, helpers, empty):
        extension = make_extension(helpers, "https://images.example.com/", empty)
        assert extension.render_asset_url("foo.png") == "https://images.example.com/foo.png"
        assert extension.render_asset_url("foo.png", empty) == "https://images.example.com/foo.png"

    @pytest.mark.parametrize("empty", [None, ""])
    def test_blank_explicit_version_falls_back_to_default(self, helpers, empty):
        extension = make_extension(helpers, "/", "XYZ")
        assert extension.render_asset_url("foo.png", empty) == "/foo.png?v=XYZ"

    @pytest.mark.parametrize("zero", [0, "0"])
    def test_zero_is_a_version(self, helpers, zero):
        extension = make_extension(helpers, "https://images.example.com/", zero)
        assert extension.render_asset_url("foo.png") == "https://images.example.com/foo.png?v=0"

    def test_explicit_zero_overrides_default(self, helpers):
        extension = make_extension(helpers, "/", "XYZ")
        assert extension.render_asset_url("foo.png", 0) == "/foo.png?v=0"
