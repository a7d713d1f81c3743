"""Tests for configuration merging."""

from __future__ import annotations

from collections import OrderedDict
from types import MappingProxyType

import pytest

from jinjawire.config import deep_merge, merge_config
from jinjawire.exceptions import InvalidConfigError


class TestMergeConfigValidation:
    @pytest.mark.parametrize(
        "config, type_name",
        [
            (True, "bool"),
            (False, "bool"),
            (0, "int"),
            (1, "int"),
            (0.0, "float"),
            (1.1, "float"),
            ("not-configuration", "str"),
            (["templates"], "list"),
            (object(), "object"),
        ],
    )
    def test_rejects_non_mapping_config(self, config, type_name):
        with pytest.raises(InvalidConfigError, match=f"received {type_name}$"):
            merge_config(config)

    def test_error_message(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            merge_config("foo")
        assert str(exc_info.value) == "Config service MUST be a mapping; received str"

    def test_accepts_any_mapping(self):
        config = MappingProxyType({"templates": {"extension": "html"}})
        assert merge_config(config) == {"extension": "html"}

    def test_ordered_dict_returns_plain_dict(self):
        merged = merge_config(OrderedDict(jinja2=OrderedDict(debug=True)))
        assert type(merged) is dict
        assert merged == {"debug": True}


class TestMergeConfig:
    def test_empty_config(self):
        assert merge_config({}) == {}

    def test_recursive_merge_engine_wins(self):
        config = {
            "templates": {"a": 1, "b": {"x": 1}},
            "jinja2": {"b": {"y": 2}, "c": 3},
        }
        assert merge_config(config) == {"a": 1, "b": {"x": 1, "y": 2}, "c": 3}

    def test_engine_scalar_overrides_template_scalar(self):
        config = {
            "templates": {"assets_url": "/static/"},
            "jinja2": {"assets_url": "https://cdn.example.com/"},
        }
        assert merge_config(config)["assets_url"] == "https://cdn.example.com/"

    def test_sequences_are_replaced_not_concatenated(self):
        config = {
            "templates": {"extensions": ["a", "b"]},
            "jinja2": {"extensions": ["c"]},
        }
        assert merge_config(config)["extensions"] == ["c"]

    def test_scalar_replaces_mapping(self):
        config = {
            "templates": {"globals": {"a": 1}},
            "jinja2": {"globals": None},
        }
        assert merge_config(config)["globals"] is None

    def test_ignores_non_mapping_subtrees(self):
        config = {"templates": "oops", "jinja2": ["nope"], "debug": True}
        assert merge_config(config) == {}

    def test_other_top_level_keys_are_not_merged(self):
        config = {"debug": True, "dependencies": {}, "templates": {"extension": "html"}}
        assert merge_config(config) == {"extension": "html"}

    def test_merges_documented_keys(self):
        config = {
            "templates": {
                "extension": "html.jinja",
                "paths": {},
            },
            "jinja2": {
                "cache_dir": "data/cache",
                "assets_url": "/static/",
                "assets_version": "1",
                "extensions": [],
                "runtime_loaders": [],
                "globals": {"ga_tracking": "UA-XXXXX-X"},
                "timezone": "America/New_York",
            },
        }
        merged = merge_config(config)
        for key in (
            "extension", "paths", "cache_dir", "assets_url", "assets_version",
            "extensions", "runtime_loaders", "globals", "timezone",
        ):
            assert key in merged

    def test_inputs_are_not_mutated(self):
        templates = {"b": {"x": 1}}
        engine = {"b": {"y": 2}}
        merge_config({"templates": templates, "jinja2": engine})
        assert templates == {"b": {"x": 1}}
        assert engine == {"b": {"y": 2}}


class TestDeepMerge:
    def test_nested_three_levels(self):
        base = {"a": {"b": {"c": 1, "d": 2}}}
        override = {"a": {"b": {"d": 3, "e": 4}}}
        assert deep_merge(base, override) == {"a": {"b": {"c": 1, "d": 3, "e": 4}}}

    def test_mapping_replaces_scalar(self):
        assert deep_merge({"a": 1}, {"a": {"b": 2}}) == {"a": {"b": 2}}
