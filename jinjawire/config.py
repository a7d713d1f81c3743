# jinjawire — Jinja2 templating bridge for container-driven web applications
# Copyright (C) 2026 The jinjawire contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Configuration merging.

Applications keep framework-level template settings under ``templates``
and engine settings under ``jinja2``::

    {
        "debug": False,
        "templates": {
            "extension": "html.jinja",
            "paths": {"layout": ["templates/layout"], 0: "templates/app"},
            "assets_url": "/static/",
        },
        "jinja2": {
            "cache_dir": "data/cache/jinja",
            "timezone": "Europe/Berlin",
            "globals": {"site_name": "Example"},
        },
    }

:func:`merge_config` flattens both into one option mapping, with the
``jinja2`` values taking precedence.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinjawire.exceptions import InvalidConfigError

CONFIG_SERVICE = "config"
TEMPLATES_KEY = "templates"
ENGINE_KEY = "jinja2"
DEFAULT_EXTENSION = "html.jinja"


def merge_config(config: Any) -> dict[str, Any]:
    """Merge the ``templates`` and ``jinja2`` subtrees of *config*.

    Raises :class:`InvalidConfigError` if *config* is not a mapping.
    """
    if not isinstance(config, Mapping):
        raise InvalidConfigError(
            f"Config service MUST be a mapping; received {type(config).__name__}"
        )

    templates = config.get(TEMPLATES_KEY)
    engine = config.get(ENGINE_KEY)
    return deep_merge(
        templates if isinstance(templates, Mapping) else {},
        engine if isinstance(engine, Mapping) else {},
    )


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return *base* recursively overlaid with *override*.

    Nested mappings are merged key by key; any other value (sequences
    included) in *override* replaces the one in *base*.  Neither input is
    modified.
    """
    merged: dict[str, Any] = {
        key: dict(value) if isinstance(value, Mapping) else value
        for key, value in base.items()
    }
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        elif isinstance(value, Mapping):
            merged[key] = dict(value)
        else:
            merged[key] = value
    return merged


def raw_config(container: Any) -> Any:
    """Return the unmerged ``config`` service, or ``{}`` if absent."""
    return container.get(CONFIG_SERVICE) if container.has(CONFIG_SERVICE) else {}
