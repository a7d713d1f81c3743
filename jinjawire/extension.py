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

"""Template extensions.

A :class:`TemplateExtension` contributes globals, functions and filters
to an environment.  :class:`UrlExtension` is the one shipped here; it
exposes the framework's URL helpers to templates::

    {{ path('article_show', {'id': 3}) }}          -> /article/3
    {{ url('article_show', {'id': 3}) }}           -> https://example.com/article/3
    {{ absolute_url('path/to/something') }}        -> https://example.com/path/to/something
    {{ asset('css/site.css', version=3) }}         -> /static/css/site.css?v=3
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Callable, Mapping
from typing import Any, Optional

from jinjawire.helpers import ServerUrlHelper, UrlHelper

LEGACY_URL_EXTENSION = "expressive.jinja.UrlExtension"


class TemplateExtension(ABC):
    """Base class for objects that can be added to a template environment."""

    name = ""

    def get_globals(self) -> dict[str, Any]:
        return {}

    def get_functions(self) -> dict[str, Callable[..., Any]]:
        return {}

    def get_filters(self) -> dict[str, Callable[..., Any]]:
        return {}


class UrlExtension(TemplateExtension):
    """Exposes route, absolute URL and asset URL generation to templates.

    Args:
        server_url_helper: Turns paths into absolute URLs.
        url_helper: Generates paths for named routes.
        assets_url: Prefix for asset paths.
        assets_version: Default cache-busting version appended to assets.
        globals: Variables made available to every template.
    """

    name = "jinjawire"

    def __init__(
        self,
        server_url_helper: ServerUrlHelper,
        url_helper: UrlHelper,
        assets_url: str = "",
        assets_version: Any = "",
        globals: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._server_url_helper = server_url_helper
        self._url_helper = url_helper
        self._assets_url = assets_url
        self._assets_version = assets_version
        self._globals = dict(globals or {})

    @property
    def server_url_helper(self) -> ServerUrlHelper:
        return self._server_url_helper

    @property
    def url_helper(self) -> UrlHelper:
        return self._url_helper

    @property
    def assets_url(self) -> str:
        return self._assets_url

    @property
    def assets_version(self) -> Any:
        return self._assets_version

    def get_globals(self) -> dict[str, Any]:
        return self._globals

    def get_functions(self) -> dict[str, Callable[..., Any]]:
        return {
            "absolute_url": self.render_url_from_path,
            "asset": self.render_asset_url,
            "path": self.render_uri,
            "url": self.render_url,
        }

    def render_uri(
        self,
        route: Optional[str] = None,
        route_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
        fragment: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Render the path for a named route.

        ``options={"reuse_result_params": False}`` stops the URL helper
        from merging parameters of the currently matched route.
        """
        return self._url_helper.generate(
            route,
            route_params or {},
            query_params or {},
            fragment,
            options or {},
        )

    def render_url(
        self,
        route: Optional[str] = None,
        route_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
        fragment: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Render the absolute URL for a named route."""
        return self._server_url_helper.generate(
            self.render_uri(route, route_params, query_params, fragment, options)
        )

    def render_url_from_path(self, path: Optional[str] = None) -> str:
        """Render an absolute URL from a path."""
        return self._server_url_helper.generate(path)

    def render_asset_url(self, path: str, version: Any = None) -> str:
        """Render an asset URL, versioned unless no version is known.

        An explicit *version* wins over the configured default.  ``0`` and
        ``"0"`` are real versions; only ``None`` and ``""`` mean "none".
        """
        if _is_blank(version):
            version = self._assets_version
        suffix = "" if _is_blank(version) else f"?v={version}"
        return f"{self._assets_url}{path}{suffix}"


def _is_blank(value: Any) -> bool:
    return value is None or value == ""
