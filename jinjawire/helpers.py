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

"""URL helper contracts supplied by the web framework.

The protocol classes double as the preferred container ids; the
``LEGACY_*`` strings are the ids used before the package was renamed.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

LEGACY_SERVER_URL_HELPER = "expressive.helper.ServerUrlHelper"
LEGACY_URL_HELPER = "expressive.helper.UrlHelper"


@runtime_checkable
class ServerUrlHelper(Protocol):
    """Turns a path into an absolute URL (scheme and host prepended)."""

    def generate(self, path: Optional[str] = None) -> str: ...


@runtime_checkable
class UrlHelper(Protocol):
    """Generates a path for a named route.

    ``options`` understands ``reuse_result_params`` (default ``True``):
    merge parameters from the currently matched route into the result.
    """

    def generate(
        self,
        route_name: Optional[str] = None,
        route_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
        fragment_identifier: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str: ...
