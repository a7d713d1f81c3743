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

"""Service container contract and collaborator lookup.

jinjawire never owns a container.  Factories receive whatever the
application uses, as long as it offers ``has(id)`` and ``get(id)``.
Service ids are either strings or classes.

Services that moved when the package was renamed are looked up by their
current id first and their legacy string id second::

    helper = resolve_service(container, ServerUrlHelper, LEGACY_SERVER_URL_HELPER)
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class ServiceLocator(Protocol):
    """Minimal container interface consumed by the factories."""

    def has(self, id: Hashable) -> bool: ...

    def get(self, id: Hashable) -> Any: ...


def service_name(service_id: Hashable) -> str:
    """Return a readable name for a service id (dotted path for classes)."""
    if isinstance(service_id, type):
        return f"{service_id.__module__}.{service_id.__qualname__}"
    return str(service_id)


def resolve_service(
    container: ServiceLocator, *candidate_ids: Hashable,
) -> Optional[Any]:
    """Return the service registered under the first known candidate id.

    Candidates are checked in order with one ``has`` call each; the first
    hit is fetched with a single ``get``.  Returns ``None`` when no
    candidate is registered, leaving it to the caller to decide whether
    that is fatal.
    """
    for index, service_id in enumerate(candidate_ids):
        if not container.has(service_id):
            continue
        if index:
            logger.debug(
                "Resolved %s through legacy id %s",
                service_name(candidate_ids[0]), service_name(service_id),
            )
        return container.get(service_id)
    return None
