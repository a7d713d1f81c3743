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

"""Runtime loaders.

A *runtime* is the object backing an extension's functions, created
lazily the first time a template needs it.  The environment asks each
registered loader in turn and keeps the first non-``None`` answer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Mapping
from typing import Any, Optional


class RuntimeLoader(ABC):
    """Creates runtime objects by name."""

    @abstractmethod
    def load(self, name: Hashable) -> Optional[Any]:
        """Return the runtime for *name*, or ``None`` if unknown."""


class FactoryRuntimeLoader(RuntimeLoader):
    """Builds runtimes from a mapping of name to zero-argument factory."""

    def __init__(self, factories: Optional[Mapping[Hashable, Callable[[], Any]]] = None) -> None:
        self._factories = dict(factories or {})

    def load(self, name: Hashable) -> Optional[Any]:
        factory = self._factories.get(name)
        return factory() if factory is not None else None


class ContainerRuntimeLoader(RuntimeLoader):
    """Pulls runtimes out of the application's service container."""

    def __init__(self, container: Any) -> None:
        self.container = container

    def load(self, name: Hashable) -> Optional[Any]:
        if self.container.has(name):
            return self.container.get(name)
        return None
