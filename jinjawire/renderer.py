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

"""Template renderer bridging the application and Jinja2.

Usage::

    renderer = JinjaRenderer(environment, suffix="html.jinja")
    renderer.add_path("templates/app", "app")
    renderer.add_default_param(JinjaRenderer.TEMPLATE_ALL, "user", user)
    html = renderer.render("app::home", {"title": "Welcome"})

Template names may be written ``namespace::name`` or ``@namespace/name``;
a name without a file extension gets the configured suffix.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from jinjawire.environment import TemplateEnvironment
from jinjawire.exceptions import InvalidArgumentError
from jinjawire.loader import NamespacedLoader

_NAMESPACED = re.compile(r"^([^:]+)::(.*)$", re.DOTALL)
_HAS_EXTENSION = re.compile(r"\.[a-z]+$", re.IGNORECASE)


@dataclass(frozen=True)
class TemplatePath:
    """A template directory and the namespace it is registered under.

    Attributes:
        path: Directory searched for templates.
        namespace: Namespace name, or ``None`` for the main namespace.
    """

    path: str
    namespace: Optional[str] = None

    def __str__(self) -> str:
        return self.path


@runtime_checkable
class TemplateRenderer(Protocol):
    """Interface applications depend on; also the renderer's service id."""

    def render(self, name: str, params: Any = None) -> str: ...

    def add_path(self, path: str | os.PathLike, namespace: Optional[str] = None) -> None: ...

    def get_paths(self) -> list[TemplatePath]: ...

    def add_default_param(self, template_name: str, param: str, value: Any) -> None: ...


class JinjaRenderer:
    """Render templates through a :class:`TemplateEnvironment`.

    Args:
        environment: Environment to render with.  A fresh one with an
            empty :class:`NamespacedLoader` is created if omitted.
        suffix: File extension appended to names that have none.
    """

    TEMPLATE_ALL = "*"

    def __init__(
        self,
        environment: Optional[TemplateEnvironment] = None,
        suffix: str = "html",
    ) -> None:
        if environment is None:
            environment = TemplateEnvironment(loader=NamespacedLoader())
        elif environment.loader is None:
            environment.loader = NamespacedLoader()

        self.environment = environment
        self.suffix = suffix if isinstance(suffix, str) else "html"
        self._default_params: dict[str, dict[str, Any]] = {}

    @property
    def loader(self) -> NamespacedLoader:
        return self.environment.loader

    def render(self, name: str, params: Any = None) -> str:
        """Render template *name* with *params*.

        Defaults registered for the requested name are merged first, then
        those registered for the normalized name fill in whatever is still
        missing; explicit *params* always win.
        """
        params = self._merge_params(name, normalize_params(params))
        template = self.normalize_template(name)
        params = self._merge_params(template, params)
        return self.environment.get_template(template).render(params)

    def add_path(self, path: str | os.PathLike, namespace: Optional[str] = None) -> None:
        """Register a template directory, appended after existing ones."""
        self.loader.add_path(path, namespace or NamespacedLoader.MAIN_NAMESPACE)

    def get_paths(self) -> list[TemplatePath]:
        """Return every registered directory in registration order."""
        paths = []
        for namespace in self.loader.get_namespaces():
            name = None if namespace == NamespacedLoader.MAIN_NAMESPACE else namespace
            for path in self.loader.get_paths(namespace):
                paths.append(TemplatePath(path, name))
        return paths

    def normalize_template(self, template: str) -> str:
        """Rewrite ``namespace::name`` to ``@namespace/name`` and add the suffix."""
        template = _NAMESPACED.sub(r"@\1/\2", template)
        if not _HAS_EXTENSION.search(template):
            return f"{template}.{self.suffix}"
        return template

    # --- default parameters -------------------------------------------------

    def add_default_param(self, template_name: str, param: str, value: Any) -> None:
        """Add a parameter passed to *template_name* unless overridden.

        Use :attr:`TEMPLATE_ALL` to target every template.
        """
        if not isinstance(template_name, str) or not template_name:
            raise InvalidArgumentError("template_name must be a non-empty string")
        if not isinstance(param, str) or not param:
            raise InvalidArgumentError("param must be a non-empty string")
        self._default_params.setdefault(template_name, {})[param] = value

    def _merge_params(self, template: str, params: dict[str, Any]) -> dict[str, Any]:
        merged = dict(self._default_params.get(self.TEMPLATE_ALL, {}))
        merged.update(self._default_params.get(template, {}))
        merged.update(params)
        return merged


def normalize_params(params: Any) -> dict[str, Any]:
    """Coerce render parameters into a plain dict.

    Accepts ``None``, mappings, named tuples and objects with attributes.
    Raises :class:`InvalidArgumentError` for scalars.
    """
    if params is None:
        return {}
    if isinstance(params, Mapping):
        return dict(params)
    if isinstance(params, (str, bytes, bool, int, float, complex)):
        raise InvalidArgumentError(
            f"JinjaRenderer expects a mapping or an object; received {type(params).__name__}"
        )
    if isinstance(params, tuple) and hasattr(params, "_asdict"):
        return dict(params._asdict())
    if is_dataclass(params) and not isinstance(params, type):
        return {f.name: getattr(params, f.name) for f in fields(params)}
    try:
        return dict(vars(params))
    except TypeError as exc:
        raise InvalidArgumentError(
            f"JinjaRenderer expects a mapping or an object; received {type(params).__name__}"
        ) from exc
