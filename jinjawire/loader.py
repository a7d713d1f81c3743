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

"""Jinja2 loader with namespaced directory fallback.

Resolution order when rendering ``env.get_template("@admin/users.html")``:

1. first directory registered under ``admin`` containing ``users.html``
2. the next directory registered under ``admin``, and so on

Names without a leading ``@namespace/`` are looked up in the main
namespace the same way.  Registering a second directory under an
existing namespace therefore adds a fallback location rather than
replacing the first one.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Callable

from jinja2 import BaseLoader, Environment, TemplateNotFound
from jinja2.loaders import split_template_path

logger = logging.getLogger(__name__)


class NamespacedLoader(BaseLoader):
    """Filesystem loader mapping namespaces to ordered directory lists."""

    MAIN_NAMESPACE = "__main__"

    def __init__(self, paths: Iterable[str | os.PathLike] = (), encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self._paths: dict[str, list[str]] = {}
        for path in paths:
            self.add_path(path)

    # --- registration -------------------------------------------------------

    def add_path(self, path: str | os.PathLike, namespace: str = MAIN_NAMESPACE) -> None:
        """Append *path* as the last search location for *namespace*."""
        self._paths.setdefault(namespace, []).append(_clean(path))
        logger.debug("Added template path %s (namespace %s)", path, namespace)

    def prepend_path(self, path: str | os.PathLike, namespace: str = MAIN_NAMESPACE) -> None:
        """Insert *path* as the first search location for *namespace*."""
        self._paths.setdefault(namespace, []).insert(0, _clean(path))

    def set_paths(
        self, paths: str | os.PathLike | Iterable[str | os.PathLike],
        namespace: str = MAIN_NAMESPACE,
    ) -> None:
        """Replace all search locations for *namespace*."""
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]
        self._paths[namespace] = [_clean(p) for p in paths]

    def get_namespaces(self) -> list[str]:
        return list(self._paths)

    def get_paths(self, namespace: str = MAIN_NAMESPACE) -> list[str]:
        return list(self._paths.get(namespace, []))

    # --- jinja2 loader API --------------------------------------------------

    def get_source(
        self, environment: Environment, template: str,
    ) -> tuple[str, str, Callable[[], bool]]:
        namespace, name = self._parse_name(template)
        if namespace not in self._paths:
            raise TemplateNotFound(
                template,
                f"There are no registered paths for namespace {namespace!r}",
            )

        pieces = split_template_path(name)
        for directory in self._paths[namespace]:
            path = Path(directory, *pieces)
            if path.is_file():
                source = path.read_text(encoding=self.encoding)
                mtime = path.stat().st_mtime
                return source, str(path), lambda: _mtime(path) == mtime
        raise TemplateNotFound(template)

    def list_templates(self) -> list[str]:
        found = set()
        for namespace, directories in self._paths.items():
            prefix = "" if namespace == self.MAIN_NAMESPACE else f"@{namespace}/"
            for directory in directories:
                root = Path(directory)
                if not root.is_dir():
                    continue
                for path in root.rglob("*"):
                    if path.is_file():
                        found.add(prefix + path.relative_to(root).as_posix())
        return sorted(found)

    def _parse_name(self, template: str) -> tuple[str, str]:
        if template.startswith("@"):
            namespace, sep, name = template[1:].partition("/")
            if not sep or not namespace:
                raise TemplateNotFound(
                    template,
                    f"Malformed namespaced template name {template!r} "
                    '(expecting "@namespace/template_name")',
                )
            return namespace, name
        return self.MAIN_NAMESPACE, template


def _clean(path: str | os.PathLike) -> str:
    cleaned = os.fspath(path).rstrip("/\\")
    return cleaned or os.fspath(path)


def _mtime(path: Path) -> float | None:
    try:
        return path.stat().st_mtime
    except OSError:
        return None
