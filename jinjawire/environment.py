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

"""Jinja2 environment with the runtime options the factories configure.

On top of :class:`jinja2.Environment` this adds:

* ``debug``: enables the ``{% debug %}`` tag
* ``cache``: compiled templates are kept in a bytecode cache directory
* ``strict_variables``: undefined variables raise instead of rendering empty
* a default timezone used by the ``date`` filter
* an optimization level (``0`` turns the compiler optimizer off)
* :class:`~jinjawire.extension.TemplateExtension` registration
* runtime loaders, consulted in registration order
"""

from __future__ import annotations

import logging
import os
from collections.abc import Hashable
from datetime import date, datetime, tzinfo
from pathlib import Path
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemBytecodeCache,
    StrictUndefined,
    Undefined,
    pass_environment,
)

from jinjawire.extension import TemplateExtension
from jinjawire.runtime import RuntimeLoader

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%B %d, %Y %H:%M"
DEBUG_EXTENSION = "jinja2.ext.debug"


class TemplateEnvironment(Environment):
    """Jinja2 environment configured from application settings.

    Args:
        loader: Template loader, usually a
            :class:`~jinjawire.loader.NamespacedLoader`.
        debug: Development mode.
        cache: Directory for compiled templates, or ``False`` to disable.
        strict_variables: Raise on undefined variables.
        auto_reload: Recompile changed templates; follows *debug* if ``None``.
        autoescape: HTML-escape output by default.
        timezone: Default timezone for the ``date`` filter.
        **options: Passed through to :class:`jinja2.Environment`.
    """

    def __init__(
        self,
        loader: Optional[BaseLoader] = None,
        *,
        debug: bool = False,
        cache: Union[str, os.PathLike, bool, None] = False,
        strict_variables: bool = False,
        auto_reload: Optional[bool] = None,
        autoescape: Any = True,
        timezone: Union[str, tzinfo, None] = None,
        **options: Any,
    ) -> None:
        extensions = list(options.pop("extensions", ()))
        if debug and DEBUG_EXTENSION not in extensions:
            extensions.append(DEBUG_EXTENSION)

        cache_dir = None
        if cache:
            cache_dir = Path(cache).expanduser()
            if not cache_dir.is_dir():
                cache_dir.mkdir(parents=True, exist_ok=True)
                logger.info("Created template cache directory %s", cache_dir)
            options.setdefault("bytecode_cache", FileSystemBytecodeCache(str(cache_dir)))

        options.setdefault("undefined", StrictUndefined if strict_variables else Undefined)

        super().__init__(
            loader=loader,
            extensions=extensions,
            autoescape=autoescape,
            auto_reload=debug if auto_reload is None else auto_reload,
            **options,
        )

        self.debug = debug
        self.strict_variables = strict_variables
        self.cache_dir: Optional[str] = str(cache) if cache else None
        self.optimizations = -1 if self.optimized else 0
        self.timezone: Optional[tzinfo] = None
        self.template_extensions: dict[type, TemplateExtension] = {}
        self._runtime_loaders: list[RuntimeLoader] = []
        self._runtimes: dict[Hashable, Any] = {}

        self.filters["date"] = date_filter
        if timezone is not None:
            self.set_timezone(timezone)

    # --- options ------------------------------------------------------------

    def set_timezone(self, zone: Union[str, tzinfo]) -> None:
        """Set the default timezone of the ``date`` filter.

        Raises :class:`zoneinfo.ZoneInfoNotFoundError` for unknown zone
        identifiers.
        """
        self.timezone = ZoneInfo(zone) if isinstance(zone, str) else zone

    def set_optimizations(self, level: int) -> None:
        """Set the optimizer level; ``0`` disables compile-time optimization."""
        if isinstance(level, bool) or not isinstance(level, int):
            raise TypeError(f"Expected an integer level, received {type(level).__name__}")
        self.optimizations = level
        self.optimized = self.optimizations != 0

    # --- extensions ---------------------------------------------------------

    def add_template_extension(self, extension: TemplateExtension) -> None:
        """Register *extension*'s globals, functions and filters."""
        if not isinstance(extension, TemplateExtension):
            raise TypeError(
                f"Expected a TemplateExtension, received {type(extension).__name__}"
            )
        self.template_extensions[type(extension)] = extension
        self.globals.update(extension.get_globals())
        self.globals.update(extension.get_functions())
        self.filters.update(extension.get_filters())
        logger.debug("Registered template extension %s", type(extension).__name__)

    def has_template_extension(self, cls: type) -> bool:
        return any(isinstance(ext, cls) for ext in self.template_extensions.values())

    def get_template_extension(self, cls: type) -> TemplateExtension:
        for ext in self.template_extensions.values():
            if isinstance(ext, cls):
                return ext
        raise LookupError(f"The {cls.__name__} extension is not enabled")

    # --- runtimes -----------------------------------------------------------

    def add_runtime_loader(self, loader: RuntimeLoader) -> None:
        self._runtime_loaders.append(loader)

    @property
    def runtime_loaders(self) -> list[RuntimeLoader]:
        return list(self._runtime_loaders)

    def get_runtime(self, name: Hashable) -> Any:
        """Return the runtime for *name* from the first loader that knows it.

        Raises :class:`LookupError` if no loader can create it.
        """
        if name in self._runtimes:
            return self._runtimes[name]
        for loader in self._runtime_loaders:
            runtime = loader.load(name)
            if runtime is not None:
                self._runtimes[name] = runtime
                return runtime
        raise LookupError(f"Unable to load the {name!r} runtime")


@pass_environment
def date_filter(
    environment: Environment,
    value: Any = None,
    format: str = DEFAULT_DATE_FORMAT,
    timezone: Union[str, tzinfo, None] = None,
) -> str:
    """Format *value* in the environment's (or the given) timezone.

    Accepts datetimes, dates, POSIX timestamps, ISO 8601 strings, or
    ``None`` for "now".
    """
    zone = ZoneInfo(timezone) if isinstance(timezone, str) else timezone
    if zone is None:
        zone = getattr(environment, "timezone", None)

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        return value.strftime(format)
    elif value is None:
        moment = datetime.now(zone)
    elif isinstance(value, (int, float)):
        moment = datetime.fromtimestamp(value, zone)
    else:
        moment = datetime.fromisoformat(str(value))

    if zone is not None:
        moment = moment.replace(tzinfo=zone) if moment.tzinfo is None else moment.astimezone(zone)
    return moment.strftime(format)
