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

"""Container factories.

Each factory is a callable taking the application's service container
and returning a fully configured service::

    environment = EnvironmentFactory()(container)
    renderer = RendererFactory()(container)

Factories either succeed or raise; nothing half-built is returned.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any
from zoneinfo import ZoneInfoNotFoundError

from jinja2.ext import Extension as JinjaExtension

from jinjawire.config import DEFAULT_EXTENSION, ENGINE_KEY, merge_config, raw_config
from jinjawire.container import ServiceLocator, resolve_service, service_name
from jinjawire.environment import TemplateEnvironment
from jinjawire.exceptions import (
    InvalidConfigError,
    InvalidExtensionError,
    InvalidRuntimeLoaderError,
)
from jinjawire.extension import LEGACY_URL_EXTENSION, TemplateExtension, UrlExtension
from jinjawire.helpers import (
    LEGACY_SERVER_URL_HELPER,
    LEGACY_URL_HELPER,
    ServerUrlHelper,
    UrlHelper,
)
from jinjawire.loader import NamespacedLoader
from jinjawire.renderer import JinjaRenderer
from jinjawire.runtime import RuntimeLoader

logger = logging.getLogger(__name__)

LEGACY_ENVIRONMENT = "expressive.jinja.Environment"


class EnvironmentFactory:
    """Create a :class:`TemplateEnvironment` from the ``config`` service.

    Recognised options (after merging ``templates`` and ``jinja2``):

    * ``cache_dir``: bytecode cache directory; caching is off if unset
    * ``auto_reload``: read from the ``jinja2`` section only; defaults to
      the top-level ``debug`` flag
    * ``timezone``: default timezone identifier for the ``date`` filter
    * ``optimizations``: ``0`` disables the compiler optimizer
    * ``autoescape``: default HTML escaping
    * ``extensions``: extension objects, classes or service ids
    * ``runtime_loaders``: runtime loader objects or service ids

    The :class:`UrlExtension` is added when the container provides it.
    """

    def __call__(self, container: ServiceLocator) -> TemplateEnvironment:
        config = raw_config(container)
        options = merge_config(config)
        debug = bool(config.get("debug", False))
        engine = config.get(ENGINE_KEY)
        auto_reload = engine.get("auto_reload") if isinstance(engine, Mapping) else None

        environment = TemplateEnvironment(
            NamespacedLoader(),
            debug=debug,
            cache=options.get("cache_dir") or False,
            strict_variables=debug,
            auto_reload=auto_reload,
        )

        if options.get("timezone") is not None:
            self._apply_timezone(environment, options["timezone"])

        if options.get("optimizations") is not None:
            self._apply_optimizations(environment, options["optimizations"])

        if options.get("autoescape") is not None:
            environment.autoescape = options["autoescape"]

        self._inject_extensions(environment, container, options.get("extensions") or [])
        self._inject_runtime_loaders(
            environment, container, options.get("runtime_loaders") or [],
        )

        url_extension = resolve_service(container, UrlExtension, LEGACY_URL_EXTENSION)
        if url_extension is not None:
            environment.add_template_extension(url_extension)
        else:
            logger.debug("No %s registered; URL functions unavailable", UrlExtension.__name__)

        return environment

    @staticmethod
    def _apply_timezone(environment: TemplateEnvironment, timezone: Any) -> None:
        if not isinstance(timezone, str):
            raise InvalidConfigError('"timezone" configuration value must be a string')
        try:
            environment.set_timezone(timezone)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise InvalidConfigError(
                f'"timezone" configuration value {timezone!r} is not a valid timezone: {exc}'
            ) from exc

    @staticmethod
    def _apply_optimizations(environment: TemplateEnvironment, level: Any) -> None:
        if isinstance(level, bool) or not isinstance(level, int):
            raise InvalidConfigError(
                f'"optimizations" configuration value must be an integer; '
                f"received {type(level).__name__}"
            )
        environment.set_optimizations(level)

    def _inject_extensions(
        self, environment: TemplateEnvironment, container: ServiceLocator, extensions: Any,
    ) -> None:
        for index, entry in enumerate(extensions):
            extension = self._load_extension(container, index, entry)
            if isinstance(extension, TemplateExtension):
                environment.add_template_extension(extension)
            else:
                environment.add_extension(extension)

    def _load_extension(self, container: ServiceLocator, index: int, entry: Any) -> Any:
        if _is_extension(entry):
            return entry
        if isinstance(entry, str) and container.has(entry):
            extension = container.get(entry)
            if _is_extension(extension):
                return extension
            raise InvalidExtensionError(
                f'Extension service "{entry}" (index {index}) is not a valid template '
                f"extension; received {type(extension).__name__}"
            )
        raise InvalidExtensionError(
            f"Extension at index {index} ({entry!r}) is neither a template extension "
            f"nor a known service"
        )

    def _inject_runtime_loaders(
        self, environment: TemplateEnvironment, container: ServiceLocator, loaders: Any,
    ) -> None:
        for index, entry in enumerate(loaders):
            environment.add_runtime_loader(self._load_runtime_loader(container, index, entry))

    def _load_runtime_loader(
        self, container: ServiceLocator, index: int, entry: Any,
    ) -> RuntimeLoader:
        if isinstance(entry, RuntimeLoader):
            return entry
        if isinstance(entry, str) and container.has(entry):
            loader = container.get(entry)
            if isinstance(loader, RuntimeLoader):
                return loader
            raise InvalidRuntimeLoaderError(
                f'Runtime loader service "{entry}" (index {index}) is not a valid '
                f"runtime loader; received {type(loader).__name__}"
            )
        raise InvalidRuntimeLoaderError(
            f"Runtime loader at index {index} ({entry!r}) is neither a runtime loader "
            f"nor a known service"
        )


class UrlExtensionFactory:
    """Create the :class:`UrlExtension` from the container's URL helpers."""

    def __call__(self, container: ServiceLocator) -> UrlExtension:
        server_url_helper = _require(container, ServerUrlHelper, LEGACY_SERVER_URL_HELPER)
        url_helper = _require(container, UrlHelper, LEGACY_URL_HELPER)

        options = merge_config(raw_config(container))
        globals = options.get("globals")
        if globals is None:
            globals = {}
        elif not isinstance(globals, Mapping):
            raise InvalidConfigError(
                f'"globals" configuration value must be a mapping; received {type(globals).__name__}'
            )
        return UrlExtension(
            server_url_helper,
            url_helper,
            options.get("assets_url", ""),
            options.get("assets_version", ""),
            globals,
        )


class RendererFactory:
    """Create a :class:`JinjaRenderer` around the container's environment.

    Template paths come from the ``paths`` option, a mapping of namespace
    to one directory or a list of directories.  Integer keys register
    directories in the main namespace::

        "paths": {
            "app": ["templates/app"],
            "layout": "templates/layout",
            0: "templates",
        }
    """

    def __call__(self, container: ServiceLocator) -> JinjaRenderer:
        options = merge_config(raw_config(container))
        environment = _require(container, TemplateEnvironment, LEGACY_ENVIRONMENT)

        renderer = JinjaRenderer(environment, options.get("extension", DEFAULT_EXTENSION))

        paths = options.get("paths") or {}
        if not isinstance(paths, Mapping):
            raise InvalidConfigError(
                f'"paths" configuration value must be a mapping; received {type(paths).__name__}'
            )
        for namespace, directories in paths.items():
            if isinstance(namespace, int):
                namespace = None
            if isinstance(directories, (str, os.PathLike)):
                directories = [directories]
            for directory in directories:
                renderer.add_path(directory, namespace)

        logger.debug("Renderer configured with %d template paths", len(renderer.get_paths()))
        return renderer


def _is_extension(value: Any) -> bool:
    if isinstance(value, TemplateExtension):
        return True
    return isinstance(value, type) and issubclass(value, JinjaExtension)


def _require(container: ServiceLocator, service_id: Any, legacy_id: str) -> Any:
    service = resolve_service(container, service_id, legacy_id)
    if service is None:
        raise InvalidConfigError(f"Missing required `{service_name(service_id)}` dependency.")
    return service
