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

"""Jinja2 templating for container-driven web applications.

Builds a configured Jinja2 environment, a renderer with namespaced
template paths, and a URL/asset helper extension from the application's
service container.

Usage::

    from jinjawire import ConfigProvider

    dependencies = ConfigProvider()()["dependencies"]
    # register dependencies with the application's container, then:
    renderer = container.get(TemplateRenderer)
    html = renderer.render("blog::post", {"post": post})
"""

from jinjawire.config import merge_config
from jinjawire.container import ServiceLocator, resolve_service
from jinjawire.environment import TemplateEnvironment
from jinjawire.exceptions import (
    InvalidArgumentError,
    InvalidConfigError,
    InvalidExtensionError,
    InvalidRuntimeLoaderError,
    TemplatingError,
)
from jinjawire.extension import TemplateExtension, UrlExtension
from jinjawire.factories import EnvironmentFactory, RendererFactory, UrlExtensionFactory
from jinjawire.loader import NamespacedLoader
from jinjawire.provider import ConfigProvider
from jinjawire.renderer import JinjaRenderer, TemplatePath, TemplateRenderer
from jinjawire.runtime import ContainerRuntimeLoader, FactoryRuntimeLoader, RuntimeLoader

__all__ = [
    "ConfigProvider",
    "ContainerRuntimeLoader",
    "EnvironmentFactory",
    "FactoryRuntimeLoader",
    "InvalidArgumentError",
    "InvalidConfigError",
    "InvalidExtensionError",
    "InvalidRuntimeLoaderError",
    "JinjaRenderer",
    "NamespacedLoader",
    "RendererFactory",
    "RuntimeLoader",
    "ServiceLocator",
    "TemplateEnvironment",
    "TemplateExtension",
    "TemplatePath",
    "TemplateRenderer",
    "TemplatingError",
    "UrlExtension",
    "UrlExtensionFactory",
    "merge_config",
    "resolve_service",
]
