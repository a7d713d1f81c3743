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

"""Default service wiring and configuration for applications.

Applications merge ``ConfigProvider()()`` into their own configuration
and hand ``dependencies`` to their container.  The container is
expected to call each factory with itself and to resolve aliases to
their targets.
"""

from __future__ import annotations

from typing import Any

from jinjawire.config import DEFAULT_EXTENSION, TEMPLATES_KEY
from jinjawire.environment import TemplateEnvironment
from jinjawire.extension import LEGACY_URL_EXTENSION, UrlExtension
from jinjawire.factories import (
    LEGACY_ENVIRONMENT,
    EnvironmentFactory,
    RendererFactory,
    UrlExtensionFactory,
)
from jinjawire.renderer import JinjaRenderer, TemplateRenderer

LEGACY_TEMPLATE_RENDERER = "expressive.template.TemplateRendererInterface"
LEGACY_RENDERER = "expressive.jinja.JinjaRenderer"


class ConfigProvider:
    """Return the package's dependency and template configuration."""

    def __call__(self) -> dict[str, Any]:
        return {
            "dependencies": self.get_dependencies(),
            TEMPLATES_KEY: self.get_templates(),
        }

    def get_dependencies(self) -> dict[str, dict[Any, Any]]:
        return {
            "aliases": {
                TemplateRenderer: JinjaRenderer,
                # Ids used before the package was renamed
                LEGACY_TEMPLATE_RENDERER: TemplateRenderer,
                LEGACY_ENVIRONMENT: TemplateEnvironment,
                LEGACY_RENDERER: JinjaRenderer,
                LEGACY_URL_EXTENSION: UrlExtension,
            },
            "factories": {
                TemplateEnvironment: EnvironmentFactory(),
                JinjaRenderer: RendererFactory(),
                UrlExtension: UrlExtensionFactory(),
            },
        }

    def get_templates(self) -> dict[str, Any]:
        return {
            "extension": DEFAULT_EXTENSION,
            "paths": {},
        }
