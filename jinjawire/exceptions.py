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

"""Exceptions raised while wiring and rendering templates.

Every exception derives from :class:`TemplatingError`, so applications
can catch the whole family in one place.  All of them are also
:class:`ValueError` subclasses: they signal a bad value (configuration,
container entry or render argument), never a transient condition.
"""

from __future__ import annotations


class TemplatingError(Exception):
    """Base class for all jinjawire errors."""


class InvalidConfigError(TemplatingError, ValueError):
    """Configuration has the wrong shape, or a required service is missing."""


class InvalidExtensionError(TemplatingError, ValueError):
    """An ``extensions`` entry is not a usable template extension."""


class InvalidRuntimeLoaderError(TemplatingError, ValueError):
    """A ``runtime_loaders`` entry is not a usable runtime loader."""


class InvalidArgumentError(TemplatingError, ValueError):
    """A renderer method received an argument it cannot use."""
