"""
Copyright 2024, Zep Software, Inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .contributor import DebugAwareContributor
from .errors import (
    ContributorTypeError,
    DuplicateRegistrationError,
    ExtensionPointConflictError,
    RegistrationNotFoundError,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_PLUGIN_ID = 'core'


@dataclass(frozen=True)
class ExtensionPointName(Generic[T]):
    """Stable key of an extension point and the interface its contributors implement."""

    name: str
    interface: type[T]

    def __str__(self) -> str:
        return self.name


JAVA_DEBUG_AWARE_EP: ExtensionPointName[DebugAwareContributor] = ExtensionPointName(
    'com.intellij.debugger.javaDebugAware', DebugAwareContributor
)


@dataclass(eq=False)
class ContributorRegistration(Generic[T]):
    """Binds one contributor to an extension point for as long as its plugin is loaded."""

    extension_point: ExtensionPointName[T]
    contributor: T
    plugin_id: str
    registry: 'ExtensionRegistry | None' = field(default=None, repr=False)

    @property
    def is_active(self) -> bool:
        return self.registry is not None

    def dispose(self) -> None:
        registry = self.registry
        if registry is None:
            return
        try:
            registry.unregister(self)
        except RegistrationNotFoundError:
            self.registry = None


class ExtensionRegistry:
    """
    Host-owned store of contributors keyed by extension point name.

    A name is bound to one interface while it has registrations; lookups made
    with a same-named key for another interface see nothing.

    Writers are serialized by a lock and replace the per-extension-point tuple
    wholesale. Readers only grab the current tuple, so querying contributors
    never waits on registration work.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._registrations: dict[str, tuple[ContributorRegistration, ...]] = {}

    def register(
        self,
        extension_point: ExtensionPointName[T],
        contributor: T,
        plugin_id: str = DEFAULT_PLUGIN_ID,
    ) -> ContributorRegistration[T]:
        if not isinstance(contributor, extension_point.interface):
            raise ContributorTypeError(extension_point.name, contributor)

        with self._lock:
            current = self._registrations.get(extension_point.name, ())
            if current and current[0].extension_point.interface is not extension_point.interface:
                raise ExtensionPointConflictError(
                    extension_point.name,
                    current[0].extension_point.interface,
                    extension_point.interface,
                )
            if any(item.contributor is contributor for item in current):
                raise DuplicateRegistrationError(extension_point.name, contributor)

            registration = ContributorRegistration(
                extension_point=extension_point,
                contributor=contributor,
                plugin_id=plugin_id,
                registry=self,
            )
            self._registrations[extension_point.name] = current + (registration,)

        logger.debug(f'Registered {contributor!r} on {extension_point.name} for plugin {plugin_id}')
        return registration

    def unregister(self, registration: ContributorRegistration) -> None:
        name = registration.extension_point.name
        with self._lock:
            current = self._registrations.get(name, ())
            remaining = tuple(item for item in current if item is not registration)
            if len(remaining) == len(current):
                raise RegistrationNotFoundError(name, registration.plugin_id)
            self._store(name, remaining)
            registration.registry = None

        logger.debug(f'Unregistered {registration.contributor!r} from {name}')

    def unregister_plugin(self, plugin_id: str) -> int:
        """Drop every registration made on behalf of a plugin; returns how many were removed."""
        removed = 0
        with self._lock:
            for name, current in list(self._registrations.items()):
                remaining = tuple(item for item in current if item.plugin_id != plugin_id)
                for item in current:
                    if item.plugin_id == plugin_id:
                        item.registry = None
                removed += len(current) - len(remaining)
                self._store(name, remaining)

        if removed:
            logger.debug(f'Unloaded {removed} contributor(s) of plugin {plugin_id}')
        return removed

    def registrations(self, extension_point: ExtensionPointName[T]) -> list[ContributorRegistration[T]]:
        return list(self._snapshot(extension_point))

    def get_extensions(self, extension_point: ExtensionPointName[T]) -> list[T]:
        """Contributors in registration order; empty when nothing is registered."""
        return [item.contributor for item in self._snapshot(extension_point)]

    def find_extension(self, extension_point: ExtensionPointName[T], contributor_type: type) -> T | None:
        for item in self._snapshot(extension_point):
            if isinstance(item.contributor, contributor_type):
                return item.contributor
        return None

    def clear(self) -> None:
        with self._lock:
            for current in self._registrations.values():
                for item in current:
                    item.registry = None
            self._registrations = {}

    def _snapshot(self, extension_point: ExtensionPointName) -> tuple[ContributorRegistration, ...]:
        current = self._registrations.get(extension_point.name, ())
        if current and current[0].extension_point.interface is not extension_point.interface:
            return ()
        return current

    def _store(self, name: str, registrations: tuple[ContributorRegistration, ...]) -> None:
        if registrations:
            self._registrations[name] = registrations
        else:
            self._registrations.pop(name, None)


_default_registry = ExtensionRegistry()


def get_default_registry() -> ExtensionRegistry:
    """Process-wide registry used when callers do not supply their own."""
    return _default_registry
