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


class DebugAwareError(Exception):
    """Base exception class for the debug-aware extension host."""


class ContributorTypeError(DebugAwareError):
    """Raised when a contributor does not implement the extension point's interface."""

    def __init__(self, ep_name: str, contributor: object):
        self.message = (
            f'{type(contributor).__name__} cannot be registered on {ep_name}: '
            'not an instance of the extension point interface'
        )
        super().__init__(self.message)


class DuplicateRegistrationError(DebugAwareError):
    """Raised when the same contributor instance is registered twice on one extension point."""

    def __init__(self, ep_name: str, contributor: object):
        self.message = f'{type(contributor).__name__} is already registered on {ep_name}'
        super().__init__(self.message)


class RegistrationNotFoundError(DebugAwareError):
    """Raised when a registration is removed from a registry that does not hold it."""

    def __init__(self, ep_name: str, plugin_id: str):
        self.message = f'no registration on {ep_name} for plugin {plugin_id}'
        super().__init__(self.message)


class ContributorFailedError(DebugAwareError):
    """Raised in strict mode when a contributor predicate raises instead of answering."""

    def __init__(self, contributor: object, predicate: str):
        self.message = f'{type(contributor).__name__}.{predicate} raised'
        super().__init__(self.message)


class ExtensionPointConflictError(DebugAwareError):
    """Raised when an extension point name is already bound to a different interface."""

    def __init__(self, ep_name: str, bound: type, requested: type):
        self.message = (
            f'{ep_name} is bound to {bound.__name__}; cannot register {requested.__name__} contributors'
        )
        super().__init__(self.message)
