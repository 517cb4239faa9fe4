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

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .file_types import FileType
from .source_file import SourceFile


class DebugAwareContributor(ABC):
    """
    DebugAwareContributor is the capability contributors register on the
    ``com.intellij.debugger.javaDebugAware`` extension point. It tells the
    debugger whether a source file may host breakpoints and whether debugger
    actions should be offered for it.

    Implementations answer for their own language only and return False for
    files they do not recognise. Predicates must be pure, fast and free of
    locks or I/O: the host may call them from several threads at once and
    from read-only sections. They must not raise; a contributor that cannot
    decide answers False.
    """

    @abstractmethod
    def is_breakpoint_aware(self, file: SourceFile, file_type: FileType) -> bool:
        """
        Whether breakpoints may be placed in the file.

        Args:
            file (SourceFile): Handle lent by the host for the duration of the call.
            file_type (FileType): The type the host associates with the file.

        Returns:
            bool: True if this contributor claims the file for the Java debugger.
        """
        pass

    def is_action_aware(self, file: SourceFile, file_type: FileType) -> bool:
        """
        Whether debugger actions should be offered in the editor for the file.

        Defaults to the breakpoint answer. Override only when the two diverge.
        Kept as a separate predicate until actions and breakpoints share a
        single debugger API.
        """
        return self.is_breakpoint_aware(file, file_type)


class FileTypeDebugAware(DebugAwareContributor):
    """Claims files by their file type tag."""

    def __init__(
        self,
        breakpoint_file_types: Iterable[FileType],
        action_file_types: Iterable[FileType] | None = None,
    ):
        # Tags hash by identity, so frozenset membership is an identity check.
        self.breakpoint_file_types = frozenset(breakpoint_file_types)
        self.action_file_types = (
            frozenset(action_file_types) if action_file_types is not None else None
        )

    def is_breakpoint_aware(self, file: SourceFile, file_type: FileType) -> bool:
        return file_type in self.breakpoint_file_types

    def is_action_aware(self, file: SourceFile, file_type: FileType) -> bool:
        if self.action_file_types is None:
            return super().is_action_aware(file, file_type)
        return file_type in self.action_file_types

    def __repr__(self) -> str:
        names = sorted(file_type.name for file_type in self.breakpoint_file_types)
        return f'{type(self).__name__}({names})'
