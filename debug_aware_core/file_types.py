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

import weakref

# Live tags by id, so unpickling inside the process resolves to the same instance.
_live_file_types: 'weakref.WeakValueDictionary[int, FileType]' = weakref.WeakValueDictionary()


def _resolve_file_type(tag_id: int, name: str) -> 'FileType':
    file_type = _live_file_types.get(tag_id)
    if file_type is None or file_type.name != name:
        raise LookupError(f'file type {name!r} is not registered in this process')
    return file_type


class FileType:
    """
    Host-defined classification of a source file.

    The host keeps exactly one instance per kind, so tags compare by identity:
    two tags built with the same name are different file types. Copying or
    pickling a tag yields the same instance.
    """

    __slots__ = ('name', 'description', 'default_extension', '__weakref__')

    def __init__(self, name: str, description: str = '', default_extension: str = ''):
        self.name = name
        self.description = description
        self.default_extension = default_extension
        _live_file_types[id(self)] = self

    def __setattr__(self, key, value):
        if hasattr(self, key):
            raise AttributeError(f'FileType.{key} is read-only')
        super().__setattr__(key, value)

    def __copy__(self) -> 'FileType':
        return self

    def __deepcopy__(self, memo) -> 'FileType':
        return self

    def __reduce__(self):
        return _resolve_file_type, (id(self), self.name)

    def __repr__(self) -> str:
        return f'FileType({self.name!r})'
