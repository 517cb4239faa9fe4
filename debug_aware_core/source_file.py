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

from pathlib import PurePath
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from .file_types import FileType


class SourceFile(BaseModel):
    """
    Read-only handle on a parsed source file.

    The host creates a handle when a file is opened or analysed and lends it to
    contributors for the duration of a single predicate call. The model is
    frozen, so contributors cannot mutate the handle they are given.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    uuid: str = Field(default_factory=lambda: str(uuid4()))
    path: str = Field(description='path of the file as known to the host')
    file_type: FileType = Field(description='file type the host associates with this file')
    text: str = Field(default='', description='current content of the file')
    syntax_tree: Any = Field(default=None, description='opaque parse tree owned by the host')

    @property
    def name(self) -> str:
        return PurePath(self.path).name

    @property
    def extension(self) -> str:
        return PurePath(self.path).suffix.lstrip('.')

    def __hash__(self):
        return hash(self.uuid)

    def __eq__(self, other):
        if isinstance(other, SourceFile):
            return self.uuid == other.uuid
        return False
