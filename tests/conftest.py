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

import pytest

from debug_aware_core import ExtensionRegistry, FileType, SourceFile


@pytest.fixture
def java_type():
    return FileType('JAVA', 'Java source', 'java')


@pytest.fixture
def groovy_type():
    return FileType('Groovy', 'Groovy source', 'groovy')


@pytest.fixture
def kotlin_type():
    return FileType('Kotlin', 'Kotlin source', 'kt')


@pytest.fixture
def java_file(java_type):
    return SourceFile(path='src/main/java/Main.java', file_type=java_type, text='class Main {}')


@pytest.fixture
def groovy_file(groovy_type):
    return SourceFile(path='src/main/groovy/build.groovy', file_type=groovy_type, text='println 1')


@pytest.fixture
def kotlin_file(kotlin_type):
    return SourceFile(path='src/main/kotlin/App.kt', file_type=kotlin_type, text='fun main() {}')


@pytest.fixture
def registry():
    """A fresh registry per test so the process-wide one stays untouched."""
    return ExtensionRegistry()
