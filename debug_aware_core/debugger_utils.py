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

from .config import DEFAULT_HOST_CONFIG, HostConfig
from .contributor import DebugAwareContributor
from .errors import ContributorFailedError
from .extension_point import JAVA_DEBUG_AWARE_EP, ExtensionRegistry, get_default_registry
from .file_types import FileType
from .source_file import SourceFile

logger = logging.getLogger(__name__)


def _ask(
    contributor: DebugAwareContributor,
    predicate_name: str,
    file: SourceFile,
    file_type: FileType,
    config: HostConfig,
) -> bool:
    predicate = getattr(contributor, predicate_name)
    try:
        answer = predicate(file, file_type)
        if not isinstance(answer, bool):
            logger.warning(
                f'{contributor!r}.{predicate_name} returned {type(answer).__name__}, expected bool'
            )
            answer = bool(answer)
    except Exception as e:
        if config.strict:
            raise ContributorFailedError(contributor, predicate_name) from e
        if config.log_contributor_failures:
            logger.exception(
                f'{contributor!r}.{predicate_name} failed for {file.path}; treating answer as false'
            )
        return False
    return answer


def _any_contributor(
    predicate_name: str,
    file: SourceFile | None,
    file_type: FileType | None,
    registry: ExtensionRegistry | None,
    config: HostConfig | None,
) -> bool:
    if file is None:
        logger.debug(f'{predicate_name} called without a file; answering false')
        return False

    if file_type is None:
        file_type = file.file_type
    if registry is None:
        registry = get_default_registry()
    if config is None:
        config = DEFAULT_HOST_CONFIG

    for contributor in registry.get_extensions(JAVA_DEBUG_AWARE_EP):
        if _ask(contributor, predicate_name, file, file_type, config):
            return True
    return False


def is_breakpoint_aware(
    file: SourceFile | None,
    file_type: FileType | None = None,
    *,
    registry: ExtensionRegistry | None = None,
    config: HostConfig | None = None,
) -> bool:
    """
    Whether the Java debugger accepts breakpoints in the file.

    True iff any contributor registered on ``com.intellij.debugger.javaDebugAware``
    claims the file. Without registrations the answer is False.

    Args:
        file: Source file handle. ``None`` is outside the contract and answers False.
        file_type: Defaults to the type the host associates with ``file``.
        registry: Defaults to the process-wide registry.
        config: Failure handling; defaults to logging and answering False.
    """
    return _any_contributor('is_breakpoint_aware', file, file_type, registry, config)


def is_action_aware(
    file: SourceFile | None,
    file_type: FileType | None = None,
    *,
    registry: ExtensionRegistry | None = None,
    config: HostConfig | None = None,
) -> bool:
    """Whether debugger actions should be offered for the file. Same aggregation as is_breakpoint_aware."""
    return _any_contributor('is_action_aware', file, file_type, registry, config)
