from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version('debug-aware-core')
except PackageNotFoundError:
    __version__ = 'unknown'

from .config import HostConfig
from .contributor import DebugAwareContributor, FileTypeDebugAware
from .debugger_utils import is_action_aware, is_breakpoint_aware
from .errors import (
    ContributorFailedError,
    ContributorTypeError,
    DebugAwareError,
    DuplicateRegistrationError,
    ExtensionPointConflictError,
    RegistrationNotFoundError,
)
from .extension_point import (
    JAVA_DEBUG_AWARE_EP,
    ContributorRegistration,
    ExtensionPointName,
    ExtensionRegistry,
    get_default_registry,
)
from .file_types import FileType
from .source_file import SourceFile

__all__ = [
    'JAVA_DEBUG_AWARE_EP',
    'ContributorFailedError',
    'ContributorRegistration',
    'ContributorTypeError',
    'DebugAwareContributor',
    'DebugAwareError',
    'DuplicateRegistrationError',
    'ExtensionPointConflictError',
    'ExtensionPointName',
    'ExtensionRegistry',
    'FileType',
    'FileTypeDebugAware',
    'HostConfig',
    'RegistrationNotFoundError',
    'SourceFile',
    '__version__',
    'get_default_registry',
    'is_action_aware',
    'is_breakpoint_aware',
]
