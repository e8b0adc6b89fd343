from .config import GroupAccessConfig, LogLevel, load_config_from_env
from .exceptions import (
    ConfigurationInvalidError,
    GroupAccessError,
    NotFoundError,
    StorageConflictError,
)
from .interfaces import (
    BundleInfoProvider,
    DefaultRoleProvider,
    DefaultTitleFormatter,
    GroupContentIndex,
    PermissionProvider,
    RoleStore,
    TitleFormatter,
)
from .logging import (
    GroupAccessFormatter,
    GroupContextLoggerAdapter,
    get_group_logger,
    safe_preview,
    setup_logging,
)
from .permissions import (
    DefaultGroupProvider,
    DefaultRoleCollection,
    GroupContentOperationPermission,
    GroupPermission,
    GroupPermissions,
    Operation,
    Ownership,
    PermissionCollection,
    PermissionManager,
    PermissionResolver,
    operation_permission_name,
)
from .registry import InMemoryGroupRegistry
from .roles import (
    ADMINISTRATOR,
    InMemoryRoleStore,
    Role,
    RoleNames,
    RoleRecord,
    role_id,
    role_id_prefix,
    role_name_from_id,
)

__all__ = [
    'ADMINISTRATOR',
    'BundleInfoProvider',
    'ConfigurationInvalidError',
    'DefaultGroupProvider',
    'DefaultRoleCollection',
    'DefaultRoleProvider',
    'DefaultTitleFormatter',
    'GroupAccessConfig',
    'GroupAccessError',
    'GroupAccessFormatter',
    'GroupContentIndex',
    'GroupContentOperationPermission',
    'GroupContextLoggerAdapter',
    'GroupPermission',
    'GroupPermissions',
    'InMemoryGroupRegistry',
    'InMemoryRoleStore',
    'LogLevel',
    'NotFoundError',
    'Operation',
    'Ownership',
    'PermissionCollection',
    'PermissionManager',
    'PermissionProvider',
    'PermissionResolver',
    'Role',
    'RoleNames',
    'RoleRecord',
    'RoleStore',
    'StorageConflictError',
    'TitleFormatter',
    'get_group_logger',
    'load_config_from_env',
    'operation_permission_name',
    'role_id',
    'role_id_prefix',
    'role_name_from_id',
    'safe_preview',
    'setup_logging',
]
