from .config import AccessConfig, LandingStrategy, LogLevel, load_access_config_from_env
from .context import EMPTY_ACCESS_CONTEXT, AccessContext, build_access_context, determine_landing_path
from .exceptions import (
    AccessCoreError,
    ConfigurationError,
    NavigationConfigError,
    PolicyValidationError,
    SnapshotError,
)
from .logging import (
    safe_preview,
    redact_secrets,
    safe_log_value,
    AccessLogFormatter,
    AccessLoggerAdapter,
    setup_logging,
    get_access_logger,
)
from .navigation import (
    DEFAULT_MENU_TREE,
    DEFAULT_ROUTES,
    CategoryNode,
    ExternalNode,
    MenuGroupNode,
    MenuNode,
    PageNode,
    RouteNode,
    check_navigation_config,
    compute_accessible_route_keys,
    filter_menu_tree,
    validate_navigation_config,
)
from .permissions import (
    Grade,
    Permissions,
    Role,
    UserMenuPolicy,
    compute_final_permissions,
    compute_permissions,
    is_policy_in_force,
    parse_user_menu_policy,
)
from .session import AccessSession, SessionSnapshot, SessionState, User
from .storage import InMemorySnapshotStore, RedisSnapshotStore, SnapshotStore

__all__ = [
    'AccessConfig',
    'LandingStrategy',
    'LogLevel',
    'load_access_config_from_env',
    'EMPTY_ACCESS_CONTEXT',
    'AccessContext',
    'build_access_context',
    'determine_landing_path',
    'AccessCoreError',
    'ConfigurationError',
    'NavigationConfigError',
    'PolicyValidationError',
    'SnapshotError',
    'safe_preview',
    'redact_secrets',
    'safe_log_value',
    'AccessLogFormatter',
    'AccessLoggerAdapter',
    'setup_logging',
    'get_access_logger',
    'DEFAULT_MENU_TREE',
    'DEFAULT_ROUTES',
    'CategoryNode',
    'ExternalNode',
    'MenuGroupNode',
    'MenuNode',
    'PageNode',
    'RouteNode',
    'check_navigation_config',
    'compute_accessible_route_keys',
    'filter_menu_tree',
    'validate_navigation_config',
    'Grade',
    'Permissions',
    'Role',
    'UserMenuPolicy',
    'compute_final_permissions',
    'compute_permissions',
    'is_policy_in_force',
    'parse_user_menu_policy',
    'AccessSession',
    'SessionSnapshot',
    'SessionState',
    'User',
    'InMemorySnapshotStore',
    'RedisSnapshotStore',
    'SnapshotStore',
]
