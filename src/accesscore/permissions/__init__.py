"""Permission catalog, base resolution and user policy overlay.

Defines:
- Permissions: all permission key constants
- Role / Grade: the two static classification axes
- ROLE_PERMISSIONS / GRADE_PERMISSION_BOOST: static tables
- compute_permissions(): Role/Grade → base permissions
- UserMenuPolicy + compute_final_permissions(): per-user overlay
- has_permission() and friends: predicate helpers
"""

from .access import (
    has_all_permissions,
    has_any_permission,
    has_permission,
    is_route_key_accessible,
)
from .catalog import (
    GRADE_PERMISSION_BOOST,
    ROLE_PERMISSIONS,
    compute_permissions,
    is_valid_permission_key,
)
from .constants import GRADE_RANK, Grade, Permissions, Role
from .policy import (
    EMPTY_USER_MENU_POLICY,
    UserMenuPolicy,
    compute_final_permissions,
    is_policy_expired,
    is_policy_in_force,
    is_valid_user_menu_policy,
    parse_user_menu_policy,
)

__all__ = [
    "EMPTY_USER_MENU_POLICY",
    "GRADE_PERMISSION_BOOST",
    "GRADE_RANK",
    "ROLE_PERMISSIONS",
    "Grade",
    "Permissions",
    "Role",
    "UserMenuPolicy",
    "compute_final_permissions",
    "compute_permissions",
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
    "is_policy_expired",
    "is_policy_in_force",
    "is_route_key_accessible",
    "is_valid_permission_key",
    "is_valid_user_menu_policy",
    "parse_user_menu_policy",
]
