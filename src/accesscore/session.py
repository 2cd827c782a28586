"""Session container that owns the access-context recomputation trigger.

``AccessSession`` holds the durable identity fields (user, token, role,
grade, policy) and the :class:`~accesscore.context.AccessContext` derived
from them. Every mutator rebuilds the context from scratch and, while the
session is authenticated, persists a snapshot.

State machine::

    ANONYMOUS ──login──▶ AUTHENTICATED ──set_user_menu_policy──▶ AUTHENTICATED_WITH_POLICY
        ▲                                                                   │
        └──────────────────────────────logout───────────────────────────────┘

Usage:
    session = AccessSession(store=RedisSnapshotStore.from_config("sess-1"))
    if not session.rehydrate():
        session.login(User(id="u-1", name="Kim"), token, role=Role.MANAGER)
    session.can_access_route("users.list")
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .config import AccessConfig, load_access_config_from_env
from .context import EMPTY_ACCESS_CONTEXT, AccessContext, build_access_context, determine_landing_path
from .exceptions import SnapshotError
from .logging import get_access_logger
from .navigation.defaults import DEFAULT_MENU_TREE, DEFAULT_ROUTES
from .navigation.integrity import check_navigation_config
from .navigation.menu import MenuNode
from .navigation.routes import RouteNode
from .permissions.catalog import compute_permissions
from .permissions.policy import UserMenuPolicy
from .storage import InMemorySnapshotStore, SnapshotStore


class SessionState(str, Enum):
    """Lifecycle state of an :class:`AccessSession`."""

    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
    AUTHENTICATED_WITH_POLICY = "authenticated_with_policy"


class User(BaseModel):
    """Authenticated user profile.

    ``roles`` holds coarse legacy role labels (e.g. "ADMIN", "USER") checked
    by ``has_role``; the RBAC role that drives permissions is stored on the
    session separately.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str = ""
    email: str = ""
    roles: list[str] = Field(default_factory=list)


class SessionSnapshot(BaseModel):
    """Persisted subset of session state.

    The filtered menu tree is derived data and is never persisted; it is
    rebuilt by ``recompute()`` after rehydration.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    user: Optional[User] = None
    access_token: Optional[str] = None
    role: Optional[str] = None
    grade: Optional[str] = None
    base_permissions: list[str] = Field(default_factory=list)
    permissions: list[str] = Field(default_factory=list)
    user_menu_policy: Optional[UserMenuPolicy] = None
    accessible_route_keys: list[str] = Field(default_factory=list)
    default_landing_route_key: Optional[str] = None


def encode_snapshot(snapshot: SessionSnapshot) -> str:
    """Serialize a snapshot to camelCase JSON."""
    return snapshot.model_dump_json(by_alias=True)


def decode_snapshot(payload: str) -> SessionSnapshot:
    """Parse a stored snapshot.

    Raises:
        SnapshotError: if ``payload`` is not a valid snapshot document.
    """
    try:
        return SessionSnapshot.model_validate_json(payload)
    except ValidationError as e:
        raise SnapshotError(
            "Stored session snapshot could not be decoded",
            errors=e.errors(include_url=False),
        ) from e


class AccessSession:
    """Single-writer container for one principal's access state.

    Args:
        routes: Route forest (default: ``DEFAULT_ROUTES``).
        menu_tree: Menu forest (default: ``DEFAULT_MENU_TREE``).
        store: Snapshot store (default: a fresh ``InMemorySnapshotStore``).
        config: Settings (default: ``load_access_config_from_env()``).

    Raises:
        NavigationConfigError: at construction, when the route and menu
            trees are inconsistent and ``strict_navigation_config`` is set.
    """

    def __init__(
        self,
        *,
        routes: Optional[Sequence[RouteNode]] = None,
        menu_tree: Optional[Sequence[MenuNode]] = None,
        store: Optional[SnapshotStore] = None,
        config: Optional[AccessConfig] = None,
    ) -> None:
        self.config = config or load_access_config_from_env()
        self.routes: tuple[RouteNode, ...] = tuple(DEFAULT_ROUTES if routes is None else routes)
        self.menu_tree: tuple[MenuNode, ...] = tuple(DEFAULT_MENU_TREE if menu_tree is None else menu_tree)
        self.store: SnapshotStore = store if store is not None else InMemorySnapshotStore()

        check_navigation_config(self.routes, self.menu_tree, strict=self.config.strict_navigation_config)

        self._reset()

    # ── State ───────────────────────────────────────────

    def _reset(self) -> None:
        self.user: Optional[User] = None
        self.access_token: Optional[str] = None
        self.role: Optional[str] = None
        self.grade: Optional[str] = None
        self.base_permissions: tuple[str, ...] = ()
        self.user_menu_policy: Optional[UserMenuPolicy] = None
        self.context: AccessContext = EMPTY_ACCESS_CONTEXT

    @property
    def _log(self):
        return get_access_logger(__name__, user_id=self.user.id if self.user else None, role=self.role)

    @property
    def state(self) -> SessionState:
        if not self.is_authenticated():
            return SessionState.ANONYMOUS
        if self.user_menu_policy is not None:
            return SessionState.AUTHENTICATED_WITH_POLICY
        return SessionState.AUTHENTICATED

    @property
    def permissions(self) -> frozenset[str]:
        return self.context.final_permissions

    @property
    def accessible_route_keys(self) -> tuple[str, ...]:
        return self.context.accessible_route_keys

    @property
    def filtered_menu_tree(self) -> tuple[MenuNode, ...]:
        return self.context.filtered_menu_tree

    @property
    def default_landing_route_key(self) -> Optional[str]:
        return self.context.default_landing_route_key

    def landing_path(self) -> str:
        """URL path to redirect to, falling back to ``config.forbidden_path``."""
        return determine_landing_path(self.context, self.routes, self.config.forbidden_path)

    # ── Mutators ────────────────────────────────────────

    def _build_context(self) -> AccessContext:
        return build_access_context(
            routes=self.routes,
            menu_tree=self.menu_tree,
            base_permissions=self.base_permissions,
            user_menu_policy=self.user_menu_policy,
            landing_strategy=self.config.landing_strategy,
        )

    def login(
        self,
        user: User,
        access_token: str,
        role: Optional[str] = None,
        grade: Optional[str] = None,
    ) -> AccessContext:
        """Authenticate and compute the initial context without any policy.

        A policy left over from a previous login is dropped; callers apply
        the new user's policy with :meth:`set_user_menu_policy`.
        """
        base_permissions = compute_permissions(role, grade)
        context = build_access_context(
            routes=self.routes,
            menu_tree=self.menu_tree,
            base_permissions=base_permissions,
            user_menu_policy=None,
            landing_strategy=self.config.landing_strategy,
        )

        self.user = user
        self.access_token = access_token
        self.role = role
        self.grade = grade
        self.base_permissions = base_permissions
        self.user_menu_policy = None
        self.context = context

        self._log.info("Logged in with %d base permissions", len(base_permissions))
        self._persist()
        return context

    def logout(self) -> None:
        """Reset to the anonymous state and clear the persisted snapshot."""
        self._log.info("Logged out")
        self._reset()
        self.store.clear()

    def update_user(self, **fields: Any) -> None:
        """Merge ``fields`` into the current user. No-op when anonymous.

        Does not recompute the context; user profile fields do not affect
        access.
        """
        if self.user is None:
            return
        self.user = User.model_validate({**self.user.model_dump(), **fields})
        self._persist()

    def update_role_and_grade(self, role: Optional[str], grade: Optional[str]) -> AccessContext:
        """Change role/grade and rebuild the context, keeping the current policy."""
        base_permissions = compute_permissions(role, grade)
        self.role = role
        self.grade = grade
        self.base_permissions = base_permissions
        self.context = self._build_context()

        self._log.info("Role/grade changed to %s/%s", role, grade)
        self._persist()
        return self.context

    def set_user_menu_policy(self, policy: Optional[UserMenuPolicy]) -> AccessContext:
        """Apply (or remove, with None) the user's menu policy and rebuild."""
        self.user_menu_policy = policy
        self.context = self._build_context()

        self._log.info(
            "User menu policy %s; %d routes accessible",
            "applied" if policy is not None else "removed",
            len(self.context.accessible_route_keys),
        )
        self._persist()
        return self.context

    def recompute(self) -> AccessContext:
        """Rebuild the context from stored base permissions and policy."""
        self.context = self._build_context()
        self._persist()
        return self.context

    # ── Persistence ─────────────────────────────────────

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            user=self.user,
            access_token=self.access_token,
            role=self.role,
            grade=self.grade,
            base_permissions=list(self.base_permissions),
            permissions=sorted(self.context.final_permissions),
            user_menu_policy=self.user_menu_policy,
            accessible_route_keys=list(self.context.accessible_route_keys),
            default_landing_route_key=self.context.default_landing_route_key,
        )

    def _persist(self) -> None:
        if not self.is_authenticated():
            return
        self.store.save(encode_snapshot(self.snapshot()))

    def rehydrate(self) -> bool:
        """Restore state from the store, then recompute.

        All durable fields are restored before the single ``recompute()``
        call, so the context is always derived from the restored state and
        never from a half-restored one.

        Returns:
            True if an authenticated session was restored. An absent
            snapshot, one without a user and token, or one that cannot be
            decoded (which is then cleared) leaves the session anonymous and
            returns False.
        """
        payload = self.store.load()
        if not payload:
            return False

        try:
            snapshot = decode_snapshot(payload)
        except SnapshotError as e:
            self._log.warning("Discarding session snapshot: %s", e.message)
            self.store.clear()
            self._reset()
            return False

        self.user = snapshot.user
        self.access_token = snapshot.access_token
        self.role = snapshot.role
        self.grade = snapshot.grade
        self.base_permissions = tuple(snapshot.base_permissions)
        self.user_menu_policy = snapshot.user_menu_policy
        self.context = AccessContext(
            final_permissions=frozenset(snapshot.permissions),
            accessible_route_keys=tuple(snapshot.accessible_route_keys),
            default_landing_route_key=snapshot.default_landing_route_key,
        )

        self.recompute()
        self._log.debug("Session rehydrated (%s)", self.state.value)
        return self.is_authenticated()

    # ── Predicates ──────────────────────────────────────

    def is_authenticated(self) -> bool:
        return bool(self.user) and bool(self.access_token)

    def has_role(self, role: str) -> bool:
        return self.user is not None and role in self.user.roles

    def has_any_role(self, roles: Iterable[str]) -> bool:
        if self.user is None:
            return False
        return any(role in self.user.roles for role in roles)

    def has_all_roles(self, roles: Iterable[str]) -> bool:
        if self.user is None:
            return False
        return all(role in self.user.roles for role in roles)

    def has_permission(self, permission: str) -> bool:
        return self.context.has_permission(permission)

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        return self.context.has_any_permission(permissions)

    def has_all_permissions(self, permissions: Iterable[str]) -> bool:
        return self.context.has_all_permissions(permissions)

    def can_access_route(self, route_key: str) -> bool:
        return self.context.can_access_route(route_key)


__all__ = [
    "AccessSession",
    "SessionSnapshot",
    "SessionState",
    "User",
    "decode_snapshot",
    "encode_snapshot",
]
