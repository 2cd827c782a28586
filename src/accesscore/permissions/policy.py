"""Per-user menu policy and its overlay on base permissions.

Provides:
- ``UserMenuPolicy`` — per-user override record (allow/deny permissions,
  whitelist/blacklist route keys, preferred landing route).
- ``EMPTY_USER_MENU_POLICY`` — inert policy.
- ``is_policy_expired()`` / ``is_policy_in_force()`` — activity checks.
- ``compute_final_permissions()`` — base permissions + policy overlay.
- ``parse_user_menu_policy()`` / ``is_valid_user_menu_policy()`` — validation
  of policy payloads received from the policy API.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..exceptions import PolicyValidationError

logger = logging.getLogger(__name__)


class UserMenuPolicy(BaseModel):
    """Per-user override layered on top of Role/Grade permissions.

    A policy is *in force* when ``is_active`` is not False and
    ``expires_at`` has not passed. A policy that is not in force behaves
    exactly like no policy at all.

    Route-key modes:
        - ``denied_route_keys`` is a blacklist, always applied when non-empty.
        - ``allowed_route_keys`` switches on whitelist mode when it holds at
          least one key. ``None`` (the default) and ``()`` both leave it off.

    Payloads may use either snake_case or the camelCase keys emitted by the
    policy API (``userId``, ``allowedPermissions``, ...).

    Example::

        policy = UserMenuPolicy(
            user_id="user-123",
            denied_permissions=["menu:dashboard:ops:view"],
            allowed_permissions=["page:notifications:templates:view"],
            denied_route_keys=["grid.samples.infinite"],
            default_landing_route_key="dashboard.main",
        )
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    user_id: str
    allowed_permissions: tuple[str, ...] = ()
    denied_permissions: tuple[str, ...] = ()
    allowed_route_keys: Optional[tuple[str, ...]] = None
    denied_route_keys: tuple[str, ...] = ()
    default_landing_route_key: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True
    expires_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("allowed_permissions", "denied_permissions", "denied_route_keys", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return () if v is None else v

    @field_validator("is_active", mode="before")
    @classmethod
    def _none_as_active(cls, v: Any) -> Any:
        # Only an explicit False disables a policy.
        return True if v is None else v

    @property
    def whitelist_mode(self) -> bool:
        """True when ``allowed_route_keys`` restricts routes to an explicit list."""
        return bool(self.allowed_route_keys)


EMPTY_USER_MENU_POLICY = UserMenuPolicy(user_id="")


def _parse_timestamp(value: str) -> datetime:
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _utc_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def is_policy_expired(policy: UserMenuPolicy, *, now: Optional[datetime] = None) -> bool:
    """Check whether the policy's ``expires_at`` lies strictly in the past.

    Naive timestamps are read as UTC. A timestamp that cannot be parsed
    counts as "never expires": the policy stays in force and a warning is
    logged.
    """
    if not policy.expires_at:
        return False

    try:
        expires_at = _parse_timestamp(policy.expires_at)
    except ValueError:
        logger.warning(
            "Unparseable expires_at %r on menu policy for user %s; treating as non-expiring",
            policy.expires_at,
            policy.user_id,
        )
        return False

    return expires_at < _utc_now(now)


def is_policy_in_force(policy: Optional[UserMenuPolicy], *, now: Optional[datetime] = None) -> bool:
    """Check whether a policy should be applied at all.

    Returns False if the policy is None, explicitly deactivated, or expired.
    """
    if policy is None:
        return False
    if policy.is_active is False:
        return False
    return not is_policy_expired(policy, now=now)


def compute_final_permissions(
    base_permissions: Iterable[str],
    policy: Optional[UserMenuPolicy],
    *,
    now: Optional[datetime] = None,
) -> tuple[str, ...]:
    """Overlay a user policy on base permissions.

    Order of operations:
    1. Remove every key in ``denied_permissions`` from the base set.
    2. Add every key in ``allowed_permissions``.

    Consequently a key listed in **both** ``denied_permissions`` and
    ``allowed_permissions`` is granted: an explicit allow in the same policy
    re-admits a denied key.

    Args:
        base_permissions: Role/Grade permissions.
        policy: User policy, or None.
        now: Reference time for expiry checks (default: current UTC time).

    Returns:
        Deduplicated tuple; base order first, then newly allowed keys.

    Example::

        policy = UserMenuPolicy(user_id="u", denied_permissions=["a"], allowed_permissions=["c"])
        compute_final_permissions(("a", "b"), policy)  # ("b", "c")
    """
    base = tuple(dict.fromkeys(base_permissions))
    if not is_policy_in_force(policy, now=now):
        return base

    denied = set(policy.denied_permissions)
    kept = (perm for perm in base if perm not in denied)
    return tuple(dict.fromkeys((*kept, *policy.allowed_permissions)))


def parse_user_menu_policy(data: Mapping[str, Any]) -> UserMenuPolicy:
    """Validate a policy payload.

    Raises:
        PolicyValidationError: if ``data`` is not a mapping, fails model
            validation, or carries an empty ``user_id``.
    """
    if not isinstance(data, Mapping):
        raise PolicyValidationError(
            f"Policy payload must be a mapping, got {type(data).__name__}",
        )
    try:
        policy = UserMenuPolicy.model_validate(dict(data))
    except ValidationError as e:
        raise PolicyValidationError(
            "Invalid user menu policy payload",
            errors=e.errors(include_url=False),
        ) from e
    if not policy.user_id:
        raise PolicyValidationError("User menu policy requires a non-empty user_id")
    return policy


def is_valid_user_menu_policy(data: Any) -> bool:
    """True if ``data`` parses as a policy with a non-empty user_id."""
    try:
        parse_user_menu_policy(data)
    except PolicyValidationError:
        return False
    return True


__all__ = [
    "EMPTY_USER_MENU_POLICY",
    "UserMenuPolicy",
    "compute_final_permissions",
    "is_policy_expired",
    "is_policy_in_force",
    "is_valid_user_menu_policy",
    "parse_user_menu_policy",
]
