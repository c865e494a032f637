"""Authorization Checks: map (identity, resource) to allow/deny.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Never raise; deny is False
    - A missing identity is denied under every policy
    - 401 vs 403 is decided by the caller, not here
"""

from typing import Protocol

from portal.core.domain_types import AccessPolicy, Identity


class OwnedResource(Protocol):
    """Anything carrying the owning user's id (Book rows, fixtures)."""
    user_id: str


def is_admin(identity: Identity | None) -> bool:
    """Admin-only routes: allowed iff the role is admin."""
    return identity is not None and identity.is_admin


def is_owner(identity: Identity | None, owner_id: str | None) -> bool:
    """Owner-only routes: allowed iff the identity id equals the owner id."""
    if identity is None or owner_id is None:
        return False
    return owner_id == identity.id


def is_authorized(
    identity: Identity | None,
    resource: OwnedResource | None,
    policy: AccessPolicy,
) -> bool:
    """Dispatch to the check for a route's policy."""
    owner_id = getattr(resource, "user_id", None)
    if policy is AccessPolicy.ADMIN_ONLY:
        return is_admin(identity)
    if policy is AccessPolicy.OWNER_ONLY:
        return is_owner(identity, owner_id)
    if policy is AccessPolicy.OWNER_OR_ADMIN:
        return is_admin(identity) or is_owner(identity, owner_id)
    return False
