"""Domain Types: rich types that replace bare strings across the codebase.

Invariants:
    - UserId, BookId, AssetId wrap the text UUIDs stored by the database
    - All valid states are Enums; routes parse path strings into them once
    - AssetKind is closed: adding a kind means adding a member here and a
      table in services/asset_registry.py

Design Decisions:
    - str Enums serialize to JSON without custom encoders
    - UserRole.STANDARD is stored as "user" to match existing rows
    - super_admin carries every admin permission; nothing distinguishes it yet
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
BookId = NewType("BookId", str)
AssetId = NewType("AssetId", str)


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    """User role column. Admin bypasses ownership for privileged routes."""
    STANDARD = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


class AssetKind(str, Enum):
    """Asset families addressable under /system-books/{bookId}/assets/{kind}."""
    MARKETING_ASSETS = "marketing-assets"
    COVERS = "covers"
    LANDING_PAGE = "landing-page"


class FeatureType(str, Enum):
    """Purchasable capabilities tracked per book."""
    SUMMARY = "summary"
    MANUSCRIPT_REPORT = "manuscript-report"
    MARKETING_ASSETS = "marketing-assets"
    BOOK_COVERS = "book-covers"
    LANDING_PAGE = "landing-page"


class FeatureStatus(str, Enum):
    """Lifecycle of a book feature row."""
    LOCKED = "locked"
    PURCHASED = "purchased"
    REQUESTED = "requested"
    UNLOCKED = "unlocked"


class AccessPolicy(str, Enum):
    """Which check a route applies before touching persistence."""
    ADMIN_ONLY = "admin_only"
    OWNER_ONLY = "owner_only"
    OWNER_OR_ADMIN = "owner_or_admin"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Identity:
    """Authenticated requester resolved from a session token."""
    id: UserId
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role in (UserRole.ADMIN, UserRole.SUPER_ADMIN)
