"""Domain Types: verifies enum values and the Identity value type.

Tests:
    - AssetKind is closed over exactly three path segments
    - UserRole values match what the user table stores
    - Identity is immutable and derives is_admin from its role
"""

import dataclasses

import pytest

from portal.core.domain_types import (
    AssetKind, FeatureStatus, FeatureType, Identity, UserId, UserRole,
)


def test_asset_kind_has_exactly_three_kinds():
    assert {k.value for k in AssetKind} == {
        "marketing-assets", "covers", "landing-page",
    }


def test_asset_kind_rejects_unknown_segment():
    with pytest.raises(ValueError):
        AssetKind("posters")


def test_user_role_values():
    assert UserRole.STANDARD.value == "user"
    assert UserRole.ADMIN.value == "admin"
    assert UserRole.SUPER_ADMIN.value == "super_admin"


def test_feature_types():
    assert FeatureType("manuscript-report") is FeatureType.MANUSCRIPT_REPORT
    assert len(FeatureType) == 5


def test_feature_status_default_is_locked():
    assert FeatureStatus.LOCKED.value == "locked"


def test_identity_is_frozen():
    identity = Identity(id=UserId("u1"), role=UserRole.STANDARD)
    with pytest.raises(dataclasses.FrozenInstanceError):
        identity.role = UserRole.ADMIN


def test_identity_is_admin():
    assert Identity(id=UserId("u1"), role=UserRole.ADMIN).is_admin
    assert Identity(id=UserId("u1"), role=UserRole.SUPER_ADMIN).is_admin
    assert not Identity(id=UserId("u1"), role=UserRole.STANDARD).is_admin
