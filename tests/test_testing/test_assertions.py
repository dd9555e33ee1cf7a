"""Tests for scout_authz.testing._assertions — assert_allowed / assert_denied."""

from __future__ import annotations

import pytest

from scout_authz._context import DecisionContext
from scout_authz._types import VideoStatus
from scout_authz.catalog import Operation
from scout_authz.policy import RoleSet, get_default_table
from scout_authz.testing._actors import make_admin, make_coach, make_local_contact
from scout_authz.testing._assertions import assert_allowed, assert_denied


class TestAssertAllowed:
    def test_passes_when_allowed(self) -> None:
        assert_allowed(Operation.USERS_LIST, DecisionContext(user=make_admin()))

    def test_fails_with_explanation(self) -> None:
        with pytest.raises(AssertionError) as exc_info:
            assert_allowed(Operation.USERS_LIST, DecisionContext(user=make_coach()))
        message = str(exc_info.value)
        assert "'users.list' to be allowed" in message
        assert "Access Check: DENIED" in message

    def test_uses_given_table(self) -> None:
        table = get_default_table().replace({Operation.USERS_LIST: RoleSet.of()})
        with pytest.raises(AssertionError):
            assert_allowed(Operation.USERS_LIST, DecisionContext(user=make_admin()), table=table)


class TestAssertDenied:
    def test_passes_when_denied(self) -> None:
        ctx = DecisionContext(user=make_local_contact(), resource_status=VideoStatus.PENDING)
        assert_denied(Operation.VIDEOS_GET, ctx)

    def test_fails_when_allowed(self) -> None:
        ctx = DecisionContext(user=make_local_contact(), resource_status=VideoStatus.PUBLISHED)
        with pytest.raises(AssertionError, match="to be denied"):
            assert_denied(Operation.VIDEOS_GET, ctx)

    def test_matching_stage(self) -> None:
        ctx = DecisionContext(user=make_admin(status="suspended"))
        assert_denied(Operation.AUTH_LOGIN, ctx, stage="invalid_status")

    def test_mismatched_stage(self) -> None:
        with pytest.raises(AssertionError, match="expected denial at stage 'unknown_operation'"):
            assert_denied(
                Operation.USERS_LIST,
                DecisionContext(user=make_coach()),
                stage="unknown_operation",
            )

    def test_unknown_operation_stage(self) -> None:
        assert_denied("users.purge", DecisionContext(user=make_admin()), stage="unknown_operation")
