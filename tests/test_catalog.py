"""Tests for the operation catalog."""

from __future__ import annotations

import pytest

from scout_authz.catalog import Domain, Operation, operations_in_domain, parse_operation


class TestOperation:
    def test_values_follow_domain_action_convention(self):
        for op in Operation:
            assert "." in op.value
            assert op.value == op.value.strip().lower()

    def test_values_are_unique(self):
        values = [op.value for op in Operation]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("op", "domain"),
        [
            (Operation.AUTH_LOGIN, Domain.AUTH),
            (Operation.USERS_ME_PASSWORD, Domain.PROFILE),
            (Operation.USERS_LIST, Domain.USERS),
            (Operation.USERS_PASSWORD_ADMIN, Domain.USERS),
            (Operation.USERS_ADMINS_MANAGE, Domain.USERS),
            (Operation.ATHLETES_STATS, Domain.ATHLETES),
            (Operation.VIDEOS_GET, Domain.VIDEOS),
            (Operation.EVALUATIONS_ATHLETE, Domain.EVALUATIONS),
            (Operation.COMMENTS_PENDING, Domain.COMMENTS),
        ],
    )
    def test_domain(self, op: Operation, domain: Domain):
        assert op.domain is domain

    def test_every_domain_has_operations(self):
        for domain in Domain:
            assert operations_in_domain(domain)


class TestParseOperation:
    def test_member_passes_through(self):
        assert parse_operation(Operation.VIDEOS_GET) is Operation.VIDEOS_GET

    def test_exact_string(self):
        assert parse_operation("comments.status") is Operation.COMMENTS_STATUS

    @pytest.mark.parametrize("value", ["videos.GET", " videos.get", "videos", "", "videos.get.all"])
    def test_near_misses_are_unrecognized(self, value: str):
        assert parse_operation(value) is None

    def test_non_string_is_unrecognized(self):
        assert parse_operation(42) is None  # type: ignore[arg-type]


class TestOperationsInDomain:
    def test_profile_domain(self):
        assert operations_in_domain("profile") == (
            Operation.USERS_ME_GET,
            Operation.USERS_ME_UPDATE,
            Operation.USERS_ME_PASSWORD,
            Operation.USERS_ME_EMAIL,
        )

    def test_users_domain_excludes_profile(self):
        users = operations_in_domain(Domain.USERS)
        assert Operation.USERS_LIST in users
        assert Operation.USERS_ME_GET not in users

    def test_unknown_domain_raises(self):
        with pytest.raises(ValueError):
            operations_in_domain("billing")
