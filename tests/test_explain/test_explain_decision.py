"""Tests for explain_decision() and DecisionExplanation."""

from __future__ import annotations

import json

import pytest

from scout_authz._context import DecisionContext
from scout_authz._decide import decide
from scout_authz._types import Role, User, VideoStatus
from scout_authz.catalog import Operation
from scout_authz.explain import DecisionExplanation, explain_decision
from scout_authz.testing._actors import make_user


class TestExplainDecision:
    def test_resource_policy_denial(self, coach: User):
        exp = explain_decision(Operation.EVALUATIONS_UPDATE, DecisionContext(user=coach))
        assert isinstance(exp, DecisionExplanation)
        assert exp.allowed is False
        assert exp.stage == "resource_policy"
        assert exp.rule == "resource policy 'modify_evaluation'"
        assert exp.role == "coach"
        assert exp.status == "active"

    def test_status_gate(self):
        exp = explain_decision(
            Operation.AUTH_LOGIN, DecisionContext(user=make_user(role="coach", status="suspended"))
        )
        assert exp.stage == "invalid_status"
        assert exp.rule == ""
        assert "STATUS GATE" in str(exp)

    def test_unknown_operation(self, admin: User):
        exp = explain_decision("users.purge", DecisionContext(user=admin))
        assert exp.operation == "users.purge"
        assert exp.stage == "unknown_operation"
        assert "DENY BY DEFAULT" in str(exp)

    @pytest.mark.parametrize("op", list(Operation))
    @pytest.mark.parametrize("role", list(Role))
    def test_agrees_with_decide(self, op: Operation, role: Role):
        ctx = DecisionContext(user=make_user(role=role), resource_status=VideoStatus.PENDING)
        assert explain_decision(op, ctx).allowed is decide(op, ctx)


class TestDecisionExplanation:
    def test_to_dict_is_json_serializable(self, local_contact: User):
        ctx = DecisionContext(user=local_contact, resource_status=VideoStatus.PUBLISHED)
        data = explain_decision(Operation.VIDEOS_GET, ctx).to_dict()
        json.dumps(data)
        assert data["allowed"] is True
        assert data["facts"]["resource_status"] == "published"

    def test_str_lists_set_facts_only(self, local_contact: User):
        ctx = DecisionContext(
            user=local_contact, resource_status=VideoStatus.PENDING, is_resource_owner=True
        )
        text = str(explain_decision(Operation.VIDEOS_GET, ctx))
        assert text.startswith("Access Check: ALLOWED")
        assert "Operation: videos.get" in text
        assert "is_resource_owner: True" in text
        assert "is_author" not in text

    def test_str_denied(self, coach: User):
        text = str(explain_decision(Operation.USERS_DELETE, DecisionContext(user=coach)))
        assert text.startswith("Access Check: DENIED")
        assert "Rule: roles: administrator" in text
