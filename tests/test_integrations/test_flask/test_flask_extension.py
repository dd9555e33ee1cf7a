"""Tests for Flask extension (AuthzExtension)."""

from __future__ import annotations

import logging
from typing import Any

import pytest
from flask import Flask

from scout_authz._types import Role, User
from scout_authz.catalog import Operation
from scout_authz.exceptions import InvalidContextError
from scout_authz.integrations.flask._extension import AuthzExtension
from scout_authz.policy import RoleSet, get_default_table

# ---------------------------------------------------------------------------
# Test-local data
# ---------------------------------------------------------------------------

VIDEO_OWNERS = {1: 2, 2: 1}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def current_user() -> dict[str, Any]:
    """Mutable holder for the actor the provider returns."""
    return {"user": User(id=1, role=Role.LOCAL_CONTACT, status="active")}


@pytest.fixture()
def ext(current_user: dict[str, Any]) -> AuthzExtension:
    return AuthzExtension(actor_provider=lambda: current_user["user"])


@pytest.fixture()
def app(ext: AuthzExtension, current_user: dict[str, Any]) -> Flask:
    """Build a Flask app with gated routes for testing."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    ext.init_app(app)

    @app.get("/users")
    @ext.require(Operation.USERS_LIST)
    def list_users():
        return {"users": []}

    def owner_facts(video_id: int) -> dict[str, Any]:
        owner = VIDEO_OWNERS[video_id]
        return {
            "resource_owner_id": owner,
            "is_resource_owner": owner == current_user["user"].id,
        }

    @app.delete("/videos/<int:video_id>")
    @ext.require(Operation.VIDEOS_DELETE, facts=owner_facts)
    def delete_video(video_id: int):
        return {"deleted": video_id}

    @app.get("/videos/<int:video_id>/editable")
    def editable(video_id: int):
        owner = VIDEO_OWNERS[video_id]
        return {
            "editable": ext.can(
                Operation.VIDEOS_UPDATE, is_resource_owner=owner == current_user["user"].id
            )
        }

    @app.get("/broken")
    @ext.require(Operation.USERS_LIST)
    def broken():
        return {}

    return app


@pytest.fixture()
def client(app: Flask):
    return app.test_client()


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestExtensionInit:
    def test_init_registers_extension(self) -> None:
        """Extension is stored on app.extensions."""
        app = Flask(__name__)
        AuthzExtension(app, actor_provider=lambda: User(id=1, role=Role.COACH, status="active"))
        assert "scout_authz" in app.extensions

    def test_init_app_factory_pattern(self) -> None:
        ext = AuthzExtension(actor_provider=lambda: User(id=1, role=Role.COACH, status="active"))
        app = Flask(__name__)
        ext.init_app(app)
        assert app.extensions["scout_authz"]["table"] is None

    def test_custom_table(self) -> None:
        table = get_default_table().replace({Operation.USERS_LIST: RoleSet.of(Role.COACH)})
        app = Flask(__name__)
        ext = AuthzExtension(
            app,
            actor_provider=lambda: User(id=1, role=Role.COACH, status="active"),
            table=table,
        )
        with app.test_request_context():
            assert ext.can(Operation.USERS_LIST)


class TestRequire:
    def test_admin_allowed(self, client, current_user: dict[str, Any]) -> None:
        current_user["user"] = User(id=3, role=Role.ADMINISTRATOR, status="active")
        response = client.get("/users")
        assert response.status_code == 200
        assert response.get_json() == {"users": []}

    def test_coach_gets_403(self, client, current_user: dict[str, Any]) -> None:
        current_user["user"] = User(id=2, role=Role.COACH, status="active")
        response = client.get("/users")
        assert response.status_code == 403
        body = response.get_json()
        assert body["operation"] == "users.list"
        assert "not authorized" in body["detail"]
        assert body["reason"] == "role_set"

    def test_facts_from_view_arguments(self, client, current_user: dict[str, Any]) -> None:
        current_user["user"] = User(id=2, role=Role.COACH, status="active")
        assert client.delete("/videos/1").status_code == 200
        assert client.delete("/videos/2").status_code == 403

    def test_pending_account_denied(self, client, current_user: dict[str, Any]) -> None:
        current_user["user"] = User(id=3, role=Role.ADMINISTRATOR, status="pending")
        assert client.get("/users").status_code == 403

    def test_invalid_actor_is_500(self, client, current_user: dict[str, Any]) -> None:
        current_user["user"] = None
        response = client.get("/broken")
        assert response.status_code == 500
        assert "requires a user" in response.get_json()["detail"]

    def test_preserves_view_name(self, app: Flask) -> None:
        assert "delete_video" in app.view_functions


class TestCan:
    def test_owner_can_edit(self, client) -> None:
        assert client.get("/videos/2/editable").get_json() == {"editable": True}

    def test_non_owner_cannot_edit(self, client) -> None:
        assert client.get("/videos/1/editable").get_json() == {"editable": False}

    def test_can_raises_on_invalid_actor(self, app: Flask, ext: AuthzExtension, current_user) -> None:
        current_user["user"] = object()
        with app.test_request_context(), pytest.raises(InvalidContextError):
            ext.can(Operation.USERS_LIST)


class TestAppSettings:
    def test_app_config_enables_decision_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        app = Flask(__name__)
        app.config["SCOUT_AUTHZ_LOG_DECISIONS"] = True
        ext = AuthzExtension(app, actor_provider=lambda: User(id=2, role=Role.COACH, status="active"))

        with app.test_request_context(), caplog.at_level(logging.INFO, logger="scout_authz"):
            assert ext.can(Operation.USERS_LIST) is False

        assert any("users.list" in r.getMessage() for r in caplog.records)

    def test_without_settings_nothing_is_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        app = Flask(__name__)
        ext = AuthzExtension(app, actor_provider=lambda: User(id=2, role=Role.COACH, status="active"))

        with app.test_request_context(), caplog.at_level(logging.INFO, logger="scout_authz"):
            ext.can(Operation.USERS_LIST)

        assert caplog.records == []


class TestFactValidation:
    def test_can_rejects_user_among_facts(self, app: Flask, ext: AuthzExtension) -> None:
        intruder = User(id=9, role=Role.ADMINISTRATOR, status="active")
        with app.test_request_context(), pytest.raises(InvalidContextError, match="user"):
            ext.can(Operation.USERS_LIST, user=intruder)
