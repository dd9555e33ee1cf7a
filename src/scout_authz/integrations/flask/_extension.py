"""Flask extension for scout-authz authorization."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Flask, current_app, jsonify

from scout_authz._context import DecisionContext
from scout_authz._decide import authorize, decide
from scout_authz._types import ActorLike
from scout_authz.catalog._operations import Operation
from scout_authz.config._config import AuthzConfig, get_global_config
from scout_authz.exceptions import AuthorizationDenied, InvalidContextError
from scout_authz.policy._table import RuleTable, get_default_table

__all__ = ["AuthzExtension"]

F = TypeVar("F", bound=Callable[..., Any])


class AuthzExtension:
    """Flask extension that gates views on catalog operations.

    Registers error handlers (``AuthorizationDenied`` -> 403,
    ``InvalidContextError`` -> 500) and provides ``can()`` and the
    ``require()`` view decorator, both resolving the actor through
    ``actor_provider`` within request context.

    Supports the Flask app-factory pattern via ``init_app()``. The
    ``SCOUT_AUTHZ_ON_UNKNOWN_OPERATION`` and ``SCOUT_AUTHZ_LOG_DECISIONS``
    keys of ``app.config`` override the global config for this app.

    Args:
        app: Optional Flask application. If provided, calls ``init_app()``
            immediately.
        actor_provider: A callable ``() -> ActorLike`` that returns the
            current actor. Called within request context.
        table: Optional rule table. Defaults to the built-in table.

    Example::

        from flask import Flask
        from scout_authz.integrations.flask import AuthzExtension

        app = Flask(__name__)
        authz = AuthzExtension(app, actor_provider=lambda: g.user)

        @app.get("/users")
        @authz.require(Operation.USERS_LIST)
        def list_users():
            ...
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        actor_provider: Callable[[], ActorLike],
        table: RuleTable | None = None,
    ) -> None:
        self._actor_provider = actor_provider
        self._table = table

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Stores configuration on ``app.extensions["scout_authz"]`` and
        registers error handlers for authorization exceptions.

        Args:
            app: The Flask application instance.
        """
        app.extensions["scout_authz"] = {
            "actor_provider": self._actor_provider,
            "table": self._table,
        }

        @app.errorhandler(AuthorizationDenied)
        def handle_authz_denied(exc: AuthorizationDenied):  # pyright: ignore[reportUnusedFunction]
            return jsonify(exc.to_dict()), 403

        @app.errorhandler(InvalidContextError)
        def handle_invalid_context(exc: InvalidContextError):  # pyright: ignore[reportUnusedFunction]
            return jsonify({"detail": str(exc)}), 500

    def _state(self) -> tuple[ActorLike, RuleTable, AuthzConfig]:
        ext_state: dict[str, Any] = current_app.extensions["scout_authz"]
        actor_provider: Callable[[], ActorLike] = ext_state["actor_provider"]
        table: RuleTable | None = ext_state["table"]
        # App settings layer over the global config at request time.
        config = get_global_config().with_settings(current_app.config)
        return actor_provider(), table if table is not None else get_default_table(), config

    def can(self, operation: Operation | str, **facts: Any) -> bool:
        """Decide *operation* for the current actor with the given resource facts.

        Must be called within a Flask request context.

        Example::

            if authz.can(Operation.VIDEOS_UPDATE, is_resource_owner=owns):
                ...
        """
        actor, table, config = self._state()
        return decide(
            operation, DecisionContext.from_facts(actor, facts), table=table, config=config
        )

    def require(
        self,
        operation: Operation | str,
        *,
        facts: Callable[..., dict[str, Any]] | None = None,
    ) -> Callable[[F], F]:
        """View decorator that authorizes *operation* before the view runs.

        Args:
            operation: The operation the view performs.
            facts: Optional callable receiving the view's keyword
                arguments and returning resource facts for the context.

        Example::

            def video_facts(video_id: int) -> dict:
                video = videos.get(video_id)
                return {"is_resource_owner": video.owner_id == g.user.id}

            @app.delete("/videos/<int:video_id>")
            @authz.require(Operation.VIDEOS_DELETE, facts=video_facts)
            def delete_video(video_id: int):
                ...
        """

        def decorator(view: F) -> F:
            @functools.wraps(view)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                actor, table, config = self._state()
                resource_facts = facts(**kwargs) if facts is not None else {}
                authorize(
                    operation,
                    DecisionContext.from_facts(actor, resource_facts),
                    table=table,
                    config=config,
                )
                return view(*args, **kwargs)

            return wrapper  # type: ignore[return-value]

        return decorator
