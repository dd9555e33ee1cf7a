"""FastAPI dependencies for scout-authz authorization."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fastapi import Depends, Request

from scout_authz._context import DecisionContext
from scout_authz._decide import authorize
from scout_authz._types import ActorLike
from scout_authz.catalog._operations import Operation
from scout_authz.policy._table import RuleTable

__all__ = ["AuthzDep", "get_actor"]


# ---------------------------------------------------------------------------
# Sentinel dependency function for DI-based configuration
# ---------------------------------------------------------------------------


def get_actor(request: Request) -> ActorLike:
    """Sentinel dependency — override via ``app.dependency_overrides[get_actor]``.

    Raises ``NotImplementedError`` if not overridden, ensuring users
    configure their actor provider before using ``AuthzDep``.

    Example::

        from scout_authz.integrations.fastapi import get_actor

        app.dependency_overrides[get_actor] = my_get_current_user
    """
    raise NotImplementedError(
        "Override get_actor via app.dependency_overrides[get_actor]. "
        "See scout-authz docs for configuration guide."
    )


# ---------------------------------------------------------------------------
# Dependency builder
# ---------------------------------------------------------------------------


def _make_dependency(
    operation: Operation | str,
    *,
    context: Callable[..., DecisionContext] | None = None,
    table: RuleTable | None = None,
) -> Callable[..., Any]:
    """Build the dependency function for a given operation.

    Args:
        operation: The operation the route performs.
        context: Optional dependency returning a fully populated
            ``DecisionContext`` for resource-scoped operations.
        table: Optional per-dependency rule table override.
    """
    if context is None:

        def _resolve_actor(actor: Any = Depends(get_actor)) -> Any:
            authorize(operation, DecisionContext(user=actor), table=table)
            return actor

        return _resolve_actor

    def _resolve_context(ctx: Any = Depends(context)) -> Any:
        authorize(operation, ctx, table=table)
        return ctx

    return _resolve_context


def AuthzDep(
    operation: Operation | str,
    *,
    context: Callable[..., DecisionContext] | None = None,
    table: RuleTable | None = None,
) -> Any:
    """FastAPI dependency that authorizes *operation* for the request.

    Without ``context``, resolves the actor through :func:`get_actor`,
    checks the operation with no resource facts and returns the actor.
    With ``context``, resolves that dependency (which must return a
    ``DecisionContext`` built from the just-fetched resource), checks
    the operation against it and returns the context.

    Denials raise :class:`~scout_authz.exceptions.AuthorizationDenied`;
    call :func:`install_error_handlers` to turn them into 403 responses.

    Args:
        operation: The operation the route performs.
        context: Optional dependency returning a ``DecisionContext``.
        table: Optional per-dependency rule table override.

    Returns:
        A FastAPI ``Depends`` instance.

    Example::

        @app.get("/users")
        def list_users(admin: User = AuthzDep(Operation.USERS_LIST)) -> list[dict]:
            ...

        def video_context(
            video_id: int, user: User = Depends(get_actor)
        ) -> DecisionContext:
            video = videos.get(video_id)
            return DecisionContext(
                user=user,
                resource_status=video.status,
                is_resource_owner=video.owner_id == user.id,
            )

        @app.delete("/videos/{video_id}")
        def delete_video(
            ctx: DecisionContext = AuthzDep(Operation.VIDEOS_DELETE, context=video_context),
        ) -> None:
            ...
    """
    dep_fn = _make_dependency(operation, context=context, table=table)
    return Depends(dep_fn)
