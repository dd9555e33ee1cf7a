"""Exception hierarchy for scout-authz."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "AuthorizationDenied",
    "AuthzError",
    "IncompleteRuleTableError",
    "InvalidContextError",
]


class AuthzError(Exception):
    """Base exception for all scout-authz errors."""


class AuthorizationDenied(AuthzError):  # noqa: N818
    """Actor is not authorized to perform the requested operation.

    Only raised by :func:`~scout_authz.authorize` and the framework
    integrations; :func:`~scout_authz.decide` always returns a bool.

    Attributes:
        actor: The actor that was denied.
        operation: The operation identifier that was attempted.
        reason: Short machine-readable reason (e.g. ``"invalid_status"``).

    Example::

        try:
            authorize(Operation.VIDEOS_DELETE, context)
        except AuthorizationDenied as exc:
            print(f"{exc.actor} cannot {exc.operation}: {exc.reason}")
    """

    def __init__(
        self,
        *,
        actor: object,
        operation: str,
        reason: str = "",
        message: str | None = None,
    ) -> None:
        self.actor = actor
        self.operation = operation
        self.reason = reason
        if message is None:
            message = f"Actor {actor!r} is not authorized to perform {operation!r}"
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        """JSON body shared by the framework integrations' 403 responses."""
        return {"detail": str(self), "operation": self.operation, "reason": self.reason}


class InvalidContextError(AuthzError):
    """A decision was requested without a usable actor.

    This is a caller programming error. It is raised rather than mapped
    to a deny so that broken call sites surface immediately.
    """


class IncompleteRuleTableError(AuthzError):
    """A rule table does not assign a rule to every catalog operation.

    Attributes:
        missing: The operation identifiers without a rule.
    """

    def __init__(self, *, missing: Iterable[str]) -> None:
        self.missing = tuple(sorted(missing))
        super().__init__(f"No rule defined for operation(s): {', '.join(self.missing)}")
