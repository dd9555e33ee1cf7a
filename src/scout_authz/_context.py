"""DecisionContext — the actor plus resource facts for one decision."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from scout_authz._types import AccountStatus, ActorLike, ResourceStatus, Role
from scout_authz.exceptions import InvalidContextError

__all__ = ["DecisionContext"]

_FACT_FIELDS = frozenset(
    {"resource_owner_id", "resource_status", "is_resource_owner", "is_evaluator", "is_author"}
)


@dataclass(frozen=True, slots=True)
class DecisionContext:
    """Carries the acting user and the relationship facts of the target.

    Resource facts must come from a just-fetched record; the engine never
    looks them up itself. Relationship flags left unset (or passed as
    ``None``) are ``False``, so a missing fact always narrows access.

    Attributes:
        user: The actor, satisfying ``ActorLike``.
        resource_owner_id: Owner of the target resource, if known.
        resource_status: Publication status of a video or comment.
        is_resource_owner: The actor owns the target.
        is_evaluator: The actor wrote the target evaluation.
        is_author: The actor wrote the target comment.
        role: The actor's role, normalized to :class:`Role`.
        status: The actor's status, normalized to :class:`AccountStatus`.

    Example::

        ctx = DecisionContext(
            user=current_user,
            resource_owner_id=video.owner_id,
            resource_status=video.status,
            is_resource_owner=video.owner_id == current_user.id,
        )
    """

    user: ActorLike
    resource_owner_id: int | None = None
    resource_status: ResourceStatus | None = None
    is_resource_owner: bool = False
    is_evaluator: bool = False
    is_author: bool = False
    role: Role = field(init=False, repr=False, compare=False)
    status: AccountStatus = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.user is None:
            raise InvalidContextError("DecisionContext requires a user")
        try:
            role = Role(self.user.role)
            status = AccountStatus(self.user.status)
        except AttributeError as exc:
            raise InvalidContextError(
                f"{self.user!r} does not expose 'role' and 'status' attributes"
            ) from exc
        except ValueError as exc:
            raise InvalidContextError(f"{self.user!r} has an unknown role or status") from exc
        object.__setattr__(self, "role", role)
        object.__setattr__(self, "status", status)
        for flag in ("is_resource_owner", "is_evaluator", "is_author"):
            object.__setattr__(self, flag, getattr(self, flag) is True)

    @property
    def status_value(self) -> str | None:
        """The resource status as a plain string (``None`` when absent)."""
        if self.resource_status is None:
            return None
        return getattr(self.resource_status, "value", self.resource_status)

    def facts(self) -> dict[str, Any]:
        """Return the resource facts as a plain dict (for logging/explain)."""
        return {
            "resource_owner_id": self.resource_owner_id,
            "resource_status": self.status_value,
            "is_resource_owner": self.is_resource_owner,
            "is_evaluator": self.is_evaluator,
            "is_author": self.is_author,
        }

    @classmethod
    def from_facts(cls, user: ActorLike, facts: Mapping[str, Any]) -> DecisionContext:
        """Build a context for *user* from a mapping of resource facts.

        Used where facts arrive as free-form keyword arguments. The actor
        always comes from *user*; any key that is not a resource fact
        (including ``user``) raises ``InvalidContextError``.

        Example::

            DecisionContext.from_facts(viewer, {"resource_status": "published"})
        """
        unexpected = sorted(set(facts) - _FACT_FIELDS)
        if unexpected:
            raise InvalidContextError(
                f"not resource facts: {', '.join(unexpected)} "
                f"(expected any of {', '.join(sorted(_FACT_FIELDS))})"
            )
        return cls(user=user, **facts)
