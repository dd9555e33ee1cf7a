"""Shared enums, protocols and the actor record for scout-authz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol, Union, runtime_checkable

__all__ = [
    "AccountStatus",
    "ActorLike",
    "CommentStatus",
    "OnUnknownOperation",
    "ResourceStatus",
    "Role",
    "User",
    "VideoStatus",
]

# Valid values for AuthzConfig.on_unknown_operation.
OnUnknownOperation = Literal["deny", "warn"]


class Role(str, Enum):
    """Closed set of actor roles, least privileged first."""

    LOCAL_CONTACT = "local_contact"
    COACH = "coach"
    ADMINISTRATOR = "administrator"


class AccountStatus(str, Enum):
    """Account lifecycle states. Only ``ACTIVE`` accounts are authorized."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
    PENDING = "pending"


class VideoStatus(str, Enum):
    PENDING = "pending"
    PUBLISHED = "published"
    FLAGGED = "flagged"
    REMOVED = "removed"


class CommentStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    FLAGGED = "flagged"
    REMOVED = "removed"


ResourceStatus = Union[VideoStatus, CommentStatus]


@runtime_checkable
class ActorLike(Protocol):
    """Structural type for authorization actors.

    Any object with ``id``, ``role`` and ``status`` attributes satisfies
    this protocol: ORM models, dataclasses, Pydantic models or named
    tuples. ``role`` and ``status`` may be enum members or their string
    values.

    Example::

        @dataclass
        class Account:
            id: int
            role: str
            status: str

        assert isinstance(Account(1, "coach", "active"), ActorLike)
    """

    @property
    def id(self) -> int | str: ...

    @property
    def role(self) -> Role | str: ...

    @property
    def status(self) -> AccountStatus | str: ...


@dataclass(frozen=True, slots=True)
class User:
    """Immutable actor record produced by the authentication layer.

    Every field is required: an account whose status is unknown must not
    pass the status gate. String values are coerced to their enum members;
    unknown values raise ``ValueError`` so an invalid role can never reach
    a decision.

    Example::

        coach = User(id=7, role="coach", status="active")
        assert coach.role is Role.COACH
    """

    id: int | str
    role: Role
    status: AccountStatus

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", Role(self.role))
        object.__setattr__(self, "status", AccountStatus(self.status))

    @property
    def is_active(self) -> bool:
        return self.status is AccountStatus.ACTIVE
