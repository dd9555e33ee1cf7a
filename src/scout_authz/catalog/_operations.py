"""The closed catalog of guarded operations."""

from __future__ import annotations

from enum import Enum

__all__ = ["Domain", "Operation", "operations_in_domain", "parse_operation"]


class Domain(str, Enum):
    """Functional area an operation belongs to."""

    AUTH = "auth"
    PROFILE = "profile"
    USERS = "users"
    ATHLETES = "athletes"
    VIDEOS = "videos"
    EVALUATIONS = "evaluations"
    COMMENTS = "comments"


class Operation(str, Enum):
    """Identifier of a guarded action, valued ``domain.action``.

    Request handlers pass the member (or its exact string value) matching
    the operation they are about to perform.
    """

    # Session
    AUTH_REGISTER = "auth.register"
    AUTH_LOGIN = "auth.login"
    AUTH_REFRESH = "auth.refresh"
    AUTH_LOGOUT = "auth.logout"

    # Own profile
    USERS_ME_GET = "users.me.get"
    USERS_ME_UPDATE = "users.me.update"
    USERS_ME_PASSWORD = "users.me.password"
    USERS_ME_EMAIL = "users.me.email"

    # User administration
    USERS_LIST = "users.list"
    USERS_GET = "users.get"
    USERS_DELETE = "users.delete"
    USERS_STATUS = "users.status"
    USERS_PASSWORD_ADMIN = "users.password.admin"
    USERS_EMAIL_ADMIN = "users.email.admin"
    USERS_ADMINS_LIST = "users.admins.list"
    USERS_ADMINS_MANAGE = "users.admins.manage"

    # Athlete administration
    ATHLETES_CREATE = "athletes.create"
    ATHLETES_UPDATE = "athletes.update"
    ATHLETES_DELETE = "athletes.delete"
    ATHLETES_LIST = "athletes.list"
    ATHLETES_GET = "athletes.get"
    ATHLETES_STATS = "athletes.stats"

    # Videos
    VIDEOS_UPLOAD = "videos.upload"
    VIDEOS_LIST = "videos.list"
    VIDEOS_ALL = "videos.all"
    VIDEOS_GET = "videos.get"
    VIDEOS_UPDATE = "videos.update"
    VIDEOS_DELETE = "videos.delete"
    VIDEOS_STATUS = "videos.status"

    # Evaluations
    EVALUATIONS_CREATE = "evaluations.create"
    EVALUATIONS_GET = "evaluations.get"
    EVALUATIONS_UPDATE = "evaluations.update"
    EVALUATIONS_DELETE = "evaluations.delete"
    EVALUATIONS_LIST = "evaluations.list"
    EVALUATIONS_ATHLETE = "evaluations.athlete"
    EVALUATIONS_ALL = "evaluations.all"

    # Comments
    COMMENTS_CREATE = "comments.create"
    COMMENTS_GET = "comments.get"
    COMMENTS_LIST = "comments.list"
    COMMENTS_UPDATE = "comments.update"
    COMMENTS_DELETE = "comments.delete"
    COMMENTS_STATUS = "comments.status"
    COMMENTS_ALL = "comments.all"
    COMMENTS_PENDING = "comments.pending"

    @property
    def domain(self) -> Domain:
        """The domain this operation is grouped under.

        ``users.me.*`` identifiers belong to :attr:`Domain.PROFILE`; every
        other identifier is grouped by its first segment.
        """
        if self.value.startswith("users.me."):
            return Domain.PROFILE
        return Domain(self.value.split(".", 1)[0])


_BY_VALUE: dict[str, Operation] = {op.value: op for op in Operation}


def parse_operation(value: Operation | str) -> Operation | None:
    """Return the catalog member for *value*, or ``None`` if unrecognized.

    Matching is exact: no case folding or whitespace trimming, so a
    mistyped identifier never resolves to a neighbouring operation.

    Example::

        assert parse_operation("videos.get") is Operation.VIDEOS_GET
        assert parse_operation("videos.GET") is None
    """
    if isinstance(value, Operation):
        return value
    if not isinstance(value, str):
        return None
    return _BY_VALUE.get(value)


def operations_in_domain(domain: Domain | str) -> tuple[Operation, ...]:
    """Return every operation grouped under *domain*, in catalog order."""
    target = Domain(domain)
    return tuple(op for op in Operation if op.domain is target)
