"""Capability facade — named role-only checks mirroring catalog operations.

Every capability is bound to one operation with a static rule and is
answered by running that operation through the dispatcher without any
resource facts. The facade therefore cannot drift from the rule table.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from scout_authz._context import DecisionContext
from scout_authz._decide import decide
from scout_authz._types import ActorLike
from scout_authz.catalog._operations import Operation
from scout_authz.policy._table import RuleTable, get_default_table

__all__ = [
    "CAPABILITY_OPERATIONS",
    "Capability",
    "Permissions",
    "can_create_evaluations",
    "can_manage_athletes",
    "can_manage_other_admins",
    "can_manage_users",
    "can_moderate_content",
    "can_see_other_admins",
    "can_upload_videos",
    "can_view_all_evaluations",
    "can_view_all_videos",
    "has_capability",
    "permissions_for",
]


class Capability(str, Enum):
    MANAGE_USERS = "manage_users"
    MANAGE_ATHLETES = "manage_athletes"
    UPLOAD_VIDEOS = "upload_videos"
    CREATE_EVALUATIONS = "create_evaluations"
    MODERATE_CONTENT = "moderate_content"
    VIEW_ALL_VIDEOS = "view_all_videos"
    VIEW_ALL_EVALUATIONS = "view_all_evaluations"
    SEE_OTHER_ADMINS = "see_other_admins"
    MANAGE_OTHER_ADMINS = "manage_other_admins"


CAPABILITY_OPERATIONS: dict[Capability, Operation] = {
    Capability.MANAGE_USERS: Operation.USERS_LIST,
    Capability.MANAGE_ATHLETES: Operation.ATHLETES_CREATE,
    Capability.UPLOAD_VIDEOS: Operation.VIDEOS_UPLOAD,
    Capability.CREATE_EVALUATIONS: Operation.EVALUATIONS_CREATE,
    Capability.MODERATE_CONTENT: Operation.COMMENTS_STATUS,
    Capability.VIEW_ALL_VIDEOS: Operation.VIDEOS_ALL,
    Capability.VIEW_ALL_EVALUATIONS: Operation.EVALUATIONS_ALL,
    Capability.SEE_OTHER_ADMINS: Operation.USERS_ADMINS_LIST,
    Capability.MANAGE_OTHER_ADMINS: Operation.USERS_ADMINS_MANAGE,
}


def _check_static(table: RuleTable) -> None:
    for capability, operation in CAPABILITY_OPERATIONS.items():
        rule = table.lookup(operation)
        if rule is None or not rule.is_static:
            raise ValueError(
                f"capability {capability.value!r} mirrors {operation.value!r}, "
                "which is not decided by a static rule"
            )


_check_static(get_default_table())


def has_capability(
    user: ActorLike,
    capability: Capability | str,
    *,
    table: RuleTable | None = None,
) -> bool:
    """Return whether *user* holds *capability*.

    Evaluates the mirrored operation with no resource facts, so the
    account-status gate applies exactly as it does in ``decide``.

    Example::

        if has_capability(current_user, Capability.MANAGE_USERS):
            show_user_admin()
    """
    operation = CAPABILITY_OPERATIONS[Capability(capability)]
    if table is not None:
        _check_static(table)
    return decide(operation, DecisionContext(user=user), table=table)


def can_manage_users(user: ActorLike) -> bool:
    return has_capability(user, Capability.MANAGE_USERS)


def can_manage_athletes(user: ActorLike) -> bool:
    return has_capability(user, Capability.MANAGE_ATHLETES)


def can_upload_videos(user: ActorLike) -> bool:
    return has_capability(user, Capability.UPLOAD_VIDEOS)


def can_create_evaluations(user: ActorLike) -> bool:
    return has_capability(user, Capability.CREATE_EVALUATIONS)


def can_moderate_content(user: ActorLike) -> bool:
    return has_capability(user, Capability.MODERATE_CONTENT)


def can_view_all_videos(user: ActorLike) -> bool:
    return has_capability(user, Capability.VIEW_ALL_VIDEOS)


def can_view_all_evaluations(user: ActorLike) -> bool:
    return has_capability(user, Capability.VIEW_ALL_EVALUATIONS)


def can_see_other_admins(user: ActorLike) -> bool:
    """Always ``False``: administrators never see peer administrators."""
    return has_capability(user, Capability.SEE_OTHER_ADMINS)


def can_manage_other_admins(user: ActorLike) -> bool:
    """Always ``False``: there is no peer administration."""
    return has_capability(user, Capability.MANAGE_OTHER_ADMINS)


class Permissions:
    """Capability checks bound to one user.

    Example::

        perms = permissions_for(current_user)
        if perms.can_manage_athletes():
            ...
        perms.can_access("videos.get", resource_status="published")
    """

    __slots__ = ("user",)

    def __init__(self, user: ActorLike) -> None:
        self.user = user

    def can_manage_users(self) -> bool:
        return can_manage_users(self.user)

    def can_manage_athletes(self) -> bool:
        return can_manage_athletes(self.user)

    def can_upload_videos(self) -> bool:
        return can_upload_videos(self.user)

    def can_create_evaluations(self) -> bool:
        return can_create_evaluations(self.user)

    def can_moderate_content(self) -> bool:
        return can_moderate_content(self.user)

    def can_view_all_videos(self) -> bool:
        return can_view_all_videos(self.user)

    def can_view_all_evaluations(self) -> bool:
        return can_view_all_evaluations(self.user)

    def can_see_other_admins(self) -> bool:
        return can_see_other_admins(self.user)

    def can_manage_other_admins(self) -> bool:
        return can_manage_other_admins(self.user)

    def can_access(self, operation: Operation | str, **facts: Any) -> bool:
        """Decide *operation* for the bound user with the given resource facts."""
        return decide(operation, DecisionContext.from_facts(self.user, facts))

    def __repr__(self) -> str:
        return f"Permissions({self.user!r})"


def permissions_for(user: ActorLike) -> Permissions:
    return Permissions(user)
