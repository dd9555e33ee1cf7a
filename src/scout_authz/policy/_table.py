"""RuleTable — the data-driven map from operation to rule descriptor."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from scout_authz._types import Role
from scout_authz.catalog._operations import Operation
from scout_authz.exceptions import IncompleteRuleTableError
from scout_authz.policy._base import Delegated, RoleSet, Rule, UniversalAllow
from scout_authz.policy._resource import (
    MODIFY_COMMENT,
    MODIFY_EVALUATION,
    MODIFY_VIDEO,
    VIEW_RESOURCE,
)

__all__ = ["DEFAULT_RULES", "RuleTable", "get_default_table"]

_ANYONE = UniversalAllow()
_ADMIN_ONLY = RoleSet.of(Role.ADMINISTRATOR)
_STAFF = RoleSet.of(Role.COACH, Role.ADMINISTRATOR)
_NOBODY = RoleSet.of()

DEFAULT_RULES: Mapping[Operation, Rule] = MappingProxyType(
    {
        Operation.AUTH_REGISTER: _ANYONE,
        Operation.AUTH_LOGIN: _ANYONE,
        Operation.AUTH_REFRESH: _ANYONE,
        Operation.AUTH_LOGOUT: _ANYONE,
        Operation.USERS_ME_GET: _ANYONE,
        Operation.USERS_ME_UPDATE: _ANYONE,
        Operation.USERS_ME_PASSWORD: _ANYONE,
        Operation.USERS_ME_EMAIL: _ANYONE,
        Operation.USERS_LIST: _ADMIN_ONLY,
        Operation.USERS_GET: _ADMIN_ONLY,
        Operation.USERS_DELETE: _ADMIN_ONLY,
        Operation.USERS_STATUS: _ADMIN_ONLY,
        Operation.USERS_PASSWORD_ADMIN: _ADMIN_ONLY,
        Operation.USERS_EMAIL_ADMIN: _ADMIN_ONLY,
        # No peer administration: hidden from and closed to every role.
        Operation.USERS_ADMINS_LIST: _NOBODY,
        Operation.USERS_ADMINS_MANAGE: _NOBODY,
        Operation.ATHLETES_CREATE: _STAFF,
        Operation.ATHLETES_UPDATE: _STAFF,
        Operation.ATHLETES_DELETE: _STAFF,
        Operation.ATHLETES_LIST: _ANYONE,
        Operation.ATHLETES_GET: _ANYONE,
        Operation.ATHLETES_STATS: _ANYONE,
        Operation.VIDEOS_UPLOAD: _ANYONE,
        Operation.VIDEOS_LIST: _ANYONE,
        Operation.VIDEOS_ALL: _STAFF,
        Operation.VIDEOS_GET: Delegated(VIEW_RESOURCE),
        Operation.VIDEOS_UPDATE: Delegated(MODIFY_VIDEO),
        Operation.VIDEOS_DELETE: Delegated(MODIFY_VIDEO),
        Operation.VIDEOS_STATUS: _ADMIN_ONLY,
        Operation.EVALUATIONS_CREATE: _STAFF,
        Operation.EVALUATIONS_GET: Delegated(MODIFY_EVALUATION),
        Operation.EVALUATIONS_UPDATE: Delegated(MODIFY_EVALUATION),
        Operation.EVALUATIONS_DELETE: Delegated(MODIFY_EVALUATION),
        Operation.EVALUATIONS_LIST: _STAFF,
        Operation.EVALUATIONS_ATHLETE: _STAFF,
        Operation.EVALUATIONS_ALL: _STAFF,
        # Commenting follows the visibility of the parent video.
        Operation.COMMENTS_CREATE: Delegated(VIEW_RESOURCE),
        Operation.COMMENTS_GET: Delegated(VIEW_RESOURCE),
        Operation.COMMENTS_LIST: Delegated(VIEW_RESOURCE),
        Operation.COMMENTS_UPDATE: Delegated(MODIFY_COMMENT),
        Operation.COMMENTS_DELETE: Delegated(MODIFY_COMMENT),
        Operation.COMMENTS_STATUS: _ADMIN_ONLY,
        Operation.COMMENTS_ALL: _ADMIN_ONLY,
        Operation.COMMENTS_PENDING: _ADMIN_ONLY,
    }
)


class RuleTable:
    """Immutable mapping from every catalog operation to its rule.

    The table is checked for exhaustiveness on construction: a table
    that leaves any :class:`Operation` without a rule cannot be built.
    Safe to share between threads.

    Example::

        table = RuleTable.default()
        rule = table.lookup(Operation.USERS_LIST)
        assert rule == RoleSet.of(Role.ADMINISTRATOR)
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[Operation, Rule]) -> None:
        missing = {op.value for op in Operation if op not in rules}
        if missing:
            raise IncompleteRuleTableError(missing=missing)
        self._rules: Mapping[Operation, Rule] = MappingProxyType(
            {op: rules[op] for op in Operation}
        )

    @classmethod
    def default(cls) -> RuleTable:
        """Return the built-in platform rule table."""
        return _default_table

    def lookup(self, operation: Operation) -> Rule | None:
        """Return the rule for *operation*, or ``None`` when it has none."""
        return self._rules.get(operation)

    def replace(self, overrides: Mapping[Operation, Rule]) -> RuleTable:
        """Return a new table with *overrides* applied.

        Intended for tests and staged rollouts; the receiver is unchanged.
        """
        merged = dict(self._rules)
        merged.update(overrides)
        return RuleTable(merged)

    def operations(self, kind: str | None = None) -> tuple[Operation, ...]:
        """Return the operations in catalog order, optionally filtered by rule kind."""
        return tuple(op for op, rule in self._rules.items() if kind is None or rule.kind == kind)

    def __contains__(self, operation: object) -> bool:
        return operation in self._rules

    def __iter__(self) -> Iterator[Operation]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def items(self) -> Iterator[tuple[Operation, Rule]]:
        return iter(self._rules.items())


_default_table = RuleTable(DEFAULT_RULES)


def get_default_table() -> RuleTable:
    """Return the module-level default rule table.

    This is the table used by ``decide``, ``authorize`` and the other
    APIs when no explicit table is provided.
    """
    return _default_table
