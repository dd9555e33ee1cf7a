"""ResourcePolicy — role-keyed decision tables for resource-scoped checks.

Administrators pass every resource policy unconditionally. Every other
role is scoped to the resources it owns, wrote, or evaluated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from sqlalchemy import ColumnElement

from scout_authz._types import ActorLike, Role
from scout_authz.policy._predicate import (
    Predicate,
    always_allow,
    always_deny,
    is_author,
    is_evaluator,
    is_published,
    is_resource_owner,
)

if TYPE_CHECKING:
    from scout_authz._context import DecisionContext
    from scout_authz.compiler._columns import ResourceColumns

__all__ = [
    "MODIFY_COMMENT",
    "MODIFY_EVALUATION",
    "MODIFY_VIDEO",
    "VIEW_RESOURCE",
    "ResourcePolicy",
]


@dataclass(frozen=True, slots=True, eq=False)
class ResourcePolicy:
    """A named mapping from role to the predicate that role must satisfy.

    Roles absent from ``rules`` are denied.

    Attributes:
        name: Policy identifier used in logs and explanations.
        description: Human-readable summary.
        rules: Read-only ``Role -> Predicate`` table.

    Example::

        policy = ResourcePolicy.build(
            "modify_video",
            {Role.ADMINISTRATOR: always_allow, Role.COACH: is_resource_owner},
        )
        policy(context)  # bool
    """

    name: str
    description: str
    rules: Mapping[Role, Predicate]

    @classmethod
    def build(
        cls, name: str, rules: Mapping[Role, Predicate], *, description: str = ""
    ) -> ResourcePolicy:
        return cls(name=name, description=description, rules=MappingProxyType(dict(rules)))

    def predicate_for(self, role: Role) -> Predicate:
        return self.rules.get(role, always_deny)

    def __call__(self, context: DecisionContext) -> bool:
        return self.predicate_for(context.role)(context)

    def to_sql(self, actor: ActorLike, columns: ResourceColumns) -> ColumnElement[bool]:
        """Compile the actor's row of the table into a filter expression."""
        return self.predicate_for(Role(actor.role)).to_sql(actor, columns)

    def __repr__(self) -> str:
        return f"ResourcePolicy({self.name!r})"


VIEW_RESOURCE = ResourcePolicy.build(
    "view_resource",
    {
        Role.ADMINISTRATOR: always_allow,
        Role.COACH: always_allow,
        Role.LOCAL_CONTACT: is_published | is_resource_owner,
    },
    description="View a video or its comments",
)

MODIFY_VIDEO = ResourcePolicy.build(
    "modify_video",
    {
        Role.ADMINISTRATOR: always_allow,
        Role.COACH: is_resource_owner,
        Role.LOCAL_CONTACT: is_resource_owner,
    },
    description="Update or delete a video",
)

MODIFY_EVALUATION = ResourcePolicy.build(
    "modify_evaluation",
    {
        Role.ADMINISTRATOR: always_allow,
        Role.COACH: is_evaluator,
        Role.LOCAL_CONTACT: always_deny,
    },
    description="Read, update or delete an evaluation",
)

MODIFY_COMMENT = ResourcePolicy.build(
    "modify_comment",
    {
        Role.ADMINISTRATOR: always_allow,
        Role.COACH: is_author,
        Role.LOCAL_CONTACT: is_author,
    },
    description="Update or delete a comment",
)
