"""Rule descriptors — how a single operation is decided."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Literal, Union

from scout_authz._types import Role
from scout_authz.policy._resource import ResourcePolicy

if TYPE_CHECKING:
    from scout_authz._context import DecisionContext

__all__ = ["Delegated", "RoleSet", "Rule", "RuleKind", "UniversalAllow"]

RuleKind = Literal["universal", "role_set", "resource_policy"]


@dataclass(frozen=True, slots=True)
class UniversalAllow:
    """Any active user may perform the operation."""

    kind: ClassVar[RuleKind] = "universal"
    is_static: ClassVar[bool] = True

    def evaluate(self, context: DecisionContext) -> bool:
        return True

    def describe(self) -> str:
        return "any active user"


@dataclass(frozen=True, slots=True)
class RoleSet:
    """Only the listed roles may perform the operation.

    An empty set denies every role.
    """

    roles: frozenset[Role]

    kind: ClassVar[RuleKind] = "role_set"
    is_static: ClassVar[bool] = True

    @classmethod
    def of(cls, *roles: Role) -> RoleSet:
        return cls(roles=frozenset(roles))

    def evaluate(self, context: DecisionContext) -> bool:
        return context.role in self.roles

    def describe(self) -> str:
        if not self.roles:
            return "no role"
        names = sorted(role.value for role in self.roles)
        return "roles: " + ", ".join(names)


@dataclass(frozen=True, slots=True)
class Delegated:
    """The operation is decided by a resource-scoped policy."""

    policy: ResourcePolicy

    kind: ClassVar[RuleKind] = "resource_policy"
    is_static: ClassVar[bool] = False

    def evaluate(self, context: DecisionContext) -> bool:
        return self.policy(context)

    def describe(self) -> str:
        return f"resource policy {self.policy.name!r}"


Rule = Union[UniversalAllow, RoleSet, Delegated]
