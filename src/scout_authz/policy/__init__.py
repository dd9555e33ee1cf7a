"""Policy engine — rule descriptors, resource policies and the rule table."""

from scout_authz.policy._base import Delegated, RoleSet, Rule, RuleKind, UniversalAllow
from scout_authz.policy._predicate import (
    Predicate,
    always_allow,
    always_deny,
    is_author,
    is_evaluator,
    is_published,
    is_resource_owner,
    predicate,
)
from scout_authz.policy._resource import (
    MODIFY_COMMENT,
    MODIFY_EVALUATION,
    MODIFY_VIDEO,
    VIEW_RESOURCE,
    ResourcePolicy,
)
from scout_authz.policy._table import DEFAULT_RULES, RuleTable, get_default_table

__all__ = [
    "DEFAULT_RULES",
    "MODIFY_COMMENT",
    "MODIFY_EVALUATION",
    "MODIFY_VIDEO",
    "VIEW_RESOURCE",
    "Delegated",
    "Predicate",
    "ResourcePolicy",
    "RoleSet",
    "Rule",
    "RuleKind",
    "RuleTable",
    "UniversalAllow",
    "always_allow",
    "always_deny",
    "get_default_table",
    "is_author",
    "is_evaluator",
    "is_published",
    "is_resource_owner",
    "predicate",
]
