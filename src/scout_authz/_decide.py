"""Decision dispatcher — decide() and authorize() for one operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from scout_authz._audit import log_decision, log_unknown_operation
from scout_authz._context import DecisionContext
from scout_authz._types import AccountStatus
from scout_authz.catalog._operations import Operation, parse_operation
from scout_authz.config._config import AuthzConfig, get_global_config
from scout_authz.exceptions import AuthorizationDenied, InvalidContextError
from scout_authz.policy._base import Delegated, Rule
from scout_authz.policy._table import RuleTable, get_default_table

__all__ = ["Decision", "DecisionStage", "authorize", "decide", "evaluate"]

DecisionStage = Literal[
    "invalid_status",
    "unknown_operation",
    "universal",
    "role_set",
    "resource_policy",
]


@dataclass(frozen=True, slots=True)
class Decision:
    """Outcome of one authorization check, with the stage that settled it.

    Attributes:
        operation: The identifier as given (catalog value when recognized).
        allowed: The verdict.
        stage: Which step of the dispatcher produced the verdict.
        reason: Short human-readable explanation.
        rule: The rule descriptor applied, if the operation was recognized.
    """

    operation: str
    allowed: bool
    stage: DecisionStage
    reason: str
    rule: Rule | None = None


def _check_context(context: object) -> DecisionContext:
    if not isinstance(context, DecisionContext):
        raise InvalidContextError(f"expected a DecisionContext, got {type(context).__name__}")
    return context


def _apply(rule: Rule, operation: Operation, context: DecisionContext) -> Decision:
    allowed = rule.evaluate(context)
    role = context.role.value
    if isinstance(rule, Delegated):
        predicate = rule.policy.predicate_for(context.role)
        outcome = "held" if allowed else "did not hold"
        reason = f"{rule.policy.name}: {predicate.name} {outcome} for role {role}"
    elif rule.kind == "role_set":
        relation = "in" if allowed else "not in"
        reason = f"role {role} {relation} {rule.describe()}"
    else:
        reason = rule.describe()
    return Decision(
        operation=operation.value,
        allowed=allowed,
        stage=rule.kind,
        reason=reason,
        rule=rule,
    )


def evaluate(
    operation: Operation | str,
    context: DecisionContext,
    *,
    table: RuleTable | None = None,
    config: AuthzConfig | None = None,
) -> Decision:
    """Run the dispatcher and return the full :class:`Decision`.

    ``decide``, ``authorize`` and ``explain_decision`` are all thin views
    over this function, so their verdicts always agree.

    Raises:
        InvalidContextError: If *context* is not a ``DecisionContext``.
    """
    ctx = _check_context(context)
    target_table = table if table is not None else get_default_table()
    cfg = config if config is not None else get_global_config()

    resolved = parse_operation(operation)
    label = resolved.value if resolved is not None else str(operation)

    if ctx.status is not AccountStatus.ACTIVE:
        decision = Decision(
            operation=label,
            allowed=False,
            stage="invalid_status",
            reason=f"account status is {ctx.status.value}",
        )
    else:
        rule = target_table.lookup(resolved) if resolved is not None else None
        if rule is None:
            if cfg.on_unknown_operation == "warn":
                log_unknown_operation(operation)
            decision = Decision(
                operation=label,
                allowed=False,
                stage="unknown_operation",
                reason="operation is not in the catalog",
            )
        else:
            decision = _apply(rule, resolved, ctx)  # type: ignore[arg-type]

    if cfg.log_decisions:
        log_decision(decision=decision, context=ctx)
    return decision


def decide(
    operation: Operation | str,
    context: DecisionContext,
    *,
    table: RuleTable | None = None,
    config: AuthzConfig | None = None,
) -> bool:
    """Decide whether the context's actor may perform *operation*.

    Inactive accounts are denied before anything else is consulted.
    Identifiers outside the catalog are denied without raising. Pure:
    identical inputs always produce the identical result.

    Args:
        operation: An :class:`Operation` or its exact string value.
        context: The actor and resource facts for this check.
        table: Optional rule table. Defaults to the built-in table.
        config: Optional config. Defaults to the global config.

    Returns:
        ``True`` if the operation is permitted, ``False`` otherwise.

    Raises:
        InvalidContextError: If *context* is not a ``DecisionContext``.

    Example::

        ctx = DecisionContext(user=viewer, resource_status="published")
        if decide(Operation.VIDEOS_GET, ctx):
            return video
    """
    return evaluate(operation, context, table=table, config=config).allowed


def authorize(
    operation: Operation | str,
    context: DecisionContext,
    *,
    table: RuleTable | None = None,
    config: AuthzConfig | None = None,
    message: str | None = None,
) -> None:
    """Assert that the context's actor may perform *operation*.

    Raises :class:`~scout_authz.exceptions.AuthorizationDenied` when
    denied. Returns ``None`` on success.

    Args:
        operation: An :class:`Operation` or its exact string value.
        context: The actor and resource facts for this check.
        table: Optional rule table. Defaults to the built-in table.
        config: Optional config. Defaults to the global config.
        message: Optional custom error message for the exception.

    Raises:
        AuthorizationDenied: If the actor is not authorized.

    Example::

        authorize(Operation.VIDEOS_DELETE, ctx)  # raises if denied
    """
    decision = evaluate(operation, context, table=table, config=config)
    if not decision.allowed:
        raise AuthorizationDenied(
            actor=context.user,
            operation=decision.operation,
            reason=decision.stage,
            message=message,
        )
