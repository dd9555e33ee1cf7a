"""explain_decision() — explain why an actor can/can't perform an operation."""

from __future__ import annotations

from scout_authz._context import DecisionContext
from scout_authz._decide import evaluate
from scout_authz.catalog._operations import Operation
from scout_authz.config._config import AuthzConfig
from scout_authz.explain._models import DecisionExplanation
from scout_authz.policy._table import RuleTable

__all__ = ["explain_decision"]


def explain_decision(
    operation: Operation | str,
    context: DecisionContext,
    *,
    table: RuleTable | None = None,
    config: AuthzConfig | None = None,
) -> DecisionExplanation:
    """Explain the verdict ``decide`` would return for *operation*.

    Runs the same dispatcher as :func:`~scout_authz.decide` and reports
    which step settled the outcome.

    Args:
        operation: An :class:`Operation` or its exact string value.
        context: The actor and resource facts for this check.
        table: Optional rule table. Defaults to the built-in table.
        config: Optional config. Defaults to the global config.

    Returns:
        A ``DecisionExplanation``.

    Example::

        print(explain_decision("evaluations.update", ctx))
        # Access Check: DENIED
        #   Rule: resource policy 'modify_evaluation'
        #   Reason: modify_evaluation: is_evaluator did not hold for role coach
    """
    decision = evaluate(operation, context, table=table, config=config)
    return DecisionExplanation(
        operation=decision.operation,
        actor_repr=repr(context.user),
        role=context.role.value,
        status=context.status.value,
        allowed=decision.allowed,
        stage=decision.stage,
        rule=decision.rule.describe() if decision.rule is not None else "",
        reason=decision.reason,
        facts=context.facts(),
    )
