"""Audit logging for authorization decisions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scout_authz._context import DecisionContext
    from scout_authz._decide import Decision

__all__ = ["log_decision", "log_unknown_operation"]

logger = logging.getLogger("scout_authz")


def log_decision(*, decision: Decision, context: DecisionContext) -> None:
    """Log a single authorization decision.

    Logging levels:
    - INFO: Summary (operation, actor, verdict, deciding stage)
    - DEBUG: The resource facts the decision was made on

    Example::

        log_decision(decision=decision, context=ctx)
    """
    verdict = "ALLOW" if decision.allowed else "DENY"
    logger.info(
        "Decision: %s %s for actor %r — %s (%s)",
        verdict,
        decision.operation,
        context.user,
        decision.stage,
        decision.reason,
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Facts for %s: role=%s status=%s %s",
            decision.operation,
            context.role.value,
            context.status.value,
            context.facts(),
        )


def log_unknown_operation(value: object) -> None:
    """Log an identifier that is not in the operation catalog.

    Emitted on the ``scout_authz.unknown_operation`` sub-logger so
    operators can silence it independently.
    """
    unknown_logger = logging.getLogger("scout_authz.unknown_operation")
    unknown_logger.warning(
        "Unknown operation %r — deny-by-default applied",
        value,
    )
