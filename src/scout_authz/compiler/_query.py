"""Compile operation rules into SQL filters for listing queries."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, Select, false, true

from scout_authz._context import DecisionContext
from scout_authz._types import AccountStatus, ActorLike
from scout_authz.catalog._operations import Operation, parse_operation
from scout_authz.compiler._columns import ResourceColumns
from scout_authz.policy._base import Delegated
from scout_authz.policy._table import RuleTable, get_default_table

__all__ = ["authorize_query", "operation_filter"]


def operation_filter(
    operation: Operation | str,
    user: ActorLike,
    columns: ResourceColumns,
    *,
    table: RuleTable | None = None,
) -> ColumnElement[bool]:
    """Return the WHERE clause selecting rows *user* may apply *operation* to.

    Row by row, the filter agrees with ``decide`` called on a context
    whose facts are derived from that row through *columns*.

    - Inactive actors and unknown operations compile to ``false()``.
    - Static rules compile to ``true()`` or ``false()`` for the actor.
    - Resource policies compile the actor's predicate against *columns*.

    Args:
        operation: An :class:`Operation` or its exact string value.
        user: The actor.
        columns: Column mapping for the relationship facts.
        table: Optional rule table. Defaults to the built-in table.

    Example::

        clause = operation_filter(Operation.VIDEOS_GET, viewer, video_columns)
        # status = 'published' OR uploader_id = :id
    """
    ctx = DecisionContext(user=user)
    if ctx.status is not AccountStatus.ACTIVE:
        return false()

    target_table = table if table is not None else get_default_table()
    resolved = parse_operation(operation)
    rule = target_table.lookup(resolved) if resolved is not None else None
    if rule is None:
        return false()

    if isinstance(rule, Delegated):
        return rule.policy.to_sql(user, columns)
    return true() if rule.evaluate(ctx) else false()


def authorize_query(
    stmt: Select[Any],
    *,
    user: ActorLike,
    operation: Operation | str,
    columns: ResourceColumns,
    table: RuleTable | None = None,
) -> Select[Any]:
    """Apply the operation's filter to a SQLAlchemy SELECT statement.

    The statement itself is not executed.

    Args:
        stmt: A SQLAlchemy 2.0 Select statement.
        user: The actor.
        operation: The operation each returned row must permit.
        columns: Column mapping for the relationship facts.
        table: Optional rule table. Defaults to the built-in table.

    Returns:
        A new Select with the authorization filter applied.

    Example::

        stmt = select(Video).order_by(Video.created_at.desc())
        stmt = authorize_query(
            stmt,
            user=current_user,
            operation=Operation.VIDEOS_GET,
            columns=ResourceColumns.from_model(Video),
        )
    """
    return stmt.where(operation_filter(operation, user, columns, table=table))
