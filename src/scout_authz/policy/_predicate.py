"""Composable relationship predicates for resource policies."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ColumnElement, and_, false, func, not_, or_, true

from scout_authz._types import ActorLike, VideoStatus

if TYPE_CHECKING:
    from scout_authz._context import DecisionContext
    from scout_authz.compiler._columns import ResourceColumns

__all__ = [
    "Predicate",
    "always_allow",
    "always_deny",
    "is_author",
    "is_evaluator",
    "is_published",
    "is_resource_owner",
    "predicate",
]

# Compiles a predicate against mapped columns. ``None`` means the columns
# needed are not mapped and the predicate cannot hold.
SqlCompiler = Callable[[ActorLike, "ResourceColumns"], Optional[ColumnElement[bool]]]


def _no_sql(actor: ActorLike, columns: ResourceColumns) -> ColumnElement[bool] | None:
    return None


class Predicate:
    """A composable check over a :class:`DecisionContext`.

    Wraps a callable that takes a context and returns a bool, plus an
    optional SQL compiler producing the equivalent filter expression.
    Supports ``&`` (AND), ``|`` (OR) and ``~`` (NOT) composition; both
    faces compose together.

    Example::

        can_see = is_published | is_resource_owner
        can_see(context)                       # bool
        can_see.to_sql(user, video_columns)    # ColumnElement[bool]
    """

    def __init__(
        self,
        fn: Callable[[DecisionContext], bool],
        *,
        name: str = "",
        sql: SqlCompiler | None = None,
    ) -> None:
        self._fn = fn
        self._sql: SqlCompiler = sql if sql is not None else _no_sql
        self._name = name or getattr(fn, "__name__", "<anonymous>")

    def __call__(self, context: DecisionContext) -> bool:
        return self._fn(context) is True

    def compile(self, actor: ActorLike, columns: ResourceColumns) -> ColumnElement[bool] | None:
        """Return the SQL form, or ``None`` when required columns are unmapped."""
        return self._sql(actor, columns)

    def to_sql(self, actor: ActorLike, columns: ResourceColumns) -> ColumnElement[bool]:
        """Return the SQL form, compiling unmappable predicates to ``false()``."""
        expr = self.compile(actor, columns)
        return expr if expr is not None else false()

    def __and__(self, other: Predicate) -> Predicate:
        def _and(context: DecisionContext) -> bool:
            return self(context) and other(context)

        def _and_sql(actor: ActorLike, columns: ResourceColumns) -> ColumnElement[bool] | None:
            left, right = self.compile(actor, columns), other.compile(actor, columns)
            if left is None or right is None:
                return None
            return and_(left, right)

        return Predicate(_and, name=f"({self._name} & {other._name})", sql=_and_sql)

    def __or__(self, other: Predicate) -> Predicate:
        def _or(context: DecisionContext) -> bool:
            return self(context) or other(context)

        def _or_sql(actor: ActorLike, columns: ResourceColumns) -> ColumnElement[bool] | None:
            left, right = self.compile(actor, columns), other.compile(actor, columns)
            if left is None:
                return right
            if right is None:
                return left
            return or_(left, right)

        return Predicate(_or, name=f"({self._name} | {other._name})", sql=_or_sql)

    def __invert__(self) -> Predicate:
        def _not(context: DecisionContext) -> bool:
            return not self(context)

        def _not_sql(actor: ActorLike, columns: ResourceColumns) -> ColumnElement[bool] | None:
            inner = self.compile(actor, columns)
            if inner is None:
                return None
            # NULL columns are absent facts: collapse UNKNOWN to false before negating.
            return not_(func.coalesce(inner, false()))

        return Predicate(_not, name=f"~{self._name}", sql=_not_sql)

    @property
    def name(self) -> str:
        """The human-readable name of this predicate."""
        return self._name

    def __repr__(self) -> str:
        return f"Predicate({self._name!r})"


def predicate(fn: Callable[[DecisionContext], bool]) -> Predicate:
    """Decorator/factory that creates an in-memory-only Predicate.

    Example::

        @predicate
        def owns_athlete(context: DecisionContext) -> bool:
            return context.resource_owner_id == context.user.id
    """
    return Predicate(fn, name=getattr(fn, "__name__", "<lambda>"))


# Built-in predicates


def _column_matches_actor(attr: str) -> SqlCompiler:
    def _compile(actor: ActorLike, columns: ResourceColumns) -> ColumnElement[bool] | None:
        column = getattr(columns, attr)
        if column is None:
            return None
        return column == actor.id

    return _compile


def _published_sql(actor: ActorLike, columns: ResourceColumns) -> ColumnElement[bool] | None:
    if columns.status is None:
        return None
    return columns.status == VideoStatus.PUBLISHED.value


always_allow: Predicate = Predicate(
    lambda context: True, name="always_allow", sql=lambda actor, columns: true()
)
always_deny: Predicate = Predicate(
    lambda context: False, name="always_deny", sql=lambda actor, columns: false()
)
is_resource_owner: Predicate = Predicate(
    lambda context: context.is_resource_owner,
    name="is_resource_owner",
    sql=_column_matches_actor("owner_id"),
)
is_evaluator: Predicate = Predicate(
    lambda context: context.is_evaluator,
    name="is_evaluator",
    sql=_column_matches_actor("evaluator_id"),
)
is_author: Predicate = Predicate(
    lambda context: context.is_author,
    name="is_author",
    sql=_column_matches_actor("author_id"),
)
is_published: Predicate = Predicate(
    lambda context: context.status_value == VideoStatus.PUBLISHED.value,
    name="is_published",
    sql=_published_sql,
)
