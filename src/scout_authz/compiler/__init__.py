"""Compiler — transforms operation rules into SQL filter expressions."""

from scout_authz.compiler._columns import ResourceColumns
from scout_authz.compiler._query import authorize_query, operation_filter

__all__ = ["ResourceColumns", "authorize_query", "operation_filter"]
