"""Operation catalog — the fixed namespace of guarded actions."""

from scout_authz.catalog._operations import (
    Domain,
    Operation,
    operations_in_domain,
    parse_operation,
)

__all__ = ["Domain", "Operation", "operations_in_domain", "parse_operation"]
