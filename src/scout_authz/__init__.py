"""scout-authz — authorization decision engine for the scouting platform.

Decides whether an actor may perform a catalog operation, given the
actor's role and account status and the relationship facts of the
target resource. Pure and stateless: no I/O, no caching.

Example::

    from scout_authz import DecisionContext, Operation, decide

    ctx = DecisionContext(
        user=current_user,
        resource_status=video.status,
        is_resource_owner=video.owner_id == current_user.id,
    )
    if decide(Operation.VIDEOS_GET, ctx):
        return video
"""

from importlib.metadata import PackageNotFoundError, version

from scout_authz._context import DecisionContext
from scout_authz._decide import Decision, authorize, decide
from scout_authz._types import (
    AccountStatus,
    ActorLike,
    CommentStatus,
    Role,
    User,
    VideoStatus,
)
from scout_authz.capabilities import Capability, Permissions, has_capability, permissions_for
from scout_authz.catalog._operations import Domain, Operation, parse_operation
from scout_authz.compiler._columns import ResourceColumns
from scout_authz.compiler._query import authorize_query, operation_filter
from scout_authz.config._config import AuthzConfig, configure
from scout_authz.exceptions import (
    AuthorizationDenied,
    AuthzError,
    IncompleteRuleTableError,
    InvalidContextError,
)
from scout_authz.explain._decision import explain_decision
from scout_authz.policy._table import RuleTable

try:
    __version__ = version("scout-authz")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "AccountStatus",
    "ActorLike",
    "AuthorizationDenied",
    "AuthzConfig",
    "AuthzError",
    "Capability",
    "CommentStatus",
    "Decision",
    "DecisionContext",
    "Domain",
    "IncompleteRuleTableError",
    "InvalidContextError",
    "Operation",
    "Permissions",
    "ResourceColumns",
    "Role",
    "RuleTable",
    "User",
    "VideoStatus",
    "authorize",
    "authorize_query",
    "configure",
    "decide",
    "explain_decision",
    "has_capability",
    "operation_filter",
    "parse_operation",
    "permissions_for",
]
