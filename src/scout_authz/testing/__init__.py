"""scout-authz testing utilities — actor factories, assertions, and fixtures.

Provides test helpers for verifying authorization decisions:

- **Actor factories**: ``make_user``, ``make_admin``, ``make_coach``,
  ``make_local_contact``.
- **Assertion helpers**: ``assert_allowed``, ``assert_denied``.
- **Review tools**: ``decision_matrix``, ``diff_tables``.
- **Fixtures**: ``authz_table``, ``authz_actors``, ``isolated_authz_state``.

Example::

    from scout_authz import DecisionContext, Operation
    from scout_authz.testing import assert_allowed, make_coach

    def test_coach_lists_evaluations():
        assert_allowed(Operation.EVALUATIONS_LIST, DecisionContext(user=make_coach()))
"""

from scout_authz.testing._actors import make_admin, make_coach, make_local_contact, make_user
from scout_authz.testing._assertions import assert_allowed, assert_denied
from scout_authz.testing._fixtures import authz_actors, authz_table, isolated_authz_state
from scout_authz.testing._isolation import isolated_authz
from scout_authz.testing._simulation import (
    DecisionMatrix,
    MatrixEntry,
    TableDiff,
    decision_matrix,
    diff_tables,
)

__all__ = [
    "DecisionMatrix",
    "MatrixEntry",
    "TableDiff",
    "assert_allowed",
    "assert_denied",
    "authz_actors",
    "authz_table",
    "decision_matrix",
    "diff_tables",
    "isolated_authz",
    "isolated_authz_state",
    "make_admin",
    "make_coach",
    "make_local_contact",
    "make_user",
]
