"""Actor factory functions for testing scout-authz decisions."""

from __future__ import annotations

from scout_authz._types import AccountStatus, Role, User

__all__ = ["make_admin", "make_coach", "make_local_contact", "make_user"]


def make_user(
    id: int | str = 1,
    role: Role | str = Role.LOCAL_CONTACT,
    status: AccountStatus | str = AccountStatus.ACTIVE,
) -> User:
    """Create a ``User`` with the given attributes.

    Args:
        id: The actor's identifier. Defaults to ``1``.
        role: The actor's role. Defaults to ``local_contact``.
        status: The account status. Defaults to ``active``.

    Example::

        suspended = make_user(id=5, role="coach", status="suspended")
        assert not suspended.is_active
    """
    return User(id=id, role=Role(role), status=AccountStatus(status))


def make_admin(
    id: int | str = 1, status: AccountStatus | str = AccountStatus.ACTIVE
) -> User:
    """Create an administrator.

    Example::

        admin = make_admin()
        assert admin.role is Role.ADMINISTRATOR
    """
    return make_user(id=id, role=Role.ADMINISTRATOR, status=status)


def make_coach(id: int | str = 1, status: AccountStatus | str = AccountStatus.ACTIVE) -> User:
    return make_user(id=id, role=Role.COACH, status=status)


def make_local_contact(
    id: int | str = 1, status: AccountStatus | str = AccountStatus.ACTIVE
) -> User:
    return make_user(id=id, role=Role.LOCAL_CONTACT, status=status)
