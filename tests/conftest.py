"""Shared test fixtures for scout-authz tests."""

from __future__ import annotations

import pytest

from scout_authz._types import User
from scout_authz.config._config import _reset_global_config
from scout_authz.testing._actors import make_admin, make_coach, make_local_contact


@pytest.fixture(autouse=True)
def _clean_config():
    """Every test starts and ends with the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def local_contact() -> User:
    return make_local_contact(id=1)


@pytest.fixture()
def coach() -> User:
    return make_coach(id=2)


@pytest.fixture()
def admin() -> User:
    return make_admin(id=3)
