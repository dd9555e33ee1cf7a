"""FastAPI integration for scout-authz."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. Install it with: pip install scout-authz[fastapi]"
    ) from exc

from scout_authz.integrations.fastapi._dependencies import AuthzDep, get_actor
from scout_authz.integrations.fastapi._errors import install_error_handlers

__all__ = ["AuthzDep", "get_actor", "install_error_handlers"]
