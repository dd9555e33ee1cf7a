"""Map scout-authz errors onto FastAPI responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from scout_authz.exceptions import AuthorizationDenied, InvalidContextError

__all__ = ["install_error_handlers"]


async def _operation_denied(request: Request, exc: AuthorizationDenied) -> JSONResponse:
    # Same body as the Flask extension: detail, operation and the deciding stage.
    return JSONResponse(status_code=403, content=exc.to_dict())


async def _broken_decision_context(request: Request, exc: InvalidContextError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def install_error_handlers(app: FastAPI) -> None:
    """Register scout-authz exception handlers on *app*.

    A denied catalog operation becomes ``403`` with a body naming the
    operation and the dispatcher stage that denied it (``reason``, e.g.
    ``"invalid_status"`` or ``"resource_policy"``). A context built without
    a usable actor is a server-side bug and becomes ``500``.

    Example::

        app = FastAPI()
        install_error_handlers(app)

        @app.delete("/videos/{video_id}")
        def delete_video(ctx=AuthzDep(Operation.VIDEOS_DELETE, context=video_context)):
            ...
    """
    app.add_exception_handler(AuthorizationDenied, _operation_denied)  # type: ignore[arg-type]
    app.add_exception_handler(InvalidContextError, _broken_decision_context)  # type: ignore[arg-type]
