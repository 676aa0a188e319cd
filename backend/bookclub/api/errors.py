"""Map application exceptions onto JSON error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..exceptions import BookClubAwardsError, EmptySelectionError, RosterError, ValidationError

logger = logging.getLogger(__name__)


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    @app.exception_handler(EmptySelectionError)
    async def user_error_handler(request: Request, exc: BookClubAwardsError):  # type: ignore[override]
        return JSONResponse(status_code=400, content={"detail": str(exc), "error": exc.kind})

    @app.exception_handler(RosterError)
    async def roster_error_handler(request: Request, exc: RosterError):  # type: ignore[override]
        logger.error("Roster unavailable: %s", exc)
        return JSONResponse(status_code=500, content={"detail": str(exc), "error": exc.kind})
