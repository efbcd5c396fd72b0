"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shelves.application.config import ConfigError


class SessionNotFoundError(Exception):
    """Raised when a request names a session that does not exist."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class DividerNotFoundError(Exception):
    """Raised when a request names a divider the session does not hold."""

    def __init__(self, divider_id: str) -> None:
        self.divider_id = divider_id
        super().__init__(f"Divider not found: {divider_id}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"error": str(exc), "error_type": "invalid_value", "details": None},
        )

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found_handler(
        request: Request, exc: SessionNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"error": str(exc), "error_type": "not_found", "details": None},
        )

    @app.exception_handler(DividerNotFoundError)
    async def divider_not_found_handler(
        request: Request, exc: DividerNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"error": str(exc), "error_type": "not_found", "details": None},
        )
