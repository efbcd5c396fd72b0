"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shelves.web.exceptions import register_exception_handlers
from shelves.web.routers import sessions_router


def create_app() -> FastAPI:
    """Build the divider editing API.

    Sessions live under ``/api/v1/sessions``. Browsers on any origin may
    call the API; it uses no cookies, so credentials are not allowed.
    """
    app = FastAPI(
        title="Shelf Divider API",
        description="Interactive divider editing for the shelf configurator",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Content-Type"],
    )
    register_exception_handlers(app)
    app.include_router(sessions_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
