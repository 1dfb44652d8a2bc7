"""
FastAPI application setup for the Pronto development server.
"""

import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__ as DEVSERVER_VERSION
from .routes import router
from .store import FixtureStore, seed_store

load_dotenv()

DEFAULT_API_KEY = "dev_api_key"
API_KEY_ENV_VAR = "PRONTO_DEVSERVER_API_KEY"


def create_app(*, api_key: str | None = None, store: FixtureStore | None = None) -> FastAPI:
    """Build a mock Pronto API serving ``store`` behind ``api_key``."""
    app = FastAPI(
        title="pronto-devserver",
        description="Local mock of the Pronto in-app provisioning API",
        version=DEVSERVER_VERSION,
    )
    app.state.api_key = api_key or os.environ.get(API_KEY_ENV_VAR, DEFAULT_API_KEY)
    app.state.store = store if store is not None else seed_store()

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 422:
            return JSONResponse({"message": exc.detail}, status_code=422)
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        return JSONResponse({"message": f"Invalid request: {fields}"}, status_code=422)

    app.include_router(router)
    return app


app = create_app()
