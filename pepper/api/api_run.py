from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pepper.infra.database import Database
from pepper.utilities.config import DATABASE_PATH

# Routers
from pepper.api.routes import shopping_list

# Logging
logger = logging.getLogger("pepper_app")


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the API around an explicitly constructed Database (defaults to DATABASE_PATH)."""
    db = database or Database(DATABASE_PATH)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.database.init_schema()
        logger.info("Pepper's Pantry API started (db=%s)", app.state.database.path)
        yield

    app = FastAPI(title="Pepper's Pantry Shopping List API", lifespan=lifespan)
    app.state.database = db

    # Same endpoints with and without the /api prefix
    app.include_router(shopping_list.router, prefix="/shopping-list")
    app.include_router(shopping_list.router, prefix="/api/shopping-list")

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
