"""
FastAPI application — read-only insurance policy catalog API.
Runs on http://127.0.0.1:8080 by default.

The catalog and query engine live on app.state so that each call to
create_app() produces a fully independent instance with no shared
module-level globals. Tests pass their own CatalogStore to create_app().
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ..catalog.store import CatalogStore, load_catalog
from ..config import config
from ..query.engine import QueryEngine
from .error_handlers import register_error_handlers
from .schemas import HealthOut

VERSION = "0.1.0"


def create_app(store: Optional[CatalogStore] = None) -> FastAPI:

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # The catalog must be in place before the first request is served.
        catalog = store if store is not None else load_catalog(config.data_file)
        app.state.store = catalog
        app.state.engine = QueryEngine(catalog)
        yield

    app = FastAPI(
        title="Insurance Policy Catalog",
        description="Read-only listing, search and filtering of insurance policies",
        version=VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    from .routers import policies

    app.include_router(policies.router)

    @app.get("/health", response_model=HealthOut)
    def health(request: Request):
        catalog = getattr(request.app.state, "store", None)
        return HealthOut(
            status="ok",
            version=VERSION,
            policies=len(catalog) if catalog is not None else 0,
        )

    return app


app = create_app()
