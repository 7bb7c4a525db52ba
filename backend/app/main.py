from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.database import SessionLocal, ensure_core_schema
from app.core.logging import setup_logging
from app.core.module_loader import collect_routers
from app.modules.users.bootstrap import ensure_default_admin


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title="Vision Guide API",
        version="1.0.0",
        description="API documentation for Vision Guide",
        docs_url="/api-docs",
        openapi_url="/api-docs/swagger.json",
        redoc_url=None,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    routers = collect_routers()
    # Ensure DB schema is present before routes are registered
    ensure_core_schema()

    for router in routers:
        app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.on_event("startup")
    def _startup():
        db = SessionLocal()
        try:
            ensure_default_admin(db)
        finally:
            db.close()

    return app


app = create_app()
