from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.v1 import estimate, pages
from app.core.logging import RequestLoggingMiddleware, setup_logging


def create_app() -> FastAPI:
    setup_logging(json_format=settings.log_json)

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
    )

    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    application.include_router(estimate.router, tags=["estimate"])

    @application.get("/health")
    async def health_check() -> dict:
        return {"status": "ok"}

    # Catch-all help route, so it must be included after everything else.
    application.include_router(pages.router, tags=["pages"])

    return application


app = create_app()
