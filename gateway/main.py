# gateway/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import Settings, load_settings
from shared.database import init_db, make_engine, make_session_factory
from shared.errors import ServiceError

# imported for their table definitions
import auth_service.models  # noqa: F401
import feedback_service.models  # noqa: F401
from auth_service.routes import build_router as build_auth_router
from feedback_service.routes import build_router as build_feedback_router

logger = logging.getLogger("gateway")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    logging.basicConfig(level=settings.log_level)

    engine = make_engine(settings.database_url)
    init_db(engine)
    SessionLocal = make_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
        yield
        engine.dispose()

    app = FastAPI(title="Feedback Service", version="1.0.0", lifespan=lifespan)
    app.state.engine = engine
    app.state.session_factory = SessionLocal

    origins = list(settings.cors_origins)
    # Browsers reject "*" with credentials
    allow_credentials = origins != ["*"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # log field locations only; input values may hold passwords
        logger.info("Rejected request to %s: %s", request.url.path, [e.get("loc") for e in exc.errors()])
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(build_auth_router(SessionLocal, bcrypt_rounds=settings.bcrypt_rounds), prefix="/api")
    app.include_router(build_feedback_router(SessionLocal), prefix="/api")

    return app
