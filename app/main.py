
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.middleware.ratelimit import RateLimitMiddleware, client_key
from app.config import settings
from app.db.session import init_db
from app.errors import register_exception_handlers
from app.auth.routes import router as auth_router
from app.tasks.routes import router as tasks_router
from app.uploads.routes import router as uploads_router
from app.suppliers.routes import router as suppliers_router
from app.invoices.routes import router as invoices_router

logger = logging.getLogger(__name__)

def create_app() -> FastAPI:
    logging.basicConfig(level=settings.log_level.upper())
    settings.validate_runtime()

    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(
        RateLimitMiddleware,
        window_seconds=settings.rate_limit_window_seconds,
        max_calls=settings.rate_limit_max_calls,
        key_func=client_key,
    )

    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(tasks_router)
    app.include_router(uploads_router)
    app.include_router(suppliers_router)
    app.include_router(invoices_router)

    @app.on_event("startup")
    def on_startup():
        init_db()
        logger.info("%s started (%s)", settings.app_name, settings.app_env)

    @app.get("/", tags=["root"])
    def root():
        return {"name": settings.app_name, "env": settings.app_env}

    return app

app = create_app()
