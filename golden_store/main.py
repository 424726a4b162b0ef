import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from golden_store.core import config
from golden_store.core.database import init_db
from golden_store.core.errors import install_error_handlers
from golden_store.routers.admin import router as admin_router
from golden_store.routers.auth import router as auth_router
from golden_store.routers.products import router as products_router
from golden_store.routers.store import router as store_router

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.OFFLINE_MODE:
        logger.warning("OFFLINE_MODE is on: serving defaults, writes disabled")
    else:
        init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(title=config.APP_NAME, version=config.APP_VERSION, lifespan=lifespan)

    # token goes in Authorization header, no cookies
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"], allow_credentials=False
    )
    install_error_handlers(app)

    @app.get("/health")
    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    app.include_router(auth_router)
    app.include_router(admin_router)
    app.include_router(store_router)
    app.include_router(products_router)
    return app


configure_logging()
app = create_app()
