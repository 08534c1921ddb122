import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from custody import __version__
from custody.api import create_api_router
from custody.core.config import get_settings
from custody.infrastructure.database import dispose_engine, get_session_factory, init_db
from custody.interfaces.http.errors import register_exception_handlers
from custody.modules.engine import CustodyEngine

settings = get_settings()
logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(level=settings.logging.level, format=settings.logging.format)


def create_app(engine: Optional[CustodyEngine] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        if engine is None:
            await init_db()
            app.state.custody_engine = CustodyEngine(get_session_factory())
            logger.info("Custody engine ready on %s", settings.database_url)
            yield
            await dispose_engine()
        else:
            app.state.custody_engine = engine
            yield

    app = FastAPI(
        title=settings.project_name,
        description="Multi-guardian custody policy engine",
        version=__version__,
        lifespan=lifespan,
    )
    if engine is not None:
        app.state.custody_engine = engine

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", tags=["system"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
