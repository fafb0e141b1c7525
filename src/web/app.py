"""
Application FastAPI de BingeScore.

Initialise l'application web avec le Container DI, configure CORS et les
gestionnaires d'erreurs, et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .. import __version__
from ..container import Container, close_clients
from .errors import register_exception_handlers
from .routes.health import router as health_router
from .routes.media import router as media_router
from .routes.search import router as search_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Ferme les clients HTTP des fournisseurs a l'arret."""
    logger.info("BingeScore API demarree")
    yield
    await close_clients(app.state.container)
    logger.info("BingeScore API arretee")


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application web.

    Args:
        container: Container DI a utiliser (un nouveau par defaut)
    """
    container = container or Container()
    settings = container.config()

    app = FastAPI(title="BingeScore", version=__version__, lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Routes
    app.include_router(health_router)
    app.include_router(search_router)
    app.include_router(media_router)
    return app


app = create_app()
