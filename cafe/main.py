# Load environment variables FIRST, before any module imports that need them
from dotenv import load_dotenv
load_dotenv()

import logging
from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS
from .logging_config import setup_logging
from .middleware import RequestIDMiddleware
from .routes import shop_router, auth_router

# Configure logging at module load time
setup_logging()

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create the café FastAPI application.

    Installs the request ID and CORS middleware, includes the shop and auth
    routers at the root path and adds the /health endpoint.
    """
    app = FastAPI(
        title="Café",
        description="Minimal café ordering web app",
        version="1.0.0",
        openapi_tags=[
            {"name": "Health", "description": "Health check endpoints"},
            {"name": "Shop", "description": "Menu pages"},
            {"name": "Auth", "description": "Login and session cookie"},
        ],
    )

    app.add_middleware(RequestIDMiddleware)

    # In production, set CORS_ORIGINS to restrict allowed origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["Health"])
    def health() -> Dict[str, str]:
        """Health check endpoint. Returns ok if the service is running."""
        return {"status": "ok"}

    app.include_router(shop_router)
    app.include_router(auth_router)

    logger.info("Application created")
    return app


app = create_app()
