# estate_api/main.py
#
# Run: python -m estate_api.main
#  or: uvicorn estate_api.main:create_app --factory --port 5000
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import Settings, get_settings
from .errors import handle_broad_exceptions
from .routes import router
from .storage import JsonStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the listings API: property and project collections plus uploaded images."""
    settings = settings or get_settings()

    app = FastAPI(title="Estate Showcase API")
    # last added is outermost; CORS has to wrap the error boundary
    app.middleware("http")(handle_broad_exceptions)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.properties = JsonStore(settings.properties_file).load()
    app.state.projects = JsonStore(settings.projects_file).load()

    settings.uploads_dir.mkdir(parents=True, exist_ok=True)
    app.mount(settings.uploads_url, StaticFiles(directory=settings.uploads_dir), name="uploads")

    app.include_router(router)
    return app


def run(settings: Optional[Settings] = None) -> None:
    import uvicorn

    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = create_app(settings)
    logger.info("Server running at http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
