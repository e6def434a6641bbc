from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from podium.backend.app.api.router import api_router
from podium.backend.app.core.config import settings
from podium.backend.app.core.logging import configure_logging
from podium.backend.app.exception_handlers import register_exception_handlers
from podium.backend.app.infrastructure.files.filesystem_storage import UPLOADS_DIR_NAME


def create_app():
    configure_logging()

    app = FastAPI(title="Podium API")
    app.include_router(api_router, prefix="/api")
    # stored files are addressed by their public `/uploads/...` url
    app.mount(
        "/uploads",
        StaticFiles(directory=Path(settings.PUBLIC_DIR) / UPLOADS_DIR_NAME, check_dir=False),
        name="uploads",
    )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    register_exception_handlers(app)
    return app

app = create_app()
