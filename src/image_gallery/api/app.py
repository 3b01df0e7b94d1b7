"""FastAPI application factory."""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import FileResponse, PlainTextResponse

from image_gallery.api.auth import router as auth_router
from image_gallery.api.errors import install_error_handlers
from image_gallery.api.images import router as images_router
from image_gallery.app_logging import configure_logging
from image_gallery.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    static_root = Path(container.settings.static_dir).resolve()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        seed_task: asyncio.Task | None = None
        if app.state.container.settings.seed_on_startup:
            seed_task = asyncio.create_task(
                app.state.container.catalog_seeder.seed_with_retry()
            )
        yield
        if seed_task is not None and not seed_task.done():
            logger.info("Cancelling unfinished image sync")
            seed_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await seed_task
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    install_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(images_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api", response_class=PlainTextResponse)
    async def api_root() -> str:
        return "API is running"

    @app.get("/{full_path:path}", include_in_schema=False)
    async def client_shell(full_path: str) -> FileResponse:
        """Serve the built client, falling back to index.html for its routes."""
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Not found"
            )
        asset = _resolve_asset(static_root, full_path)
        if asset is not None:
            return FileResponse(asset)
        index = static_root / "index.html"
        if not index.is_file():
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Not found"
            )
        return FileResponse(index)

    return app


def _resolve_asset(root: Path, relative: str) -> Path | None:
    """Return a file under root for the request path, refusing traversal."""
    if not relative:
        return None
    candidate = (root / relative).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate
