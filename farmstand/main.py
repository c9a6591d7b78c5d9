from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from farmstand.core.config import Settings, get_settings
from farmstand.core.lifespan import lifespan
from farmstand.api.v1.routers.pages import router as pages_router
from farmstand.api.v1.routers.catalog import router as catalog_router
from farmstand.api.v1.routers.assets import router as assets_router
from farmstand.core.logging import configure_logging

import logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    # redirect_slashes off: "/product/" is an unknown route, not a redirect
    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan, redirect_slashes=False)
    app.state.settings = settings

    # ------- Routes -------
    app.include_router(pages_router)      # overview + product detail
    app.include_router(catalog_router)    # /api
    app.include_router(assets_router)     # public, images, html

    # ------- Errors -------
    @app.exception_handler(StarletteHTTPException)
    async def not_found_page(request: Request, exc: StarletteHTTPException):
        # a known path with an unsupported method is still "not found" to the client
        if exc.status_code in (404, 405):
            return HTMLResponse(request.app.state.templates.not_found, status_code=404)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return PlainTextResponse("500 - Internal server error", status_code=500)

    return app


settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

app = create_app(settings)


def run():
    import uvicorn

    logger.info("Server running on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
