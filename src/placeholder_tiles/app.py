from fastapi import FastAPI, Request

from placeholder_tiles.logger import logger, set_context_logger
from placeholder_tiles.routers.xyz import xyz_tiles_router


def create_app() -> FastAPI:
    """Build the tile server application.

    The interactive docs are switched off so that every path, including
    ``/docs``, is answered by the tile router.
    """
    app = FastAPI(
        title="Placeholder Tiles",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        client = request.client
        remote_addr = f"{client.host}:{client.port}" if client else "-"
        url = request.scope["path"]
        if request.url.query:
            url = f"{url}?{request.url.query}"

        bound_logger = logger.bind(
            remote_addr=remote_addr, method=request.method, url=url
        )
        set_context_logger(bound_logger)
        bound_logger.info("request")
        return await call_next(request)

    app.include_router(xyz_tiles_router)
    return app
