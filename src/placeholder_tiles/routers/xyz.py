from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from placeholder_tiles.lib import RenderError, async_run
from placeholder_tiles.logger import get_context_logger, set_context_logger
from placeholder_tiles.render import render_tile
from placeholder_tiles.validators import validate_tile_path

# tiles and 404s are answered the same way whatever the method
TILE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

NOT_FOUND_BODY = "404 - not found"
INTERNAL_ERROR_BODY = "500 - internal error"

xyz_tiles_router = APIRouter()


@xyz_tiles_router.api_route(
    "/{path:path}", methods=TILE_METHODS, include_in_schema=False
)
async def xyz_tile(request: Request):
    try:
        # the decoded path as received; request.url drops control characters
        coord = validate_tile_path(request.scope["path"])
    except ValueError:
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)

    bound_logger = get_context_logger().bind(z=coord.zoom, x=coord.x, y=coord.y)
    set_context_logger(bound_logger)

    try:
        content = await async_run(render_tile, coord)
    except RenderError as e:
        bound_logger.error("RenderError", error=str(e))
        return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)
    except Exception as e:  # pragma: no cover - passthrough errors
        bound_logger.error("Exception", error=str(e))
        return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)

    return Response(
        content,
        media_type="image/png",
        headers={"Content-Length": str(len(content))},
    )
