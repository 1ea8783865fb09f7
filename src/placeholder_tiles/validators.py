import re

from placeholder_tiles.types import TileCoordinate

TILE_PATH_PATTERN = re.compile(r"/(\d+)/(\d+)/(\d+)\.png", flags=re.ASCII)


def validate_tile_path(v: str) -> TileCoordinate:
    match = TILE_PATH_PATTERN.fullmatch(v)
    if match is None:
        raise ValueError(f"path {v!r} must be in the format '/z/x/y.png'")

    zoom, x, y = match.groups()
    return TileCoordinate(zoom=zoom, x=x, y=y)
