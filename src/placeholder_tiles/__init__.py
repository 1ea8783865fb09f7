"""Placeholder map tiles: framed 256x256 PNGs labelled with their z/x/y."""

from placeholder_tiles.app import create_app

__all__ = ["create_app"]
