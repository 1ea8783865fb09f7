"""Configuration management for placeholder-tiles using donfig."""

from __future__ import annotations

import donfig

config = donfig.Config(
    "placeholder_tiles",
    defaults=[
        {
            "host": "0.0.0.0",
            "port": 5001,
            "num_threads": 8,
            "tile_size": 256,
            "font_size": 20,
            # distance from the top edge to the label baseline, in pixels
            "text_baseline": 35,
            "halo_offset": 1,
            "log_level": "INFO",
        }
    ],
    paths=[],
    env_var="PLACEHOLDER_TILES_CONFIG_PATH",
)
