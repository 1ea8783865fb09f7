from dataclasses import dataclass, fields
from typing import Self

from placeholder_tiles.config import config


@dataclass(frozen=True)
class TileCoordinate:
    """A z/x/y tile address, kept as canonical decimal digit strings.

    Values stay strings so that arbitrarily long digit runs never go through
    ``int``, which refuses more than 4300 digits.
    """

    zoom: str
    x: str
    y: str

    def __post_init__(self) -> None:
        for field in fields(self):
            digits = str(getattr(self, field.name)).lstrip("0") or "0"
            object.__setattr__(self, field.name, digits)

    @property
    def label(self) -> str:
        return f"/{self.zoom}/{self.x}/{self.y}"


@dataclass(frozen=True)
class TileLayout:
    """Fixed geometry of a placeholder tile."""

    size: int = 256
    font_size: int = 20
    # label baseline, measured down from the top edge
    baseline: int = 35
    halo_offset: int = 1

    @classmethod
    def from_config(cls) -> Self:
        return cls(
            size=config.get("tile_size"),
            font_size=config.get("font_size"),
            baseline=config.get("text_baseline"),
            halo_offset=config.get("halo_offset"),
        )
