from placeholder_tiles.render.placeholder import (
    draw_frame,
    draw_label,
    label_origin,
    render_tile,
)

__all__ = ["draw_frame", "draw_label", "label_origin", "render_tile"]
