from PIL import Image

from .dither import floyd_steinberg
from .geometry import Affine, Rect, rotation_about_centers
from .palette import Palette
from .resample import Op, transform


def sample_backfill(src):
    """Return the color that corners exposed by rotation are filled with."""
    return src.convert("RGBA").getpixel((0, 0))


def composite_frame(src, bounds: Rect, backfill, angle: float):
    working = Image.new("RGBA", bounds.size, backfill)
    # Working pixel (0, 0) stands for (bounds.x0, bounds.y0).
    src_transform = rotation_about_centers(bounds, Rect.of(src), angle) @ Affine.translate(
        bounds.x0, bounds.y0
    )
    return transform(working, Rect.of(working), src_transform, src, op=Op.REPLACE)


def render_frame(src, bounds: Rect, backfill, palette: Palette, angle: float):
    return floyd_steinberg(composite_frame(src, bounds, backfill, angle), palette)
