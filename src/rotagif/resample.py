import enum

from PIL import Image

from .geometry import Affine, Rect


class Op(enum.Enum):
    REPLACE = "replace"
    BLEND = "blend"


def transform(dst, dst_region: Rect, src_transform: Affine, src, src_region=None, op=Op.REPLACE):
    """Paint ``src`` into ``dst_region`` of ``dst`` through ``src_transform``.

    ``src_transform`` maps destination pixel space to source pixel space and
    is applied as is. Destination pixels whose sample falls outside
    ``src_region`` are left untouched.
    """
    if src_region is None:
        src_region = Rect.of(src)
    if not Rect.of(dst).contains(dst_region):
        raise ValueError(f"destination region {dst_region.box} lies outside the surface")
    if not Rect.of(src).contains(src_region):
        raise ValueError(f"source region {src_region.box} lies outside the surface")
    if dst_region.width <= 0 or dst_region.height <= 0:
        return dst

    # Re-express the transform relative to both regions' origins.
    layer_transform = (
        Affine.translate(-src_region.x0, -src_region.y0)
        @ src_transform
        @ Affine.translate(dst_region.x0, dst_region.y0)
    )
    data = layer_transform.coefficients

    patch = src.crop(src_region.box) if src_region != Rect.of(src) else src
    if patch.mode != "RGBA":
        patch = patch.convert("RGBA")
    layer = patch.transform(
        dst_region.size,
        Image.Transform.AFFINE,
        data,
        resample=Image.Resampling.BILINEAR,
        fillcolor=(0, 0, 0, 0),
    )

    if op is Op.BLEND:
        if dst.mode != "RGBA":
            raise ValueError("blending requires an RGBA destination")
        dst.alpha_composite(layer, dest=(dst_region.x0, dst_region.y0))
        return dst

    coverage = Image.new("L", src_region.size, 255).transform(
        dst_region.size,
        Image.Transform.AFFINE,
        data,
        resample=Image.Resampling.NEAREST,
        fillcolor=0,
    )
    if dst.mode != "RGBA":
        layer = layer.convert(dst.mode)
    dst.paste(layer, (dst_region.x0, dst_region.y0), coverage)
    return dst
