import logging
import os

from PIL import GifImagePlugin, Image, UnidentifiedImageError

from .errors import DecodeError, EncodeError, NotFoundError, WriteError
from .palette import Palette
from .scheduler import MAX_DELAY

logger = logging.getLogger(__name__)

GIF_TRAILER = b";"


def open_image(path):
    if not os.path.exists(path):
        raise NotFoundError(f"Image not found: {path}")
    try:
        with Image.open(path) as im:
            im.load()
            return im.convert("RGBA")
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
        raise DecodeError(f"Cannot decode {path}: {exc}") from exc


def _with_palette(im, shared: bytes):
    if im.mode != "P":
        raise EncodeError(f"Expected palette frames, got mode {im.mode}")
    im = im.copy()
    im.putpalette(shared)
    return im


def encode_animated_image(frames, delays, palette: Palette) -> bytes:
    """Encode palette frames as an infinitely looping GIF.

    All frames are written against one global color table and none carries
    a local table. ``delays`` are in hundredths of a second, one per frame.
    Every frame is written, including ones identical to their predecessor.
    """
    if len(frames) != len(delays):
        raise EncodeError(f"{len(frames)} frames but {len(delays)} delays")
    if not frames:
        raise EncodeError("Cannot encode an animation without frames")

    shared = palette.to_bytes()
    size = frames[0].size
    chunks = []
    try:
        header, _ = GifImagePlugin.getheader(_with_palette(frames[0], shared), info={"loop": 0})
        chunks.extend(header)
        for position, (im, delay) in enumerate(zip(frames, delays)):
            if im.size != size:
                raise EncodeError(f"Frame size {im.size} differs from {size}")
            if delay < 0 or delay > MAX_DELAY:
                raise EncodeError(f"Delay {delay} does not fit a GIF frame")
            params = {"duration": delay * 10, "disposal": 1}
            if position == 0:
                # Older Pillow releases emit the loop block with the first frame.
                params["loop"] = 0
            # getdata takes milliseconds and stores hundredths.
            chunks.extend(GifImagePlugin.getdata(_with_palette(im, shared), **params))
    except (ValueError, OSError) as exc:
        raise EncodeError(f"Cannot encode animation: {exc}") from exc
    chunks.append(GIF_TRAILER)
    return b"".join(chunks)


def write_animated_image(path, frames, delays, palette: Palette):
    data = encode_animated_image(frames, delays, palette)
    logger.info("Writing to %s", path)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise WriteError(f"Cannot write {path}: {exc}") from exc
