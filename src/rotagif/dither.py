from PIL import Image

from .palette import Palette


def _clamp(value):
    if value < 0.0:
        return 0.0
    if value > 255.0:
        return 255.0
    return value


def floyd_steinberg(image, palette: Palette):
    """Quantize ``image`` to ``palette`` with Floyd-Steinberg error diffusion.

    Pixels are visited in row-major order. Each pixel's error is spread to
    the right neighbour (7/16) and to the row below (3/16, 5/16, 1/16);
    error falling off an edge is dropped. Alpha is ignored.
    """
    rgb = image.convert("RGB")
    width, height = rgb.size
    data = rgb.tobytes()
    colors = palette.colors
    indices = bytearray(width * height)
    nearest = {}

    # One padding slot on each side keeps edge diffusion branch-free.
    span = (width + 2) * 3
    this_row = [0.0] * span
    next_row = [0.0] * span

    for y in range(height):
        base = y * width
        for x in range(width):
            o = (base + x) * 3
            e = (x + 1) * 3
            r = _clamp(data[o] + this_row[e])
            g = _clamp(data[o + 1] + this_row[e + 1])
            b = _clamp(data[o + 2] + this_row[e + 2])

            key = (int(r + 0.5), int(g + 0.5), int(b + 0.5))
            index = nearest.get(key)
            if index is None:
                index = nearest[key] = palette.nearest(key)
            indices[base + x] = index

            pr, pg, pb = colors[index]
            for c, err in enumerate((r - pr, g - pg, b - pb)):
                if not err:
                    continue
                this_row[e + 3 + c] += err * 7 / 16
                next_row[e - 3 + c] += err * 3 / 16
                next_row[e + c] += err * 5 / 16
                next_row[e + 3 + c] += err * 1 / 16
        this_row, next_row = next_row, [0.0] * span

    out = Image.frombytes("P", (width, height), bytes(indices))
    out.putpalette(palette.to_bytes())
    return out
