class Palette:
    """Fixed, ordered color table shared by every frame of a sequence."""

    def __init__(self, colors):
        self._colors = tuple((int(r), int(g), int(b)) for r, g, b in colors)
        if not 0 < len(self._colors) <= 256:
            raise ValueError("a palette holds between 1 and 256 colors")

    def __len__(self):
        return len(self._colors)

    def __getitem__(self, index):
        return self._colors[index]

    def __iter__(self):
        return iter(self._colors)

    def __eq__(self, other):
        return isinstance(other, Palette) and self._colors == other._colors

    def __hash__(self):
        return hash(self._colors)

    @property
    def colors(self):
        return self._colors

    def nearest(self, color):
        r, g, b = color[:3]
        best, best_dist = 0, None
        for index, (pr, pg, pb) in enumerate(self._colors):
            dist = (r - pr) ** 2 + (g - pg) ** 2 + (b - pb) ** 2
            if best_dist is None or dist < best_dist:
                best, best_dist = index, dist
                if dist == 0:
                    break
        return best

    def to_bytes(self):
        return bytes(channel for color in self._colors for channel in color)


def web_safe():
    levels = range(0, 256, 0x33)
    return Palette((r, g, b) for r in levels for g in levels for b in levels)


WEB_SAFE = web_safe()
