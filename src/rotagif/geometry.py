import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    x0: int
    y0: int
    x1: int
    y1: int

    @classmethod
    def of(cls, image):
        width, height = image.size
        return cls(0, 0, width, height)

    @property
    def width(self):
        return self.x1 - self.x0

    @property
    def height(self):
        return self.y1 - self.y0

    @property
    def size(self):
        return (self.width, self.height)

    @property
    def box(self):
        return (self.x0, self.y0, self.x1, self.y1)

    @property
    def center(self):
        return (self.x0 + self.width / 2, self.y0 + self.height / 2)

    def contains(self, other):
        return (
            self.x0 <= other.x0
            and self.y0 <= other.y0
            and other.x1 <= self.x1
            and other.y1 <= self.y1
        )


@dataclass(frozen=True)
class Affine:
    # ``p @ q`` applies ``q`` first.
    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @classmethod
    def identity(cls):
        return cls(1.0, 0.0, 0.0, 0.0, 1.0, 0.0)

    @classmethod
    def translate(cls, tx, ty):
        return cls(1.0, 0.0, tx, 0.0, 1.0, ty)

    @classmethod
    def rotate(cls, angle):
        s, c = math.sin(angle), math.cos(angle)
        return cls(c, -s, 0.0, s, c, 0.0)

    def __matmul__(self, other):
        p, q = self, other
        return Affine(
            p.a * q.a + p.b * q.d,
            p.a * q.b + p.b * q.e,
            p.a * q.c + p.b * q.f + p.c,
            p.d * q.a + p.e * q.d,
            p.d * q.b + p.e * q.e,
            p.d * q.c + p.e * q.f + p.f,
        )

    def apply(self, x, y):
        return (self.a * x + self.b * y + self.c, self.d * x + self.e * y + self.f)

    @property
    def coefficients(self):
        return (self.a, self.b, self.c, self.d, self.e, self.f)


def rotation_about_centers(dst, src, angle):
    """Map destination pixels to source pixels, rotating about both centers.

    Image space is y-down, so a positive angle turns the rendered content
    counter-clockwise on screen.
    """
    dx, dy = dst.center
    sx, sy = src.center
    return Affine.translate(sx, sy) @ Affine.rotate(angle) @ Affine.translate(-dx, -dy)
