"""Two-dimensional vectors, transforms, integer points and colours."""

import math
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class Vector2D:
    """An immutable pair of floats."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vector2D"]
    LEFT: ClassVar["Vector2D"]
    RIGHT: ClassVar["Vector2D"]
    UP: ClassVar["Vector2D"]
    DOWN: ClassVar["Vector2D"]

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def ix(self):
        return int(self.x)

    def iy(self):
        return int(self.y)

    def is_zeroed(self):
        """True when either component is zero."""
        return self.x == 0.0 or self.y == 0.0

    def half(self):
        return Vector2D(self.x * 0.5, self.y * 0.5)

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self):
        """Unit vector in the same direction; zero-length vectors come back unchanged."""
        length = self.length()
        if length > 0.0 and not math.isnan(length):
            return Vector2D(self.x / length, self.y / length)
        return self

    def equal_to_int(self, other):
        """Compare the truncated integer parts of both vectors."""
        return self.ix() == other.ix() and self.iy() == other.iy()

    def __add__(self, other):
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, value):
        return Vector2D(self.x * value, self.y * value)

    __rmul__ = __mul__

    def __truediv__(self, value):
        return Vector2D(self.x / value, self.y / value)

    def __str__(self):
        return f"X : [{self.x:f}] Y : [{self.y:f}]"


Vector2D.ZERO = Vector2D(0, 0)
Vector2D.LEFT = Vector2D(-1, 0)
Vector2D.RIGHT = Vector2D(1, 0)
Vector2D.UP = Vector2D(0, -1)
Vector2D.DOWN = Vector2D(0, 1)


@dataclass(frozen=True)
class Transform:
    """A centred rectangle: location is its centre, scale its size."""

    scale: Vector2D = field(default_factory=Vector2D)
    location: Vector2D = field(default_factory=Vector2D)

    def center_left_top(self):
        return self.location - self.scale.half()

    def center_right_bottom(self):
        return self.location + self.scale.half()


def _truncating_div(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class IntPoint:
    """An immutable pair of integers."""

    x: int = 0
    y: int = 0

    LEFT: ClassVar["IntPoint"]
    RIGHT: ClassVar["IntPoint"]
    UP: ClassVar["IntPoint"]
    DOWN: ClassVar["IntPoint"]

    def __post_init__(self):
        object.__setattr__(self, "x", int(self.x))
        object.__setattr__(self, "y", int(self.y))

    def __add__(self, other):
        return IntPoint(self.x + other.x, self.y + other.y)

    def __truediv__(self, value):
        """Integer division truncating toward zero."""
        return IntPoint(_truncating_div(self.x, value), _truncating_div(self.y, value))


IntPoint.LEFT = IntPoint(-1, 0)
IntPoint.RIGHT = IntPoint(1, 0)
IntPoint.UP = IntPoint(0, -1)
IntPoint.DOWN = IntPoint(0, 1)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with one byte per channel."""

    r: int
    g: int
    b: int
    a: int = 0

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def value(self):
        """The colour packed as a signed 32-bit integer, red in the lowest byte."""
        return int.from_bytes(bytes((self.r, self.g, self.b, self.a)), "little", signed=True)

    def rgb(self):
        return (self.r, self.g, self.b)