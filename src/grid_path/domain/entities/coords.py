import math
from dataclasses import dataclass


# Integer cell address on the grid
@dataclass(frozen=True)
class Coord:
    x: int
    y: int

    def __add__(self, other: "Coord") -> "Coord":
        return Coord(self.x + other.x, self.y + other.y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_diagonal(self) -> bool:
        # only meaningful for offsets
        return self.x != 0 and self.y != 0


CoordLike = Coord | tuple[int, int]


def to_coord(c: CoordLike) -> Coord:
    return c if isinstance(c, Coord) else Coord(int(c[0]), int(c[1]))


# N, NE, E, SE, S, SW, W, NW
OFFSETS: tuple[Coord, ...] = (
    Coord(0, 1),
    Coord(1, 1),
    Coord(1, 0),
    Coord(1, -1),
    Coord(0, -1),
    Coord(-1, -1),
    Coord(-1, 0),
    Coord(-1, 1),
)


def distance(a: Coord, b: Coord) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)
