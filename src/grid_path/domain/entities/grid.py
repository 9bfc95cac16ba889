import math
from collections.abc import Iterator
from dataclasses import dataclass

from grid_path.domain.entities.coords import OFFSETS, Coord


@dataclass(frozen=True)
class Grid:
    """
    Fixed-size uniform grid. Cells are addressed by integer Coord; world
    positions are (x, y) floats with `origin` at the corner of cell (0, 0).
    """

    width: int
    height: int
    cell_size: float = 1.0
    origin: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"grid width must be > 0, got {self.width}")
        if self.height <= 0:
            raise ValueError(f"grid height must be > 0, got {self.height}")
        if self.cell_size <= 0:
            raise ValueError(f"grid cell_size must be > 0, got {self.cell_size}")

    def in_bounds(self, c: Coord) -> bool:
        return 0 <= c.x < self.width and 0 <= c.y < self.height

    def clamp(self, x: int, y: int) -> Coord:
        return Coord(min(max(x, 0), self.width - 1), min(max(y, 0), self.height - 1))

    def cells(self) -> Iterator[Coord]:
        for x in range(self.width):
            for y in range(self.height):
                yield Coord(x, y)

    def neighbors(self, c: Coord) -> list[Coord]:
        return [n for n in (c + o for o in OFFSETS) if self.in_bounds(n)]

    # --------------- world <-> cell -----------------------

    def cell_to_world(self, c: Coord) -> tuple[float, float]:
        """Centre of the cell in world units."""
        c = self.clamp(c.x, c.y)
        ox, oy = self.origin
        return (c.x + 0.5) * self.cell_size + ox, (c.y + 0.5) * self.cell_size + oy

    def world_to_cell(self, wx: float, wy: float) -> Coord:
        ox, oy = self.origin
        x = math.floor((wx - ox) / self.cell_size)
        y = math.floor((wy - oy) / self.cell_size)
        return self.clamp(x, y)

    def snap(self, wx: float, wy: float) -> tuple[float, float]:
        return self.cell_to_world(self.world_to_cell(wx, wy))
