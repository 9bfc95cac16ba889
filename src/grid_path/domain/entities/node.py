from dataclasses import dataclass

from grid_path.domain.entities.coords import Coord


@dataclass
class Node:
    """
    Search state for one cell.
    `h` is fixed when the node is first opened; `g` may only go down while
    the node is open. `f` is derived on read so relaxation never leaves it stale.
    """

    coord: Coord
    g: float = 0.0
    h: float = 0.0
    parent: Coord | None = None  # None => search origin

    @property
    def f(self) -> float:
        return self.g + self.h
