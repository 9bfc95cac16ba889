from collections.abc import Callable, Iterable, Iterator

import numpy as np

from grid_path.domain.entities.coords import Coord, CoordLike, to_coord
from grid_path.domain.entities.grid import Grid


class ObstacleSet:
    """Immutable set of blocked cells. The search only ever asks `c in obstacles`."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[CoordLike] = ()):
        self._cells = frozenset(to_coord(c) for c in cells)

    def __contains__(self, c) -> bool:
        return c in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._cells)

    def __eq__(self, other) -> bool:
        return isinstance(other, ObstacleSet) and self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"ObstacleSet({len(self._cells)} cells)"

    def __getstate__(self):
        return self._cells

    def __setstate__(self, state):
        self._cells = state

    # --------------- constructors -----------------------

    @classmethod
    def from_mask(cls, mask) -> "ObstacleSet":
        """`mask` is a 2-D array indexed [y, x]; truthy cells are blocked."""
        arr = np.asarray(mask, dtype=bool)
        if arr.ndim != 2:
            raise ValueError(f"obstacle mask must be 2-D, got shape {arr.shape}")
        ys, xs = np.nonzero(arr)
        return cls(Coord(int(x), int(y)) for x, y in zip(xs, ys))

    @classmethod
    def from_predicate(cls, grid: Grid, blocked: Callable[[Coord], bool]) -> "ObstacleSet":
        # Probe every cell (e.g. a scene query at the cell centre)
        return cls(c for c in grid.cells() if blocked(c))

    @classmethod
    def random(
        cls,
        grid: Grid,
        density: float,
        rng: np.random.Generator,
        *,
        keep: Iterable[CoordLike] = (),
    ) -> "ObstacleSet":
        if not 0.0 <= density < 1.0:
            raise ValueError(f"density must be in [0, 1), got {density}")
        mask = rng.random((grid.height, grid.width)) < density
        for c in map(to_coord, keep):
            if grid.in_bounds(c):
                mask[c.y, c.x] = False
        return cls.from_mask(mask)

    def to_mask(self, grid: Grid) -> np.ndarray:
        mask = np.zeros((grid.height, grid.width), dtype=bool)
        for c in self._cells:
            if grid.in_bounds(c):
                mask[c.y, c.x] = True
        return mask
