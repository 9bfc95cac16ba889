# search/types.py
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from grid_path.app.protocols import GridSpace, ObstacleQuery
from grid_path.domain.entities.coords import Coord, CoordLike, distance, to_coord
from grid_path.domain.entities.node import Node
from grid_path.domain.entities.obstacles import ObstacleSet


class Termination(Enum):
    GOAL_REACHED = "goal_reached"
    FRONTIER_EXHAUSTED = "frontier_exhausted"
    BUDGET_EXHAUSTED = "budget_exhausted"
    ORIGIN_BLOCKED = "origin_blocked"


@dataclass(frozen=True)
class SearchRequest:
    """
    One engine run. Invalid arguments are rejected here, never inside the
    expansion loop.
    """

    origin: Coord
    target: Coord
    grid: GridSpace
    obstacles: ObstacleQuery
    iteration_budget: int = 1000

    def __post_init__(self):
        object.__setattr__(self, "origin", to_coord(self.origin))
        object.__setattr__(self, "target", to_coord(self.target))
        if not isinstance(self.obstacles, ObstacleSet) and isinstance(self.obstacles, Iterable):
            # plain sets of (x, y) tuples must block Coord lookups too
            object.__setattr__(self, "obstacles", ObstacleSet(self.obstacles))
        if self.grid.width <= 0 or self.grid.height <= 0:
            raise ValueError(
                f"grid dimensions must be positive, got {self.grid.width}x{self.grid.height}"
            )
        if not self.grid.in_bounds(self.origin):
            raise ValueError(f"origin {self.origin.as_tuple()} is outside the grid")
        if not self.grid.in_bounds(self.target):
            raise ValueError(f"target {self.target.as_tuple()} is outside the grid")
        if self.iteration_budget < 0:
            raise ValueError(f"iteration_budget must be >= 0, got {self.iteration_budget}")

    @classmethod
    def between(
        cls, origin: CoordLike, target: CoordLike, grid, obstacles, iteration_budget: int = 1000
    ) -> "SearchRequest":
        return cls(to_coord(origin), to_coord(target), grid, obstacles, iteration_budget)

    def reversed(self) -> "SearchRequest":
        return SearchRequest(
            self.target, self.origin, self.grid, self.obstacles, self.iteration_budget
        )


@dataclass(frozen=True)
class SearchResult:
    origin: Coord
    target: Coord
    explored: dict[Coord, Node]  # closed set, in expansion order
    iterations: int
    termination: Termination
    wall_ms: float = 0.0

    @property
    def reached_target(self) -> bool:
        return self.target in self.explored


@dataclass
class PathResult:
    path: list[Coord]
    mode: str
    reached_goal: bool
    results: list[SearchResult] = field(default_factory=list)

    @property
    def fallback(self) -> bool:
        return not self.reached_goal

    @property
    def explored(self) -> frozenset[Coord]:
        """Every cell closed by any engine; handy for external renderers."""
        out: set[Coord] = set()
        for r in self.results:
            out.update(r.explored)
        return frozenset(out)

    @property
    def cost(self) -> float:
        return sum(distance(a, b) for a, b in zip(self.path, self.path[1:]))

    def as_tuples(self) -> list[tuple[int, int]]:
        return [c.as_tuple() for c in self.path]
