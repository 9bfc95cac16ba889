from typing import Protocol, runtime_checkable

from grid_path.domain.entities.coords import Coord


# ------------- Collaborators --------------------
@runtime_checkable
class GridSpace(Protocol):
    """
    Responsibilities:
    • Report fixed integer dimensions (both > 0).
    • Answer in-bounds checks and clamp raw indices onto the grid.
    """

    width: int
    height: int

    def in_bounds(self, c: Coord) -> bool: ...
    def clamp(self, x: int, y: int) -> Coord: ...


@runtime_checkable
class ObstacleQuery(Protocol):
    """Blocked cells. Read-only for the whole search; membership is the only query."""

    def __contains__(self, c: object) -> bool: ...


@runtime_checkable
class PathSink(Protocol):
    """Anything that wants the finished path plus explored cells (renderers, recorders)."""

    def write(self, ev) -> None: ...


# ------------- Search --------------------
@runtime_checkable
class PathPlanner(Protocol):
    """
    Responsibilities:
    • Turn a validated SearchRequest into an ordered path (never empty).
    • Degrade to a fallback endpoint instead of failing when the target is unreachable.
    """

    def find_path(self, request): ...
