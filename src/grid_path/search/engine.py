# search/engine.py

import time

from grid_path.domain.entities.coords import OFFSETS, Coord, distance
from grid_path.domain.entities.node import Node
from grid_path.search.frontier import Frontier
from grid_path.search.types import SearchRequest, SearchResult, Termination
from grid_path.sim.hooks import NoopHooks, SearchHooks


def run_search(request: SearchRequest, hooks: SearchHooks | None = None) -> SearchResult:
    """
    Single-direction A* from request.origin towards request.target.

    Stops on the first of: target closed, frontier empty, more than
    `iteration_budget` expansions. None of these is an error; the returned
    closed set is handed to the reconciler either way.
    """
    hooks = hooks or NoopHooks()
    t0 = time.perf_counter()
    origin, target = request.origin, request.target
    grid, obstacles = request.grid, request.obstacles
    budget = request.iteration_budget

    explored: dict[Coord, Node] = {}
    if origin in obstacles:
        return SearchResult(origin, target, explored, 0, Termination.ORIGIN_BLOCKED, _ms(t0))

    frontier = Frontier()
    open_set: dict[Coord, Node] = {}

    start = Node(origin, g=0.0, h=distance(origin, target))
    open_set[origin] = start
    frontier.push(start)

    iterations = 0
    termination = Termination.FRONTIER_EXHAUSTED
    while frontier:
        current = frontier.pop()
        cur = current.coord
        if cur in explored:
            continue  # stale entry left behind by a relaxation

        for off in OFFSETS:
            nc = cur + off
            if not grid.in_bounds(nc):
                continue
            if nc in obstacles or nc in explored:
                continue
            # no squeezing between two blocked orthogonals
            if (
                off.is_diagonal
                and Coord(nc.x, cur.y) in obstacles
                and Coord(cur.x, nc.y) in obstacles
            ):
                continue

            g = current.g + distance(cur, nc)
            nb = open_set.get(nc)
            if nb is None:
                nb = Node(nc, g=g, h=distance(nc, target), parent=cur)
                open_set[nc] = nb
                frontier.push(nb)
            elif g < nb.g:
                nb.g, nb.parent = g, cur
                frontier.push(nb)

        del open_set[cur]
        explored[cur] = current
        iterations += 1
        hooks.expand(coord=cur, f=current.f, iteration=iterations, open_size=len(open_set))

        if cur == target:
            termination = Termination.GOAL_REACHED
            break
        if iterations > budget:
            termination = Termination.BUDGET_EXHAUSTED
            break

    return SearchResult(origin, target, explored, iterations, termination, _ms(t0))


def _ms(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000
