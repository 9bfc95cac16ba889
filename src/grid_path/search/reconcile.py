# search/reconcile.py

import numpy as np

from grid_path.domain.entities.coords import Coord
from grid_path.domain.entities.node import Node
from grid_path.search.types import SearchResult

H_WEIGHT = 1.0
PARENT_WEIGHT = 0.5
CHUNK_ROWS = 64


def reconstruct(explored: dict[Coord, Node], end: Coord) -> list[Coord]:
    """Walk parent links from `end` back to the origin; returned origin -> end."""
    path = [end]
    parent = explored[end].parent
    while parent is not None:
        path.append(parent)
        parent = explored[parent].parent
    path.reverse()
    return path


def chain_lengths(explored: dict[Coord, Node]) -> dict[Coord, int]:
    """
    Hops from every closed node back to the origin.
    A node's parent is always closed before the node itself, so one pass
    in expansion order is enough.
    """
    depth: dict[Coord, int] = {}
    for c, node in explored.items():
        depth[c] = 0 if node.parent is None else depth[node.parent] + 1
    return depth


def fallback_endpoint(
    explored: dict[Coord, Node],
    *,
    h_weight: float = H_WEIGHT,
    parent_weight: float = PARENT_WEIGHT,
) -> Coord:
    """
    Best stand-in for an unreached target: low h, deep parent chain.
    score = h * h_weight - chain * parent_weight, lower wins, earliest
    expansion wins ties.
    """
    if not explored:
        raise ValueError("fallback needs at least one explored node")
    depth = chain_lengths(explored)
    best, best_score = None, float("inf")
    for c, node in explored.items():
        score = node.h * h_weight - depth[c] * parent_weight
        if score < best_score:
            best, best_score = c, score
    return best


def closest_pair(
    a: dict[Coord, Node], b: dict[Coord, Node], *, chunk: int = CHUNK_ROWS
) -> tuple[Coord, Coord]:
    """
    Closest approach between two closed sets; first pair in expansion order on ties.
    `a` is scanned in row blocks so memory stays at chunk * |b|.
    """
    ka, kb = list(a), list(b)
    pa = np.array([c.as_tuple() for c in ka], dtype=np.int64)
    pb = np.array([c.as_tuple() for c in kb], dtype=np.int64)
    best_i, best_j, best_d2 = 0, 0, None
    for lo in range(0, len(ka), chunk):
        block = pa[lo : lo + chunk]
        dx = block[:, 0, None] - pb[None, :, 0]
        dy = block[:, 1, None] - pb[None, :, 1]
        d2 = dx * dx + dy * dy
        i, j = np.unravel_index(int(np.argmin(d2)), d2.shape)
        if best_d2 is None or d2[i, j] < best_d2:
            best_i, best_j, best_d2 = lo + int(i), int(j), d2[i, j]
    return ka[best_i], kb[best_j]


# --------------- single / dual -----------------------


def reconcile_single(
    result: SearchResult,
    *,
    h_weight: float = H_WEIGHT,
    parent_weight: float = PARENT_WEIGHT,
) -> list[Coord]:
    if not result.explored:
        # origin blocked
        return [result.origin]
    if result.reached_target:
        return reconstruct(result.explored, result.target)
    end = fallback_endpoint(result.explored, h_weight=h_weight, parent_weight=parent_weight)
    return reconstruct(result.explored, end)


def reconcile_dual(
    forward: SearchResult,
    backward: SearchResult,
    *,
    h_weight: float = H_WEIGHT,
    parent_weight: float = PARENT_WEIGHT,
) -> list[Coord]:
    """
    Only the forward half builds the path. The backward closed set just
    picks the meeting cell; its half of the route is not stitched on.
    """
    if forward.reached_target:
        return reconstruct(forward.explored, forward.target)
    if not forward.explored:
        return [forward.origin]
    if not backward.explored:
        # destination blocked: nothing to meet, use the one-sided heuristic
        return reconcile_single(forward, h_weight=h_weight, parent_weight=parent_weight)
    meet, _ = closest_pair(forward.explored, backward.explored)
    return reconstruct(forward.explored, meet)
