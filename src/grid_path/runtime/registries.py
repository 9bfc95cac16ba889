# runtime/registries.py
from collections.abc import Callable
from typing import Any

from grid_path.config.models import (
    ObstaclesListModel,
    ObstaclesRandomModel,
    ObstaclesUnion,
    SearchDualModel,
    SearchSingleModel,
    SearchUnion,
)
from grid_path.domain.entities.obstacles import ObstacleSet
from grid_path.search.coordinator import SearchCoordinator
from grid_path.sim.rng import RNGRegistry

ObstaclesFactory = Callable[[ObstaclesUnion, dict], ObstacleSet]
SearchFactory = Callable[[SearchUnion, dict], SearchCoordinator]

_obstacles_registry: dict[str, ObstaclesFactory] = {}
_search_registry: dict[str, SearchFactory] = {}


# ------------------- Obstacle sources ---------------------------


def register_obstacles(kind: str):
    def deco(fn: ObstaclesFactory):
        _obstacles_registry[kind] = fn
        return fn

    return deco


def make_obstacles(cfg: ObstaclesUnion, *, grid, scenario: str = "default", keep=()) -> ObstacleSet:
    try:
        factory = _obstacles_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown obstacles kind {cfg.kind!r}")
    return factory(cfg, {"grid": grid, "scenario": scenario, "keep": keep})


@register_obstacles("list")
def _make_list(cfg: ObstaclesListModel, deps):
    return ObstacleSet(cfg.cells)


@register_obstacles("random")
def _make_random(cfg: ObstaclesRandomModel, deps):
    rng = RNGRegistry(cfg.seed, scenario=deps["scenario"]).stream("obstacles")
    keep = deps["keep"] if cfg.keep_endpoints else ()
    return ObstacleSet.random(deps["grid"], cfg.density, rng, keep=keep)


# --------------------- Search coordinators ---------------------


def register_search(kind: str):
    def deco(fn: SearchFactory):
        _search_registry[kind] = fn
        return fn

    return deco


def make_search(cfg: SearchUnion, *, hooks: Any = None) -> SearchCoordinator:
    try:
        factory = _search_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown search kind {cfg.kind!r}")
    return factory(cfg, {"hooks": hooks})


@register_search("single")
def _make_single(cfg: SearchSingleModel, deps):
    return SearchCoordinator(
        "single", h_weight=cfg.h_weight, parent_weight=cfg.parent_weight, hooks=deps["hooks"]
    )


@register_search("dual")
def _make_dual(cfg: SearchDualModel, deps):
    return SearchCoordinator(
        "dual",
        executor=cfg.executor,
        h_weight=cfg.h_weight,
        parent_weight=cfg.parent_weight,
        hooks=deps["hooks"],
    )
