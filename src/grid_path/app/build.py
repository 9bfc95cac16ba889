# grid_path/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from grid_path.app.protocols import PathPlanner
from grid_path.config.models import ScenarioModel
from grid_path.domain.entities.grid import Grid
from grid_path.domain.entities.obstacles import ObstacleSet
from grid_path.io.recorder import PathRecorded, Recorder
from grid_path.io.search_logging import SearchLogging
from grid_path.runtime.registries import make_obstacles, make_search
from grid_path.search.types import PathResult, SearchRequest
from grid_path.sim.hooks import NoopHooks


@dataclass
class App:
    run_id: str
    grid: Grid
    obstacles: ObstacleSet
    request: SearchRequest
    planner: PathPlanner
    recorder: Recorder | None = None

    def run(self) -> PathResult:
        res = self.planner.find_path(self.request)
        if self.recorder:
            self.recorder.emit(PathRecorded.from_result(self.run_id, res))
        return res


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Grid & obstacles
    g = model.grid
    grid = Grid(g.width, g.height, cell_size=g.cell_size, origin=g.origin)
    obstacles = make_obstacles(
        model.obstacles, grid=grid, scenario=model.name, keep=(model.start, model.goal)
    )

    # 2) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Planner & request
    planner = make_search(model.search, hooks=hooks)
    request = SearchRequest.between(
        model.start, model.goal, grid, obstacles, model.search.iteration_budget
    )
    return App(model.run_id, grid, obstacles, request, planner, recorder)
