# tests/app/test_config.py
import pytest
from pydantic import ValidationError

from grid_path.config.models import ScenarioModel, SearchDualModel
from grid_path.runtime.registries import make_obstacles, make_search


def _base(**over):
    cfg = {"name": "c", "grid": {"width": 5, "height": 5}, "start": [0, 0], "goal": [4, 4]}
    cfg.update(over)
    return cfg


def test_defaults():
    m = ScenarioModel.model_validate(_base())
    assert m.search.kind == "single"
    assert m.search.iteration_budget == 1000
    assert m.obstacles.kind == "list"
    assert m.log.level == "INFO"


def test_dual_defaults_to_smaller_budget_per_engine():
    m = ScenarioModel.model_validate(_base(search={"kind": "dual"}))
    assert isinstance(m.search, SearchDualModel)
    assert m.search.iteration_budget == 500
    assert m.search.executor == "thread"


@pytest.mark.parametrize(
    "over",
    [
        {"grid": {"width": 0, "height": 5}},
        {"start": [5, 0]},
        {"goal": [-1, 2]},
        {"search": {"kind": "single", "iteration_budget": -1}},
        {"search": {"kind": "astar"}},
        {"obstacles": {"kind": "random", "density": 1.5}},
        {"colour": "red"},
    ],
)
def test_invalid_configs_rejected(over):
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate(_base(**over))


def test_registries_reject_unknown_kinds():
    class Odd:
        kind = "quantum"

    with pytest.raises(ValueError):
        make_obstacles(Odd(), grid=None)
    with pytest.raises(ValueError):
        make_search(Odd())
