# tests/domain/test_obstacles.py
import pickle

import numpy as np
import pytest

from grid_path.app.protocols import ObstacleQuery
from grid_path.domain.entities.coords import Coord
from grid_path.domain.entities.grid import Grid
from grid_path.domain.entities.obstacles import ObstacleSet


def test_membership_only():
    obs = ObstacleSet([(1, 0), Coord(2, 2)])
    assert isinstance(obs, ObstacleQuery)
    assert Coord(1, 0) in obs
    assert Coord(0, 1) not in obs
    assert len(obs) == 2
    assert set(obs) == {Coord(1, 0), Coord(2, 2)}


def test_mask_round_trip_is_y_major():
    mask = np.array([[0, 1, 0], [0, 0, 1]], dtype=bool)
    obs = ObstacleSet.from_mask(mask)
    assert set(obs) == {Coord(1, 0), Coord(2, 1)}
    assert np.array_equal(obs.to_mask(Grid(3, 2)), mask)


def test_mask_must_be_2d():
    with pytest.raises(ValueError):
        ObstacleSet.from_mask(np.zeros(4, dtype=bool))


def test_from_predicate_probes_every_cell():
    g = Grid(5, 5)
    obs = ObstacleSet.from_predicate(g, lambda c: c.x == 2 and c.y != 4)
    assert set(obs) == {Coord(2, y) for y in range(4)}


def test_random_is_seeded_and_keeps_endpoints():
    g = Grid(12, 12)
    a = ObstacleSet.random(g, 0.9, np.random.default_rng(3), keep=[(0, 0), (11, 11)])
    b = ObstacleSet.random(g, 0.9, np.random.default_rng(3), keep=[(0, 0), (11, 11)])
    assert a == b
    assert Coord(0, 0) not in a and Coord(11, 11) not in a
    assert len(a) > 60


def test_random_density_range():
    with pytest.raises(ValueError):
        ObstacleSet.random(Grid(3, 3), 1.0, np.random.default_rng(0))


def test_pickles_for_process_workers():
    obs = ObstacleSet([(1, 2), (3, 4)])
    assert pickle.loads(pickle.dumps(obs)) == obs
