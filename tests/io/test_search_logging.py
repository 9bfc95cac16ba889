# tests/io/test_search_logging.py
import io
import json
import logging

from grid_path.domain.entities.grid import Grid
from grid_path.domain.entities.obstacles import ObstacleSet
from grid_path.io.recorder import JsonlSink, MemorySink, PathRecorded, Recorder
from grid_path.io.search_logging import SearchLogging, _default_json_logger
from grid_path.search.coordinator import SearchCoordinator
from grid_path.search.types import SearchRequest


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _logger(name):
    log = logging.getLogger(name)
    log.handlers.clear()
    h = _ListHandler()
    log.addHandler(h)
    log.setLevel(logging.DEBUG)
    log.propagate = False
    return log, h


def test_lifecycle_lines_carry_run_id():
    log, h = _logger("grid_path.test.lifecycle")
    hooks = SearchLogging(run_id="r-7", logger=log)
    req = SearchRequest.between((0, 0), (4, 4), Grid(5, 5), ObstacleSet(), 100)
    SearchCoordinator(hooks=hooks).find_path(req)
    msgs = [r.getMessage() for r in h.records]
    assert msgs == ["search_start", "search_end", "reconcile"]
    assert all(r.extra["run_id"] == "r-7" for r in h.records)
    end = h.records[1].extra
    assert end["termination"] == "goal_reached"
    assert end["iterations"] == 5


def test_fallback_is_a_warning_and_expansions_are_sampled():
    log, h = _logger("grid_path.test.sampled")
    hooks = SearchLogging(logger=log, debug=True, sample_every=2)
    req = SearchRequest.between((0, 0), (2, 2), Grid(3, 3), ObstacleSet([(1, 0), (1, 1), (0, 1)]), 100)
    SearchCoordinator(hooks=hooks).find_path(req)
    rec = h.records[-1]
    assert rec.getMessage() == "reconcile"
    assert rec.levelno == logging.WARNING
    assert rec.extra["fallback"] is True
    assert not any(r.getMessage() == "expand" for r in h.records)  # one expansion, not sampled


def test_json_formatter_flattens_extra():
    log = _default_json_logger("grid_path.test.fmt")
    fmt = log.handlers[0].formatter
    rec = logging.LogRecord("grid_path.test.fmt", logging.INFO, __file__, 1, "hello", None, None)
    rec.extra = {"run_id": "x", "path_len": 3}
    out = json.loads(fmt.format(rec))
    assert out == {"level": "INFO", "msg": "hello", "logger": "grid_path.test.fmt", "run_id": "x", "path_len": 3}


def test_recorder_writes_jsonl_and_survives_broken_sinks():
    class Broken:
        def write(self, ev):
            raise RuntimeError("disk full")

    buf, mem = io.StringIO(), MemorySink()
    rec = Recorder(Broken(), JsonlSink(buf), mem)
    req = SearchRequest.between((0, 0), (2, 0), Grid(3, 1), ObstacleSet(), 10)
    res = SearchCoordinator().find_path(req)
    rec.emit(PathRecorded.from_result("r-1", res))

    line = json.loads(buf.getvalue())
    assert line["path"] == [[0, 0], [1, 0], [2, 0]]
    assert line["reached_goal"] is True
    assert line["explored"] == [[0, 0], [1, 0], [2, 0]]
    assert mem.events[0].run_id == "r-1"


def test_sinks_satisfy_the_path_sink_protocol():
    from grid_path.app.protocols import PathSink

    assert isinstance(MemorySink(), PathSink)
    assert isinstance(JsonlSink(io.StringIO()), PathSink)
