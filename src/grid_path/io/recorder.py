# io/recorder.py
import json
import sys
from dataclasses import asdict, dataclass

from grid_path.app.protocols import PathSink
from grid_path.search.types import PathResult


@dataclass(frozen=True)
class PathRecorded:
    """What an external renderer needs: the path plus every closed cell."""

    run_id: str
    mode: str
    reached_goal: bool
    path: list[tuple[int, int]]
    explored: list[tuple[int, int]]
    iterations: list[int]

    @classmethod
    def from_result(cls, run_id: str, res: PathResult) -> "PathRecorded":
        return cls(
            run_id=run_id,
            mode=res.mode,
            reached_goal=res.reached_goal,
            path=res.as_tuples(),
            explored=sorted(c.as_tuple() for c in res.explored),
            iterations=[r.iterations for r in res.results],
        )


class JsonlSink:
    def __init__(self, fp=sys.stdout):
        self.fp = fp

    def write(self, ev) -> None:
        self.fp.write(json.dumps(asdict(ev)) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)


class Recorder:
    def __init__(self, *sinks: PathSink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            try:
                s.write(ev)
            except Exception:
                pass  # a broken sink never fails a search
