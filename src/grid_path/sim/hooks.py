# sim/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def search_start(self, *, mode, origin, target, budget): ...
    def expand(self, *, coord, f, iteration, open_size): ...
    def search_end(self, *, origin, target, iterations, termination, explored, wall_ms): ...
    def reconcile(self, *, mode, path_len, reached_goal, endpoint): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def expand(self, **_):
        pass

    def search_end(self, **_):
        pass

    def reconcile(self, **_):
        pass

    def error(self, **_):
        pass
