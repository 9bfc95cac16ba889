# search/coordinator.py

from concurrent.futures import ALL_COMPLETED, ProcessPoolExecutor, ThreadPoolExecutor, wait

from grid_path.domain.entities.coords import CoordLike
from grid_path.search.engine import run_search
from grid_path.search.reconcile import H_WEIGHT, PARENT_WEIGHT, reconcile_dual, reconcile_single
from grid_path.search.types import PathResult, SearchRequest, SearchResult
from grid_path.sim.hooks import NoopHooks, SearchHooks

MODES = ("single", "dual")
EXECUTORS = ("thread", "process")


class SearchCoordinator:
    """
    Decides how many engines run and where, joins them, hands the closed
    sets to the reconciler.

    single: one engine, synchronously on the calling thread.
    dual:   origin->target and target->origin on a two-worker pool; both
            futures are awaited before anything is reconciled. No
            cancellation: only the iteration budget bounds the work.
    """

    def __init__(
        self,
        mode: str = "single",
        *,
        executor: str = "thread",
        h_weight: float = H_WEIGHT,
        parent_weight: float = PARENT_WEIGHT,
        hooks: SearchHooks | None = None,
    ):
        if mode not in MODES:
            raise ValueError(f"Unknown search mode {mode!r}")
        if executor not in EXECUTORS:
            raise ValueError(f"Unknown executor {executor!r}")
        self.mode, self.executor = mode, executor
        self.h_weight, self.parent_weight = h_weight, parent_weight
        self.hooks = hooks or NoopHooks()

    def find_path(self, request: SearchRequest) -> PathResult:
        self.hooks.search_start(
            mode=self.mode,
            origin=request.origin.as_tuple(),
            target=request.target.as_tuple(),
            budget=request.iteration_budget,
        )
        if self.mode == "single":
            results = [run_search(request, self.hooks)]
            path = reconcile_single(
                results[0], h_weight=self.h_weight, parent_weight=self.parent_weight
            )
        else:
            results = self._run_pair(request)
            path = reconcile_dual(
                *results, h_weight=self.h_weight, parent_weight=self.parent_weight
            )

        for r in results:
            self._report(r)
        out = PathResult(
            path=path, mode=self.mode, reached_goal=path[-1] == request.target, results=results
        )
        self.hooks.reconcile(
            mode=self.mode,
            path_len=len(path),
            reached_goal=out.reached_goal,
            endpoint=path[-1].as_tuple(),
        )
        return out

    # ------------------ helpers --------------------------

    def _run_pair(self, request: SearchRequest) -> list[SearchResult]:
        if self.executor == "process":
            # hooks hold a logger; keep them on this side of the process boundary
            pool, hooks = ProcessPoolExecutor(max_workers=2), None
        else:
            pool, hooks = ThreadPoolExecutor(max_workers=2, thread_name_prefix="search"), self.hooks
        with pool:
            fwd = pool.submit(run_search, request, hooks)
            bwd = pool.submit(run_search, request.reversed(), hooks)
            wait([fwd, bwd], return_when=ALL_COMPLETED)
            try:
                return [fwd.result(), bwd.result()]
            except Exception as exc:
                self.hooks.error(reason="engine_failed", error=str(exc))
                raise

    def _report(self, r: SearchResult) -> None:
        self.hooks.search_end(
            origin=r.origin.as_tuple(),
            target=r.target.as_tuple(),
            iterations=r.iterations,
            termination=r.termination.value,
            explored=len(r.explored),
            wall_ms=r.wall_ms,
        )


def find_path(
    origin: CoordLike,
    target: CoordLike,
    grid,
    obstacles,
    *,
    iteration_budget: int = 1000,
    mode: str = "single",
    **kw,
) -> PathResult:
    """One-shot convenience: validate, plan, return."""
    request = SearchRequest.between(origin, target, grid, obstacles, iteration_budget)
    return SearchCoordinator(mode, **kw).find_path(request)
