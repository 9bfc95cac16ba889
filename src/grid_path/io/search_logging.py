# io/search_logging.py
import json
import logging
import sys

from grid_path.sim.hooks import NoopHooks


def _default_json_logger(name="grid_path", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for a planning call: one line per search start,
    per engine result and per reconciliation. Expansions are DEBUG only and
    sampled every `sample_every` iterations.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 100,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}})

    # --------------------------------------------------------

    def search_start(self, *, mode, origin, target, budget):
        self._emit("INFO", "search_start", mode=mode, origin=origin, target=target, budget=budget)

    def expand(self, *, coord, f, iteration, open_size):
        if self.debug and (iteration % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "expand",
                coord=coord.as_tuple(),
                f=round(f, 4),
                iteration=iteration,
                open_size=open_size,
            )

    def search_end(self, *, origin, target, iterations, termination, explored, wall_ms):
        self._emit(
            "INFO",
            "search_end",
            origin=origin,
            target=target,
            iterations=iterations,
            termination=termination,
            explored=explored,
            wall_ms=round(wall_ms, 3),
        )

    def reconcile(self, *, mode, path_len, reached_goal, endpoint):
        level = "INFO" if reached_goal else "WARNING"
        self._emit(
            level,
            "reconcile",
            mode=mode,
            path_len=path_len,
            reached_goal=reached_goal,
            fallback=not reached_goal,
            endpoint=endpoint,
        )

    def error(self, *, reason: str, **extra):
        self._emit("ERROR", "search_error", reason=reason, **extra)
