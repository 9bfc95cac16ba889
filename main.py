# main.py
import argparse
import json
import sys

from grid_path.app.build import build
from grid_path.io.recorder import JsonlSink, Recorder


def run(path: str, *, record: bool = False, quiet: bool = False) -> int:
    with open(path, encoding="utf-8") as f:
        cfg = json.load(f)

    recorder = Recorder(JsonlSink(sys.stdout)) if record else None
    app = build(cfg, use_logging=not quiet, recorder=recorder)
    res = app.run()

    if not record:
        print(
            json.dumps(
                {
                    "path": res.as_tuples(),
                    "reached_goal": res.reached_goal,
                    "mode": res.mode,
                    "cost": round(res.cost, 6),
                }
            )
        )
    return 0 if res.reached_goal else 2


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Plan a path across an obstacle grid.")
    p.add_argument("scenario", help="scenario JSON file")
    p.add_argument("--record", action="store_true", help="emit path + explored cells as JSONL")
    p.add_argument("--quiet", action="store_true", help="disable structured logs")
    args = p.parse_args(argv)
    return run(args.scenario, record=args.record, quiet=args.quiet)


if __name__ == "__main__":
    sys.exit(main())
