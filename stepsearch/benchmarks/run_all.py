# stepsearch/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from ..algorithms.registry import ALGORITHMS
from ..algorithms.solve import solve
from ..core.problem import Problem

# ---- Tunables (overridable via environment variables) -----------------------
MAX_STEPS     = int(os.getenv("STEPSEARCH_MAX_STEPS", "200000"))   # per algorithm
PUZZLE_SEED   = int(os.getenv("STEPSEARCH_PUZZLE_SEED", "7"))      # scrambled 8-puzzle / maze
PUZZLE_MOVES  = int(os.getenv("STEPSEARCH_PUZZLE_MOVES", "20"))    # scramble length

logger = logging.getLogger(__name__)


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    if x is None:
        return "n/a"
    return f"{float(x):.4f}"


def _romania() -> Problem:
    from ..problems.romania import romania_problem
    return romania_problem()


def _puzzle() -> Problem:
    from ..problems.sliding_puzzle import scrambled, sliding_puzzle
    return sliding_puzzle(scrambled(3, PUZZLE_MOVES, seed=PUZZLE_SEED))


def _grid() -> Problem:
    from ..problems.grid import make_grid_problem
    return make_grid_problem()


def _maze() -> Problem:
    from ..problems.maze import generate_maze, maze_problem
    grid = generate_maze(15, 15, density=0.25, seed=PUZZLE_SEED)
    return maze_problem(grid, (0, 0), (14, 14))


def _queens() -> Problem:
    from ..problems.queens import n_queens
    return n_queens(6)


PROBLEMS: Dict[str, Callable[[], Problem]] = {
    "romania": _romania,
    "puzzle": _puzzle,
    "grid": _grid,
    "maze": _maze,
    "queens": _queens,
}


def _load_problem(name: str) -> Problem:
    try:
        return PROBLEMS[name]()
    except KeyError:
        raise ValueError(f"unknown problem {name!r}; choose from {', '.join(PROBLEMS)}") from None


def run(problem: Problem, algos: Sequence[str], max_steps: Optional[int] = None,
        goal_on_expand: bool = False) -> List[dict]:
    rows = []
    for name in algos:
        print(f"→ Running {name} ...")
        model = ALGORITHMS[name](problem, goal_on_expand=goal_on_expand)
        r = solve(model, name=name, max_steps=max_steps)
        print(
            f"  {r.algo}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"cost={r.cost} "
            f"steps={r.steps}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        rows.append(r.to_row())
    return rows


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Solve one example problem with every named algorithm.")
    p.add_argument("--problem", default="romania", choices=sorted(PROBLEMS))
    p.add_argument("--algo", action="append", choices=list(ALGORITHMS),
                   help="algorithm to run (repeatable); default: all")
    p.add_argument("--max-steps", type=int, default=MAX_STEPS)
    p.add_argument("--goal-on-expand", action="store_true",
                   help="goal-test nodes when popped instead of when generated")
    p.add_argument("--out", type=Path, default=Path(__file__).with_name("results.json"))
    p.add_argument("--log-level", default="WARNING")
    return p


def main(argv: Optional[Sequence[str]] = None) -> dict:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    problem = _load_problem(args.problem)
    algos = args.algo or list(ALGORITHMS)
    rows = run(problem, algos, max_steps=args.max_steps, goal_on_expand=args.goal_on_expand)

    out = {"problem": args.problem, "results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))
    args.out.write_text(json.dumps(out, indent=2))
    logger.info("wrote %s", args.out)
    return out


if __name__ == "__main__":
    main()
