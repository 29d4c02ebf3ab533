# stepsearch/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import json
import math
from pathlib import Path
from typing import Optional, Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from ..plots.plotting import bar_compare  # noqa: E402

HERE = Path(__file__).parent


def load_rows(path: Path):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m stepsearch.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return data.get("problem", "search"), rows


def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        return math.inf if v is None else v
    return sorted(rows, key=key_fn)


def fmt_table(rows):
    # Markdown table
    lines = [
        "| Algorithm | Cost | Steps | Explored | Frontier | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|---:|",
    ]

    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"

    for r in rows:
        lines.append(
            f"| {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('steps'))} | "
            f"{fnum(r.get('explored'))} | {fnum(r.get('frontier'))} | "
            f"{fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None):
    p = argparse.ArgumentParser(description="Plot a results.json written by run_all.")
    p.add_argument("--results", type=Path, default=HERE / "results.json")
    p.add_argument("--out-dir", type=Path, default=HERE)
    args = p.parse_args(argv)

    problem, rows = load_rows(args.results)

    md_path = args.out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    fig = bar_compare(_sorted(rows, "steps"), title=f"Search Comparison ({problem})")
    png_path = args.out_dir / "comparison.png"
    fig.savefig(png_path, dpi=160)
    plt.close(fig)
    print(f"Wrote {png_path}")
    return md_path, png_path


if __name__ == "__main__":
    main()
