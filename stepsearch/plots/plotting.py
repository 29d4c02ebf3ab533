# stepsearch/plots/plotting.py
# Bar plots comparing benchmark rows (dicts as written by benchmarks/run_all.py):
# steps taken, path cost, wall time and peak memory, one panel each.
from __future__ import annotations
from typing import Mapping, Sequence
import matplotlib.pyplot as plt

PANELS = (
    ("steps", "Steps (expansions)"),
    ("cost", "Path Cost"),
    ("time_s", "Time (s)"),
    ("peak_kb", "Peak Memory (KB)"),
)


def bar_compare(rows: Sequence[Mapping], title="Search Comparison"):
    names = [r["algo"] for r in rows]

    fig, axs = plt.subplots(2, 2, figsize=(11, 8))
    axs = axs.ravel()
    for ax, (metric, label) in zip(axs, PANELS):
        vals = [r.get(metric) or 0 for r in rows]
        ax.bar(names, vals)
        ax.set_title(label)
        ax.tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.95])
    return fig
