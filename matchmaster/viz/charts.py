"""Visualization helpers for match results."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt

from matchmaster.engine.matching import ResultSet


def save_share_chart_png(
    result_set: ResultSet, out_path: Path, title: str, top_n: int = 20
) -> None:
    records = list(result_set.results[: max(top_n, 0)])
    total = result_set.total_participants

    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(6, max(2.0, 0.4 * len(records) + 1)))
    # Highest count on top
    labels = [r.label for r in reversed(records)]
    counts = [r.count for r in reversed(records)]
    ax.barh(range(len(records)), counts)
    ax.set_yticks(range(len(records)))
    ax.set_yticklabels(labels)
    ax.set_xlim(0, max(total, 1))
    ax.set_xlabel("Participants")
    ax.set_title(title)

    # Annotate
    for i, count in enumerate(counts):
        ax.text(count, i, f" {count}/{total}", va="center")

    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)
