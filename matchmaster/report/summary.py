"""Tabular and JSON views of a ResultSet for presentation layers."""

from __future__ import annotations

from typing import Any

import pandas as pd

from matchmaster.engine.matching import ResultSet

RESULT_COLUMNS = [
    "rank",
    "key",
    "label",
    "count",
    "total_participants",
    "share",
    "tier",
]


def share_tier(count: int, total: int) -> str:
    """Classify a record: everyone has it, several people share it, or one does."""
    if total > 0 and count == total:
        return "all"
    if count >= 2:
        return "shared"
    return "unique"


def results_to_dataframe(result_set: ResultSet) -> pd.DataFrame:
    total = result_set.total_participants
    rows = [
        {
            "rank": rank,
            "key": record.key,
            "label": record.label,
            "count": record.count,
            "total_participants": total,
            "share": f"{record.count}/{total}",
            "tier": share_tier(record.count, total),
        }
        for rank, record in enumerate(result_set.results, start=1)
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def build_report(result_set: ResultSet) -> dict[str, Any]:
    df = results_to_dataframe(result_set)
    tier_counts = {tier: 0 for tier in ("all", "shared", "unique")}
    tier_counts.update({k: int(v) for k, v in df["tier"].value_counts().items()})
    return {
        "total_participants": result_set.total_participants,
        "num_keys": int(len(df)),
        "tier_counts": tier_counts,
        "shared_by_all": df.loc[df["tier"] == "all", "label"].tolist(),
        "results": [r.to_dict() for r in result_set.results],
    }
