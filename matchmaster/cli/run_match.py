"""Match participant item lists from a CSV and write ranked results.

Run:
    python -m matchmaster.cli.run_match --help
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from matchmaster.data.io import load_participants, load_participants_wide
from matchmaster.engine.matching import match_participants
from matchmaster.report.summary import build_report, results_to_dataframe
from matchmaster.viz.charts import save_share_chart_png


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Find items shared across participants"
    )
    parser.add_argument(
        "--participants_csv",
        type=Path,
        required=True,
        help="CSV with participant_id,item[,name,slot] rows",
    )
    parser.add_argument("--out_dir", type=Path, required=True)
    parser.add_argument(
        "--wide",
        action="store_true",
        help="Input has one column per participant instead of one row per item",
    )
    parser.add_argument(
        "--chart",
        action="store_true",
        help="Also write a bar chart of the top results",
    )
    parser.add_argument("--top_n", type=int, default=20)
    args = parser.parse_args()

    if args.wide:
        participants = load_participants_wide(args.participants_csv)
    else:
        participants = load_participants(args.participants_csv)

    result_set = match_participants(participants)

    args.out_dir.mkdir(parents=True, exist_ok=True)
    results_path = args.out_dir / "results.csv"
    results_to_dataframe(result_set).to_csv(results_path, index=False)

    report = build_report(result_set)
    report_path = args.out_dir / "match_report.json"
    report_path.write_text(
        json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8"
    )

    print(f"Wrote: {results_path}")
    print(f"Wrote: {report_path}")

    if args.chart:
        chart_path = args.out_dir / "share_chart.png"
        save_share_chart_png(
            result_set, chart_path, title="Shared items", top_n=args.top_n
        )
        print(f"Wrote: {chart_path}")

    print("\nSummary:")
    print(f"  Participants: {result_set.total_participants}")
    print(f"  Distinct items: {report['num_keys']}")
    print(f"  Shared by everyone: {report['tier_counts']['all']}")
    print(f"  Shared by some: {report['tier_counts']['shared']}")
    print(f"  Unique: {report['tier_counts']['unique']}")


if __name__ == "__main__":
    main()
