# src/dropfour_analysis/cli/make_figures.py
from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_results
from ..metrics.summarize import agent_table, outcome_counts
from ..plots.chart import plot_agent_bar, plot_outcomes, plot_plies_hist
from .analyze_csv import add_input_args, resolve_csv


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="dropfour_analysis figures",
        description="Generate charts from selfplay_results_*.csv",
    )
    add_input_args(ap)
    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--metric", type=str, default="points_per_game", help="Metric for the per-agent bar chart")
    ap.add_argument("--no-bar", action="store_true", help="Disable the per-agent bar chart")
    ap.add_argument("--no-hist", action="store_true", help="Disable the game length histogram")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = resolve_csv(args)
    df = load_results(LoadSpec(csv_path=csv_path))
    outdir = Path(args.outdir)

    written = [plot_outcomes(outcome_counts(df), outdir, show=args.show)]
    if not args.no_hist:
        written.append(plot_plies_hist(df, outdir, show=args.show))
    if not args.no_bar:
        written.append(plot_agent_bar(agent_table(df), outdir, args.metric, show=args.show))

    for path in written:
        if path is not None:
            print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
