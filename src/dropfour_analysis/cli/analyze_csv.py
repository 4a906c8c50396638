from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import SummaryConfig, agent_table, numeric_summary, outcome_counts


def add_input_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing selfplay_results_*.csv")
    ap.add_argument("--pattern", type=str, default="selfplay_results_*.csv", help="Glob pattern for selecting latest file")


def resolve_csv(args: argparse.Namespace) -> Path:
    if args.csv:
        return Path(args.csv)
    return load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Summarize self-play CSV results.")
    add_input_args(ap)
    ap.add_argument("--top", type=int, default=20, help="Top N agents in the table")
    ap.add_argument("--metric", type=str, default="points_per_game", help="Ranking metric (points_per_game, avg_ms_per_move, wins, ...)")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out agents with fewer than this many games")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = resolve_csv(args)
    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Games: {len(df):,}  Cols: {len(df.columns)}")

    print("\n=== Outcomes ===")
    print(outcome_counts(df).to_string())

    cfg = SummaryConfig(metric=args.metric, top_n=args.top, min_games=args.min_games)
    table = agent_table(df, cfg)
    print("\n=== Agents ===")
    print(table.to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
