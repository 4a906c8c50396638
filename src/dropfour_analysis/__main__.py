from __future__ import annotations

import argparse
import sys

from .cli.analyze_csv import main as analyze_main
from .cli.make_figures import main as figures_main

COMMANDS = {
    "analyze": (analyze_main, "Print outcome counts and the per-agent table for a self-play CSV"),
    "figures": (figures_main, "Save outcome, game length and per-agent charts for a self-play CSV"),
}


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="dropfour_analysis",
        description="Inspect selfplay_results_*.csv files written by dropfour.scripts.selfplay.",
        epilog="Run '<command> --help' for the options of each command.",
    )
    sub = ap.add_subparsers(dest="command", metavar="command")
    for name, (_, help_text) in COMMANDS.items():
        sub.add_parser(name, help=help_text, add_help=False)
    return ap


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # No command, or bare flags: analyze
    if not argv or argv[0].startswith("-") and argv[0] not in {"-h", "--help"}:
        return analyze_main(argv)

    args, rest = build_argparser().parse_known_args(argv[:1])
    run, _ = COMMANDS[args.command]
    return run(argv[1:] + rest)


if __name__ == "__main__":
    raise SystemExit(main())
