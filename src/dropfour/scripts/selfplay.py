from __future__ import annotations

import argparse
import csv
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from dropfour.ai.base import Agent
from dropfour.ai.minimax_agent import MinimaxAgent
from dropfour.ai.random_agent import RandomAgent
from dropfour.config import HEIGHT, SEARCH_DEPTH, WIDTH
from dropfour.core.board import Board
from dropfour.game.state import GameState
from dropfour.log import ensure_logging
from dropfour.types import Piece

CSV_COLUMNS = [
    "game", "seed",
    "yellow", "red",
    "winner", "plies",
    "width", "height",
    "yellow_moves", "yellow_nodes", "yellow_cutoffs", "yellow_ms",
    "red_moves", "red_nodes", "red_cutoffs", "red_ms",
]


@dataclass
class SideStats:
    moves: int = 0
    nodes: int = 0
    cutoffs: int = 0
    time_ms: int = 0


@dataclass
class GameRecord:
    game: int
    seed: int
    yellow: str
    red: str
    winner: str = "Tie"
    plies: int = 0
    width: int = WIDTH
    height: int = HEIGHT
    stats: Dict[Piece, SideStats] = field(
        default_factory=lambda: {Piece.YELLOW: SideStats(), Piece.RED: SideStats()}
    )

    def row(self) -> List[object]:
        y, r = self.stats[Piece.YELLOW], self.stats[Piece.RED]
        return [
            self.game, self.seed,
            self.yellow, self.red,
            self.winner, self.plies,
            self.width, self.height,
            y.moves, y.nodes, y.cutoffs, y.time_ms,
            r.moves, r.nodes, r.cutoffs, r.time_ms,
        ]


def seed_agent(agent: Agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if isinstance(rng, random.Random):
        rng.seed(seed)


def play_headless(
    agent_yellow: Agent,
    agent_red: Agent,
    *,
    game: int = 0,
    seed: int = 0,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> GameRecord:
    """Play one game without any terminal output."""
    seed_agent(agent_yellow, seed + 101)
    seed_agent(agent_red, seed + 202)

    state = GameState(board=Board(width=width, height=height), last_status="")
    rec = GameRecord(
        game=game,
        seed=seed,
        yellow=agent_yellow.name,
        red=agent_red.name,
        width=width,
        height=height,
    )

    while not state.board.game_over():
        mover = state.current
        agent = agent_yellow if mover is Piece.YELLOW else agent_red
        move = agent.choose_move(state)
        if state.board.drop(int(move)) is None:
            raise ValueError(f"{agent.name} chose full column {int(move)}")

        info = getattr(agent, "last_info", None) or {}
        side = rec.stats[mover]
        side.moves += 1
        side.nodes += int(info.get("nodes", 0))
        side.cutoffs += int(info.get("cutoffs", 0))
        side.time_ms += int(info.get("time_ms", 0))
        rec.plies += 1

    if state.board.winner is not None:
        rec.winner = str(state.board.winner)
    return rec


def write_results(records: List[GameRecord], outdir: Path) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = outdir / f"selfplay_results_{ts}.csv"
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for rec in records:
            w.writerow(rec.row())
    return out_path


def make_agent(color: str, depth: int, use_random: bool, prune: bool) -> Agent:
    if use_random:
        return RandomAgent(name=f"Random {color}")
    return MinimaxAgent(name=f"Minimax d{depth} {color}", depth=depth, prune=prune)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play headless games between search agents and export CSV results.")
    ap.add_argument("--games", type=int, default=10, help="Number of games to play")
    ap.add_argument("--depth-yellow", type=int, default=SEARCH_DEPTH, help="Search depth for Yellow")
    ap.add_argument("--depth-red", type=int, default=SEARCH_DEPTH, help="Search depth for Red")
    ap.add_argument("--random-yellow", action="store_true", help="Yellow plays uniformly random moves")
    ap.add_argument("--random-red", action="store_true", help="Red plays uniformly random moves")
    ap.add_argument("--width", type=int, default=WIDTH, help="Board width")
    ap.add_argument("--height", type=int, default=HEIGHT, help="Board height")
    ap.add_argument("--seed", type=int, default=1234, help="Base seed; game i uses seed + i")
    ap.add_argument("--no-prune", action="store_true", help="Disable alpha-beta pruning (exhaustive minimax)")
    ap.add_argument("--outdir", type=str, default="data/results", help="Directory for the results CSV")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ensure_logging()
    args = build_argparser().parse_args(argv)

    prune = not args.no_prune
    yellow = make_agent("Y", args.depth_yellow, args.random_yellow, prune)
    red = make_agent("R", args.depth_red, args.random_red, prune)

    records: List[GameRecord] = []
    tally = {"Yellow": 0, "Red": 0, "Tie": 0}
    start = time.perf_counter()

    for g in range(args.games):
        rec = play_headless(
            yellow,
            red,
            game=g + 1,
            seed=args.seed + g,
            width=args.width,
            height=args.height,
        )
        records.append(rec)
        tally[rec.winner] += 1
        logger.info("Game {}/{}: {} in {} plies", g + 1, args.games, rec.winner, rec.plies)

    out_path = write_results(records, Path(args.outdir))
    elapsed = time.perf_counter() - start

    print("\n=== SELF-PLAY RESULTS ===")
    print(f"Yellow ({yellow.name}) wins: {tally['Yellow']}")
    print(f"Red ({red.name}) wins:    {tally['Red']}")
    print(f"Ties:      {tally['Tie']}")
    print(f"Elapsed:   {elapsed:.2f}s")
    print(f"Wrote CSV: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
