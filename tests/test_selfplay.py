import csv

from dropfour.ai.minimax_agent import MinimaxAgent
from dropfour.ai.random_agent import RandomAgent
from dropfour.scripts.selfplay import CSV_COLUMNS, main, play_headless, write_results
from dropfour.types import Piece


def test_play_headless_records_a_finished_game():
    rec = play_headless(RandomAgent(name="R1"), MinimaxAgent(name="M1", depth=1), game=1, seed=7)
    assert rec.winner in {"Yellow", "Red", "Tie"}
    y, r = rec.stats[Piece.YELLOW], rec.stats[Piece.RED]
    assert rec.plies == y.moves + r.moves
    assert y.moves - r.moves in (0, 1)
    assert y.nodes == 0
    assert r.nodes > 0


def test_play_headless_is_reproducible_for_a_seed():
    a = play_headless(RandomAgent(), RandomAgent(), seed=11, width=5, height=5)
    b = play_headless(RandomAgent(), RandomAgent(), seed=11, width=5, height=5)
    assert (a.winner, a.plies) == (b.winner, b.plies)


def test_write_results(tmp_path):
    rec = play_headless(RandomAgent(), RandomAgent(), game=1, seed=3)
    path = write_results([rec], tmp_path / "out")
    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == CSV_COLUMNS
    assert len(rows) == 2
    assert rows[1][4] == rec.winner


def test_main_writes_one_row_per_game(tmp_path, capsys):
    code = main([
        "--games", "3",
        "--depth-yellow", "1",
        "--random-red",
        "--width", "5",
        "--height", "4",
        "--outdir", str(tmp_path),
    ])
    assert code == 0
    files = list(tmp_path.glob("selfplay_results_*.csv"))
    assert len(files) == 1
    with open(files[0], newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["game"] for r in rows] == ["1", "2", "3"]
    assert {r["red"] for r in rows} == {"Random R"}
    assert "SELF-PLAY RESULTS" in capsys.readouterr().out
