from __future__ import annotations

import time

from dropfour.ai.minimax_agent import MinimaxAgent
from dropfour.config import SEARCH_DEPTH
from dropfour.game.controller import run_game
from dropfour.ui.human import HumanAgent


def _start(label: str) -> None:
    print(f"\nStarting game: {label}")
    print("Game will start in 3 seconds...\n")
    time.sleep(3)


def run_menu() -> None:
    print("Select mode:")
    print("1) Human (Yellow) vs AI (Red)")
    print("2) AI vs AI")
    print("3) Human vs Human")
    print("4) Headless self-play batch")

    choice = input("Choice: ").strip()

    if choice == "1":
        human = HumanAgent()
        ai = MinimaxAgent(name=f"Minimax d{SEARCH_DEPTH}")
        _start(f"{human.name} vs {ai.name}")
        run_game(human, ai)
        return

    if choice == "2":
        _start("Minimax vs Minimax")
        run_game(MinimaxAgent(name="Minimax Y"), MinimaxAgent(name="Minimax R"))
        return

    if choice == "4":
        from dropfour.scripts.selfplay import main as selfplay_main

        selfplay_main([])
        return

    if choice != "3":
        print("\nInvalid choice. Defaulting to Human vs Human.\n")
    _start("Human vs Human")
    run_game(HumanAgent(name="Yellow"), HumanAgent(name="Red"))
