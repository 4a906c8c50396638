from __future__ import annotations
from typing import Optional

from loguru import logger

from dropfour.ai.base import Agent
from dropfour.config import SHOW_THREATS
from dropfour.core.board import Board
from dropfour.game.state import GameState
from dropfour.types import Piece
from dropfour.ui.effects import ai_thinking
from dropfour.ui.human import HumanAgent
from dropfour.ui.render import render


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_yellow: Agent, agent_red: Agent, current: Piece) -> str:
    """
    Prepend a persistent header showing who plays which color.
    """
    y_name = _agent_name(agent_yellow, "Yellow")
    r_name = _agent_name(agent_red, "Red")

    header = f"Yellow: {y_name} | Red: {r_name} | Turn: {current}"
    if status:
        return f"{header}\n{status}"
    return header


def _ai_status(agent: Agent, col: int) -> str:
    info = getattr(agent, "last_info", None)
    if not info:
        return f"{agent.name} chose {col + 1}"
    return (
        f"{agent.name} chose {info.get('move_col')} | "
        f"d={info.get('depth')} | "
        f"nodes={info.get('nodes')} | "
        f"cut={info.get('cutoffs')} | "
        f"eval={info.get('eval')} | "
        f"tied={info.get('tied')} | "
        f"{info.get('time_ms')}ms"
    )


def run_game(
    agent_yellow: Agent,
    agent_red: Agent,
    show_thinking: bool = True,
    board: Optional[Board] = None,
) -> Optional[Piece]:
    """
    Drive one game to the end. Yellow moves first.
    Returns the winner, or None for a tie or a quit.
    """
    state = GameState(board=board or Board(show_threats=SHOW_THREATS))

    while True:
        render(state.board, _status_with_agents(state.last_status, agent_yellow, agent_red, state.current))

        if state.board.winner is not None:
            msg = f"{state.board.winner} wins!"
            render(state.board, _status_with_agents(msg, agent_yellow, agent_red, state.current))
            logger.info("Game over: {}", msg)
            return state.board.winner

        if state.board.is_full():
            render(state.board, _status_with_agents("Tie, nobody wins.", agent_yellow, agent_red, state.current))
            logger.info("Game over: tie")
            return None

        mover = state.current
        current_agent = agent_yellow if mover is Piece.YELLOW else agent_red

        try:
            if isinstance(current_agent, HumanAgent):
                move = current_agent.ask(state)
                if move is None:
                    render(state.board, _status_with_agents("Game quit.", agent_yellow, agent_red, mover))
                    return None
                state.last_status = f"{mover} chose {int(move) + 1}"
            else:
                if show_thinking:
                    ai_thinking(_agent_name(current_agent, str(mover)))
                move = current_agent.choose_move(state)
                state.last_status = _ai_status(current_agent, int(move))

            if state.board.drop(int(move)) is None:
                raise ValueError(f"Column {int(move) + 1} is full.")
            state.last_status += f" | Next: {state.current}"

        except ValueError as e:
            state.last_status = str(e)
