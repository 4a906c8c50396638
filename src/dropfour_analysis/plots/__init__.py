from .chart import (
    plot_agent_bar,
    plot_outcomes,
    plot_plies_hist,
)

__all__ = [
    "plot_agent_bar",
    "plot_outcomes",
    "plot_plies_hist",
]
