from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_outcomes(counts: pd.Series, outdir: Path, *, show: bool) -> Path | None:
    fig = plt.figure()
    plt.bar(counts.index.astype(str), counts.values, color=["gold", "firebrick", "gray"][: len(counts)])
    plt.title("Game outcomes")
    plt.xlabel("winner")
    plt.ylabel("games")
    return _finish(fig, outdir, "outcomes.png", show=show)


def plot_plies_hist(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if "plies" not in df.columns or not pd.api.types.is_numeric_dtype(df["plies"]):
        return None

    fig = plt.figure()
    plt.hist(df["plies"].dropna(), bins=20)
    plt.title("Histogram: game length")
    plt.xlabel("plies")
    plt.ylabel("count")
    return _finish(fig, outdir, "hist_plies.png", show=show)


def plot_agent_bar(table: pd.DataFrame, outdir: Path, metric: str, *, show: bool) -> Path | None:
    if "agent" not in table.columns or metric not in table.columns:
        return None
    if not pd.api.types.is_numeric_dtype(table[metric]):
        return None

    fig = plt.figure(figsize=(10, 5))
    plt.bar(table["agent"].astype(str), table[metric].astype(float))
    plt.title(f"Agents by {metric}")
    plt.xlabel("agent")
    plt.ylabel(metric)
    plt.xticks(rotation=45, ha="right")
    return _finish(fig, outdir, f"agents_{metric}.png", show=show)
