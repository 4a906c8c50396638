from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


SIDES = ("yellow", "red")
RESULT_POINTS = {"win": 1.0, "draw": 0.5, "loss": 0.0}


@dataclass(frozen=True)
class SummaryConfig:
    metric: str = "points_per_game"
    top_n: int = 20
    min_games: int = 0


def per_side(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per (game, side): reshape the wide per-game export so each agent
    appearance can be aggregated regardless of color.
    """
    frames = []
    for side in SIDES:
        color = side.capitalize()
        part = pd.DataFrame({
            "game": df["game"],
            "agent": df[side],
            "color": color,
            "moves": df.get(f"{side}_moves", 0),
            "nodes": df.get(f"{side}_nodes", 0),
            "cutoffs": df.get(f"{side}_cutoffs", 0),
            "time_ms": df.get(f"{side}_ms", 0),
        })
        part["result"] = "loss"
        part.loc[df["winner"] == color, "result"] = "win"
        part.loc[df["winner"] == "Tie", "result"] = "draw"
        frames.append(part)
    return pd.concat(frames, ignore_index=True)


def agent_table(df: pd.DataFrame, cfg: SummaryConfig = SummaryConfig()) -> pd.DataFrame:
    sides = per_side(df)
    sides["points"] = sides["result"].map(RESULT_POINTS)

    grouped = sides.groupby("agent")
    out = pd.DataFrame({
        "games": grouped.size(),
        "wins": grouped["result"].apply(lambda s: int((s == "win").sum())),
        "draws": grouped["result"].apply(lambda s: int((s == "draw").sum())),
        "losses": grouped["result"].apply(lambda s: int((s == "loss").sum())),
        "points": grouped["points"].sum(),
        "moves": grouped["moves"].sum(),
        "nodes": grouped["nodes"].sum(),
        "cutoffs": grouped["cutoffs"].sum(),
        "time_ms": grouped["time_ms"].sum(),
    }).reset_index()

    out["points_per_game"] = out["points"] / out["games"]
    moves = out["moves"].where(out["moves"] > 0)
    out["avg_ms_per_move"] = (out["time_ms"] / moves).fillna(0.0)
    out["avg_nodes_per_move"] = (out["nodes"] / moves).fillna(0.0)

    if cfg.min_games > 0:
        out = out[out["games"] >= cfg.min_games].copy()

    ascending = cfg.metric == "avg_ms_per_move"
    if cfg.metric in out.columns:
        out = out.sort_values(cfg.metric, ascending=ascending)

    out = out.head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def outcome_counts(df: pd.DataFrame) -> pd.Series:
    return df["winner"].value_counts().reindex(["Yellow", "Red", "Tie"], fill_value=0)


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
