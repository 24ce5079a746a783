#!/usr/bin/env python3
"""
Plot generation trends from the summary CSV written by blob_sim.main.

Figure (one PNG, saved under --outdir with a timestamp):
  (1) Population N, alive and asleep at the end of each generation
  (2) Avg speed with the min/max band
  (3) Who ate what (ate0 / ate1 / ate2+)

Usage:
  python -m blob_sim.analyze --csv runs/summary.csv --outdir reports --tag demo
"""
from __future__ import annotations
import argparse
import os
import sys
import time
import pandas as pd

# Use non-interactive backend for headless operation
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

REQUIRED_COLUMNS = {"generation", "n", "avg_speed"}


# ------------------------- utilities -------------------------
def ensure_dir(p: str) -> None:
    os.makedirs(p, exist_ok=True)

def timestamp(tag: str | None = None) -> str:
    t = time.strftime("%Y%m%d_%H%M%S")
    return f"{t}__{tag}" if tag else t


# ------------------------- loading ---------------------------
def load_summary(path: str) -> pd.DataFrame:
    df = pd.read_csv(path)
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"{path} is missing columns {sorted(missing)}")
    for col in df.columns:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    # several runs appended to one file: average them per generation
    return df.groupby("generation", as_index=False).mean().sort_values("generation")


# ------------------------- plotting --------------------------
def plot_trends(df: pd.DataFrame, outdir: str, tag: str | None) -> str:
    ensure_dir(outdir)
    fig, ax = plt.subplots(3, 1, figsize=(10, 11), sharex=True)
    x = df["generation"]

    ax[0].plot(x, df["n"], label="N", color="black", linewidth=2.25)
    for col in ("alive", "asleep"):
        if col in df.columns:
            ax[0].plot(x, df[col], label=col.capitalize(), linewidth=1.6)
    ax[0].set_ylabel("Count")
    ax[0].legend(loc="best")
    ax[0].grid(alpha=0.25)

    ax[1].plot(x, df["avg_speed"], label="Avg speed")
    if {"speed_min", "speed_max"} <= set(df.columns):
        ax[1].fill_between(x, df["speed_min"], df["speed_max"], alpha=0.2, label="min..max")
    ax[1].set_ylabel("Speed")
    ax[1].legend(loc="best")
    ax[1].grid(alpha=0.25)

    for col, label in (("ate0", "ate 0"), ("ate1", "ate 1"), ("ate2p", "ate 2+")):
        if col in df.columns:
            ax[2].plot(x, df[col], label=label)
    ax[2].set_xlabel("Generation")
    ax[2].set_ylabel("Creatures")
    ax[2].legend(loc="best")
    ax[2].grid(alpha=0.25)

    fig.tight_layout()
    png = os.path.join(outdir, f"generation_trends_{timestamp(tag)}.png")
    fig.savefig(png, dpi=160)
    plt.close(fig)
    return png


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Plot blob_sim generation summaries")
    ap.add_argument("--csv", default="runs/summary.csv")
    ap.add_argument("--outdir", default="reports")
    ap.add_argument("--tag", default="")
    args = ap.parse_args(argv)

    if not os.path.exists(args.csv):
        print(
            "\n[ERROR] Summary CSV not found.\n"
            f"  Expected: {args.csv}\n"
            "Hint: run `python -m blob_sim.main` first.\n",
            file=sys.stderr
        )
        return 1
    try:
        df = load_summary(args.csv)
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    png = plot_trends(df, args.outdir, args.tag or None)
    print(f"[OK] Saved {png}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
