#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

import luach


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "luach[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "luach[diagnostics]"') from e


def days_since_equinox(d: date) -> int:
    """Days since the (nominal) autumn equinox, with Sep 22 = 1."""
    return (d - date(d.year, 9, 22)).days + 1


def rolling_median(np, y, win: int = 19):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """(Gregorian year, days since Sep 22, leap flag) for each Hebrew year in range."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    x = np.empty_like(years)
    y = np.empty_like(years, dtype=float)
    leap = np.empty_like(years, dtype=bool)
    for i, Y in enumerate(years):
        info = luach.year_info(int(Y))
        d = info["rosh_hashana"]
        x[i] = d.year
        y[i] = float(days_since_equinox(d))
        leap[i] = info["leap"]
    return x, y, leap


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Rosh Hashana dates against the Gregorian year.")
    p.add_argument("--from-year", type=int, default=5600)
    p.add_argument("--to-year", type=int, default=6000)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=19, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="rosh_hashana_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Days since Sep 22 (Sep 22 = 1)")
    ax.set_title("Rosh Hashana drift against the solar year")

    x, y, leap = build_series(np, args.from_year, args.to_year)
    ax.scatter(x[~leap], y[~leap], s=12, c="tab:blue", alpha=0.45, linewidths=0.0, label="common year")
    ax.scatter(x[leap], y[leap], s=16, facecolors="none", edgecolors="tab:red", alpha=0.6, label="leap year")

    if args.show_trend:
        ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color="0.30", linewidth=1.8)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
