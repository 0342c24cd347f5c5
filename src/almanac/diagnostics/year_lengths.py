#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from almanac.calendars import hebrew

# Every length the Hebrew rules can produce: deficient / regular / complete.
HEBREW_YEAR_LENGTHS = (353, 354, 355, 383, 384, 385)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "almanac-calendars[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "almanac-calendars[diagnostics]"') from e


def year_lengths(np, start_year: int, end_year: int) -> "np.ndarray":
    return np.array([hebrew.year_length(y) for y in range(start_year, end_year + 1)], dtype=int)


def histogram(np, lengths: "np.ndarray") -> List[Tuple[int, int]]:
    values, counts = np.unique(lengths, return_counts=True)
    return [(int(v), int(c)) for v, c in zip(values, counts)]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Distribution of Hebrew year lengths over a range of years.")
    p.add_argument("--start-year", type=int, default=5600)
    p.add_argument("--end-year", type=int, default=6000)
    p.add_argument("--plot", default="", help="Write a bar chart to this path (needs matplotlib).")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    lengths = year_lengths(np, args.start_year, args.end_year)
    hist = histogram(np, lengths)

    unexpected = sorted(set(int(x) for x in lengths) - set(HEBREW_YEAR_LENGTHS))
    n = len(lengths)
    print(f"Hebrew years {args.start_year}..{args.end_year} (n={n}), mean length {lengths.mean():.6f} days")
    print("Length  Count   Share")
    for length, count in hist:
        print(f"{length:<6}  {count:<6}  {count / n:.4f}")
    if unexpected:
        print(f"Unexpected lengths: {unexpected}")

    if args.plot:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(8, 3.6))
        ax.bar([str(v) for v, _ in hist], [c for _, c in hist], color="0.35")
        ax.set_xlabel("Year length (days)")
        ax.set_ylabel("Years")
        ax.set_title(f"Hebrew year lengths {args.start_year}-{args.end_year}")
        fig.tight_layout()
        fig.savefig(args.plot, dpi=200)
        print(f"Saved: {args.plot}")

    return 1 if unexpected else 0


if __name__ == "__main__":
    raise SystemExit(main())
