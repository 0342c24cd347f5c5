from __future__ import annotations

from datetime import date
import argparse
from typing import Callable, Dict, List, Tuple

import almanac


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


# New Year labels as (month, day) in each calendar's own numbering.
NEW_YEAR: Dict[str, Tuple[int, int]] = {
    "hebrew": (7, 1),     # Rosh Hashanah, 1 Tishri
    "islamic": (1, 1),    # 1 Muharram
    "persian": (1, 1),    # Nowruz, 1 Farvardin
    "julian": (1, 1),
}


def new_years_in(key: str, gregorian_year: int) -> List[Tuple[int, date]]:
    """All (native year, Gregorian date) New Years of `key` falling in `gregorian_year`."""
    cls = almanac.get_calendar(key)
    month, day = NEW_YEAR[key]
    first = cls.from_date(date(gregorian_year, 1, 1))
    last = cls.from_date(date(gregorian_year, 12, 31))

    out = []
    for y in range(first.year, last.year + 1):
        d = almanac.to_date(cls(y, month, day))
        if d.year == gregorian_year:
            out.append((y, d))
    return out


def parse_calendars(arg: str) -> List[str]:
    items = [x.strip() for x in arg.split(",") if x.strip()]
    for it in items:
        if it not in NEW_YEAR:
            raise SystemExit(f"Unknown calendar '{it}'. Known: {sorted(NEW_YEAR)}")
    return items


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print New Year dates (Gregorian) of other calendars for a range of Gregorian years."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--calendars",
        type=str,
        default="hebrew,islamic,persian",
        help='Comma list like "hebrew,islamic,persian,julian".',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars)

    fmt: Callable[[date], str] = mmdd if args.dates == "mmdd" else date.isoformat

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    # table header
    headers = ["Year"] + [almanac.get_calendar(c).CALENDAR_NAME.split()[0] for c in calendars]
    colw = [5] + [max(18, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        for cal, w in zip(calendars, colw[1:]):
            # The Islamic year is shorter than the Gregorian one: occasionally two New Years.
            cells = ", ".join(f"{fmt(d)} ({y})" for y, d in new_years_in(cal, Y)) or "-"
            row.append(cells.ljust(w))
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
