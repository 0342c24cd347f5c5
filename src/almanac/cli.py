from __future__ import annotations

import argparse
import sys
import re
import importlib
import inspect
from typing import List

from .calendars.base import Almanac


_DATE_RE = re.compile(r"^-?\d+-\d{1,2}-\d{1,2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    neg = s.startswith("-")
    y, m, d = map(int, s.lstrip("-").split("-"))
    return (-y if neg else y), m, d


def _date_last(argv: list[str]) -> list[str]:
    """Move a Y-M-D argument behind `--` so a negative year is not read as an option."""
    if "--" in argv:
        return argv
    for i, a in enumerate(argv):
        if _DATE_RE.match(a):
            return argv[:i] + argv[i + 1 :] + ["--", a]
    return argv


def _parse_components(s: str) -> tuple[int, ...]:
    """`5784-7-1` for year/month/day calendars, `13.0.0.0.0` for the Long Count."""
    if "." in s:
        return tuple(int(x) for x in s.split("."))
    return _parse_ymd(s)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _targets(to: str) -> List[str]:
    import almanac

    if to == "all":
        return almanac.list_calendars()
    return [x.strip() for x in to.split(",") if x.strip()]


def _print_conversions(src: Almanac, to: str) -> None:
    import almanac

    jd = src.to_julian_day()
    print(f"JD = {jd.value:.1f}")
    for key in _targets(to):
        print(str(almanac.convert(src, key)))


def cmd_convert(argv: list[str]) -> int:
    import almanac

    p = argparse.ArgumentParser(prog="almanac convert", description="Convert a date between calendar systems")
    p.add_argument("date", help="Y-M-D (or b.k.t.u.k for --from maya)")
    p.add_argument("--from", dest="source", default="gregorian")
    p.add_argument("--to", default="all", help="calendar key, comma list, or 'all'")
    args = p.parse_args(_date_last(argv))

    src = almanac.make_date(args.source, *_parse_components(args.date))
    _print_conversions(src, args.to)
    return 0


def cmd_jd(argv: list[str]) -> int:
    import almanac

    p = argparse.ArgumentParser(prog="almanac jd", description="Convert a Julian Date to calendar dates")
    p.add_argument("value", type=float, help="Julian Date, e.g. 2451544.5")
    p.add_argument("--to", default="all", help="calendar key, comma list, or 'all'")
    args = p.parse_args(argv)

    src = almanac.from_julian_day(args.value, "gregorian")
    _print_conversions(src, args.to)
    return 0


def cmd_today(argv: list[str]) -> int:
    import almanac

    p = argparse.ArgumentParser(prog="almanac today", description="Today's date in each calendar")
    p.add_argument("--to", default="all", help="calendar key, comma list, or 'all'")
    args = p.parse_args(argv)

    _print_conversions(almanac.today("gregorian"), args.to)
    return 0


def cmd_list(argv: list[str]) -> int:
    import almanac

    argparse.ArgumentParser(prog="almanac list", description="List registered calendars").parse_args(argv)
    for key in almanac.list_calendars():
        info = almanac.calendar_info(key)
        print(f"{key:<10} {info.name:<20} epoch JD {info.epoch.value:.1f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `almanac YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_convert(argv)

    p = argparse.ArgumentParser(prog="almanac", description="Calendar conversion toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Convert a date between calendar systems")
    sub.add_parser("jd", help="Convert a Julian Date to calendar dates")
    sub.add_parser("today", help="Today's date in each calendar")
    sub.add_parser("list", help="List registered calendars")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-lengths", "new-years"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "jd":
        return cmd_jd(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "list":
        return cmd_list(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "almanac.diagnostics.round_trip",
            "year-lengths": "almanac.diagnostics.year_lengths",
            "new-years": "almanac.diagnostics.new_years_table",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
