from __future__ import annotations

import argparse
import random
from typing import List

import almanac
from almanac.core.types import JulianDay


def parse_calendars(s: str) -> List[str]:
    # "hebrew,islamic" -> ["hebrew", "islamic"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start_jd: float,
    end_jd: float,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    Random midnights in [start_jd, end_jd]: JD -> date -> JD must be the identity,
    and so must date -> JD -> date.
    """
    random.seed(seed)
    cls = almanac.get_calendar(calendar)
    failures = 0

    for _ in range(N):
        jd0 = JulianDay(random.randint(int(start_jd), int(end_jd)) + 0.5)

        d = cls.from_julian_day(jd0)
        jd1 = d.to_julian_day()
        back = cls.from_julian_day(jd1)

        if jd1 != jd0 or back != d:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("jd0:", jd0.value)
            print("date:", repr(d))
            print("jd1:", jd1.value)
            print("back:", repr(back))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: JD -> calendar date -> JD.")
    p.add_argument("--calendars", type=str, default=",".join(almanac.list_calendars()),
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start-jd", type=float, default=1948440.0, help="Lower Julian Date bound.")
    p.add_argument("--end-jd", type=float, default=2816787.0, help="Upper Julian Date bound.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    total = 0
    for cal in parse_calendars(args.calendars):
        n_fail = roundtrip_test(cal, args.N, args.start_jd, args.end_jd, args.seed, max_failures=args.max_failures)
        print(f"{cal:<10} N={args.N}  failures={n_fail}")
        total += n_fail

    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
