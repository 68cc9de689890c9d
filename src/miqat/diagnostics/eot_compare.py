#!/usr/bin/env python3
"""
Compare the folded equation of time with the older modulo-only variant.

The modulo-only variant wraps right ascension to [0,24) hours and subtracts
it from the wrapped mean longitude without folding the difference. Around the
March equinox one of the two positions has wrapped past 0 while the other has
not, and the result jumps by 24 hours. Elsewhere both agree.
"""
from __future__ import annotations

import argparse
import math
from datetime import date, timedelta
from typing import List, Optional, Tuple

from miqat.core.time import julian_date, parse_ymd
from miqat.reference.solar import J2000, solar_parameters


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "miqat[diagnostics]"') from e


def naive_equation_of_time(jd: float) -> float:
    """Equation of time (hours) with plain % wrapping and no fold."""
    D = jd - J2000
    g = (357.529 + 0.98560028 * D) % 360.0
    q = (280.459 + 0.98564736 * D) % 360.0
    L = (q + 1.915 * math.sin(math.radians(g)) + 0.020 * math.sin(math.radians(2.0 * g))) % 360.0
    e = math.radians(23.439 - 0.00000036 * D)
    ra = math.degrees(math.atan2(math.cos(e) * math.sin(math.radians(L)), math.cos(math.radians(L)))) / 15.0
    ra = ra % 24.0
    return q / 15.0 - ra


def compare(jds: List[float]) -> List[Tuple[float, float, float]]:
    """(jd, folded, naive) for each Julian Date."""
    return [(jd, solar_parameters(jd).equation_of_time_hours, naive_equation_of_time(jd)) for jd in jds]


def divergent(rows: List[Tuple[float, float, float]], tol_hours: float = 1e-6) -> List[Tuple[float, float, float]]:
    return [r for r in rows if abs(r[1] - r[2]) > tol_hours]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Folded vs modulo-only equation of time.")
    p.add_argument("--start", default="2024-01-01", help="YYYY-MM-DD")
    p.add_argument("--days", type=int, default=366)
    p.add_argument("--step-hours", type=float, default=1.0, help="sampling step")
    p.add_argument("--tol", type=float, default=1e-6, help="agreement tolerance in hours")
    args = p.parse_args(argv)

    if args.days <= 0 or args.step_hours <= 0:
        raise SystemExit("--days and --step-hours must be positive")

    np = _need_numpy()

    jd0 = julian_date(parse_ymd(args.start))
    jds = np.arange(jd0, jd0 + args.days, args.step_hours / 24.0, dtype=float)
    rows = compare([float(x) for x in jds])

    folded = np.array([r[1] for r in rows], dtype=float)
    naive = np.array([r[2] for r in rows], dtype=float)
    bad = divergent(rows, args.tol)

    print(f"samples            : {len(rows)}")
    print(f"folded EoT range   : [{folded.min() * 60:+.3f}, {folded.max() * 60:+.3f}] min")
    print(f"modulo EoT range   : [{naive.min() * 60:+.3f}, {naive.max() * 60:+.3f}] min")
    print(f"divergent samples  : {len(bad)} (tol {args.tol:g} h)")

    epoch = date(2000, 1, 1)
    for jd, f, n in bad[:20]:
        d = epoch + timedelta(days=jd - J2000)
        print(f"  {d.isoformat()}  jd={jd:.4f}  folded={f:+.5f} h  modulo={n:+.5f} h")
    if len(bad) > 20:
        print(f"  ... {len(bad) - 20} more")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
