#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional

from miqat.core.time import julian_date
from miqat.reference.solar import solar_parameters


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "miqat[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "miqat[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot equation of time and solar declination over one year.")
    p.add_argument("--year", type=int, default=2024)
    p.add_argument("--out", default="eot_curve.png", help="output image filename")
    p.add_argument("--analemma", action="store_true", help="plot declination against EoT instead")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    jd0 = julian_date(date(args.year, 1, 1))
    jd1 = julian_date(date(args.year + 1, 1, 1))
    days = np.arange(0.0, jd1 - jd0, 1.0, dtype=float)

    sps = [solar_parameters(jd0 + float(x)) for x in days]
    eot = np.array([sp.equation_of_time_minutes for sp in sps], dtype=float)
    decl = np.array([sp.declination_deg for sp in sps], dtype=float)

    if args.analemma:
        fig, ax = plt.subplots(figsize=(5, 8))
        ax.plot(eot, decl, linewidth=1.5)
        ax.set_xlabel("equation of time (min)")
        ax.set_ylabel("declination (deg)")
        ax.set_title(f"Analemma {args.year}")
        ax.grid(True, alpha=0.3)
    else:
        fig, ax1 = plt.subplots(figsize=(10, 5))
        ax1.plot(days, eot, linewidth=2, label="equation of time")
        ax1.set_xlabel(f"day of {args.year}")
        ax1.set_ylabel("equation of time (min)")
        ax1.axhline(0.0, color="0.5", linewidth=0.8)
        ax2 = ax1.twinx()
        ax2.plot(days, decl, linewidth=1.2, linestyle="--", color="tab:orange", label="declination")
        ax2.set_ylabel("declination (deg)")
        ax1.set_title(f"Equation of time and solar declination, {args.year}")
        ax1.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
