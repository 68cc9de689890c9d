from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import math
import re
import sys

from .core.errors import InvalidInputError, MiqatError
from .core.params import DEFAULT_PARAMS, MethodParams
from .core.time import format_hours, julian_date, parse_ymd, shift_hours
from .core.types import Location

logger = logging.getLogger(__name__)

_YM_RE = re.compile(r"^(\d{4})-(\d{2})$")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )


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


def _add_location_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", type=float, required=True, help="latitude in degrees (north positive)")
    p.add_argument("--lon", type=float, required=True, help="longitude in degrees (east positive)")
    p.add_argument("--utc-offset", type=float, default=0.0, help="fixed clock offset in hours for display, e.g. 3 for UTC+3")


def _add_method_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--fajr-angle", type=float, default=DEFAULT_PARAMS.fajr_angle_deg, help="Fajr depression angle (deg)")
    p.add_argument("--isha-angle", type=float, default=DEFAULT_PARAMS.isha_angle_deg, help="Isha depression angle (deg)")
    p.add_argument("--maghrib-offset", type=float, default=DEFAULT_PARAMS.maghrib_offset_minutes, help="minutes after sunset")


def _params_from_args(args: argparse.Namespace) -> MethodParams:
    return DEFAULT_PARAMS.tweak(
        fajr_angle_deg=args.fajr_angle,
        isha_angle_deg=args.isha_angle,
        maghrib_offset_minutes=args.maghrib_offset,
    )


def cmd_times(argv: list[str]) -> int:
    import miqat

    p = argparse.ArgumentParser(prog="miqat times", description="Prayer times for one date and location.")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_location_args(p)
    _add_method_args(p)
    p.add_argument("--json", action="store_true", help="print a JSON object of decimal hours")
    p.add_argument("--decimal", action="store_true", help="print decimal hours instead of HH:MM")
    args = p.parse_args(argv)

    params = _params_from_args(args)
    times = miqat.calculate_prayer_times(args.lat, args.lon, args.date, params=params)
    shown = {name: shift_hours(h, args.utc_offset) for name, h in times}

    if args.json:
        print(json.dumps(shown, indent=2))
        return 0

    print(f"Date: {args.date}   lat={args.lat:.4f}  lon={args.lon:.4f}   UTC{args.utc_offset:+g}")
    for name, h in shown.items():
        value = f"{h:.4f}" if args.decimal else format_hours(h)
        print(f"  {name:<8} {value}")
    print(f"  Day length {format_hours(miqat.day_length_hours(times))}")
    return 0


def cmd_month(argv: list[str]) -> int:
    import miqat

    p = argparse.ArgumentParser(prog="miqat month", description="Prayer time table for one Gregorian month.")
    p.add_argument("month", help="YYYY-MM")
    _add_location_args(p)
    _add_method_args(p)
    args = p.parse_args(argv)

    m = _YM_RE.match(args.month)
    if not m:
        raise miqat.InvalidInputError(f"month must be 'YYYY-MM', got {args.month!r}")
    year, month = int(m.group(1)), int(m.group(2))

    loc = miqat.Location(args.lat, args.lon)
    rows = miqat.month_table(year, month, loc, params=_params_from_args(args))

    print("Date        " + " ".join(f"{name:>7}" for name in miqat.PRAYER_NAMES))
    print("-" * (12 + 8 * len(miqat.PRAYER_NAMES)))
    for d, times in rows:
        if times is None:
            cells = ["--:--"] * len(miqat.PRAYER_NAMES)
        else:
            cells = [format_hours(shift_hours(h, args.utc_offset)) for _, h in times]
        print(f"{d.isoformat()}  " + " ".join(f"{c:>7}" for c in cells))
    return 0


def cmd_solar(argv: list[str]) -> int:
    from miqat.reference.solar import solar_parameters

    p = argparse.ArgumentParser(prog="miqat solar", description="Solar declination and equation of time.")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--jd", type=float, help="Julian Date")
    g.add_argument("--date", help="YYYY-MM-DD (JD of local mean noon)")
    p.add_argument("--lon", type=float, default=0.0, help="longitude for --date (east positive)")
    args = p.parse_args(argv)

    if args.jd is not None and not math.isfinite(args.jd):
        raise InvalidInputError(f"--jd must be a finite number, got {args.jd!r}")
    loc = Location(0.0, args.lon)

    if args.jd is not None:
        jd = args.jd
    elif args.date is not None:
        jd = julian_date(parse_ymd(args.date), lon_deg=loc.lon_deg)
    else:
        jd = 2451545.0

    sp = solar_parameters(jd)
    print(f"JD = {jd:.6f}")
    print(f"  Declination      = {sp.declination_deg:.6f} deg")
    print(f"  Equation of time = {sp.equation_of_time_minutes:.4f} min")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="miqat", description="Daily prayer times from solar position.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("times", help="Prayer times for one date", add_help=False)
    sub.add_parser("month", help="Monthly prayer time table", add_help=False)
    sub.add_parser("solar", help="Solar declination and equation of time", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["eot-compare", "eot-curve"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    commands = {"times": cmd_times, "month": cmd_month, "solar": cmd_solar}
    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "eot-compare": "miqat.diagnostics.eot_compare",
                "eot-curve": "miqat.diagnostics.eot_curve",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except MiqatError as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"miqat: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
