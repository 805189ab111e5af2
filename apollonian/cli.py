"""Command line driver: ``apollonian B1 B2 B3 --threshold 0.01 --out gasket.png``."""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
from pathlib import Path

from . import settings
from .circle import is_tangent
from .descartes import initial_config
from .errors import GasketError
from .gasket import apollonian, surviving_nodes
from .kissing import is_kissing

log = logging.getLogger("apollonian")

IMAGE_SUFFIXES = {".png", ".svg", ".pdf"}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Generate an Apollonian gasket from three signed bends")
    ap.add_argument("bends", type=float, nargs=3, metavar="BEND", help="Signed bends of three tangent circles")
    ap.add_argument("--threshold", type=float, default=settings.DEFAULT_THRESHOLD,
                    help="Smallest circle radius to keep")
    ap.add_argument("--out", type=Path, default=None,
                    help="Output file (.json, .npy, .png, .svg or .pdf)")
    ap.add_argument("--parallel", action="store_true", help="Walk the four trees in worker processes")
    ap.add_argument("--check", action="store_true", help="Verify that generated circles are tangent")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def check_tangency(threshold, seeds, tol: float) -> int:
    """Count seed pairs and generated circles that fail to touch their neighbours."""
    failures = sum(1 for a, b in itertools.combinations(seeds, 2) if not is_tangent(a, b, tol))
    failures += sum(1 for ks in surviving_nodes(threshold, seeds) if not is_kissing(ks, tol))
    return failures


def write_output(circles, path: Path) -> None:
    suffix = path.suffix.lower()
    if suffix == ".json":
        from .export import save_json
        save_json(circles, path)
    elif suffix == ".npy":
        from .export import save_npy
        save_npy(circles, path)
    elif suffix in IMAGE_SUFFIXES:
        from .render import save_figure
        save_figure(circles, path, title=f"Apollonian Gasket ({len(circles)} circles)")
    else:
        raise ValueError(f"unsupported output format: {path.suffix or path.name}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    b1, b2, b3 = args.bends
    log.info("Generating Apollonian gasket (bends=%g, %g, %g, threshold=%g)", b1, b2, b3, args.threshold)
    try:
        seeds = initial_config(b1, b2, b3)
        circles = apollonian(args.threshold, seeds, parallel=args.parallel)
    except (GasketError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    log.info("Generated %d circles", len(circles))

    if args.check:
        # Errors grow with depth, so scale the tolerance to the seeds.
        tol = settings.TANGENCY_TOL * 1e3 * max(c.radius for c in seeds)
        failures = check_tangency(args.threshold, seeds, tol)
        if failures:
            log.error("%d circles are not tangent to their neighbours", failures)
            return 1
        log.info("All circles tangent within %g", tol)

    if args.out is not None:
        try:
            write_output(circles, args.out)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
    else:
        for c in circles:
            x, y = c.center
            print(f"{x:.10g} {y:.10g} {c.radius:.10g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
