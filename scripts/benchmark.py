#!/usr/bin/env python
"""
Time the hot gd3dmath matrix operations and display a per-call breakdown.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --iterations 200000
    python scripts/benchmark.py --only mat_mul invert
    python scripts/benchmark.py --numpy

Examples:
    python scripts/benchmark.py -i 50000 --numpy
    python scripts/benchmark.py --only project unproject
"""

import argparse
import math
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Tuple

import numpy as np

# Add project paths for development
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from gd3dmath.mathutils import matrix4 as M
from gd3dmath.mathutils.vector import transform_coord_array, vec3_transform_coord
from gd3dmath.mathutils.viewport import Viewport, project, unproject


# ANSI colors for output
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
GRAY = "\033[90m"


def build_cases(seed: int) -> Dict[str, Tuple[Callable, Callable]]:
    """Return name -> (gd3dmath call, numpy equivalent or None)."""
    rng = np.random.default_rng(seed)
    a_arr = rng.uniform(-10, 10, size=(4, 4)) + np.eye(4) * 20
    b_arr = rng.uniform(-10, 10, size=(4, 4)) + np.eye(4) * 20
    a, b = M.Matrix4(a_arr), M.Matrix4(b_arr)
    point = (1.5, -2.0, 7.0)
    points = rng.uniform(-5, 5, size=(1000, 3))

    viewport = Viewport(0, 0, 800, 600)
    projection = M.perspective_fov_lh_matrix(math.pi / 4, 800 / 600, 0.1, 100.0)
    view = M.look_at_lh_matrix((0, 2, -10), (0, 0, 0), (0, 1, 0))
    world = M.identity()
    screen = project(point, viewport, projection, view, world)

    return {
        "mat_mul": (lambda: M.mat_mul(a, b), lambda: a_arr @ b_arr),
        "determinant": (lambda: M.determinant(a), lambda: np.linalg.det(a_arr)),
        "invert": (lambda: M.invert(a), lambda: np.linalg.inv(a_arr)),
        "transpose": (lambda: M.transpose(a), lambda: a_arr.T.copy()),
        "yaw_pitch_roll": (lambda: M.yaw_pitch_roll_matrix(0.3, 0.2, 0.1), None),
        "look_at_lh": (lambda: M.look_at_lh_matrix((0, 2, -10), (0, 0, 0), (0, 1, 0)), None),
        "perspective_fov_lh": (lambda: M.perspective_fov_lh_matrix(1.0, 1.5, 0.1, 100.0), None),
        "transform_coord": (lambda: vec3_transform_coord(point, a), None),
        "transform_coord_x1000": (lambda: transform_coord_array(points, a), None),
        "project": (lambda: project(point, viewport, projection, view, world), None),
        "unproject": (lambda: unproject(screen, viewport, projection, view, world), None),
    }


def time_call(fn: Callable, iterations: int, warmup: bool = True) -> float:
    """Mean seconds per call over `iterations` runs."""
    if warmup:
        for _ in range(min(iterations, 1000)):
            fn()
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    return (time.perf_counter() - start) / iterations


def format_time(seconds: float) -> str:
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds * 1e6:.2f}µs"


def print_results(rows: List[Tuple[str, float, float]], iterations: int, with_numpy: bool):
    """Print timing results in a formatted table."""
    print()
    print("=" * 70)
    print("GD3DMATH BENCHMARK")
    print("=" * 70)
    print()
    print(f"  Iterations:    {iterations:,}")
    print()

    header = f"  {'Operation':<26} {'gd3dmath':>12}"
    if with_numpy:
        header += f"  {'numpy':>12}  {'ratio':>8}"
    print(header)
    print(f"  {'─' * 26} {'─' * 12}" + (f"  {'─' * 12}  {'─' * 8}" if with_numpy else ""))

    slowest = max(t for _, t, _ in rows) if rows else 0.0
    for name, ours, theirs in rows:
        # Color coding relative to the slowest operation
        share = ours / slowest if slowest else 0.0
        if share >= 0.5:
            color = YELLOW
        elif share >= 0.1:
            color = CYAN
        else:
            color = GRAY
        line = f"  {color}{name:<26}{RESET} {format_time(ours):>12}"
        if with_numpy:
            if theirs:
                line += f"  {format_time(theirs):>12}  {DIM}{ours / theirs:>7.2f}x{RESET}"
            else:
                line += f"  {DIM}{'-':>12}  {'-':>8}{RESET}"
        print(line)
    print()


def main():
    parser = argparse.ArgumentParser(
        description="Time the hot gd3dmath matrix operations.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/benchmark.py -i 50000 --numpy
    python scripts/benchmark.py --only project unproject
        """
    )

    parser.add_argument("-i", "--iterations", type=int, default=100000, help="Calls per operation (default: 100000)")
    parser.add_argument("--only", nargs="+", metavar="OP", help="Restrict to the named operations")
    parser.add_argument("--numpy", action="store_true", help="Also time the numpy equivalent where one exists")
    parser.add_argument("--no-warmup", action="store_true", help="Skip warmup calls")
    parser.add_argument("--seed", type=int, default=0, help="Random seed for the input matrices (default: 0)")

    args = parser.parse_args()

    if args.iterations <= 0:
        print(f"Error: iterations must be positive, got {args.iterations}")
        return 1

    cases = build_cases(args.seed)
    names = args.only or list(cases)
    unknown = [n for n in names if n not in cases]
    if unknown:
        print(f"Error: unknown operation(s): {', '.join(unknown)}")
        print(f"Available: {', '.join(cases)}")
        return 1

    rows = []
    for name in names:
        ours_fn, numpy_fn = cases[name]
        ours = time_call(ours_fn, args.iterations, warmup=not args.no_warmup)
        theirs = 0.0
        if args.numpy and numpy_fn is not None:
            theirs = time_call(numpy_fn, args.iterations, warmup=not args.no_warmup)
        rows.append((name, ours, theirs))

    print_results(rows, args.iterations, args.numpy)
    return 0


if __name__ == "__main__":
    sys.exit(main())
