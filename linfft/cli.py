"""Command line front end.

Matrices are written row by row with ``;`` between rows and ``,`` between
cells, e.g. ``--matrix "4,3;6,3"``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from fractions import Fraction
from typing import Callable, List, Optional, Sequence

from .errors import LinearAlgebraError
from .fft import Direction, transform
from .matrix import Matrix
from .solver import solve


logger = logging.getLogger(__name__)


def parse_vector(text: str, dtype: Callable = float) -> List:
    return [dtype(cell.strip()) for cell in text.split(",") if cell.strip()]


def parse_matrix(text: str, dtype: Callable = float) -> Matrix:
    rows = [parse_vector(row, dtype) for row in text.split(";") if row.strip()]
    return Matrix.from_rows(rows, dtype)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="linfft", description="Dense linear algebra and FFT utilities.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="compute with exact fractions instead of floats",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    solve_cmd = commands.add_parser("solve", help="solve A x = y")
    solve_cmd.add_argument("--matrix", required=True, help='coefficient rows, e.g. "4,3;6,3"')
    solve_cmd.add_argument("--rhs", required=True, help='right-hand side, e.g. "1,1"')

    det_cmd = commands.add_parser("det", help="determinant of a square matrix")
    det_cmd.add_argument("--matrix", required=True)

    inv_cmd = commands.add_parser("inverse", help="inverse of a square matrix")
    inv_cmd.add_argument("--matrix", required=True)

    fft_cmd = commands.add_parser("fft", help="fast Fourier transform of a sequence")
    fft_cmd.add_argument("--values", required=True, help='comma separated complex values, e.g. "1,0,2+1j"')
    fft_cmd.add_argument("--inverse", action="store_true", help="compute the inverse transform")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="[%(levelname)s] %(name)s: %(message)s")
    dtype = Fraction if args.exact else float

    try:
        if args.command == "solve":
            matrix = parse_matrix(args.matrix, dtype)
            solution = solve(matrix, parse_vector(args.rhs, dtype), dtype)
            print(" ".join(str(v) for v in solution))
        elif args.command == "det":
            print(parse_matrix(args.matrix, dtype).determinant(dtype))
        elif args.command == "inverse":
            sys.stdout.write(parse_matrix(args.matrix, dtype).inverse(dtype).render())
        elif args.command == "fft":
            values = parse_vector(args.values, complex)
            transform(values, Direction.INVERSE if args.inverse else Direction.FORWARD)
            print(" ".join(str(v) for v in values))
    except LinearAlgebraError as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
