"""Command line helper to compute values and inspect the character table."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, TextIO

try:  # pragma: no cover - ensure package import works in script context
    from arithmos.services.gematria import (
        CHARACTER_VALUES,
        SINGLE_METHODS,
        CalculationMethod,
        compute_value,
        iter_methods,
        parse_selection,
        table_checksum,
    )
    from arithmos.services.gematria.table import render_table
except ModuleNotFoundError:  # pragma: no cover
    from pathlib import Path

    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))
    from arithmos.services.gematria import (
        CHARACTER_VALUES,
        SINGLE_METHODS,
        CalculationMethod,
        compute_value,
        iter_methods,
        parse_selection,
        table_checksum,
    )
    from arithmos.services.gematria.table import render_table


def _parse_methods(raw: Optional[str]) -> CalculationMethod:
    if not raw:
        return CalculationMethod.ALL
    try:
        selection = parse_selection(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    if not selection:
        raise argparse.ArgumentTypeError("At least one calculation method is required")
    return selection


def main(argv: Optional[Iterable[str]] = None, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    parser = argparse.ArgumentParser(description="Compute gematria values of normalized text")
    parser.add_argument("text", nargs="?", help="Normalized text (upper case Latin/Greek or Hebrew)")
    parser.add_argument(
        "--methods",
        help="Comma separated list of method names (default: all): "
        + ",".join(method.name for method in SINGLE_METHODS),
    )
    parser.add_argument("--checksum", action="store_true", help="Print the table checksum and exit")
    parser.add_argument("--dump", action="store_true", help="Print the canonical table CSV and exit")
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.checksum:
        out.write(table_checksum() + "\n")
        return 0
    if args.dump:
        out.write(render_table(CHARACTER_VALUES))
        return 0
    if args.text is None:
        parser.error("text is required unless --checksum or --dump is given")

    try:
        selection = _parse_methods(args.methods)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    for method in iter_methods(selection):
        out.write(f"{method.name}\t{compute_value(args.text, method)}\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
