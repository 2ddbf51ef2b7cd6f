#!/usr/bin/env python
"""
svmlight-inspect: Load an SVMLight/libsvm file and summarize what decodes.

Examples
--------
# Regression targets, dense features
svmlight-inspect data.svm --target regression --features dense

# Ranking data with 136 sparse features, show the first 20 rows
svmlight-inspect train.txt --target disjoint --features sparse --dim 136 --head 20

# Stack the sparse rows into CSR arrays (data/indices/indptr/shape)
svmlight-inspect train.txt --features sparse --dim 136 --csr train_csr.npz

# List available decoders
svmlight-inspect --list-decoders
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="svmlight-inspect",
        description="Decode an SVMLight file and report rows, groups and skipped lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("input", nargs="?", help="SVMLight/libsvm text file")

    parser.add_argument(
        "--target",
        default="regression",
        help="Target decoder (default: regression)",
    )
    parser.add_argument(
        "--features",
        default="sparse",
        help="Feature decoder (default: sparse)",
    )
    parser.add_argument(
        "--dim",
        type=int,
        default=None,
        help="Feature dimension (required for sparse features)",
    )

    parser.add_argument(
        "-n", "--head",
        type=int,
        default=0,
        help="Print the first N decoded rows as a table",
    )
    parser.add_argument(
        "--csr",
        help="Save decoded rows as CSR arrays to this .npz file",
    )

    parser.add_argument(
        "--list-decoders",
        action="store_true",
        help="List available target and feature decoders",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    if args.list_decoders:
        _list_decoders()
        return 0

    if not args.input:
        parser.error("Input file is required")
    if args.head < 0:
        parser.error("--head must be non-negative")

    from svmlight_toolkit.core.registry import ReaderConfig

    cfg = ReaderConfig(target=args.target, features=args.features, dimension=args.dim)

    if args.verbose:
        print(f"[svmlight-inspect] input: {args.input}", file=sys.stderr)
        print(f"[svmlight-inspect] target: {cfg.target}", file=sys.stderr)
        print(f"[svmlight-inspect] features: {cfg.features} (dim={cfg.dimension})", file=sys.stderr)

    try:
        with cfg.open(args.input) as rows_iter:
            rows = list(rows_iter)
            n_lines = rows_iter.n_lines
            n_skipped = rows_iter.n_skipped
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_summary(args.input, rows, n_lines, n_skipped)

    if args.head:
        from svmlight_toolkit.core.rows import rows_to_frame

        _print_section(f"First {min(args.head, len(rows))} rows")
        df = rows_to_frame(rows[: args.head])
        print(df.to_string(index=False) if len(df) else "(no rows)")

    if args.csr:
        from svmlight_toolkit.features.sparse_matrix import rows_to_csr, save_csr_npz

        data, indices, indptr, shape = rows_to_csr(rows, n_cols=args.dim)
        out = Path(args.csr)
        out.parent.mkdir(parents=True, exist_ok=True)
        save_csr_npz(str(out), data=data, indices=indices, indptr=indptr, shape=shape)
        print(f"[svmlight-inspect] CSR arrays saved to {out} (shape {tuple(int(s) for s in shape)})", file=sys.stderr)

    return 0


def _print_section(title: str, width: int = 60) -> None:
    print("-" * width)
    print(title)
    print("-" * width)


def _print_summary(path: str, rows: List, n_lines: int, n_skipped: int) -> None:
    from svmlight_toolkit.core.rows import dims

    groups = {r.group_id for r in rows if r.group_id is not None}
    widths = {dims(r.features) for r in rows}

    _print_section(f"Summary: {path}")
    print(f"{'Lines read':<20} {n_lines}")
    print(f"{'Rows decoded':<20} {len(rows)}")
    print(f"{'Lines skipped':<20} {n_skipped}")
    print(f"{'Groups (qid)':<20} {len(groups)}")
    print(f"{'With comment':<20} {sum(1 for r in rows if r.comment is not None)}")
    if widths:
        print(f"{'Feature width':<20} {min(widths)}..{max(widths)}" if len(widths) > 1 else f"{'Feature width':<20} {widths.pop()}")


def _list_decoders() -> None:
    from svmlight_toolkit.core.registry import FEATURE_DECODERS, TARGET_DECODERS

    print("\nAvailable target decoders:\n")
    print(f"{'Name':<15} {'Description'}")
    print("-" * 60)
    for key, spec in TARGET_DECODERS.items():
        print(f"{key:<15} {spec.description}")

    print("\nAvailable feature decoders:\n")
    print(f"{'Name':<15} {'Description'}")
    print("-" * 60)
    for key, spec in FEATURE_DECODERS.items():
        suffix = " (needs --dim)" if spec.needs_dimension else ""
        print(f"{key:<15} {spec.description}{suffix}")
    print()


if __name__ == "__main__":
    sys.exit(main())
