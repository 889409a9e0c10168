"""`bucket show` command implementation."""

from __future__ import annotations

import argparse
from pathlib import Path

from bucket.config import BucketConfig
from bucket.log.filter import filter_logs
from bucket.log.printer import to_stdout

from ._io import read_bucket


def add_subparser(subparsers: argparse._SubParsersAction) -> None:
    """Register the `show` command."""
    parser = subparsers.add_parser("show", help="Print the log trail of a serialized bucket.")
    parser.add_argument("path", type=Path, help="Bucket file written by serialize_bucket (.json/.yaml).")
    parser.add_argument("--level", default=None, help="Only show entries compared against this level.")
    parser.add_argument("--op", default="gte", choices=["lte", "gte", "eq"], help="Level comparison (default: gte).")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, cfg: BucketConfig) -> None:
    """Execute the `show` command."""
    bucket = read_bucket(args.path)
    if args.level is not None:
        bucket = filter_logs(bucket, mode="level", op=args.op, value=args.level)
    to_stdout(bucket)
