"""`bucket spill` command implementation."""

from __future__ import annotations

import argparse
from pathlib import Path

import yaml
from rich.console import Console

from bucket.config import EXIT_MODES, OUT_MODES, BucketConfig
from bucket.core.plain import to_plain
from bucket.spouts.extract import spill

from ._io import read_bucket


def add_subparser(subparsers: argparse._SubParsersAction) -> None:
    """Register the `spill` command."""
    parser = subparsers.add_parser(
        "spill",
        help="Print logs, metadata and error of a serialized bucket, then its value.",
    )
    parser.add_argument("path", type=Path, help="Bucket file written by serialize_bucket (.json/.yaml).")
    parser.add_argument("--log-out", choices=OUT_MODES, default=None, help="Where logs go (default from config).")
    parser.add_argument("--meta-out", choices=OUT_MODES, default=None, help="Where metadata goes (default from config).")
    parser.add_argument("--error-out", choices=OUT_MODES, default=None, help="Where the error goes (default from config).")
    parser.add_argument("--exit", choices=EXIT_MODES, default=None, help="Exit policy when the bucket failed.")
    parser.add_argument("--out-dir", type=Path, default=None, help="Directory for file output.")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, cfg: BucketConfig) -> None:
    """Execute the `spill` command."""
    bucket = read_bucket(args.path)
    value = spill(
        bucket,
        log_out=args.log_out,
        meta_out=args.meta_out,
        error_out=args.error_out,
        exit=args.exit,
        out_dir=args.out_dir,
        config=cfg,
    )
    if value is not None:
        text = yaml.safe_dump(to_plain(value), sort_keys=False, default_flow_style=False)
        Console(highlight=False, soft_wrap=True).print(text.rstrip("\n"), markup=False)
