"""`bucket summarize` command implementation."""

from __future__ import annotations

import argparse
from pathlib import Path

import yaml
from rich.console import Console

from bucket.config import BucketConfig
from bucket.core.plain import to_plain
from bucket.spouts.aggregate import collect_metrics
from bucket.spouts.transform import summarize

from ._io import read_bucket


def add_subparser(subparsers: argparse._SubParsersAction) -> None:
    """Register the `summarize` command."""
    parser = subparsers.add_parser("summarize", help="Print a summary of a serialized bucket.")
    parser.add_argument("path", type=Path, help="Bucket file written by serialize_bucket (.json/.yaml).")
    parser.add_argument("--metrics", action="store_true", help="Include log timing metrics.")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, cfg: BucketConfig) -> None:
    """Execute the `summarize` command."""
    bucket = read_bucket(args.path)
    report = summarize(bucket)
    if args.metrics:
        report["metrics"] = collect_metrics(bucket)
    text = yaml.safe_dump(to_plain(report), sort_keys=False, default_flow_style=False)
    Console(highlight=False, soft_wrap=True).print(text.rstrip("\n"), markup=False)
