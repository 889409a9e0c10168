"""bucket command-line interface entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

import yaml

from bucket.cli.commands import show, spill, summarize
from bucket.config import BucketConfig, ConfigError, load_config
from bucket.logging import configure_logging

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the top-level parser: global config options plus one subparser per command."""
    parser = argparse.ArgumentParser(
        prog="bucket",
        description="Inspect and drain serialized buckets",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=Path("."),
        help="Directory searched for bucket.yaml / .bucket.yaml (default: current directory).",
    )
    parser.add_argument("--log-dir", type=Path, default=None, help="Directory for the CLI's own log file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug messages on the console.")
    subparsers = parser.add_subparsers(dest="command", required=True, metavar="<command>")
    for module in (show, summarize, spill):
        module.add_subparser(subparsers)
    return parser


def resolve_config(args: argparse.Namespace) -> BucketConfig:
    """
    Config for one CLI invocation.

    Precedence (lowest to highest): defaults, config file in ``--config-dir``,
    ``BUCKET_*`` environment variables, command-line flags.
    """
    cfg = BucketConfig.from_env(default=load_config(args.config_dir))
    if args.log_dir is not None:
        cfg = replace(cfg, log_dir=args.log_dir)
    if args.verbose:
        cfg = replace(cfg, console_level=logging.DEBUG)
    return cfg


def main(argv: Sequence[str] | None = None) -> int:
    """
    Parse args, configure logging and run the selected command.

    Returns the process exit status: 0 on success, 1 when the bucket file
    cannot be read or parsed, 2 for unsupported options or configuration.
    ``spill`` may end the process earlier through its exit policy.
    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    try:
        cfg = resolve_config(args)
    except ConfigError as exc:
        print(f"bucket: configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logger, _ = configure_logging(cfg=cfg)
    logger.debug("Running '%s' with config %s", args.command, cfg)
    try:
        args.handler(args, cfg)
    except ConfigError as exc:
        logger.error("%s", exc)
        return EXIT_USAGE
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("Could not read bucket from %s: %s", args.path, exc)
        return EXIT_FAILED
    return EXIT_OK


def app() -> None:
    """Console-script entrypoint."""
    sys.exit(main())


if __name__ == "__main__":
    app()
