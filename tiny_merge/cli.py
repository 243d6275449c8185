"""Command line entry point: merge tiny files sharing a base namespace."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from tiny_merge.errors import MergeConfigurationError, TinyMergeError
from tiny_merge.load_config import load_config
from tiny_merge.merge_tiny_files import merge_tiny_files, validate_inputs
from tiny_merge.tiny_reader import read_tiny_file
from tiny_merge.tiny_writer import write_tiny_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the merge command."""
    ap = argparse.ArgumentParser(
        prog="tiny-merge",
        description=(
            "Merge tiny v2 mapping files that share their first namespace. "
            "The output carries every namespace of every input."
        ),
    )
    ap.add_argument(
        "paths",
        nargs="+",
        type=Path,
        metavar="PATH",
        help="<input-a> <input-b> [<input-c>...] <output>",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--pad-columns",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Pad name rows to the merged header width (default: from config)",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress details to stderr",
    )
    return ap


def run_merge(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Read the inputs, merge them and write the output."""
    if len(args.paths) < 3:
        msg = "Expected at least 2 input files and 1 output file."
        raise MergeConfigurationError(msg)
    if args.pad_columns is not None:
        config["output"]["pad_columns"] = args.pad_columns

    *inputs, output = args.paths
    tiny_files = [read_tiny_file(p) for p in inputs]
    sources = [str(p) for p in inputs]
    # Validated here as well so a bad input fails before the progress line.
    validate_inputs(tiny_files, sources)
    print(f"Merging {inputs[0]} with {', '.join(str(p) for p in inputs[1:])}")
    merged = merge_tiny_files(
        tiny_files,
        sources,
        sort_classes=config["output"]["sort_classes"],
    )

    write_tiny_file(merged, output, pad_columns=config["output"]["pad_columns"])
    print(f"Merged mappings written to {output}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the merge command; returns the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        level = "DEBUG" if args.verbose else config["logging"]["level"]
        logging.basicConfig(
            level=level, format="%(levelname)s %(name)s: %(message)s"
        )
        return run_merge(args, config)
    except MergeConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except TinyMergeError as e:
        logger.debug("Merge failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
