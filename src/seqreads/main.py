#!/usr/bin/env python3
"""
Command line interface for seqreads.

Loads a read file and summarises it, or applies a sequence transform to a
sequence given on the command line.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .config import LoaderConfig
from .core.archive import load_any
from .core.transform import expand_iupac, reverse_complement, sanitize
from .exceptions import SeqReadsError


def setup_logging(log_level: str = "INFO") -> None:
    """Setup logging configuration."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}",
    )


def run_load(path: Path, config: LoaderConfig, as_json: bool = False) -> int:
    """
    Load a read file and print its contents.

    Args:
        path: Plain or gzip-compressed FASTA/FASTQ file
        config: Loader configuration
        as_json: Print the whole collection as JSON instead of a summary

    Returns:
        Process exit code
    """
    errors: List[str] = []
    collection = asyncio.run(load_any(path, errors.append, config=config))

    if collection is None:
        for message in errors:
            print(f"Error: {message}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps(collection.to_dict()))
        return 0

    print(f"# {collection.kind.value}\t{len(collection)} reads\tarchived={collection.was_archived}")
    for name, sequence, qualities in collection.records():
        mean = sum(qualities) / len(qualities) if qualities else 0.0
        print(f"{name}\t{len(sequence)}\t{mean:.2f}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="seqreads",
        description="seqreads - Load FASTA/FASTQ reads and transform sequences"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level, overriding the config file (default: INFO)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    load_parser = subparsers.add_parser("load", help="Load a .fa/.fasta/.fastq file, optionally .gz")
    load_parser.add_argument("path", type=Path, help="Read file")
    load_parser.add_argument("--config", type=Path, help="YAML configuration file")
    load_parser.add_argument("--app-name", help="Application name for the temporary directory")
    load_parser.add_argument("--data-dir", type=Path, help="Override the application-data directory")
    load_parser.add_argument(
        "--no-length-check",
        action="store_true",
        default=None,
        help="Accept FASTQ records whose quality and sequence lengths differ"
    )
    load_parser.add_argument("--json", action="store_true", help="Print the collection as JSON")

    for name, help_text in (
        ("revcomp", "Reverse complement a sequence"),
        ("sanitize", "Strip whitespace and upper-case a sequence"),
        ("expand", "Expand IUPAC ambiguity codes"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("sequence", help="Nucleotide sequence")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for command line interface."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level or LoaderConfig.log_level)

    try:
        if args.command == "load":
            base = LoaderConfig.from_yaml(args.config) if args.config is not None else None
            config = LoaderConfig.from_args(vars(args), base=base)
            setup_logging(config.log_level)
            sys.exit(run_load(args.path, config, as_json=args.json))
        elif args.command == "revcomp":
            print(reverse_complement(args.sequence))
        elif args.command == "sanitize":
            print(sanitize(args.sequence))
        elif args.command == "expand":
            for sequence in expand_iupac(args.sequence):
                print(sequence)
    except SeqReadsError as e:
        logger.error(f"seqreads failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
