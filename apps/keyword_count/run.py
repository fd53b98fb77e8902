#!/usr/bin/env python3
"""Command-line entry point for the keyword count workflow."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from apps.keyword_count.config import load_config
from kwc_analyser.filters import create_line_filter
from kwc_analyser.pipeline import KeywordCountPipeline
from kwc_analyser.types import KeywordCountConfig
from kwc_core.errors import KeywordCountError

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyword-count",
        description="Count keyword occurrences in a file or in every file of a directory",
    )
    parser.add_argument("target", nargs="?", help="File or directory to read")
    parser.add_argument("keywords", nargs="?", help="JSON (or YAML) file with keywords")
    parser.add_argument("-i", "--ignore-case", action="store_true", help="Ignore case of keywords")
    parser.add_argument("-k", "--key-name", help="Name of keyword array in json file")
    parser.add_argument("-o", "--output-file", help="Name of file for json output, i.e. -o path/to/output.json")
    parser.add_argument("-c", "--config", help="Path to YAML run config; command-line options override it")
    parser.add_argument("-w", "--workers", type=int, help="Maximum number of files scanned at once")
    parser.add_argument("--filter", choices=["auto", "grep", "regex"], help="Line filter backend")
    parser.add_argument("--incremental", action="store_true", help="Rewrite the report after every scanned file")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar for directory scans")
    parser.add_argument("--csv", action="store_true", help="Also write a CSV table next to the JSON report")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser


def apply_overrides(cfg: KeywordCountConfig, args: argparse.Namespace) -> KeywordCountConfig:
    """Apply command-line options on top of a loaded configuration."""
    if args.target:
        cfg.target = Path(args.target)
    if args.keywords:
        cfg.keywords_list = Path(args.keywords)
    if args.ignore_case:
        cfg.ignore_case = True
    if args.key_name:
        cfg.key_name = args.key_name
    if args.output_file:
        cfg.output_path = Path(args.output_file)
    if args.workers is not None:
        cfg.max_workers = max(1, args.workers)
    if args.filter:
        cfg.line_filter = args.filter
    if args.incremental:
        cfg.incremental_writes = True
    if args.progress:
        cfg.show_progress = True
    if args.csv and "csv" not in cfg.formats:
        cfg.formats = list(cfg.formats) + ["csv"]
    return cfg


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)

    try:
        if args.config:
            config_path = Path(args.config)
            if not config_path.exists():
                print(f"Config not found: {config_path}", file=sys.stderr)
                return 1
            cfg = load_config(config_path)
        else:
            cfg = KeywordCountConfig()
    except (ValueError, yaml.YAMLError) as exc:
        print(f"Invalid config: {exc}", file=sys.stderr)
        return 1

    cfg = apply_overrides(cfg, args)

    if cfg.target is None:
        print("Specify a file to analyze", file=sys.stderr)
        return 1
    if not cfg.keywords_list:
        print("Specify a keyword list", file=sys.stderr)
        return 1

    try:
        pipeline = KeywordCountPipeline(cfg, line_filter=create_line_filter(cfg.line_filter))
        results = pipeline.run()
    except (KeywordCountError, ValueError, yaml.YAMLError) as exc:
        # Malformed keyword files surface as parser errors
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Processed files: {len(results)}")
    print(f"Keywords: {', '.join(pipeline.keywords)}")
    print(f"Report saved to: {cfg.output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
