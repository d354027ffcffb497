from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from fastalens import __version__
from fastalens.core.config import RuntimeConfig, get_runtime_config
from fastalens.core.controller import NavigationController
from fastalens.core.errors import FastaLensError
from fastalens.core.logging import configure_logging, get_logger
from fastalens.domain.sequences import Catalog
from fastalens.services.catalog import build_catalog

logger = get_logger("fastalens.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastalens",
        description="Browse FASTA files and the length distribution of their records.",
    )

    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Directory to scan recursively for FASTA files (default: current directory).",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Print version and exit.",
    )

    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Load the catalog and print one line per file without launching the UI.",
    )

    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the resolved runtime config to stdout and exit.",
    )

    return parser


def handle_print_config(config: RuntimeConfig) -> None:
    print(json.dumps(config.model_dump(mode="json"), indent=2))


def print_catalog_summary(catalog: Catalog) -> None:
    for item in catalog:
        print(f"{item.path}\t{item.record_count}")


def run_ui(catalog: Catalog, root: Path, config: RuntimeConfig) -> None:
    from fastalens.core.app import FastaLensApp

    controller = NavigationController(
        catalog,
        quick_filter_min=config.quick_filter_min,
        quick_filter_max=config.quick_filter_max,
    )
    FastaLensApp(controller, root).run()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = get_runtime_config()

    if args.print_config:
        handle_print_config(config)
        return 0

    log_dir = config.resolved_log_dir()
    try:
        configure_logging(
            log_dir=log_dir,
            level=config.log_level,
            format_name=config.log_format,
        )
    except OSError as exc:
        print(f"Unable to create log file in {log_dir}: {exc}", file=sys.stderr)
        return 1

    root = Path(args.root).expanduser()
    try:
        catalog = build_catalog(root, extensions=config.extensions)
    except FastaLensError as exc:
        print(f"Failed to load FASTA files from directory: {exc}", file=sys.stderr)
        return 1

    if len(catalog) == 0:
        print("No FASTA files found in directory.", file=sys.stderr)
        return 0

    if args.no_ui:
        print_catalog_summary(catalog)
        return 0

    run_ui(catalog, root, config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
