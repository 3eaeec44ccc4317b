from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from passivetree.adapters.datasets import dump_tree_data
from passivetree.app import check_data, load_data
from passivetree.config import ConfigurationError, configure_logging, get_dataset_config
from passivetree.domain.errors import TreeDataError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from passivetree.app import DataReport
    from passivetree.config import DatasetConfig

log = logging.getLogger(__name__)


def _add_dataset_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--positions",
        type=Path,
        help="Positions JSON file (defaults to PASSIVETREE_POSITIONS_PATH or bundled data)",
    )
    parser.add_argument(
        "--descriptions",
        type=Path,
        help="Descriptions JSON file (defaults to PASSIVETREE_DESCRIPTIONS_PATH or bundled data)",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Merge passive tree node datasets")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    export = subparsers.add_parser("export", help="Write the merged node map as JSON")
    _add_dataset_arguments(export)
    export.add_argument(
        "--output",
        type=Path,
        help="File to write (defaults to stdout)",
    )
    export.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent the JSON output by this many spaces",
    )

    check = subparsers.add_parser("check", help="Report duplicate ids and missing descriptions")
    _add_dataset_arguments(check)

    return parser.parse_args(list(argv))


def _build_config(args: argparse.Namespace) -> DatasetConfig:
    return get_dataset_config(
        positions_path=args.positions,
        descriptions_path=args.descriptions,
    )


def _export(args: argparse.Namespace, config: DatasetConfig) -> None:
    tree = load_data(config=config)
    if args.output is None:
        dump_tree_data(tree, sys.stdout, indent=args.indent)
        return
    with args.output.open("w", encoding="utf-8") as handle:
        dump_tree_data(tree, handle, indent=args.indent)
    log.info("Wrote %s nodes to %s", len(tree), args.output)


def _log_report(report: DataReport) -> None:
    for node_id, groups in report.duplicate_ids.items():
        log.warning(
            "Node %s appears in %s; the last occurrence wins",
            node_id,
            ", ".join(group.value for group in groups),
        )
    for node_id in report.orphan_descriptions:
        log.info("Description %s has no position", node_id)
    for node_id in report.missing_descriptions:
        log.error("Node %s has no description", node_id)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    signal(SIGINT, sigint_handler)
    load_dotenv()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO, force=True)

    try:
        config = _build_config(parsed_args)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        if parsed_args.command == "export":
            _export(parsed_args, config)
        elif parsed_args.command == "check":
            report = check_data(config=config)
            _log_report(report)
            if not report.ok:
                sys.exit(1)
    except (TreeDataError, OSError):
        log.exception("Failed to build tree data")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    main()
