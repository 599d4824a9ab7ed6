# Command-line front end: prints the coverage table and writes optional exports.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from index_coverage.core.config import SweepConfig, config_from_dict, load_config
from index_coverage.core.errors import IndexCoverageError, ReportError
from index_coverage.core.sweep import run_sweep
from index_coverage.core.types import IndexKind
from index_coverage.interfaces.renderer import ReportRenderer
from index_coverage.render.csv_export import write_csv
from index_coverage.render.html_renderer import HtmlReportRenderer
from index_coverage.render.table import TextTableRenderer

logger = logging.getLogger(__name__)


def parse_index_kind(name: str) -> IndexKind:
    try:
        return IndexKind.parse(name)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_value_sizes(text: str) -> list[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid value size list: {text!r}") from e


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="index-coverage",
        description="Estimate layer file index heights, coverage and sizes",
    )
    # Defaults live in SweepConfig so a --config file can supply them.
    p.add_argument(
        "--min-branch", type=int, help="Minimum branching factor in data and index blocks (default: 32)"
    )
    p.add_argument(
        "--min-data-block", type=int, help="Minimum data block size, in bytes (default: 8192)"
    )
    p.add_argument(
        "--min-index-block", type=int, help="Minimum index block size, in bytes (default: 8192)"
    )
    p.add_argument(
        "--total-data-size",
        type=int,
        dest="total_data_size_log2",
        help="Total data size as a power of 2 exponent, e.g. 30 for 1 GB, 40 for 1 TB (default: 40)",
    )
    p.add_argument(
        "--index",
        dest="indexes",
        action="append",
        type=parse_index_kind,
        help="Index to include: data, c1-row, row, filter (repeatable; default: all)",
    )
    p.add_argument(
        "--value-sizes",
        type=parse_value_sizes,
        help="Comma-separated value sizes in bytes (default: 16 through 65536, powers of 2)",
    )
    p.add_argument("--config", type=Path, help="TOML file with sweep settings")
    p.add_argument("--csv", type=Path, help="Also write the results as CSV")
    p.add_argument("--html", type=Path, help="Also write an HTML report")
    p.add_argument("--plot", type=Path, help="Also save an index size chart (PNG/SVG/PDF)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def resolve_config(args: argparse.Namespace) -> SweepConfig:
    """Merge defaults, the optional TOML file and explicit flags, in that order."""
    base = load_config(args.config) if args.config else SweepConfig()
    overrides = {}
    for key in ("min_branch", "min_data_block", "min_index_block", "total_data_size_log2"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value
    if args.value_sizes is not None:
        overrides["value_sizes"] = args.value_sizes
    if args.indexes:
        overrides["indexes"] = [str(kind) for kind in args.indexes]
    return config_from_dict(overrides, base=base)


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    try:
        config = resolve_config(args)
        models = run_sweep(config)
    except (IndexCoverageError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    renderer: ReportRenderer = TextTableRenderer()
    sys.stdout.write(renderer.render(config, models))

    try:
        if args.csv:
            write_csv(config, models, args.csv)
        if args.html:
            html = HtmlReportRenderer().render(config, models)
            try:
                args.html.write_text(html, encoding="utf-8")
            except OSError as e:
                raise ReportError(f"Failed to write HTML to {args.html}: {e}") from e
            logger.info(f"Wrote HTML to {args.html}")
        if args.plot:
            from index_coverage.render.plot import plot_total_sizes

            plot_total_sizes(config, models, args.plot)
    except IndexCoverageError as e:
        logger.error(f"Report failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
