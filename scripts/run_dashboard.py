#!/usr/bin/env python3
"""Compute dashboard series from a mortality summary CSV."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from mortdash import (  # noqa: E402
    DashboardProfileLoader,
    DataLoader,
    FilterState,
    MetricType,
    MortalityDashboard,
    ScaleType,
    calculate_stats,
)
from mortdash.publishers import SeriesJsonPublisher  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build mortality chart series from a summary CSV")
    parser.add_argument("--csv", required=True, help="Path to datos_summary.csv")
    parser.add_argument("--profile", default="default", help="Profile name or JSON path")
    parser.add_argument("--profiles-dir", default=None, help="Directory holding profile JSON files")
    parser.add_argument(
        "--clear-filters",
        action="store_true",
        help="Ignore the profile's default species/region/year selection.",
    )
    parser.add_argument("--species", action="append", help="Species to include. Repeatable.")
    parser.add_argument("--region", action="append", help="Region to include. Repeatable.")
    parser.add_argument("--year", action="append", type=int, help="Year to include. Repeatable.")
    parser.add_argument("--metric", choices=[item.value for item in MetricType], default=None)
    parser.add_argument("--cause", action="append", help="Cause field for primary/secondary views. Repeatable.")
    parser.add_argument("--scale", choices=[item.value for item in ScaleType], default=None)
    parser.add_argument("--output", default=None, help="Write the chart payload JSON here.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (DEBUG is forced when the profile enables debug).",
    )
    return parser.parse_args()


def build_state(args: argparse.Namespace, default_state: FilterState) -> FilterState:
    state = FilterState() if args.clear_filters else default_state

    if args.species:
        state.species = set(args.species)
    if args.region:
        state.regions = set(args.region)
    if args.year:
        state.years = set(args.year)
    if args.metric:
        state.metric_type = MetricType(args.metric)
        state.selected_causes = []
    if args.cause:
        state.selected_causes = list(args.cause)
    if args.scale:
        state.scale_type = ScaleType(args.scale)

    return state


def main() -> int:
    args = parse_args()
    profile = DashboardProfileLoader(profiles_dir=args.profiles_dir).load(args.profile)

    logging.basicConfig(
        level=logging.DEBUG if profile.config.debug else getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logger = logging.getLogger("mortdash.runner")
    logger.info("Profile: %s (max_lines=%d)", profile.name, profile.config.max_lines)

    records = DataLoader.from_csv(args.csv).load()

    publishers = []
    if args.output:
        publishers.append(SeriesJsonPublisher(output_path=args.output))

    dashboard = MortalityDashboard(records, config=profile.config, publishers=publishers)
    report = dashboard.handle_filter_change(build_state(args, profile.default_state()))

    payload = {
        "profile": profile.name,
        "records": len(records),
        "filtered_records": report.filtered_records,
        "built_series": report.built_series,
        "series_count": report.series_count,
        "exceeded": report.exceeded,
        "results": dashboard.results_label(),
        "scale_type": report.scale_type.value,
        "series": [
            {"id": item.id, "label": item.label, "color": item.color, "total": stats.total}
            for item, stats in zip(report.series, calculate_stats(report.series))
        ],
    }
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
