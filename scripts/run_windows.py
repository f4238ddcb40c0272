#!/usr/bin/env python3
"""Beach window runner.

Scores a forecast for one beach and prints the visit windows.

Usage:
    # Print windows for a beach (default text format)
    python scripts/run_windows.py --beach honeymoon_island --snapshots forecast.csv

    # Output as SMS format
    python scripts/run_windows.py --beach clearwater_beach --snapshots forecast.csv --format sms

    # Add the week ahead with the best day
    python scripts/run_windows.py --beach caladesi_island --snapshots forecast.csv --week

    # Swimmer preferences and a packing plan for the best window
    python scripts/run_windows.py --beach sand_key --snapshots forecast.csv \\
        --goal swim --temp-min 78 --temp-max 88 --plan

    # Replay a saved forecast as of a given time
    python scripts/run_windows.py --beach fred_howard --snapshots forecast.csv \\
        --now 2025-06-14T09:00:00-04:00 --count 8
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from beachbuddy.core.beach import BeachDatabase
from beachbuddy.core.conditions import ActivityGoal, TempRange, UserPreferences
from beachbuddy.core.forecast import daily_forecast
from beachbuddy.core.scorer import BeachScorer
from beachbuddy.core.weights import load_scoring_config
from beachbuddy.core.windows import WindowGenerator, WindowOptions, find_best_window
from beachbuddy.plans.formatter import PlanFormatter
from beachbuddy.plans.loader import load_snapshots
from beachbuddy.plans.planner import build_plan


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Score a beach forecast and list visit windows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--beach", "-b",
        required=True,
        help="Beach id or part of its name",
    )

    parser.add_argument(
        "--snapshots", "-s",
        required=True,
        type=Path,
        help="CSV file of condition snapshots",
    )

    parser.add_argument(
        "--format",
        choices=["text", "sms"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        help="Write output to file instead of stdout",
    )

    parser.add_argument(
        "--count",
        type=int,
        default=WindowOptions.count,
        help=f"Number of snapshots to consider (default: {WindowOptions.count})",
    )

    parser.add_argument(
        "--duration",
        type=float,
        default=WindowOptions.duration_hours,
        help=f"Window length in hours (default: {WindowOptions.duration_hours})",
    )

    parser.add_argument(
        "--goal",
        choices=[g.value for g in ActivityGoal],
        nargs="+",
        default=[],
        help="Activity goals that shift the score weights",
    )

    parser.add_argument("--temp-min", type=float, help="Preferred minimum feels-like temp (F)")
    parser.add_argument("--temp-max", type=float, help="Preferred maximum feels-like temp (F)")
    parser.add_argument("--wind-tolerance", type=float, help="Maximum comfortable wind (mph)")

    parser.add_argument(
        "--plan",
        action="store_true",
        help="Include a trip plan and checklist for the Go Now or best window",
    )

    parser.add_argument(
        "--week",
        action="store_true",
        help="Append a day-by-day forecast with the best day highlighted",
    )

    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        help="Reference time in ISO format (default: current time)",
    )

    parser.add_argument(
        "--scoring-config",
        type=Path,
        help="Scoring overrides YAML (default: config/scoring.yaml)",
    )

    parser.add_argument(
        "--beaches-config",
        type=Path,
        help="Beach database YAML (default: config/beaches.yaml)",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def build_preferences(args) -> Optional[UserPreferences]:
    """Build user preferences from arguments, or None when none were given."""
    has_range = args.temp_min is not None and args.temp_max is not None
    if not (args.goal or has_range or args.wind_tolerance):
        return None

    return UserPreferences(
        temp_range=TempRange(args.temp_min, args.temp_max) if has_range else None,
        wind_tolerance=args.wind_tolerance,
        activity_goals=[ActivityGoal(g) for g in args.goal],
    )


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    db = BeachDatabase(args.beaches_config)
    beach = db.get_beach(args.beach) or db.get_beach_by_name(args.beach)
    if beach is None:
        print(f"Unknown beach: {args.beach}", file=sys.stderr)
        return 2

    snapshots = load_snapshots(args.snapshots, beach_id=beach.id)

    scorer = BeachScorer(load_scoring_config(args.scoring_config))
    options = WindowOptions(
        duration_hours=args.duration,
        count=args.count,
        preferences=build_preferences(args),
    )
    windows = WindowGenerator(scorer, options).generate_windows(snapshots, now=args.now)
    week = daily_forecast(snapshots, scorer, options.preferences) if args.week else None

    plan = None
    if args.plan and windows:
        chosen = next((w for w in windows if w.is_go_now), None) or find_best_window(windows)
        plan = build_plan(beach, chosen)

    formatter = PlanFormatter(beach, windows, plan, week)
    output = formatter.format_sms() if args.format == "sms" else formatter.format_text()

    # Write or print output
    if args.output:
        output_path = Path(args.output)
        output_path.write_text(output)
        print(f"Output written to: {output_path}", file=sys.stderr)
    else:
        print(output)

    # Summary (always to stderr so it doesn't pollute piped output)
    go_now = formatter.go_now
    print(file=sys.stderr)
    print("=" * 50, file=sys.stderr)
    print("SUMMARY", file=sys.stderr)
    print("=" * 50, file=sys.stderr)
    print(f"  Beach: {beach.name}", file=sys.stderr)
    print(f"  Snapshots: {len(snapshots)}", file=sys.stderr)
    print(f"  Windows: {len(windows)}", file=sys.stderr)
    print(f"  Go now: {'yes, score ' + str(go_now.score) if go_now else 'no'}", file=sys.stderr)
    if args.format == "sms":
        print(f"  SMS segments: {formatter.sms_segments(output)}", file=sys.stderr)
    print("=" * 50, file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
