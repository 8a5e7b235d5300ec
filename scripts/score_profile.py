#!/usr/bin/env python3
"""
Score an FSP input profile from the command line.

Usage:
    python scripts/score_profile.py
    python scripts/score_profile.py --profile profiles/example.yaml
    python scripts/score_profile.py --set age=36 --set stress=High --breakdown
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fsp.collector import InputCollector
from fsp.core.config import get_settings, load_profile
from fsp.core.exceptions import FSPError
from fsp.core.types import FertilityInput
from fsp.explain.generator import ExplanationGenerator


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_assignment(text: str) -> tuple[str, str]:
    """Split a field=value override."""
    field, sep, value = text.partition("=")
    if not sep or not field:
        raise argparse.ArgumentTypeError(
            f"Invalid override '{text}'. Use field=value."
        )
    return field.strip(), value.strip()


def run(
    profile: str | None,
    overrides: list[tuple[str, str]],
    breakdown: bool,
    as_json: bool,
) -> int:
    """Score the profile and print the result."""
    try:
        record = load_profile(profile) if profile else FertilityInput()
        collector = InputCollector(record.clamped())
        for field, value in overrides:
            collector.set(field, value)
    except (FSPError, ValueError) as e:
        logging.error(f"Could not build input profile: {e}")
        return 1

    result = collector.result

    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    generator = ExplanationGenerator()

    print("\n" + "=" * 60)
    print("FERTILITY SCORE PREDICTOR")
    print("=" * 60)
    print(f"BMI:        {result.bmi}")
    print(f"Total:      {result.total} / {result.max_total}")
    print(f"Band:       {result.band.value} ({result.band.range_label})")
    print("-" * 60)
    if breakdown:
        print(generator.format_component_breakdown(result))
        print("-" * 60)
    print("Explanation:")
    for line in generator.generate(result).splitlines():
        print(f"  {line}")
    print("=" * 60 + "\n")

    return 0


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Score an FSP input profile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/score_profile.py                         # Default inputs
    python scripts/score_profile.py -p profiles/example.yaml
    python scripts/score_profile.py -s age=38 -s "diet=Mostly balanced" -b

FSP bands:
    Green (30-39), Blue (20-29), Orange (10-19), Red (5-9), Black (<5)
        """,
    )

    parser.add_argument(
        "--profile",
        "-p",
        type=str,
        default=None,
        help="YAML profile of input fields (default: built-in defaults)",
    )

    parser.add_argument(
        "--set",
        "-s",
        dest="overrides",
        type=parse_assignment,
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Override one input field (repeatable)",
    )

    parser.add_argument(
        "--breakdown",
        "-b",
        action="store_true",
        help="Print the per-factor breakdown",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    setup_logging(args.verbose)

    return run(args.profile, args.overrides, args.breakdown, args.json)


if __name__ == "__main__":
    sys.exit(main())
