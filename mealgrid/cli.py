"""Command-line interface for mealgrid."""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

import yaml

from mealgrid.days import get_next_7_days
from mealgrid.grid import TIMESLOT_VALUES, grid_to_payload, grid_to_slots, slots_to_grid
from mealgrid.output import format_grid, format_pair_cells, format_payload, format_time_band
from mealgrid.overlap import build_pair_cells_for_next_7_days
from mealgrid.parser import (
    create_availability_template,
    parse_availability_yaml,
    parse_pair_availability_yaml,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mealgrid",
        description="Inspect weekly meal availability and pair schedules.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  mealgrid template availability.yaml
  mealgrid grid availability.yaml
  mealgrid payload availability.yaml --format yaml
  mealgrid pair overlap.json --today 2026-10-19
  mealgrid band NIGHT
""",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    grid_parser = subparsers.add_parser("grid", help="Show the weekly availability grid")
    grid_parser.add_argument("availability", type=Path, help="Path to the availability YAML file")

    payload_parser = subparsers.add_parser("payload", help="Print the availability request body")
    payload_parser.add_argument("availability", type=Path, help="Path to the availability YAML file")
    payload_parser.add_argument(
        "--available-only",
        action="store_true",
        help="Only include AVAILABLE slots instead of the full 14-slot grid",
    )
    payload_parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)",
    )

    pair_parser = subparsers.add_parser("pair", help="Show the 7-day pair schedule")
    pair_parser.add_argument(
        "pair_availability",
        type=Path,
        help="Path to the pair-availability YAML or JSON file",
    )
    pair_parser.add_argument(
        "--today",
        type=date.fromisoformat,
        help="First day of the window as YYYY-MM-DD (default: today)",
    )

    band_parser = subparsers.add_parser("band", help="Show the group-meal band for a time slot")
    band_parser.add_argument(
        "time_slot",
        type=str.upper,
        choices=TIMESLOT_VALUES,
        help="Availability time slot (DAY or NIGHT)",
    )

    template_parser = subparsers.add_parser("template", help="Write an availability template")
    template_parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=Path("availability_template.yaml"),
        help="Path for the template (default: availability_template.yaml)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for mealgrid CLI."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "template":
        create_availability_template(args.output)
        print(f"Created template at: {args.output}")
        return 0

    if args.command == "band":
        print(format_time_band(args.time_slot))
        return 0

    input_path: Path = args.pair_availability if args.command == "pair" else args.availability
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        if args.command == "pair":
            pair_slots = parse_pair_availability_yaml(input_path)
        else:
            slots = parse_availability_yaml(input_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error parsing {input_path}: {e}", file=sys.stderr)
        return 1

    if args.command == "pair":
        days = get_next_7_days(clock=lambda: args.today) if args.today else get_next_7_days()
        logger.debug("Loaded %d pair slots for window starting %s", len(pair_slots), days[0].date)
        cells = build_pair_cells_for_next_7_days(days, pair_slots)
        print(format_pair_cells(days, cells))
        return 0

    logger.debug("Loaded %d availability slots", len(slots))
    grid = slots_to_grid(slots)

    if args.command == "grid":
        print(format_grid(grid))
    else:
        payload = grid_to_payload(grid) if args.available_only else grid_to_slots(grid)
        print(format_payload(payload, args.format))

    return 0


if __name__ == "__main__":
    sys.exit(main())
