"""Main entry point for the Sprint Calendar & Capacity Engine."""

import argparse
import json
import logging
import sys
from pathlib import Path

from sprint_capacity.engine.sprint_engine import SprintEngine
from sprint_capacity.models.timeline import BarKind
from sprint_capacity.utils.config import get_default_config, load_config
from sprint_capacity.utils.data_file import load_sprint_file

logger = logging.getLogger("sprint_capacity")


def build_engine(data_path: str, config_path: str, today: str = None) -> SprintEngine:
    """Load sprint records and configuration into an engine."""
    config = load_config(config_path) if Path(config_path).exists() else get_default_config()
    data = load_sprint_file(data_path)
    logger.info("Loaded %d members and %d tasks from %s",
                len(data.members), len(data.tasks), data_path)
    return SprintEngine(
        data.project,
        data.members,
        data.tasks,
        data.holidays,
        config=config,
        today=today,
    )


def write_json(payload, output_path: str):
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(payload, f, indent=2, default=str)
    print(f"\nSaved to: {path}")


def run_report(engine: SprintEngine, output_path: str = None):
    report = engine.report()
    print(report.to_human_readable())
    if output_path:
        write_json(report.to_dict(), output_path)
    return report


def run_state(engine: SprintEngine):
    state = engine.time_state()
    if not state.is_valid:
        print(f"Sprint not configured: {state.error}")
        return state

    print(f"Phase: {state.phase.value}")
    print(f"Day {state.current_day} of {state.total_working_days} working days "
          f"({state.progress_percent}%)")
    print(f"Remaining: {state.remaining_working_days} working days")
    return state


def run_capacity(engine: SprintEngine):
    team = engine.team_capacity()
    for member, record in zip(engine.members, team.members):
        remaining = engine.remaining_capacity(member)
        print(f"{record.name}: {record.hours_per_day:g}h/day x {record.working_days} days "
              f"= {record.total_hours}h (remaining {remaining}h)")
    print(f"Team: {team.total_hours}h sprint total, {engine.team_remaining_capacity()}h remaining")
    return team


def run_next_free(engine: SprintEngine, member_id: str = None, min_free_hours: float = None):
    members = engine.members
    if member_id:
        member = engine.get_member(member_id)
        if member is None:
            raise ValueError(f"Unknown member: {member_id}")
        members = [member]

    state = engine.time_state()
    results = {}
    for member in members:
        slot = engine.next_available_day(member, min_free_hours)
        results[member.id] = slot
        if state.is_complete:
            print(f"{member.name}: Sprint completed")
        elif slot:
            print(f"{member.name}: next free {slot.date} ({slot.free_hours}h)")
        else:
            print(f"{member.name}: no capacity this sprint")
    return results


def run_timeline(engine: SprintEngine):
    cells = engine.timeline()
    if not cells:
        print("Sprint dates not configured")
        return []

    header = "".join(
        ("*" if cell.is_today else "#" if cell.is_shaded else cell.weekday) for cell in cells
    )
    width = max((len(task.name) for task in engine.tasks), default=4)
    print(f"{'Task':<{width}}  {header}")

    bars = engine.task_bars()
    for task, bar in zip(engine.tasks, bars):
        row = [" "] * len(cells)
        if bar.kind is BarKind.MARKER:
            row[0] = "?"
        elif bar.kind is BarKind.BAR:
            for index in range(bar.visible_start_index, bar.visible_end_index + 1):
                row[index] = "="
            if bar.overflow_left:
                row[bar.visible_start_index] = "<"
            if bar.overflow_right:
                row[bar.visible_end_index] = ">"
        suffix = f"  {bar.label}" if bar.is_drawn else ""
        print(f"{task.name:<{width}}  {''.join(row)}{suffix}")
    return bars


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Sprint Calendar & Capacity Engine"
    )
    parser.add_argument(
        'command',
        choices=['report', 'state', 'capacity', 'next-free', 'timeline'],
        help='Command to run'
    )
    parser.add_argument(
        '--data',
        type=str,
        default='sprint.yaml',
        help='Path to sprint data file (default: sprint.yaml)'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--today',
        type=str,
        default=None,
        help='Evaluate as of this date (YYYY-MM-DD) instead of the local date'
    )
    parser.add_argument(
        '--member',
        type=str,
        default=None,
        help='Member id for next-free (default: all members)'
    )
    parser.add_argument(
        '--min-free-hours',
        type=float,
        default=None,
        help='Free hours a day must have for next-free (default from config)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Write the report as JSON to this path'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        engine = build_engine(args.data, args.config, args.today)

        if args.command == 'report':
            run_report(engine, args.output)
        elif args.command == 'state':
            run_state(engine)
        elif args.command == 'capacity':
            run_capacity(engine)
        elif args.command == 'next-free':
            run_next_free(engine, args.member, args.min_free_hours)
        elif args.command == 'timeline':
            run_timeline(engine)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
