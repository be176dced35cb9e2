#!/usr/bin/env python3
"""
Padel Planner CLI

Plans weekly 2 vs 2 padel matches for a fixed group of players.
Configuration comes from data/league_config.json, season data from
data/availability.json, data/matches.json and data/results.json.

Usage:
    python padel_planner.py availability --week 3
    python padel_planner.py availability --week 3 --player Erik
    python padel_planner.py teams --week 3 --guest Sanne
    python padel_planner.py result --week 3 6 4
    python padel_planner.py move --week 3 Bob team1 team2
    python padel_planner.py swap --week 3 Bob team1 Erik team2
    python padel_planner.py stats
    python padel_planner.py history
    python padel_planner.py export season.xlsx
    python padel_planner.py check
"""

import argparse
import logging
import sys
from pathlib import Path

from padel import PadelPlanner, PlannerError, SeasonDataError, SeasonStore, validate_season
from padel.config import DEFAULT_CONFIG_PATH, get_config
from padel.export import export_season_workbook
from padel.logging_config import setup_logging
from padel.models import AvailabilityStatus
from padel.weeks import format_week_date

logger = logging.getLogger('padel.cli')


def format_team(team: list[str]) -> str:
    return ' & '.join(team) if team else '(empty)'


def print_week(planner: PadelPlanner, week: int) -> None:
    match = planner.matches.get(week)
    print(f"Week {week} ({format_week_date(week, planner.start_date)})")
    if match is None:
        print("  No teams yet")
        return

    print(f"  Team 1: {format_team(match.team1)}")
    print(f"  Team 2: {format_team(match.team2)}")

    result = planner.results.get(week)
    if result is not None:
        print(f"  Score:  {result.team1_score} - {result.team2_score}")


def cmd_availability(planner: PadelPlanner, args: argparse.Namespace) -> bool:
    if args.player:
        if args.status is not None:
            planner.set_availability(args.week, args.player, args.status)
        else:
            planner.cycle_availability(args.week, args.player)

    print(f"Availability for week {args.week} ({format_week_date(args.week, planner.start_date)})")
    for player in planner.roster:
        print(f"  {player:<12} {planner.get_status(args.week, player).label}")

    eligible = planner.eligible_players(args.week)
    print(f"\n{len(eligible)} of {len(planner.roster)} players available")
    if 0 < len(eligible) < 4:
        print("⚠️  At least 4 players are needed for a match")

    return args.player is not None


def cmd_teams(planner: PadelPlanner, args: argparse.Namespace) -> bool:
    for guest in args.guest or []:
        planner.add_guest(guest)

    planner.create_teams_for_week(args.week)
    print_week(planner, args.week)
    return True


def cmd_result(planner: PadelPlanner, args: argparse.Namespace) -> bool:
    planner.record_result(args.week, args.team1_score, args.team2_score)
    print_week(planner, args.week)
    return True


def cmd_move(planner: PadelPlanner, args: argparse.Namespace) -> bool:
    before = planner.matches.get(args.week)
    after = planner.move_player(args.week, args.player, args.from_team, args.to_team)
    if after is None:
        print(f"❌ Week {args.week} has no teams")
        return False
    if after is before:
        print(f"⚠️  Could not move {args.player} to {args.to_team}")
    print_week(planner, args.week)
    return after is not before


def cmd_swap(planner: PadelPlanner, args: argparse.Namespace) -> bool:
    before = planner.matches.get(args.week)
    after = planner.swap_players(args.week, args.player_a, args.team_a, args.player_b, args.team_b)
    if after is None:
        print(f"❌ Week {args.week} has no teams")
        return False
    print_week(planner, args.week)
    return after is not before


def cmd_stats(planner: PadelPlanner, args: argparse.Namespace) -> bool:
    print("=" * 60)
    print("PLAYER STATS")
    print("=" * 60)
    for rank, stats in enumerate(planner.player_stats(), 1):
        print(
            f"  {rank}. {stats.name:<12} played {stats.play_count:>2} "
            f"({stats.participation:.1f}%)  won {stats.win_count:>2} ({stats.win_rate:.1f}%)"
        )
    return False


def cmd_history(planner: PadelPlanner, args: argparse.Namespace) -> bool:
    history = planner.history()
    if not history:
        print("No matches played yet")
        return False

    for week, match, result in history:
        print(
            f"Week {week:>2} ({format_week_date(week, planner.start_date)}): "
            f"{format_team(match.team1)} {result.team1_score} - "
            f"{result.team2_score} {format_team(match.team2)}"
        )
    return False


def cmd_export(planner: PadelPlanner, args: argparse.Namespace) -> bool:
    path = export_season_workbook(args.output, planner)
    print(f"Season exported to {path}")
    return False


def cmd_check(planner: PadelPlanner, args: argparse.Namespace) -> bool:
    errors, warnings = validate_season(planner.matches, planner.results)
    for warning in warnings:
        print(f"⚠️  {warning}")
    for error in errors:
        print(f"❌ {error}")
    if errors:
        raise SeasonDataError(errors)
    print("✅ Season data is valid")
    return False


COMMANDS = {
    'availability': cmd_availability,
    'teams': cmd_teams,
    'result': cmd_result,
    'move': cmd_move,
    'swap': cmd_swap,
    'stats': cmd_stats,
    'history': cmd_history,
    'export': cmd_export,
    'check': cmd_check,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Padel Planner - weekly 2 vs 2 team scheduling")
    parser.add_argument(
        "--data-dir", "-d",
        default="data",
        help="Path to season data directory",
    )
    parser.add_argument(
        "--config", "-c",
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to league_config.json",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write a log file under ./logs",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_week(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--week", "-w",
            type=int,
            default=None,
            help="Week number (defaults to the current week)",
        )

    availability = subparsers.add_parser("availability", help="Show or change availability")
    add_week(availability)
    availability.add_argument("--player", "-p", help="Roster player to update")
    availability.add_argument(
        "--status", "-s",
        type=int,
        choices=[int(s) for s in AvailabilityStatus],
        default=None,
        help="Set status (0=unavailable, 1=tentative, 2=available) instead of cycling",
    )

    teams = subparsers.add_parser("teams", help="Create teams for a week")
    add_week(teams)
    teams.add_argument(
        "--guest", "-g",
        action="append",
        help="Guest player to include (repeatable)",
    )

    result = subparsers.add_parser("result", help="Record a match result")
    add_week(result)
    result.add_argument("team1_score")
    result.add_argument("team2_score")

    move = subparsers.add_parser("move", help="Move a player to the other team")
    add_week(move)
    move.add_argument("player")
    move.add_argument("from_team", choices=["team1", "team2"])
    move.add_argument("to_team", choices=["team1", "team2"])

    swap = subparsers.add_parser("swap", help="Swap two players between teams")
    add_week(swap)
    swap.add_argument("player_a")
    swap.add_argument("team_a", choices=["team1", "team2"])
    swap.add_argument("player_b")
    swap.add_argument("team_b", choices=["team1", "team2"])

    subparsers.add_parser("stats", help="Show play and win counts")
    subparsers.add_parser("history", help="Show played matches, newest first")

    export = subparsers.add_parser("export", help="Export the season to Excel")
    export.add_argument("output", help="Output .xlsx path")

    subparsers.add_parser("check", help="Validate stored season data")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        level=logging.WARNING if args.quiet else logging.INFO,
        log_dir=Path("logs") if args.log_file else None,
    )

    config_path = Path(args.config)
    if not config_path.exists():
        print(f"❌ Config file not found: {config_path}")
        return 1

    store = SeasonStore(args.data_dir)

    # json.JSONDecodeError and schema failures are both ValueErrors
    try:
        planner = store.load_planner(get_config(config_path))

        if hasattr(args, "week"):
            if args.week is None:
                args.week = planner.current_week()
            elif not 1 <= args.week <= planner.total_weeks:
                print(f"❌ Week must be between 1 and {planner.total_weeks}")
                return 1

        changed = COMMANDS[args.command](planner, args)
    except (PlannerError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"❌ {e}")
        return 1

    if changed:
        store.save_planner(planner)
        logger.info(f"Saved season data to {store.data_dir}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
