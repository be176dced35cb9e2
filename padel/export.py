"""Excel export of a season's schedule and statistics."""

from pathlib import Path

import openpyxl
from openpyxl.styles import Font

from .planner import PadelPlanner
from .weeks import format_week_date

SCHEDULE_HEADERS = ['Week', 'Date', 'Team 1', 'Team 2', 'Score']
STATS_HEADERS = ['Player', 'Played', 'Won', 'Win %', 'Participation %']


def export_season_workbook(path: str | Path, planner: PadelPlanner) -> Path:
    """
    Write the season to an .xlsx workbook.

    Sheets:
    - Schedule: one row per week with teams and score (blank if not played)
    - Stats: one row per roster player, most wins first

    Returns:
        Path of the written workbook
    """
    path = Path(path)
    wb = openpyxl.Workbook()

    ws = wb.active
    ws.title = 'Schedule'
    ws.append(SCHEDULE_HEADERS)
    for week in range(1, planner.total_weeks + 1):
        match = planner.matches.get(week)
        result = planner.results.get(week)
        ws.append([
            week,
            format_week_date(week, planner.start_date),
            ' & '.join(match.team1) if match else None,
            ' & '.join(match.team2) if match else None,
            f'{result.team1_score}-{result.team2_score}' if result else None,
        ])

    stats_ws = wb.create_sheet('Stats')
    stats_ws.append(STATS_HEADERS)
    for stats in planner.player_stats():
        stats_ws.append([
            stats.name,
            stats.play_count,
            stats.win_count,
            stats.win_rate,
            stats.participation,
        ])

    for sheet in (ws, stats_ws):
        for cell in sheet[1]:
            cell.font = Font(bold=True)

    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    return path
