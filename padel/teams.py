"""Team assignment and team editing for weekly 2 vs 2 matches.

Selection policy:
- Eligible players are roster members marked available for the week,
  followed by every guest in the guest pool
- The four players with the fewest historical matches are picked; ties keep
  eligibility order (roster order, then guest order), so the same history
  always gives the same teams
- Picked players [p0, p1, p2, p3] are paired as team1 = [p0, p2] and
  team2 = [p1, p3]

All functions here are pure: they return new Match objects and never modify
the ones passed in.
"""

import logging
from typing import Iterable, Mapping, Optional

from .constants import PLAYERS_PER_MATCH, TEAM_SIZE
from .errors import DuplicatePlayerError, InsufficientPlayersError
from .models import Availability, AvailabilityStatus, Match

logger = logging.getLogger('padel.teams')


def other_team(team_id: str) -> str:
    """Return the opposing team id."""
    return 'team2' if team_id == 'team1' else 'team1'


def compute_eligible_players(
    availability: Availability,
    week: int,
    roster: Iterable[str],
    guest_pool: Optional[Iterable[str]] = None,
) -> list[str]:
    """
    List the players who can be picked for a week.

    Args:
        availability: Mapping of week -> {player: status}
        week: Week number
        roster: Registered players, in roster order
        guest_pool: Guests for the next assignment, in the order they were added

    Returns:
        Available roster members followed by all guests
    """
    week_availability = availability.get(week, {})
    eligible = [
        player
        for player in roster
        if week_availability.get(player, AvailabilityStatus.UNAVAILABLE) == AvailabilityStatus.AVAILABLE
    ]
    eligible.extend(guest_pool or [])
    return eligible


def compute_match_counts(
    matches: Mapping[int, Match],
    candidate_players: Iterable[str],
) -> dict[str, int]:
    """
    Count how many matches each candidate has played, across all weeks.

    Players who never appear in the history (new guests) count 0. Players
    in the history but not among the candidates are ignored.
    """
    counts = {player: 0 for player in candidate_players}

    for match in matches.values():
        for player in match.players:
            if player in counts:
                counts[player] += 1

    return counts


def assign_teams(
    eligible_players: list[str],
    match_counts: Mapping[str, int],
    week: Optional[int] = None,
) -> Match:
    """
    Pick four least-played players and split them into two teams.

    Args:
        eligible_players: Candidates in eligibility order
        match_counts: Historical match count per player
        week: Week number, only used in the error message

    Returns:
        New Match with team1 = [p0, p2] and team2 = [p1, p3]

    Raises:
        InsufficientPlayersError: If fewer than four players are eligible
    """
    if len(eligible_players) < PLAYERS_PER_MATCH:
        raise InsufficientPlayersError(len(eligible_players), week)

    # sorted() is stable, ties keep eligibility order
    ranked = sorted(eligible_players, key=lambda player: match_counts.get(player, 0))
    selected = ranked[:PLAYERS_PER_MATCH]

    logger.debug(
        'Selected %s from %d eligible players (counts: %s)',
        selected,
        len(eligible_players),
        {player: match_counts.get(player, 0) for player in selected},
    )

    return Match(
        team1=[selected[0], selected[2]],
        team2=[selected[1], selected[3]],
    )


def move_player(match: Match, player: str, from_team: str, to_team: str) -> Match:
    """
    Move a player from one team to the other.

    The move is silently rejected, returning ``match`` itself, when the
    target team already has two players, when the player is not in
    ``from_team``, or when the player is already in ``to_team``.
    """
    if player not in match.team(from_team):
        return match
    if from_team != to_team and player in match.team(to_team):
        return match

    moved = match.copy()
    source = moved.team(from_team)
    source.remove(player)

    target = moved.team(to_team)
    if len(target) >= TEAM_SIZE:
        logger.debug(f'{to_team} is full, not moving {player}')
        return match

    target.append(player)
    return moved


def swap_players(
    match: Match,
    player_a: str,
    team_a: str,
    player_b: str,
    team_b: str,
) -> Match:
    """
    Swap two players between the teams.

    Both players are taken out of whichever team holds them, then
    ``player_a`` joins the team opposite ``team_a`` and ``player_b`` the team
    opposite ``team_b``. Swapping two players of the same team, a player with
    themselves, or a player who is not in the given team leaves the
    composition unchanged and returns ``match``.
    """
    if player_a == player_b or team_a == team_b:
        return match
    if player_a not in match.team(team_a) or player_b not in match.team(team_b):
        return match

    swapped = Match(
        team1=[p for p in match.team1 if p not in (player_a, player_b)],
        team2=[p for p in match.team2 if p not in (player_a, player_b)],
    )
    swapped.team(other_team(team_a)).append(player_a)
    swapped.team(other_team(team_b)).append(player_b)
    return swapped


def replace_player(match: Match, team_id: str, index: int, new_player: str) -> Match:
    """
    Put ``new_player`` in a team slot, replacing whoever holds it.

    An empty ``new_player`` clears the slot.

    Raises:
        DuplicatePlayerError: If the player is already in either team
        IndexError: If the slot is outside the team
    """
    if new_player and match.has_player(new_player):
        raise DuplicatePlayerError(new_player)

    if not 0 <= index < TEAM_SIZE:
        raise IndexError(f'Team slot {index} out of range')

    replaced = match.copy()
    team = replaced.team(team_id)

    if not new_player:
        if index < len(team):
            del team[index]
        return replaced

    if index < len(team):
        team[index] = new_player
    else:
        team.append(new_player)
    return replaced
