"""
Tennis scoring rules.

Points -> games -> sets -> match, with deuce/advantage and win-by-two games.
A 6-6 set is not special-cased: sets keep going until one side leads by two
games (7-5, 8-6, ...).

Every function here is pure. `apply_point` builds the complete next state
from the previous one and never touches the values it was given.
"""

import math
from dataclasses import replace
from datetime import datetime
from typing import Optional

from scoreboard.config import (
    ADVANTAGE_LABEL,
    AWAY,
    DEUCE_LABEL,
    GAME_POINT,
    GAMES_PER_SET,
    HOME,
    MIN_LEAD,
    POINT_LABELS,
    SIDES,
)
from scoreboard.exceptions import InvalidConfigurationError, InvalidSideError
from scoreboard.models import HistoryEntry, MatchConfig, MatchState, TeamState


# =========================================================
# HELPERS
# =========================================================

def other_side(side: str) -> str:
    return AWAY if side == HOME else HOME


def validate_side(side: str) -> None:
    if side not in SIDES:
        raise InvalidSideError(f"Invalid side: {side!r}")


def sets_to_win(best_of_sets: int) -> int:
    return math.ceil(best_of_sets / 2)


def validate_config(config: MatchConfig) -> None:
    best_of = config.best_of_sets

    if isinstance(best_of, bool) or not isinstance(best_of, int):
        raise InvalidConfigurationError("best_of_sets must be an integer")

    if best_of <= 0:
        raise InvalidConfigurationError("best_of_sets must be positive")

    if best_of % 2 == 0:
        raise InvalidConfigurationError("best_of_sets must be odd")

    if not config.home_name or not config.away_name:
        raise InvalidConfigurationError("team names must not be empty")

    if config.home_name == config.away_name:
        raise InvalidConfigurationError("team names must be distinct")


# =========================================================
# STATE CONSTRUCTION
# =========================================================

def initial_state(config: MatchConfig) -> MatchState:
    validate_config(config)

    return MatchState(
        home=TeamState(name=config.home_name, color=config.home_color),
        away=TeamState(name=config.away_name, color=config.away_color),
        best_of_sets=config.best_of_sets,
    )


def reset_state(state: MatchState) -> MatchState:
    """Zero every counter, keeping names, colors and best-of."""
    return MatchState(
        home=TeamState(name=state.home.name, color=state.home.color),
        away=TeamState(name=state.away.name, color=state.away.color),
        best_of_sets=state.best_of_sets,
    )


# =========================================================
# DISPLAY
# =========================================================

def display_score(points: int, opponent_points: int) -> str:
    if points >= GAME_POINT and opponent_points >= GAME_POINT:
        if points == opponent_points:
            return DEUCE_LABEL
        if points > opponent_points:
            return ADVANTAGE_LABEL
        return POINT_LABELS[GAME_POINT]

    return POINT_LABELS[min(max(points, 0), GAME_POINT)]


def leading_side(state: MatchState) -> Optional[str]:
    """Side ahead on sets, or on games when sets are level. None when tied."""
    for side in SIDES:
        team, opponent = state.team(side), state.opponent(side)
        if team.sets > opponent.sets or (team.sets == opponent.sets and team.games > opponent.games):
            return side
    return None


def team_summary(team: TeamState, opponent: TeamState) -> str:
    """sets-games-points, e.g. "1-3-30"."""
    return f"{team.sets}-{team.games}-{display_score(team.points, opponent.points)}"


# =========================================================
# POINT LOGIC
# =========================================================

def _wins_game(points: int, opponent_points: int) -> bool:
    if points < GAME_POINT:
        return False

    if opponent_points < GAME_POINT:
        return True

    return points >= opponent_points + 1


def _wins_set(games: int, opponent_games: int) -> bool:
    return games >= GAMES_PER_SET and games - opponent_games >= MIN_LEAD


def apply_point(state: MatchState, side: str, timestamp: datetime) -> MatchState:
    """
    Return the state after `side` wins a point.

    A decided match is returned unchanged and records nothing.
    """
    validate_side(side)

    if state.is_finished:
        return state

    scorer = state.team(side)
    opponent = state.opponent(side)

    entry = HistoryEntry(
        snapshot=replace(state, history=()),
        action=f"Point to {scorer.name}",
        timestamp=timestamp,
        side=side,
    )

    game_winner = None
    set_winner = None

    if not _wins_game(scorer.points, opponent.points):
        scorer = replace(scorer, points=scorer.points + 1)
    else:
        scorer = replace(scorer, points=0, games=scorer.games + 1)
        opponent = replace(opponent, points=0)
        game_winner = scorer.name

        if _wins_set(scorer.games, opponent.games):
            scorer = replace(scorer, sets=scorer.sets + 1, games=0)
            opponent = replace(opponent, games=0)

            if scorer.sets >= sets_to_win(state.best_of_sets):
                set_winner = scorer.name

    home, away = (scorer, opponent) if side == HOME else (opponent, scorer)

    return replace(
        state,
        home=home,
        away=away,
        game_winner=game_winner,
        set_winner=set_winner,
        history=state.history + (entry,),
    )
