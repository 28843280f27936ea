from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple

from scoreboard.config import (
    AWAY,
    DEFAULT_AWAY_COLOR,
    DEFAULT_AWAY_NAME,
    DEFAULT_BEST_OF,
    DEFAULT_HOME_COLOR,
    DEFAULT_HOME_NAME,
    HOME,
)


@dataclass(frozen=True)
class MatchConfig:
    home_name: str = DEFAULT_HOME_NAME
    home_color: str = DEFAULT_HOME_COLOR
    away_name: str = DEFAULT_AWAY_NAME
    away_color: str = DEFAULT_AWAY_COLOR
    best_of_sets: int = DEFAULT_BEST_OF


@dataclass(frozen=True)
class TeamState:
    name: str
    color: str
    points: int = 0
    games: int = 0
    sets: int = 0


@dataclass(frozen=True)
class MatchState:
    home: TeamState
    away: TeamState
    best_of_sets: int
    game_winner: Optional[str] = None
    set_winner: Optional[str] = None
    history: Tuple["HistoryEntry", ...] = field(default_factory=tuple)

    @property
    def is_finished(self) -> bool:
        return self.set_winner is not None

    def team(self, side: str) -> TeamState:
        return self.home if side == HOME else self.away

    def opponent(self, side: str) -> TeamState:
        return self.away if side == HOME else self.home

    def side_of(self, name: str) -> Optional[str]:
        if name == self.home.name:
            return HOME
        if name == self.away.name:
            return AWAY
        return None


@dataclass(frozen=True)
class HistoryEntry:
    """
    Pre-point snapshot recorded for undo.

    `snapshot` is the state before the action without its history; undo
    reattaches the history that precedes the entry.
    """

    snapshot: MatchState
    action: str
    timestamp: datetime
    side: str
