import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, List, Optional

from scoreboard.exceptions import EmptyHistoryError, MatchAlreadyDecidedError
from scoreboard.models import MatchConfig, MatchState
from scoreboard.scoring import (
    apply_point,
    display_score,
    initial_state,
    reset_state,
    team_summary,
    validate_side,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MatchEngine:
    """
    Authoritative state of one tennis match.

    Responsibilities:
    - Award points and enforce scoring rules
    - Keep a pre-point snapshot per action for undo
    - Reset to a fresh match with the same teams
    - Provide display labels for presentation

    Not thread-safe. Wrap in a MatchSession when shared.
    """

    def __init__(self, config: Optional[MatchConfig] = None, clock: Optional[Clock] = None, **overrides):
        config = config or MatchConfig()
        if overrides:
            config = replace(config, **overrides)

        self._state = initial_state(config)
        self._clock = clock or utc_now

        logger.debug(
            "Match created: %s vs %s, best of %d",
            config.home_name,
            config.away_name,
            config.best_of_sets,
        )

    # =========================================================
    # READ API
    # =========================================================

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def is_finished(self) -> bool:
        return self._state.is_finished

    @property
    def can_undo(self) -> bool:
        return bool(self._state.history)

    def display_score(self, side: str) -> str:
        validate_side(side)
        return display_score(
            self._state.team(side).points,
            self._state.opponent(side).points,
        )

    def scoreline(self) -> str:
        home, away = self._state.home, self._state.away
        return f"{home.name} {team_summary(home, away)} | {away.name} {team_summary(away, home)}"

    def history_lines(self) -> List[str]:
        """Newest first, each with the score before the action."""
        lines = []
        for entry in reversed(self._state.history):
            home, away = entry.snapshot.home, entry.snapshot.away
            lines.append(
                f"{entry.timestamp.astimezone().strftime('%H:%M:%S')} {entry.action}: "
                f"{home.name} {team_summary(home, away)}, "
                f"{away.name} {team_summary(away, home)}"
            )
        return lines

    # =========================================================
    # MUTATING API
    # =========================================================

    def award_point(self, side: str, strict: bool = False) -> MatchState:
        validate_side(side)

        if self._state.is_finished:
            message = f"Match already decided ({self._state.set_winner} won)"
            if strict:
                raise MatchAlreadyDecidedError(message)
            logger.warning("%s, ignoring point to %s", message, side)
            return self._state

        previous = self._state
        self._state = apply_point(previous, side, self._clock())

        self._log_transition(previous, side)

        return self._state

    def undo(self) -> MatchState:
        history = self._state.history
        if not history:
            raise EmptyHistoryError("No actions to undo")

        last = history[-1]
        self._state = replace(last.snapshot, history=history[:-1])

        logger.info("Undone: %s", last.action)
        return self._state

    def reset(self) -> MatchState:
        self._state = reset_state(self._state)

        logger.info("Match has been reset")
        return self._state

    # =========================================================
    # LOGGING
    # =========================================================

    def _log_transition(self, previous: MatchState, side: str):
        state = self._state
        scorer = state.team(side)
        opponent = state.opponent(side)

        logger.debug("Point to %s -> %s", scorer.name, self.scoreline())

        if state.game_winner is None:
            return

        if scorer.sets > previous.team(side).sets:
            logger.info("Set to %s (sets %d-%d)", scorer.name, scorer.sets, opponent.sets)
        else:
            logger.info("Game to %s (games %d-%d)", scorer.name, scorer.games, opponent.games)

        if state.set_winner is not None:
            logger.info("Match won by %s", state.set_winner)
