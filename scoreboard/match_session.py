import logging
import threading
from typing import Dict, List, Optional

from scoreboard.engine import Clock, MatchEngine
from scoreboard.exceptions import SessionExistsError, SessionNotFoundError
from scoreboard.models import MatchConfig, MatchState
from scoreboard.scoring import validate_side

logger = logging.getLogger(__name__)


class MatchSession:
    """
    Single in-progress match.

    Responsibilities:
    - Own one MatchEngine instance
    - Serialize every operation on it (the engine has no locking)
    - Bulk replay point winners (atomic)
    - Export the applied point winners
    """

    def __init__(self, match_id: str, config: Optional[MatchConfig] = None, clock: Optional[Clock] = None):
        self.match_id = match_id
        self._config = config or MatchConfig()
        self._clock = clock
        self._engine = MatchEngine(self._config, clock=clock)
        self._lock = threading.Lock()

    # ---------------------------------------------------------
    # Core API
    # ---------------------------------------------------------

    def award_point(self, side: str) -> MatchState:
        with self._lock:
            return self._engine.award_point(side)

    def undo(self) -> MatchState:
        with self._lock:
            return self._engine.undo()

    def reset(self) -> MatchState:
        with self._lock:
            return self._engine.reset()

    def snapshot(self) -> MatchState:
        with self._lock:
            return self._engine.state

    def scoreline(self) -> str:
        with self._lock:
            return self._engine.scoreline()

    def load_points(self, sides: List[str]) -> MatchState:
        """
        Replace the match with a replay of `sides` from a fresh start.
        Atomic: if any side is invalid -> no state mutation.
        """
        if not isinstance(sides, list):
            raise ValueError("sides must be a list")

        # Validate first
        for side in sides:
            validate_side(side)

        # Replay on a scratch engine
        temp_engine = MatchEngine(self._config, clock=self._clock)
        for side in sides:
            temp_engine.award_point(side)

        # If everything succeeds -> commit
        with self._lock:
            self._engine = temp_engine
            state = self._engine.state

        logger.info("Session %s loaded %d points", self.match_id, len(sides))
        return state

    def export_points(self) -> List[str]:
        with self._lock:
            return [entry.side for entry in self._engine.state.history]


class SessionRegistry:
    """One MatchSession per match id, created at match start and dropped at match end."""

    def __init__(self):
        self._sessions: Dict[str, MatchSession] = {}
        self._lock = threading.Lock()

    def create(self, match_id: str, config: Optional[MatchConfig] = None, clock: Optional[Clock] = None) -> MatchSession:
        with self._lock:
            if match_id in self._sessions:
                raise SessionExistsError(f"Match already exists: {match_id}")

            session = MatchSession(match_id, config, clock=clock)
            self._sessions[match_id] = session

        logger.info("Session %s created", match_id)
        return session

    def get(self, match_id: str) -> MatchSession:
        with self._lock:
            try:
                return self._sessions[match_id]
            except KeyError:
                raise SessionNotFoundError(f"Match not found: {match_id}") from None

    def drop(self, match_id: str) -> None:
        with self._lock:
            if self._sessions.pop(match_id, None) is None:
                raise SessionNotFoundError(f"Match not found: {match_id}")

        logger.info("Session %s dropped", match_id)

    def __contains__(self, match_id: str) -> bool:
        with self._lock:
            return match_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
