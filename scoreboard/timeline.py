from typing import List, Optional

from scoreboard.engine import Clock, MatchEngine
from scoreboard.models import MatchConfig, MatchState


def build_match_timeline(
    sides: List[str],
    config: Optional[MatchConfig] = None,
    clock: Optional[Clock] = None,
) -> List[MatchState]:
    """
    Replays a match from scratch using the point winners in `sides`.
    Returns the state after each point, stopping once the match is decided.
    Does NOT mutate external state.
    """

    engine = MatchEngine(config, clock=clock)

    timeline: List[MatchState] = []

    for side in sides:

        timeline.append(engine.award_point(side))

        if engine.is_finished:
            break

    return timeline
