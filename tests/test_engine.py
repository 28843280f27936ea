import pytest

from scoreboard.config import AWAY, HOME
from scoreboard.engine import MatchEngine
from scoreboard.exceptions import EmptyHistoryError


def create_engine(best_of=3):
    return MatchEngine(best_of_sets=best_of)


def win_game(engine, side):
    for _ in range(4):
        engine.award_point(side)


def win_games(engine, side, count):
    for _ in range(count):
        win_game(engine, side)


def win_set(engine, side):
    win_games(engine, side, 6)


def reach_games(engine, home, away):
    """Alternate games from 0-0 until the set is at home-away."""
    while engine.state.home.games < home or engine.state.away.games < away:
        if engine.state.home.games < home:
            win_game(engine, HOME)
        if engine.state.away.games < away:
            win_game(engine, AWAY)


def reach_deuce(engine):
    for _ in range(3):
        engine.award_point(HOME)
        engine.award_point(AWAY)


# ---------- FULL MATCH SCENARIO ----------

def test_home_wins_best_of_three_without_dropping_a_point():
    engine = create_engine(best_of=3)

    win_game(engine, HOME)

    state = engine.state
    assert (state.home.games, state.away.games) == (1, 0)
    assert (state.home.points, state.away.points) == (0, 0)
    assert state.game_winner == "Home"

    win_games(engine, HOME, 5)

    state = engine.state
    assert (state.home.sets, state.away.sets) == (1, 0)
    assert (state.home.games, state.away.games) == (0, 0)
    assert state.set_winner is None

    win_set(engine, HOME)

    assert engine.state.set_winner == "Home"
    assert engine.is_finished
    assert len(engine.state.history) == 48


@pytest.mark.parametrize("sequence, expected_winner", [
    ([HOME, HOME], "Home"),
    ([HOME, AWAY, HOME], "Home"),
    ([AWAY, AWAY], "Away"),
    ([AWAY, HOME, AWAY], "Away"),
])
def test_match_outcomes(sequence, expected_winner):
    engine = create_engine(best_of=3)

    for side in sequence:
        win_set(engine, side)

    assert engine.state.set_winner == expected_winner


# ---------- LOCK AFTER FINISH ----------

def test_points_after_match_are_ignored():
    engine = create_engine(best_of=3)
    win_set(engine, HOME)
    win_set(engine, HOME)

    finished = engine.state

    for _ in range(10):
        assert engine.award_point(AWAY) is finished

    assert engine.state is finished
    assert len(engine.state.history) == 48


# ---------- DEUCE ----------

def test_deuce_then_advantage_then_game():
    engine = create_engine()
    reach_deuce(engine)

    assert engine.display_score(HOME) == "Deuce"
    assert engine.display_score(AWAY) == "Deuce"

    engine.award_point(AWAY)

    state = engine.state
    assert (state.home.points, state.away.points) == (3, 4)
    assert state.game_winner is None
    assert engine.display_score(AWAY) == "Advantage"
    assert engine.display_score(HOME) == "40"

    engine.award_point(AWAY)

    state = engine.state
    assert state.away.games == 1
    assert (state.home.points, state.away.points) == (0, 0)
    assert state.game_winner == "Away"


def test_advantage_lost_back_to_deuce():
    engine = create_engine()
    reach_deuce(engine)

    engine.award_point(HOME)
    engine.award_point(AWAY)

    assert engine.state.home.games == 0
    assert engine.display_score(HOME) == "Deuce"

    engine.award_point(HOME)
    assert engine.display_score(HOME) == "Advantage"

    engine.award_point(HOME)
    assert engine.state.home.games == 1
    assert engine.state.game_winner == "Home"


def test_game_winner_cleared_on_next_point():
    engine = create_engine()
    win_game(engine, HOME)
    assert engine.state.game_winner == "Home"

    engine.award_point(AWAY)
    assert engine.state.game_winner is None


# ---------- SET BOUNDARIES ----------

def test_six_four_wins_set():
    engine = create_engine()
    reach_games(engine, 5, 4)

    win_game(engine, HOME)

    state = engine.state
    assert (state.home.sets, state.away.sets) == (1, 0)
    assert (state.home.games, state.away.games) == (0, 0)


def test_six_five_does_not_win_set():
    engine = create_engine()
    reach_games(engine, 5, 5)

    win_game(engine, HOME)

    state = engine.state
    assert (state.home.games, state.away.games) == (6, 5)
    assert state.home.sets == 0

    win_game(engine, HOME)

    state = engine.state
    assert state.home.sets == 1
    assert (state.home.games, state.away.games) == (0, 0)


def test_no_tiebreak_at_six_all():
    engine = create_engine()
    reach_games(engine, 6, 6)

    assert engine.state.home.sets == 0

    win_game(engine, HOME)
    assert (engine.state.home.games, engine.state.away.games) == (7, 6)
    assert engine.state.home.sets == 0

    win_game(engine, HOME)
    assert engine.state.home.sets == 1


# ---------- MATCH BOUNDARY ----------

def test_best_of_five_needs_three_sets():
    engine = create_engine(best_of=5)

    for side in (HOME, AWAY, HOME, AWAY):
        win_set(engine, side)

    assert (engine.state.home.sets, engine.state.away.sets) == (2, 2)
    assert engine.state.set_winner is None

    win_set(engine, HOME)

    assert engine.state.set_winner == "Home"


# ---------- UNDO / RESET ----------

def test_undo_on_fresh_match():
    engine = create_engine()
    before = engine.state

    with pytest.raises(EmptyHistoryError):
        engine.undo()

    assert engine.state is before
    assert not engine.can_undo


def test_reset_clears_everything_but_teams():
    engine = MatchEngine(home_name="Serena", away_name="Venus", best_of_sets=3)
    win_set(engine, HOME)
    win_set(engine, HOME)

    engine.reset()

    state = engine.state
    assert state.home.name == "Serena"
    assert state.away.name == "Venus"
    assert state.best_of_sets == 3
    assert (state.home.sets, state.home.games, state.home.points) == (0, 0, 0)
    assert state.game_winner is None
    assert state.set_winner is None
    assert state.history == ()

    engine.award_point(AWAY)
    assert engine.state.away.points == 1
