import argparse
import logging
import sys
from typing import Iterable, List, Optional

from render.renderer import ScoreboardRenderer
from scoreboard.config import AWAY, DEFAULT_BEST_OF, HOME
from scoreboard.engine import MatchEngine
from scoreboard.exceptions import EmptyHistoryError, InvalidConfigurationError
from scoreboard.models import MatchConfig

HELP = "h = point home, a = point away, u = undo, r = reset, s = history, q = quit"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Console tennis scoreboard")
    defaults = MatchConfig()

    parser.add_argument("--home", default=defaults.home_name, help="home team name")
    parser.add_argument("--away", default=defaults.away_name, help="away team name")
    parser.add_argument("--home-color", default=defaults.home_color)
    parser.add_argument("--away-color", default=defaults.away_color)
    parser.add_argument("--best-of", type=int, default=DEFAULT_BEST_OF, help="number of sets (odd)")
    parser.add_argument("--render", default=None, help="write the final scoreboard to this image path")
    parser.add_argument("-v", "--verbose", action="store_true")

    return parser


def run(engine: MatchEngine, commands: Iterable[str]) -> None:
    print(engine.scoreline())

    for raw in commands:
        command = raw.strip().lower()

        if not command:
            continue

        if command == "q":
            break

        if command == "h":
            engine.award_point(HOME)
        elif command == "a":
            engine.award_point(AWAY)
        elif command == "u":
            try:
                engine.undo()
                print("Action undone!")
            except EmptyHistoryError:
                print("No actions to undo!")
        elif command == "r":
            engine.reset()
            print("Match has been reset!")
        elif command == "s":
            lines = engine.history_lines()
            print(f"{len(lines)} actions recorded")
            if not lines:
                print("No actions yet")
            for line in lines:
                print("  " + line)
            continue
        else:
            print(HELP)
            continue

        print(engine.scoreline())

        if engine.is_finished:
            print(f"Match Winner: {engine.state.set_winner}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        engine = MatchEngine(
            MatchConfig(
                home_name=args.home,
                home_color=args.home_color,
                away_name=args.away,
                away_color=args.away_color,
                best_of_sets=args.best_of,
            )
        )
    except InvalidConfigurationError as e:
        print("ERROR:", e, file=sys.stderr)
        return 2

    print(HELP)
    run(engine, sys.stdin)

    if args.render:
        path = ScoreboardRenderer().save(engine.state, args.render)
        print(f"Scoreboard written to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
