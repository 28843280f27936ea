from scoreboard.config import AWAY, HOME, RENDER_DIR
from scoreboard.models import MatchConfig
from scoreboard.timeline import build_match_timeline
from render.renderer import ScoreboardRenderer


def main():

    # Set 1: Home 6-0, then Home at advantage in the first game of set 2
    sides = [HOME] * 24 + [HOME, AWAY, HOME, AWAY, HOME, AWAY, HOME]

    timeline = build_match_timeline(sides, MatchConfig(best_of_sets=3))

    renderer = ScoreboardRenderer()

    for index in (0, 23, len(timeline) - 1):
        path = renderer.save(timeline[index], RENDER_DIR / f"point_{index + 1:03d}.png")
        print("Wrote", path)


if __name__ == "__main__":
    main()
