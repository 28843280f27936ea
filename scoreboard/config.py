from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
RENDER_DIR = PROJECT_ROOT / "renders"

HOME = "home"
AWAY = "away"
SIDES = (HOME, AWAY)

DEFAULT_BEST_OF = 5
DEFAULT_HOME_NAME = "Home"
DEFAULT_HOME_COLOR = "#FF0000"
DEFAULT_AWAY_NAME = "Away"
DEFAULT_AWAY_COLOR = "#0000FF"

POINT_LABELS = ("0", "15", "30", "40")
GAME_POINT = len(POINT_LABELS) - 1
DEUCE_LABEL = "Deuce"
ADVANTAGE_LABEL = "Advantage"

GAMES_PER_SET = 6
MIN_LEAD = 2
