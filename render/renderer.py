from pathlib import Path
from typing import Tuple, Union

import cv2
import numpy as np

from scoreboard.config import AWAY, HOME
from scoreboard.models import MatchState
from scoreboard.scoring import display_score, leading_side

LEADER_BGR = (0, 200, 0)


def hex_to_bgr(color: str) -> Tuple[int, int, int]:
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Invalid color: {color}")

    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return b, g, r


class ScoreboardRenderer:

    def __init__(self, width: int = 640, height: int = 200):
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")

        self.width = width
        self.height = height

    def render(self, state: MatchState) -> np.ndarray:
        frame = np.full((self.height, self.width, 3), 40, dtype=np.uint8)
        self.draw(frame, state)
        return frame

    def save(self, state: MatchState, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if not cv2.imwrite(str(path), self.render(state)):
            raise RuntimeError(f"Cannot write image: {path}")

        return path

    # ----------------------------------------------------
    # DRAWING
    # ----------------------------------------------------

    def draw(self, frame: np.ndarray, state: MatchState):

        height, width = frame.shape[:2]

        margin = 10
        row_height = (height - 2 * margin) // 3

        font = cv2.FONT_HERSHEY_SIMPLEX
        white = (255, 255, 255)
        grey = (180, 180, 180)

        # column positions
        sets_x = width - 260
        games_x = width - 180
        points_x = width - 110

        header_y = margin + row_height // 2 + 8
        cv2.putText(frame, "SETS", (sets_x, header_y), font, 0.5, grey, 1)
        cv2.putText(frame, "GAMES", (games_x, header_y), font, 0.5, grey, 1)
        cv2.putText(frame, "POINTS", (points_x, header_y), font, 0.5, grey, 1)

        leader = leading_side(state)

        for row, side in enumerate((HOME, AWAY), start=1):
            team = state.team(side)
            opponent = state.opponent(side)

            y1 = margin + row * row_height
            baseline = y1 + row_height // 2 + 10

            # background box
            overlay = frame.copy()
            cv2.rectangle(overlay, (margin, y1 + 2), (width - margin, y1 + row_height - 2), (0, 0, 0), -1)
            alpha = 0.6
            cv2.addWeighted(overlay, alpha, frame, 1 - alpha, 0, frame)

            if side == leader:
                cv2.rectangle(frame, (margin, y1 + 2), (margin + 4, y1 + row_height - 2), LEADER_BGR, -1)

            cv2.circle(frame, (margin + 20, y1 + row_height // 2), 10, hex_to_bgr(team.color), -1)
            cv2.putText(frame, team.name, (margin + 45, baseline), font, 0.8, white, 2)

            cv2.putText(frame, str(team.sets), (sets_x + 10, baseline), font, 0.9, white, 2)
            cv2.putText(frame, str(team.games), (games_x + 15, baseline), font, 0.9, white, 2)
            cv2.putText(
                frame,
                display_score(team.points, opponent.points),
                (points_x, baseline),
                font,
                0.7,
                white,
                2,
            )

        # If match finished
        if state.is_finished:
            cv2.putText(
                frame,
                f"Winner: {state.set_winner}",
                (margin + 10, header_y),
                font,
                0.7,
                (0, 255, 0),
                2,
            )
