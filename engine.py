# ============================
# ENGINE.PY - Lakbay Batangas
# Quiz resolution and municipality unlocks
# ============================

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from models import InvalidInputError, Player, Question, Spot

logger = logging.getLogger(__name__)

POINTS_PER_CORRECT = 5


class QuizOutcome(Enum):
    COMPLETED = "completed"
    PLAYER_ELIMINATED = "player_eliminated"


@dataclass(frozen=True)
class AnswerResult:
    """How one question was scored, plus the player's totals afterwards."""

    question: Question
    number: int  # 1-based position within the spot
    correct: bool
    error: Optional[InvalidInputError]
    hearts: int
    points: int


# ===============================================
#                Quiz Resolution
# ===============================================
def conduct_quiz(
    spot: Spot,
    player: Player,
    ask: Callable[[Question], str],
    notify: Optional[Callable[[AnswerResult], None]] = None,
) -> QuizOutcome:
    """Run every question of `spot` in order against `player`.

    `ask` returns the raw answer text for a question. Invalid answers are
    scored as wrong once and never asked again. The quiz stops as soon as
    the player's last heart is gone.
    """
    for number, question in enumerate(spot.questions, start=1):
        error = None
        try:
            correct = question.evaluate(ask(question))
        except InvalidInputError as e:
            correct = False
            error = e

        if correct:
            player.add_points(POINTS_PER_CORRECT)
        else:
            player.lose_heart()

        logger.info(
            "%s answered %s Q%d: %s (hearts=%d, points=%d)",
            player.name, spot.name, number,
            "correct" if correct else ("invalid" if error else "wrong"),
            player.hearts, player.points,
        )
        if notify is not None:
            notify(AnswerResult(question, number, correct, error, player.hearts, player.points))

        if not correct and player.hearts == 0:
            logger.info("%s eliminated at %s", player.name, spot.name)
            return QuizOutcome.PLAYER_ELIMINATED

    return QuizOutcome.COMPLETED


# ===============================================
#                Unlock Engine
# ===============================================
class UnlockEngine:
    """Opens municipalities once the player's points reach their threshold."""

    def __init__(self, municipalities):
        self.municipalities = list(municipalities)

    def refresh(self, player: Player) -> list:
        """Unlock what the player has earned; returns only the newly unlocked ones."""
        newly_unlocked = []
        for m in self.municipalities:
            if m.can_unlock(player.points):
                m.unlock()
                newly_unlocked.append(m)
                logger.info(
                    "Unlocked %s for %s (%d >= %d pts)",
                    m.name, player.name, player.points, m.unlock_threshold,
                )
        return newly_unlocked
