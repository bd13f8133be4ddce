# ============================
# MODELS.PY - Lakbay Batangas
# Questions, spots, municipalities and the player
# ============================

from dataclasses import dataclass, field
from enum import Enum

# ==== Player Defaults ====
STARTING_HEARTS = 2
STARTING_POINTS = 0


# ===============================================
#                 Input Errors
# ===============================================
class InputErrorReason(Enum):
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


class InvalidInputError(ValueError):
    """A numeric choice that could not be used (menu selection or quiz answer)."""

    def __init__(self, reason: InputErrorReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


def parse_number(raw: str) -> int:
    """Plain signed whole number only (no "1_0", " 1 0", or non-ASCII digits)."""
    text = raw.strip()
    digits = text[1:] if text.startswith(("+", "-")) else text
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidInputError(InputErrorReason.NOT_A_NUMBER, "Invalid input; expected a number.")
    return int(text)


def parse_choice(raw: str, count: int) -> int:
    """Parse a 1-based menu/answer number and check it is within 1..count."""
    value = parse_number(raw)
    if value < 1 or value > count:
        raise InvalidInputError(InputErrorReason.OUT_OF_RANGE, "Choice out of range.")
    return value


# ===============================================
#               Places & Questions
# ===============================================
class Category(Enum):
    BEACH = "Beach"
    MOUNTAIN = "Mountain"
    HERITAGE_SITE = "Heritage Site"


@dataclass(frozen=True)
class Question:
    prompt: str
    options: tuple
    correct_index: int  # 0-based

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(self.options))
        if not self.options:
            raise ValueError(f"Question {self.prompt!r} has no options.")
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"Question {self.prompt!r}: correct index {self.correct_index} "
                f"is outside 0..{len(self.options) - 1}."
            )

    def evaluate(self, raw: str) -> bool:
        """True if the 1-based answer in `raw` is the correct option.

        Raises InvalidInputError for non-numbers and numbers outside the options.
        """
        choice = parse_choice(raw, len(self.options))
        return (choice - 1) == self.correct_index


@dataclass(frozen=True)
class Spot:
    name: str
    description: str
    category: Category
    questions: tuple

    def __post_init__(self):
        object.__setattr__(self, "questions", tuple(self.questions))
        if not self.questions:
            raise ValueError(f"Spot {self.name!r} needs at least one question.")


@dataclass
class Municipality:
    name: str
    order_index: int
    unlock_threshold: int
    spots: tuple
    unlocked: bool = field(init=False)

    SPOT_COUNT = 2

    def __post_init__(self):
        self.spots = tuple(self.spots)
        if len(self.spots) != self.SPOT_COUNT:
            raise ValueError(
                f"Municipality {self.name!r} must have exactly {self.SPOT_COUNT} spots, "
                f"got {len(self.spots)}."
            )
        # First stop on the route (or a free one) is open from the start
        self.unlocked = self.order_index == 0 or self.unlock_threshold <= 0

    def can_unlock(self, points: int) -> bool:
        return not self.unlocked and points >= self.unlock_threshold

    def unlock(self):
        """Open the municipality. Never closes again."""
        self.unlocked = True

    def __str__(self):
        icon = "🔓" if self.unlocked else "🔒"
        return f"{self.name} {icon} (Req: {self.unlock_threshold} pts)"


# ===============================================
#                    Player
# ===============================================
@dataclass
class Player:
    name: str
    hearts: int = STARTING_HEARTS
    points: int = STARTING_POINTS

    @property
    def is_alive(self) -> bool:
        return self.hearts > 0

    def add_points(self, amount: int):
        """Add points; zero or negative amounts are ignored."""
        if amount > 0:
            self.points += amount

    def lose_heart(self):
        if self.hearts > 0:
            self.hearts -= 1

    def restore_heart(self):
        self.hearts += 1

    def __str__(self):
        return f"{self.name} ❤️ x{self.hearts}  ✨ {self.points} pts"
