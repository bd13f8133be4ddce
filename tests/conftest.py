import pytest

from leaderboard import Leaderboard
from models import Category, Municipality, Player, Question, Spot
from ui import ConsoleUI


def make_question(correct_index=0, options=("Yes", "No", "Maybe")):
    return Question("Pick one", options, correct_index)


def make_spot(name="Spot", questions=None, category=Category.BEACH):
    if questions is None:
        questions = [make_question(0), make_question(1)]
    return Spot(name, f"About {name}.", category, questions)


def make_municipality(name="Town", index=0, threshold=0, spots=None):
    if spots is None:
        spots = [make_spot(f"{name} A"), make_spot(f"{name} B", category=Category.MOUNTAIN)]
    return Municipality(name, index, threshold, spots)


class ScriptedUI(ConsoleUI):
    """ConsoleUI fed from a list of answers, collecting everything it prints."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.output = []
        super().__init__(read=self._read, write=self.output.append, char_delay=0)

    def _read(self, prompt):
        self.output.append(prompt)
        if not self.answers:
            raise AssertionError(f"Ran out of scripted input at prompt {prompt!r}")
        return self.answers.pop(0)

    @property
    def text(self):
        return "\n".join(self.output)


@pytest.fixture
def player():
    return Player("Tester")


@pytest.fixture
def spot():
    return make_spot()


@pytest.fixture
def towns():
    # Two-question spots; answers 1 then 2 are correct at every spot
    return [
        make_municipality("Alpha", 0, 0),
        make_municipality("Bravo", 1, 10),
        make_municipality("Charlie", 2, 30),
    ]


@pytest.fixture
def leaderboard():
    return Leaderboard()
