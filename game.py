# ============================
# GAME.PY - Lakbay Batangas
# One play session: travel -> spot -> quiz -> unlocks -> continue?
# ============================

import logging
from enum import Enum

from config import Config
from engine import QuizOutcome, UnlockEngine, conduct_quiz
from models import InvalidInputError, Player, parse_choice, parse_number

logger = logging.getLogger(__name__)

QUIT_CHOICE = 0
CONTINUE_ANSWERS = {"y", "yes"}


class GameState(Enum):
    SELECTING_MUNICIPALITY = "selecting_municipality"
    SELECTING_SPOT = "selecting_spot"
    RUNNING_QUIZ = "running_quiz"
    AWAITING_CONTINUE = "awaiting_continue"
    ELIMINATED = "eliminated"
    PLAYER_QUIT = "player_quit"


TERMINAL_STATES = {GameState.ELIMINATED, GameState.PLAYER_QUIT}


class GameController:
    """Drives a single session against a UI object (see ui.ConsoleUI).

    The controller only interprets the raw strings the UI hands back; all
    printing goes through the UI.
    """

    def __init__(self, municipalities, leaderboard, ui):
        self.municipalities = list(municipalities)
        self.leaderboard = leaderboard
        self.ui = ui
        self.unlocks = UnlockEngine(self.municipalities)
        self.player = None
        self.state = None
        self.municipality = None
        self.spot = None
        self.finalized = False

    @property
    def is_over(self) -> bool:
        return self.state in TERMINAL_STATES

    # ===============================================
    # Session Lifecycle
    # ===============================================
    def start(self, raw_name: str) -> Player:
        name = raw_name.strip() or Config.DEFAULT_PLAYER_NAME
        self.player = Player(name)
        logger.info("Session started for %s", name)
        self.ui.welcome(self.player)
        # First municipality (and any free ones) open before the first menu
        self.unlocks.refresh(self.player)
        self.state = GameState.SELECTING_MUNICIPALITY
        return self.player

    def run(self, raw_name: str) -> Player:
        """Play a whole session and commit it to the leaderboard."""
        self.start(raw_name)
        while not self.is_over:
            self.step()
        self.finalize()
        return self.player

    def step(self):
        if self.state is None:
            raise RuntimeError("Call start() before step().")
        if self.is_over:
            raise RuntimeError(f"Session already ended ({self.state.value}).")

        handler = {
            GameState.SELECTING_MUNICIPALITY: self._select_municipality,
            GameState.SELECTING_SPOT: self._select_spot,
            GameState.RUNNING_QUIZ: self._run_quiz,
            GameState.AWAITING_CONTINUE: self._confirm_continue,
        }[self.state]
        handler()
        return self.state

    def finalize(self):
        """Record the player on the leaderboard and show it. Once per session."""
        if self.finalized:
            raise RuntimeError("Session already finalized.")
        if not self.is_over:
            raise RuntimeError("Cannot finalize a session that is still running.")
        self.finalized = True

        if self.state is GameState.ELIMINATED:
            self.ui.game_over(self.player)
        else:
            self.ui.farewell()
        rank = self.leaderboard.insert(self.player.name, self.player.points)
        logger.info(
            "Session ended for %s: %s with %d pts (rank #%d)",
            self.player.name, self.state.value, self.player.points, rank,
        )
        self.ui.final_score(self.player)
        self.ui.show_leaderboard(self.leaderboard.render())

    # ===============================================
    # State Handlers
    # ===============================================
    def _select_municipality(self):
        self.ui.show_status(self.player)
        raw = self.ui.ask_municipality(self.municipalities)
        try:
            if parse_number(raw) == QUIT_CHOICE:
                logger.info("%s quit from the travel menu", self.player.name)
                self.state = GameState.PLAYER_QUIT
                return
            choice = parse_choice(raw, len(self.municipalities))
        except InvalidInputError as e:
            logger.debug("Bad municipality selection %r: %s", raw, e.reason.value)
            self.ui.invalid_selection(e)
            return

        selected = self.municipalities[choice - 1]
        if not selected.unlocked:
            self.ui.municipality_locked(selected)
            return

        logger.info("%s travels to %s", self.player.name, selected.name)
        self.municipality = selected
        self.state = GameState.SELECTING_SPOT

    def _select_spot(self):
        raw = self.ui.ask_spot(self.municipality)
        try:
            choice = parse_choice(raw, len(self.municipality.spots))
        except InvalidInputError as e:
            logger.debug("Bad spot selection %r: %s", raw, e.reason.value)
            self.ui.invalid_selection(e)
            return

        self.spot = self.municipality.spots[choice - 1]
        logger.info("%s visits %s", self.player.name, self.spot.name)
        self.state = GameState.RUNNING_QUIZ

    def _run_quiz(self):
        self.ui.enter_spot(self.spot)
        outcome = conduct_quiz(self.spot, self.player, self.ui.ask_answer, self.ui.answer_result)
        self.ui.quiz_finished(outcome, self.player)

        newly_unlocked = self.unlocks.refresh(self.player)
        if newly_unlocked:
            self.ui.unlocked(newly_unlocked)

        if outcome is QuizOutcome.PLAYER_ELIMINATED or not self.player.is_alive:
            self.state = GameState.ELIMINATED
        else:
            self.state = GameState.AWAITING_CONTINUE

    def _confirm_continue(self):
        answer = self.ui.ask_continue().strip().lower()
        if answer in CONTINUE_ANSWERS:
            self.state = GameState.SELECTING_MUNICIPALITY
        else:
            logger.info("%s stopped exploring", self.player.name)
            self.state = GameState.PLAYER_QUIT
