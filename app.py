# ============================
# APP.PY - Lakbay Batangas
# ============================

import logging
import sys

from config import Config
from game import GameController
from leaderboard import Leaderboard
from map import build_municipalities
from ui import ConsoleUI

logger = logging.getLogger(__name__)


# ===============================================
# Logging
# ===============================================
def setup_logging(level=None, log_file=None):
    """Log to a file only; the terminal belongs to the game."""
    level = level or Config.LOG_LEVEL
    log_file = Config.LOG_FILE if log_file is None else log_file
    handlers = [logging.FileHandler(log_file, encoding="utf-8")] if log_file else [logging.NullHandler()]
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        handlers=handlers,
    )


# ===============================================
# Sessions
# ===============================================
def new_game(ui, leaderboard):
    """One full session: banner, name, travel loop, leaderboard."""
    ui.banner()
    controller = GameController(build_municipalities(), leaderboard, ui)
    player = controller.run(ui.ask_name())
    ui.thanks()
    return player


def start_menu(ui, leaderboard):
    while True:
        choice = ui.ask_start_menu()
        if choice == "1":
            new_game(ui, leaderboard)
        elif choice == "2":
            ui.show_leaderboard(leaderboard.render())
        elif choice in ("3", "q", "quit"):
            ui.goodbye()
            return
        else:
            ui.invalid_choice()


# ===============================================
# Entry
# ===============================================
def main():
    setup_logging()
    logger.info("Lakbay Batangas starting")
    try:
        start_menu(ConsoleUI(), Leaderboard())
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye.")
    logger.info("Lakbay Batangas closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
