# ============================
# UI.PY - Lakbay Batangas
# Everything the player sees and types
# ============================

import time

from config import Config
from engine import POINTS_PER_CORRECT, QuizOutcome
from models import STARTING_HEARTS, Category

LINE = "=" * 40
THIN_LINE = "-" * 40

# ==== Category Framing (icon, arrival line) ====
CATEGORY_FRAMES = {
    Category.BEACH: ("🏖️", "Welcome to {name} - a beautiful beach spot!"),
    Category.MOUNTAIN: ("🏔️", "You're at {name} - a scenic mountain trail!"),
    Category.HERITAGE_SITE: ("🏛️", "Visiting {name} - a cultural heritage site."),
}


def type_text(line, char_delay=0.15, write=print):
    """Types text one character at a time (all at once when char_delay is 0)."""
    if char_delay <= 0:
        write(line)
        return
    for ch in line:
        write(ch, end="", flush=True)
        time.sleep(char_delay)
    write("", flush=True)


class ConsoleUI:
    """Terminal front end: prints menus and hands raw typed lines back to the game."""

    def __init__(self, read=input, write=print, char_delay=None):
        self.read = read
        self.write = write
        self.char_delay = Config.TEXT_DELAY if char_delay is None else char_delay

    def ask(self, prompt):
        return self.read(prompt).strip()

    # ===============================================
    # Start Menu & Banner
    # ===============================================
    def ask_start_menu(self):
        self.write("\n===== LAKBAY BATANGAS =====")
        self.write("[1] New Game")
        self.write("[2] Leaderboard")
        self.write("[3] Quit")
        return self.ask("> ").lower()

    def banner(self):
        self.write(LINE)
        type_text("⭐ Welcome to LAKBAY BATANGAS ⭐", char_delay=self.char_delay, write=self.write)
        self.write("Cultural Exploration Game - Answer quizzes, earn points, unlock places!")
        self.write(f"Hearts: {STARTING_HEARTS} | Wrong answer = -1 heart | Correct = +{POINTS_PER_CORRECT} pts")
        self.write(LINE + "\n")

    def ask_name(self):
        return self.ask("Enter your name, traveler: ")

    def welcome(self, player):
        self.write(f"\nWelcome, {player.name}! 🗺️  Ready to explore Lakbay Batangas.")

    def invalid_choice(self):
        self.write("Invalid choice.")

    def goodbye(self):
        self.write("Goodbye.")

    # ===============================================
    # Travel: Status, Municipalities, Spots
    # ===============================================
    def show_status(self, player):
        self.write("\n" + LINE)
        self.write(f"Player: {player}")
        self.write(LINE)

    def ask_municipality(self, municipalities):
        self.write("Choose a municipality to visit (or 0 to quit):")
        for i, m in enumerate(municipalities, start=1):
            self.write(f"  {i}. {m}")
        return self.ask("Selection: ")

    def municipality_locked(self, municipality):
        self.write(
            "🚫 This municipality is still locked. Earn more points to unlock it! "
            f"Required: {municipality.unlock_threshold} pts."
        )
        self.write(
            "Tip: Complete other spots and answer questions correctly "
            f"(+{POINTS_PER_CORRECT} pts each)."
        )

    def invalid_selection(self, error):
        self.write(f"⚠️ {error.message}")

    def ask_spot(self, municipality):
        self.write(f"\nYou arrived at: {municipality.name} - choose a tourist spot:")
        for i, spot in enumerate(municipality.spots, start=1):
            icon, _ = CATEGORY_FRAMES[spot.category]
            self.write(f"  {i}. {icon}  {spot.name}")
        return self.ask(f"Selection (1-{len(municipality.spots)}): ")

    def unlocked(self, municipalities):
        for m in municipalities:
            self.write(f"🔓 Municipality unlocked: {m.name} (requires {m.unlock_threshold} pts).")

    # ===============================================
    # Quiz
    # ===============================================
    def enter_spot(self, spot):
        icon, arrival = CATEGORY_FRAMES[spot.category]
        self.write(f"{icon}  " + arrival.format(name=spot.name))
        self.write(spot.description)
        count = len(spot.questions)
        self.write(THIN_LINE)
        self.write(f" Quiz: {spot.name} ({count} question{'s' if count != 1 else ''})")
        self.write(THIN_LINE)

    def ask_answer(self, question):
        self.write("\n" + question.prompt)
        for i, option in enumerate(question.options, start=1):
            self.write(f"  {i}. {option}")
        return self.ask("Your answer (enter number): ")

    def answer_result(self, result):
        if result.correct:
            self.write(f"✅ Correct! +{POINTS_PER_CORRECT} points\n")
        elif result.error is not None:
            self.write(f"⚠️ {result.error.message} Counting as wrong answer.")
        else:
            self.write("❌ Wrong. -1 heart\n")

    def quiz_finished(self, outcome, player):
        if outcome is QuizOutcome.PLAYER_ELIMINATED:
            self.write("💔 You've lost all hearts!")
            return
        self.write(f"Spot complete! Current points: {player.points} | Hearts: {player.hearts}")
        self.write(THIN_LINE + "\n")

    def ask_continue(self):
        return self.ask("Continue exploring? (y/n): ").lower()

    # ===============================================
    # Endings & Leaderboard
    # ===============================================
    def game_over(self, player):
        self.write(f"\nGAME OVER 💀 - {player.name} has no hearts left.")

    def farewell(self):
        self.write("Thanks for visiting Lakbay Batangas! Safe travels.")

    def final_score(self, player):
        self.write(f"\nFinal Score: {player.points} pts")

    def show_leaderboard(self, rows):
        self.write("\n" + LINE)
        self.write("🏆 Leaderboard - Lakbay Batangas")
        self.write(LINE)
        if not rows:
            self.write("(No records yet.)")
        for rank, name, points in rows:
            self.write(f" {rank:2d}. {name} - {points} pts")
        self.write(LINE + "\n")

    def thanks(self):
        self.write("Thank you for playing Lakbay Batangas! 🌴")
