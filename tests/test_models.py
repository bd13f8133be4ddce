import pytest

from models import (
    Category,
    InputErrorReason,
    InvalidInputError,
    Municipality,
    Player,
    Question,
    Spot,
    parse_choice,
    parse_number,
)
from tests.conftest import make_municipality, make_question, make_spot


# ==== Question.evaluate ====
def test_correct_answer_is_one_based():
    q = make_question(correct_index=1)
    assert q.evaluate("2") is True
    assert q.evaluate("1") is False
    assert q.evaluate("3") is False


def test_answer_whitespace_is_ignored():
    assert make_question(0).evaluate("  1 \n") is True


def test_non_number_answer_raises_not_a_number():
    with pytest.raises(InvalidInputError) as exc:
        make_question().evaluate("abc")
    assert exc.value.reason is InputErrorReason.NOT_A_NUMBER


@pytest.mark.parametrize("raw", ["5", "0", "-1", "4"])
def test_out_of_range_answer(raw):
    with pytest.raises(InvalidInputError) as exc:
        make_question(options=("a", "b", "c")).evaluate(raw)
    assert exc.value.reason is InputErrorReason.OUT_OF_RANGE


def test_empty_answer_is_not_a_number():
    with pytest.raises(InvalidInputError) as exc:
        parse_choice("", 3)
    assert exc.value.reason is InputErrorReason.NOT_A_NUMBER


@pytest.mark.parametrize("raw", ["1_0", "1 0", "²", "+", "0x1", "1.0"])
def test_only_plain_digits_are_numbers(raw):
    with pytest.raises(InvalidInputError) as exc:
        parse_choice(raw, 20)
    assert exc.value.reason is InputErrorReason.NOT_A_NUMBER


def test_signed_numbers_parse():
    assert parse_number("+2") == 2
    assert parse_number(" -3 ") == -3
    assert parse_choice("+2", 3) == 2


def test_invalid_input_error_is_a_value_error():
    assert issubclass(InvalidInputError, ValueError)


def test_question_rejects_bad_correct_index():
    with pytest.raises(ValueError):
        Question("?", ["a", "b"], 2)
    with pytest.raises(ValueError):
        Question("?", ["a", "b"], -1)


def test_question_is_immutable():
    q = make_question()
    with pytest.raises(AttributeError):
        q.correct_index = 2
    assert isinstance(q.options, tuple)


# ==== Spot ====
def test_spot_needs_a_question():
    with pytest.raises(ValueError):
        Spot("Empty", "Nothing here.", Category.BEACH, [])


def test_spot_keeps_question_order():
    first, second = make_question(0), make_question(2)
    spot = make_spot(questions=[first, second])
    assert spot.questions == (first, second)


# ==== Municipality ====
def test_first_municipality_starts_unlocked():
    assert make_municipality(index=0, threshold=25).unlocked is True


def test_free_municipality_starts_unlocked():
    assert make_municipality(index=3, threshold=0).unlocked is True
    assert make_municipality(index=3, threshold=-5).unlocked is True


def test_other_municipalities_start_locked():
    assert make_municipality(index=1, threshold=10).unlocked is False


def test_municipality_needs_exactly_two_spots():
    with pytest.raises(ValueError):
        Municipality("Solo", 1, 10, [make_spot()])
    with pytest.raises(ValueError):
        Municipality("Trio", 1, 10, [make_spot(), make_spot(), make_spot()])


def test_unlock_is_permanent():
    m = make_municipality(index=1, threshold=10)
    assert m.can_unlock(9) is False
    assert m.can_unlock(10) is True
    m.unlock()
    assert m.unlocked is True
    assert m.can_unlock(100) is False


def test_municipality_str_shows_lock_and_requirement():
    m = make_municipality("Lemery", index=1, threshold=10)
    assert str(m) == "Lemery 🔒 (Req: 10 pts)"
    m.unlock()
    assert str(m) == "Lemery 🔓 (Req: 10 pts)"


# ==== Player ====
def test_new_player_defaults():
    p = Player("Juan")
    assert (p.hearts, p.points, p.is_alive) == (2, 0, True)


def test_add_points_ignores_non_positive():
    p = Player("Juan")
    p.add_points(5)
    p.add_points(0)
    p.add_points(-10)
    assert p.points == 5


def test_hearts_never_go_negative():
    p = Player("Juan")
    for _ in range(5):
        p.lose_heart()
    assert p.hearts == 0
    assert p.is_alive is False


def test_restore_heart_after_losing_all():
    p = Player("Juan")
    p.lose_heart()
    p.lose_heart()
    p.restore_heart()
    assert p.hearts == 1
    assert p.is_alive is True
    p.lose_heart()
    p.lose_heart()
    assert p.hearts == 0


def test_player_str():
    p = Player("Juan", hearts=1, points=15)
    assert str(p) == "Juan ❤️ x1  ✨ 15 pts"
