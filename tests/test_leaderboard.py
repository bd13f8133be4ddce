from leaderboard import Leaderboard, LeaderboardEntry


def test_descending_order():
    board = Leaderboard()
    for name, pts in [("A", 50), ("B", 30), ("C", 70)]:
        board.insert(name, pts)
    assert [pts for _, _, pts in board.render()] == [70, 50, 30]


def test_newer_tie_ranks_above_older():
    board = Leaderboard()
    board.insert("first", 40)
    board.insert("second", 40)
    assert board.render() == [(1, "second", 40), (2, "first", 40)]


def test_tie_goes_above_older_equals_but_below_higher():
    board = Leaderboard()
    board.insert("top", 60)
    board.insert("old", 20)
    board.insert("low", 5)
    rank = board.insert("new", 20)
    assert rank == 2
    assert [name for _, name, _ in board.render()] == ["top", "new", "old", "low"]


def test_insert_returns_rank():
    board = Leaderboard()
    assert board.insert("A", 10) == 1
    assert board.insert("B", 5) == 2
    assert board.insert("C", 15) == 1


def test_ranks_are_contiguous_and_names_repeat():
    board = Leaderboard()
    board.insert("Juan", 10)
    board.insert("Juan", 25)
    board.insert("Maria", 0)
    assert board.render() == [(1, "Juan", 25), (2, "Juan", 10), (3, "Maria", 0)]
    assert len(board) == 3


def test_empty_board():
    board = Leaderboard()
    assert board.render() == []
    assert len(board) == 0


def test_iterates_entries():
    board = Leaderboard()
    board.insert("Ana", 5)
    assert list(board) == [LeaderboardEntry("Ana", 5)]
