import pytest

from shotter.leaderboard import LeaderBoard


def test_entries_sorted_descending():
    board = LeaderBoard()
    for score, name in [(30, "carol"), (50, "alice"), (10, "dave"), (40, "bob")]:
        board.insert(score, name)
    scores = [entry.score for entry in board]
    assert scores == sorted(scores, reverse=True)
    assert [entry.name for entry in board] == ["alice", "bob", "carol", "dave"]


def test_equal_scores_keep_arrival_order():
    board = LeaderBoard()
    board.insert(20, "first")
    board.insert(20, "second")
    board.insert(20, "third")
    assert [entry.name for entry in board] == ["first", "second", "third"]


def test_insert_trims_to_capacity():
    board = LeaderBoard(capacity=3)
    for score in range(10):
        board.insert(score, f"p{score}")
    assert len(board) == 3
    assert [entry.score for entry in board] == [9, 8, 7]


def test_low_score_dropped_when_full():
    board = LeaderBoard(capacity=2)
    board.insert(100, "high")
    board.insert(90, "mid")
    board.insert(5, "low")
    assert [entry.name for entry in board] == ["high", "mid"]


def test_default_capacity_is_eight():
    board = LeaderBoard()
    for score in range(20):
        board.insert(score, "x")
    assert len(board) == 8


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LeaderBoard(capacity=-1)


def test_save_format(tmp_path):
    board = LeaderBoard()
    board.insert(10, "alice")
    board.insert(25, "bob")
    path = tmp_path / "save.dat"
    board.save(path)
    assert path.read_text(encoding="utf-8") == "25 bob\n10 alice\n"


def test_save_load_round_trip(tmp_path):
    board = LeaderBoard()
    for score, name in [(10, "alice"), (25, "匿名玩家"), (25, "carol"), (3, "dave")]:
        board.insert(score, name)
    path = tmp_path / "save.dat"
    board.save(path)
    restored = LeaderBoard()
    restored.load(path)
    assert list(restored) == list(board)


def test_load_replaces_existing_entries(tmp_path):
    path = tmp_path / "save.dat"
    path.write_text("7 zed\n", encoding="utf-8")
    board = LeaderBoard()
    board.insert(99, "old")
    board.load(path)
    assert [(e.score, e.name) for e in board] == [(7, "zed")]


def test_load_sorts_unsorted_file(tmp_path):
    path = tmp_path / "save.dat"
    path.write_text("1 a\n3 b\n2 c\n", encoding="utf-8")
    board = LeaderBoard()
    board.load(path)
    assert [e.name for e in board] == ["b", "c", "a"]


def test_load_does_not_trim(tmp_path):
    path = tmp_path / "save.dat"
    path.write_text("".join(f"{n} p{n}\n" for n in range(12)), encoding="utf-8")
    board = LeaderBoard(capacity=8)
    board.load(path)
    assert len(board) == 12


def test_load_stops_at_malformed_line(tmp_path):
    path = tmp_path / "save.dat"
    path.write_text("5 alice\nbad bob\n9 carol\n", encoding="utf-8")
    board = LeaderBoard()
    board.load(path)
    assert [(e.score, e.name) for e in board] == [(5, "alice")]


def test_load_ignores_dangling_score(tmp_path):
    path = tmp_path / "save.dat"
    path.write_text("5 alice\n8", encoding="utf-8")
    board = LeaderBoard()
    board.load(path)
    assert [e.name for e in board] == ["alice"]


def test_load_missing_file_keeps_entries(tmp_path):
    board = LeaderBoard()
    board.insert(42, "kept")
    with pytest.raises(FileNotFoundError):
        board.load(tmp_path / "missing.dat")
    assert [e.name for e in board] == ["kept"]


def test_iteration_is_a_snapshot():
    board = LeaderBoard()
    board.insert(1, "a")
    entries = iter(board)
    board.insert(2, "b")
    assert [e.name for e in entries] == ["a"]