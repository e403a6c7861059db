import pytest

from numclass_app.core.services.classification_board import POOL, ClassificationBoard


def make_board():
    return ClassificationBoard(["1", "2", "3"], ["even", "odd"])


def test_new_board_holds_everything_in_pool():
    board = make_board()
    assert board.pool() == ["1", "2", "3"]
    assert board.assignments() == {}
    assert board.assigned_count() == 0
    assert board.locate("2") == POOL


def test_place_moves_identifier_out_of_pool():
    board = make_board()
    board.place("2", "even")
    assert board.pool() == ["1", "3"]
    assert board.bucket("even") == ["2"]
    assert board.assignments() == {"even": ["2"]}
    assert board.assigned_count() == 1


def test_place_between_buckets_keeps_single_owner():
    board = make_board()
    board.place("1", "even")
    board.place("1", "odd")
    assert board.bucket("even") == []
    assert board.bucket("odd") == ["1"]
    assert board.locate("1") == "odd"


def test_place_appends_to_end_of_bucket():
    board = make_board()
    board.place("3", "odd")
    board.place("1", "odd")
    assert board.bucket("odd") == ["3", "1"]


def test_unassign_returns_identifier_to_pool_end():
    board = make_board()
    board.place("1", "odd")
    assert board.unassign("1", "odd") is True
    assert board.pool() == ["2", "3", "1"]
    assert board.bucket("odd") == []


def test_unassign_from_wrong_bucket_is_noop():
    board = make_board()
    board.place("1", "odd")
    assert board.unassign("1", "even") is False
    assert board.unassign("2", "even") is False
    assert board.bucket("odd") == ["1"]
    assert board.pool() == ["2", "3"]


def test_move_identifier_rejects_wrong_source():
    board = make_board()
    with pytest.raises(ValueError):
        board.move_identifier("1", "even", "odd")


def test_move_identifier_rejects_unknown_container():
    board = make_board()
    with pytest.raises(KeyError):
        board.move_identifier("1", POOL, "prime")


def test_unknown_category_is_rejected():
    board = make_board()
    with pytest.raises(KeyError):
        board.place("1", "prime")
    with pytest.raises(KeyError):
        board.bucket(POOL)


def test_duplicate_identifiers_rejected():
    with pytest.raises(ValueError):
        ClassificationBoard(["1", "1"], ["even"])


def test_reserved_pool_key_rejected_as_category():
    with pytest.raises(ValueError):
        ClassificationBoard(["1"], [POOL])


def test_partition_holds_after_many_moves():
    board = ClassificationBoard([str(n) for n in range(10)], ["a", "b", "c"])
    for step in range(30):
        identifier = str(step % 10)
        board.place(identifier, "abc"[step % 3])
        if step % 4 == 0:
            board.unassign(identifier, board.locate(identifier))
        board.check_invariant()
        total = len(board.pool()) + sum(len(items) for items in board.assignments().values())
        assert total == 10
