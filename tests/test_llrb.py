import random

import pytest

from docsync.llrb import LLRBTree

ARRAYS = [
    [0, 1, 2, 3, 4, 5, 6, 7, 8, 9],
    [8, 5, 7, 9, 1, 3, 6, 0, 4, 2],
    [7, 2, 0, 3, 1, 9, 8, 4, 6, 5],
    [2, 0, 3, 5, 8, 6, 4, 1, 9, 7],
    [8, 4, 7, 9, 2, 6, 0, 3, 1, 5],
    [7, 1, 5, 2, 8, 6, 3, 4, 0, 9],
    [9, 8, 7, 6, 5, 4, 3, 2, 1, 0],
]


@pytest.mark.parametrize("array", ARRAYS)
def test_keeping_order(array):
    tree = LLRBTree()
    for value in array:
        tree.put(value, value)
    assert str(tree) == "0,1,2,3,4,5,6,7,8,9"

    tree.remove(8)
    assert str(tree) == "0,1,2,3,4,5,6,7,9"

    tree.remove(2)
    assert str(tree) == "0,1,3,4,5,6,7,9"

    tree.remove(5)
    assert str(tree) == "0,1,3,4,6,7,9"


def test_put_returns_value_and_overwrites():
    tree = LLRBTree()
    assert tree.put(1, "a") == "a"
    tree.put(1, "b")
    assert len(tree) == 1
    assert str(tree) == "b"


def test_len_and_iteration():
    tree = LLRBTree()
    for key in [5, 3, 8, 1]:
        tree.put(key, str(key))
    assert len(tree) == 4
    assert list(tree) == [1, 3, 5, 8]
    tree.remove(3)
    assert len(tree) == 3
    assert list(tree) == [1, 5, 8]


def test_remove_missing_key_raises():
    tree = LLRBTree()
    tree.put(1, 1)
    with pytest.raises(KeyError):
        tree.remove(2)
    assert len(tree) == 1


def test_remove_from_empty_raises():
    with pytest.raises(KeyError):
        LLRBTree().remove(0)


def test_remove_last_key_empties_tree():
    tree = LLRBTree()
    tree.put(1, 1)
    tree.remove(1)
    assert len(tree) == 0
    assert str(tree) == ""


def test_floor():
    tree = LLRBTree()
    for key in [0, 2, 4, 6, 8]:
        tree.put(key, f"v{key}")
    assert tree.floor(5) == (4, "v4")
    assert tree.floor(4) == (4, "v4")
    assert tree.floor(100) == (8, "v8")
    assert tree.floor(1) == (0, "v0")
    assert tree.floor(-1) is None


def test_floor_empty_tree():
    assert LLRBTree().floor(3) is None


def test_random_operations_match_sorted_reference():
    rng = random.Random(1234)
    tree = LLRBTree()
    reference = {}
    for _ in range(500):
        key = rng.randrange(100)
        if key in reference and rng.random() < 0.5:
            tree.remove(key)
            del reference[key]
        else:
            tree.put(key, key * 10)
            reference[key] = key * 10
        assert len(tree) == len(reference)
    assert list(tree) == sorted(reference)
    assert str(tree) == ",".join(str(reference[k]) for k in sorted(reference))