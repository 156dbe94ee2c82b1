import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.bst import BinarySearchTree, from_values

VALUES = [50, 20, 70, 10, 30, 60, 80, 25]


def test_inorder_is_sorted():
    tree = BinarySearchTree(VALUES)
    assert tree.inorder() == sorted(VALUES)
    assert list(tree) == sorted(VALUES)
    assert len(tree) == len(VALUES)


def test_from_values_stops_at_sentinel():
    tree = from_values([5, 3, -1, 8])
    assert tree.inorder() == [3, 5]
    assert 8 not in tree


def test_root_is_first_inserted():
    tree = BinarySearchTree(VALUES)
    assert tree.preorder()[0] == VALUES[0]
    assert tree.postorder()[-1] == VALUES[0]
    assert tree.level_order()[0] == [VALUES[0]]


def test_min_and_max():
    tree = BinarySearchTree(VALUES)
    assert tree.min_value() == min(VALUES)
    assert tree.max_value() == max(VALUES)


def test_empty_tree_extremes_raise():
    tree = BinarySearchTree()
    with pytest.raises(ValueError):
        tree.min_value()
    with pytest.raises(ValueError):
        tree.max_value()


@pytest.mark.parametrize("victim", [10, 30, 20, 50, 80, 25])
def test_delete_keeps_order(victim):
    tree = BinarySearchTree(VALUES)
    assert tree.delete(victim) is True
    expected = sorted(VALUES)
    expected.remove(victim)
    assert tree.inorder() == expected
    assert victim not in tree
    assert len(tree) == len(VALUES) - 1


def test_delete_absent_value():
    tree = BinarySearchTree(VALUES)
    assert tree.delete(999) is False
    assert tree.inorder() == sorted(VALUES)


def test_delete_only_node():
    tree = BinarySearchTree([7])
    assert tree.delete(7) is True
    assert tree.inorder() == []
    assert tree.level_order() == []


def test_duplicates_are_kept():
    tree = BinarySearchTree([5, 5, 3])
    assert tree.inorder() == [3, 5, 5]
    tree.delete(5)
    assert tree.inorder() == [3, 5]


def test_contains():
    tree = BinarySearchTree(VALUES)
    assert all(v in tree for v in VALUES)
    assert 0 not in tree


@given(st.lists(st.integers(-100, 100), max_size=80), st.data())
def test_random_inserts_and_deletes(values, data):
    tree = BinarySearchTree(values)
    remaining = sorted(values)
    assert tree.inorder() == remaining
    victims = data.draw(st.lists(st.integers(-100, 100), max_size=30))
    for victim in victims:
        removed = tree.delete(victim)
        assert removed == (victim in remaining)
        if removed:
            remaining.remove(victim)
        assert tree.inorder() == remaining
    assert len(tree) == len(remaining)
    flat = [v for level in tree.level_order() for v in level]
    assert sorted(flat) == remaining