import random

from exerkit.bst import Tree, main

DEMO = [6, 2, 3, 2, 5, 9, 12, 1]


def _build(values):
    tree = Tree()
    for v in values:
        tree.add(v)
    return tree


def test_empty_tree():
    tree = Tree()
    assert tree.sorted_elements() == []
    assert tree.pop_greatest() is None


def test_tree_with_initial_element():
    tree = Tree(6)
    assert tree.sorted_elements() == [6]
    assert tree.pop_greatest() == 6
    assert tree.sorted_elements() == []


def test_add_sorts_and_ignores_duplicates():
    tree = _build(DEMO)
    assert tree.sorted_elements() == sorted(set(DEMO))
    assert list(tree) == sorted(set(DEMO))


def test_demo_scenario():
    tree = _build(DEMO)
    assert tree.pop_greatest() == 12
    tree.remove(6)
    assert tree.sorted_elements() == sorted(set(DEMO) - {6, 12})


def test_pop_greatest_when_root_is_max_with_left_child():
    tree = _build([10, 5, 3, 7])
    assert tree.pop_greatest() == 10
    assert tree.sorted_elements() == [3, 5, 7]


def test_pop_greatest_drains_in_descending_order():
    values = random.Random(5).sample(range(1000), 60)
    tree = _build(values)
    drained = []
    while (value := tree.pop_greatest()) is not None:
        drained.append(value)
    assert drained == sorted(values, reverse=True)
    assert tree.sorted_elements() == []


def test_remove_missing_value_keeps_tree():
    tree = _build(DEMO)
    tree.remove(100)
    assert tree.sorted_elements() == sorted(set(DEMO))


def test_remove_root_with_two_children():
    tree = _build([6, 2, 9, 1, 3, 12])
    tree.remove(6)
    assert tree.sorted_elements() == [1, 2, 3, 9, 12]


def test_random_removals_keep_order():
    rng = random.Random(17)
    values = rng.sample(range(500), 80)
    tree = _build(values)
    remaining = set(values)
    for v in rng.sample(values, 40):
        tree.remove(v)
        remaining.discard(v)
        assert tree.sorted_elements() == sorted(remaining)


def test_strings_are_supported():
    words = ["pear", "apple", "fig", "apple"]
    tree = _build(words)
    assert tree.sorted_elements() == sorted(set(words))


def test_main_prints_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Maior elemento: 12" in out
    assert str(sorted(set(DEMO) - {6, 12})) in out