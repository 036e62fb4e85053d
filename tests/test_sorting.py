import io
import random

import pytest

from dslab.sorting import merge, merge_sort, main


@pytest.mark.parametrize(
    "values",
    [[], [1], [2, 1], [5, 3, 9, 1, 3, 7], [-4, 0, -4, 12, 8], list(range(10, 0, -1))],
)
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


def test_merge_sort_random_lists():
    rng = random.Random(3)
    for _ in range(50):
        data = [rng.randrange(-50, 50) for _ in range(rng.randrange(30))]
        assert merge_sort(data) == sorted(data)


def test_merge_sort_leaves_input_alone():
    data = [3, 1, 2]
    merge_sort(data)
    assert data == [3, 1, 2]


def test_merge_of_sorted_lists():
    left, right = [1, 4, 9], [2, 4, 10, 11]
    assert merge(left, right) == sorted(left + right)


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([3], []) == [3]


def test_merge_is_stable():
    class Item:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __le__(self, other):
            return self.key <= other.key

    result = merge([Item(1, "left")], [Item(1, "right")])
    assert [item.tag for item in result] == ["left", "right"]


def test_main_with_arguments(capsys):
    assert main(["5", "2", "8"]) == 0
    out = capsys.readouterr().out
    assert "Original array: 5 2 8" in out
    assert "Sorted array: 2 5 8" in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n9 7 8\n"))
    assert main([]) == 0
    assert "Sorted array: 7 8 9" in capsys.readouterr().out


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n1 2\n"))
    assert main([]) == 1