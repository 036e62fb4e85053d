import pytest

from dslab.stack import Stack


def filled(*values):
    stack = Stack()
    for value in values:
        stack.push(value)
    return stack


def test_pop_returns_values_last_in_first_out():
    stack = filled(1, 2, 3)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = filled(10, 20)
    assert stack.peek() == 20
    assert len(stack) == 2


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_len_counts_pushes_and_pops():
    stack = filled(*range(7))
    stack.pop()
    assert len(stack) == 6


def test_clear_empties_stack():
    stack = filled(4, 5, 6)
    stack.clear()
    assert stack.is_empty()
    assert len(stack) == 0


def test_iteration_runs_top_down():
    values = [3, 1, 4, 1, 5]
    assert list(filled(*values)) == values[::-1]


def test_str_lists_values_top_down():
    assert str(filled(1, 2, 3)) == "3 2 1"


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty()
    assert str(stack) == ""