import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit import stacks


def test_linked_stack_push_pop_order():
    stack = stacks.LinkedStack()
    for value in (10, 20, 30):
        stack.push(value)
    assert list(stack) == [30, 20, 10]
    assert stack.pop() == 30
    assert list(stack) == [20, 10]
    assert len(stack) == 2


def test_linked_stack_underflow():
    with pytest.raises(stacks.StackUnderflowError):
        stacks.LinkedStack().pop()


@given(values=st.lists(st.integers()))
def test_linked_stack_reverses(values):
    stack = stacks.LinkedStack(values)
    assert [stack.pop() for _ in range(len(values))] == values[::-1]
    assert len(stack) == 0


def test_array_stack_fills_and_overflows():
    stack = stacks.ArrayStack(3)
    assert stack.is_empty()
    for _ in range(3):
        stack.push(10)
    assert stack.is_full()
    assert stack.peek() == 10
    with pytest.raises(stacks.StackOverflowError):
        stack.push(10)
    assert stack.pop() == 10
    assert list(stack) == [10, 10]
    assert not stack.is_full()


def test_array_stack_empty_errors():
    stack = stacks.ArrayStack(2)
    with pytest.raises(stacks.StackUnderflowError):
        stack.pop()
    with pytest.raises(stacks.StackUnderflowError):
        stack.peek()


def test_array_stack_negative_capacity():
    with pytest.raises(ValueError):
        stacks.ArrayStack(-1)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("([]{})", True),
        ("{[a+b]*(c-d)}", True),
        ("(]", False),
        ("(()", False),
        (")(", False),
        ("", True),
    ],
)
def test_is_balanced(expression, expected):
    assert stacks.is_balanced(expression) is expected


def test_precedence_levels():
    assert stacks.precedence("+") == stacks.precedence("-") == 1
    assert stacks.precedence("*") == stacks.precedence("/") == 2
    assert stacks.precedence("(") == 0


def test_infix_to_postfix_examples():
    assert stacks.infix_to_postfix("a+b*c") == "abc*+"
    assert stacks.infix_to_postfix("a*b+c") == "ab*c+"


@given(
    operands=st.lists(st.sampled_from("abcxyz0123"), min_size=1, max_size=8),
    data=st.data(),
)
def test_infix_to_postfix_keeps_operands_and_operators(operands, data):
    ops = data.draw(st.lists(st.sampled_from("+-*/"), min_size=len(operands) - 1, max_size=len(operands) - 1))
    expression = operands[0] + "".join(op + operand for op, operand in zip(ops, operands[1:]))
    result = stacks.infix_to_postfix(expression)
    assert sorted(result) == sorted(expression)
    assert [c for c in result if c.isalnum()] == operands