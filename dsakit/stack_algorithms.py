"""Algorithms built around a stack."""

from __future__ import annotations

from collections.abc import Iterator

_MAX_DEPTH = 100

_OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
}


def _divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


_OPERATORS["/"] = _divide


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Characters other than digits and ``+ - * /`` are ignored. Division
    truncates toward zero. Raises ValueError on stack underflow or
    overflow and ZeroDivisionError on division by zero.
    """
    stack: list[int] = []

    def push(item: int) -> None:
        if len(stack) >= _MAX_DEPTH:
            raise ValueError("stack overflow")
        stack.append(item)

    def pop() -> int:
        if not stack:
            raise ValueError("stack underflow")
        return stack.pop()

    for symbol in expression:
        if "0" <= symbol <= "9":
            push(int(symbol))
        elif symbol in _OPERATORS:
            right = pop()
            left = pop()
            push(_OPERATORS[symbol](left, right))
    return pop()


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    stack = list(text)
    return "".join(stack.pop() for _ in range(len(stack)))


def hanoi_moves(
    count: int,
    source: str = "A",
    auxiliary: str = "B",
    destination: str = "C",
) -> Iterator[tuple[str, str]]:
    """Yield the ``(from, to)`` moves that solve the Tower of Hanoi."""
    if count < 0:
        raise ValueError("disc count must not be negative")

    def solve(n: int, src: str, aux: str, dst: str) -> Iterator[tuple[str, str]]:
        if n == 0:
            return
        yield from solve(n - 1, src, dst, aux)
        yield src, dst
        yield from solve(n - 1, aux, src, dst)

    return solve(count, source, auxiliary, destination)