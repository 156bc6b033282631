"""Error types raised by the calculator core.

Two failure kinds cover the whole core:
- `InvalidNumberError`: a single token is not an integer literal.
- `InvalidExpressionError`: the input as a whole cannot be computed.

Both derive from `ValueError` so callers that only care about "bad input"
can catch the builtin.
"""

from __future__ import annotations


class CalculatorError(ValueError):
    """Base class for every error raised by the core."""


class InvalidNumberError(CalculatorError):
    """A token could not be parsed as an integer."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"invalid number: {token!r}")


class InvalidExpressionError(CalculatorError):
    """The input could not be classified or one of its tokens failed."""

    def __init__(self, text: str | None, *, token: str | None = None, reason: str | None = None) -> None:
        self.text = text
        self.token = token
        if reason is None:
            reason = f"invalid token {token!r}" if token is not None else "unrecognized expression"
        self.reason = reason
        super().__init__(f"{reason}: {text!r}")


class NegativeNumbersError(InvalidExpressionError):
    """Negative values were found while negative rejection was enabled."""

    def __init__(self, text: str | None, negatives: list[int]) -> None:
        self.negatives = list(negatives)
        super().__init__(
            text,
            reason="negatives not allowed: " + ",".join(str(n) for n in self.negatives),
        )
