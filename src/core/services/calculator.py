"""Calculator dispatcher.

`calculate` classifies the input once and runs the strategy for that shape
through a single exhaustive `match`. Tokens are parsed and summed left to
right, so the first failing token is the one reported.

Everything here is pure: no shared state, safe from any thread.
"""

from __future__ import annotations

import logging

from core.domain.errors import (
    CalculatorError,
    InvalidExpressionError,
    InvalidNumberError,
    NegativeNumbersError,
)
from core.domain.models import CalculationResult, ParsedNumber
from core.domain.shapes import (
    CommaSeparatedShape,
    CustomDelimitedShape,
    EmptyShape,
    Shape,
    SingleValueShape,
    UnrecognizedShape,
)
from core.services.shape_classifier import DEFAULT_SEPARATORS, classify, split_tokens
from core.services.token_parser import parse_number

logger = logging.getLogger(__name__)


def tokenize(shape: Shape) -> list[str]:
    """Tokens the strategy for `shape` parses (empty for empty/unrecognized)."""

    match shape:
        case EmptyShape() | UnrecognizedShape():
            return []
        case SingleValueShape(text=text):
            return [text]
        case CommaSeparatedShape(text=text):
            return split_tokens(text, DEFAULT_SEPARATORS)
        case CustomDelimitedShape(spec=spec):
            return split_tokens(spec.remainder, (spec.delimiter,))
    raise TypeError(f"unsupported shape: {shape!r}")


def _sum_tokens(text: str | None, tokens: list[str], *, reject_negatives: bool) -> int:
    numbers: list[ParsedNumber] = []
    for token in tokens:
        try:
            numbers.append(parse_number(token))
        except InvalidNumberError as exc:
            raise InvalidExpressionError(text, token=token) from exc

    if reject_negatives:
        negatives = [n.value for n in numbers if n.value < 0]
        if negatives:
            raise NegativeNumbersError(text, negatives)

    total = 0
    for number in numbers:
        total += number.value
    return total


def calculate(text: str | None = None, *, reject_negatives: bool = False) -> int:
    """Sum the integers contained in `text`.

    Raises `InvalidExpressionError` when the input is unrecognized or any
    token is not an integer literal.
    """

    return _calculate_shape(text, classify(text), reject_negatives=reject_negatives)


def _calculate_shape(text: str | None, shape: Shape, *, reject_negatives: bool) -> int:
    logger.debug("classified %r as %s", text, shape.kind.value)

    match shape:
        case EmptyShape():
            total = 0
        case SingleValueShape() | CommaSeparatedShape() | CustomDelimitedShape():
            total = _sum_tokens(text, tokenize(shape), reject_negatives=reject_negatives)
        case UnrecognizedShape():
            raise InvalidExpressionError(text)
        case _:
            raise TypeError(f"unsupported shape: {shape!r}")

    logger.debug("total for %r = %d", text, total)
    return total


def evaluate(text: str | None = None, *, reject_negatives: bool = False) -> CalculationResult:
    """Like `calculate`, but returns the failure as data instead of raising."""

    shape = classify(text)
    tokens = tokenize(shape)
    try:
        total = _calculate_shape(text, shape, reject_negatives=reject_negatives)
    except CalculatorError as exc:
        return CalculationResult(text=text, shape=shape.kind, tokens=tokens, error=str(exc))
    return CalculationResult(text=text, shape=shape.kind, tokens=tokens, total=total)
