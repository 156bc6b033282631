"""Token parser: one substring -> one integer.

The grammar is the plain decimal integer literal: an optional single `+` or
`-` followed by ASCII digits. Python's `int()` is more lenient (surrounding
whitespace, underscores, non-ASCII digits), so tokens are matched against an
explicit pattern first and range-checked to a signed 32-bit integer.
"""

from __future__ import annotations

import re

from core.domain.errors import InvalidNumberError
from core.domain.models import ParsedNumber

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def try_parse(token: str) -> int | None:
    """Return the integer value of `token`, or None when it is not one."""

    if not token or _INTEGER_RE.fullmatch(token) is None:
        return None
    value = int(token)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def is_integer(token: str) -> bool:
    return try_parse(token) is not None


def parse(token: str) -> int:
    """Parse `token` or raise `InvalidNumberError`. No partial parse."""

    value = try_parse(token)
    if value is None:
        raise InvalidNumberError(token)
    return value


def parse_number(token: str) -> ParsedNumber:
    return ParsedNumber(token=token, value=parse(token))
