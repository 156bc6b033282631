"""Shape classifier.

Classification probes the input with candidate splits and parses instead of
a single grammar, because the accepted forms overlap: "5" is a single value
and also a one-token comma list. The checks run in a fixed priority order
and the first match wins:

1. empty (absent or whitespace only)
2. single value
3. comma/colon separated, every token an integer
4. custom delimiter header `//<char>\\n<rest>` (remainder not validated)
5. unrecognized

The classifier never raises.
"""

from __future__ import annotations

import re
from typing import Iterable

from core.domain.shapes import (
    CommaSeparatedShape,
    CustomDelimitedShape,
    CustomDelimiterSpec,
    EmptyShape,
    Shape,
    SingleValueShape,
    UnrecognizedShape,
)
from core.services.token_parser import is_integer

DEFAULT_SEPARATORS = (",", ":")

# Header must start the text; the remainder keeps every following line.
_CUSTOM_HEADER_RE = re.compile(r"//([^\n])\n(.*)", re.DOTALL)


def split_tokens(text: str, separators: Iterable[str]) -> list[str]:
    """Split `text` on literal separator characters.

    Rules:
    - No separator present: the whole text is the only token.
    - Otherwise split at every separator and drop trailing empty tokens;
      leading and interior empty tokens are kept (they fail to parse later).
    """

    seps = [s for s in separators if s]
    if not any(s in text for s in seps):
        return [text]

    pattern = "|".join(re.escape(s) for s in seps)
    tokens = re.split(pattern, text)
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def match_custom_delimiter(text: str) -> CustomDelimiterSpec | None:
    """Extract delimiter and remainder from a `//<char>\\n<rest>` input."""

    m = _CUSTOM_HEADER_RE.fullmatch(text)
    if m is None:
        return None
    return CustomDelimiterSpec(delimiter=m.group(1), remainder=m.group(2))


def _is_comma_separated(text: str) -> bool:
    tokens = split_tokens(text, DEFAULT_SEPARATORS)
    if not tokens:
        return False
    return all(is_integer(t) for t in tokens)


def classify(text: str | None) -> Shape:
    if text is None or not text.strip():
        return EmptyShape()

    if is_integer(text):
        return SingleValueShape(text=text)

    if _is_comma_separated(text):
        return CommaSeparatedShape(text=text)

    spec = match_custom_delimiter(text)
    if spec is not None:
        return CustomDelimitedShape(spec=spec)

    return UnrecognizedShape(text=text)
