"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to any I/O library.
- Results serialize straight to JSON for the exporter.

Note:
- These models describe *what* a number or a result is, not *how* it is
  computed (see `core.services`).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.shapes import ShapeKind


class ParsedNumber(BaseModel):
    """Integer value of a single token.

    Built through `core.services.token_parser.parse_number`, which refuses
    invalid tokens instead of defaulting to zero.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(
        ...,
        min_length=1,
        description="Raw token as it appeared in the input.",
    )
    value: int = Field(
        ...,
        description="Base-10 integer value of the token.",
    )


class CalculationResult(BaseModel):
    """Outcome of evaluating one expression.

    Why it exists:
    - The CLI and the JSON exporter need the shape and tokens, not only the
      total.
    - Failures are captured as data so a batch can report every line.
    """

    model_config = ConfigDict(frozen=True)

    text: str | None = Field(
        default=None,
        description="Input exactly as received (None when absent).",
    )
    shape: ShapeKind = Field(
        ...,
        description="Shape the input was classified as.",
    )
    tokens: list[str] = Field(
        default_factory=list,
        description="Tokens the shape's strategy splits the input into.",
    )
    total: int | None = Field(
        default=None,
        description="Sum of the tokens (None when the evaluation failed).",
    )
    error: str | None = Field(
        default=None,
        description="Failure message (None when the evaluation succeeded).",
    )

    @model_validator(mode="after")
    def _total_xor_error(self) -> "CalculationResult":
        if (self.total is None) == (self.error is None):
            raise ValueError("exactly one of total/error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
