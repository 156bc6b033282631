"""Input shapes (closed tagged union).

Why a discriminated union instead of behaviour on an enum:
- The classifier only *describes* the input; the calculator decides what to
  do with each variant through a single exhaustive `match`.
- Each variant carries exactly the data its strategy needs (for instance the
  extracted delimiter), so classification and computation are tested apart.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ShapeKind(str, Enum):
    """Tags of the five syntactic shapes an input can take."""

    EMPTY = "empty"
    SINGLE_VALUE = "single_value"
    COMMA_SEPARATED = "comma_separated"
    CUSTOM_DELIMITED = "custom_delimited"
    UNRECOGNIZED = "unrecognized"

    def label(self) -> str:
        """Human readable label for tables and logs."""

        return self.value.replace("_", " ").capitalize()


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class CustomDelimiterSpec(_FrozenModel):
    """Delimiter and remainder extracted from a `//<char>\\n<rest>` header."""

    delimiter: str = Field(
        ...,
        min_length=1,
        max_length=1,
        description="Single literal character used to split the remainder.",
    )
    remainder: str = Field(
        default="",
        description="Text after the header line, still unvalidated.",
    )


class EmptyShape(_FrozenModel):
    kind: Literal[ShapeKind.EMPTY] = ShapeKind.EMPTY


class SingleValueShape(_FrozenModel):
    kind: Literal[ShapeKind.SINGLE_VALUE] = ShapeKind.SINGLE_VALUE
    text: str


class CommaSeparatedShape(_FrozenModel):
    kind: Literal[ShapeKind.COMMA_SEPARATED] = ShapeKind.COMMA_SEPARATED
    text: str


class CustomDelimitedShape(_FrozenModel):
    kind: Literal[ShapeKind.CUSTOM_DELIMITED] = ShapeKind.CUSTOM_DELIMITED
    spec: CustomDelimiterSpec


class UnrecognizedShape(_FrozenModel):
    kind: Literal[ShapeKind.UNRECOGNIZED] = ShapeKind.UNRECOGNIZED
    text: str


Shape = Annotated[
    Union[
        EmptyShape,
        SingleValueShape,
        CommaSeparatedShape,
        CustomDelimitedShape,
        UnrecognizedShape,
    ],
    Field(discriminator="kind"),
]
