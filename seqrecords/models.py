from collections.abc import Iterable, Mapping
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Field,
    field_serializer,
    field_validator,
)
from pydantic_core import PydanticCustomError


def convert_alphabet(value: object) -> object:
    """Convert a string or an iterable of symbols to a frozenset of symbols."""
    if isinstance(value, Iterable) and not isinstance(value, Mapping):
        return frozenset(value)

    return value


def check_alphabet_symbols(value: frozenset[str]) -> frozenset[str]:
    """Ensure every symbol in the alphabet is a single character."""
    if invalid := sorted(symbol for symbol in value if len(symbol) != 1):
        raise PydanticCustomError(
            "invalid_symbol",
            "Alphabet symbols must be single characters: {symbols}",
            {"symbols": invalid},
        )

    return value


Alphabet = Annotated[
    frozenset[str],
    BeforeValidator(convert_alphabet),
    Field(min_length=1),
    AfterValidator(check_alphabet_symbols),
]
"""A non-empty set of single-character symbols."""


class SequenceModel(BaseModel):
    """A class representing the fields of a sequence record."""

    name: str = Field(min_length=1)
    """The record name."""

    alphabet: Alphabet
    """The symbols the sequence may be drawn from."""

    sequence: str
    """The sequence of symbols."""

    @field_validator("sequence", mode="before")
    @classmethod
    def convert_sequence(cls, value: str | list[str] | tuple[str, ...]) -> str:
        """Join a list or tuple of symbols into a sequence string."""
        if isinstance(value, list | tuple) and all(
            isinstance(symbol, str) for symbol in value
        ):
            return "".join(value)

        return value

    @field_serializer("alphabet")
    def serialize_alphabet(self, alphabet: frozenset[str]) -> list[str]:
        """Serialize the alphabet as a sorted list of symbols."""
        return sorted(alphabet)
