from typing import Any

import structlog
from pydantic import ConfigDict, model_validator
from pydantic_core import PydanticCustomError

from seqrecords.generics import index, length, render, reverse
from seqrecords.models import SequenceModel
from seqrecords.records.base import Record
from seqrecords.settings import DEFAULT_SETTINGS, RecordSettings

logger = structlog.get_logger("records.sequence")


class SequenceRecord(Record, SequenceModel):
    """A class representing a sequence record with full validation.

    Every symbol in the sequence must belong to the alphabet. Records are frozen;
    use :meth:`replace` or one of the ``with_*`` methods to derive a new record.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def create(
        cls,
        name: str,
        alphabet: str | frozenset[str],
        sequence: str,
    ) -> "SequenceRecord":
        """Create a validated sequence record.

        :param name: the record name
        :param alphabet: the symbols the sequence may be drawn from
        :param sequence: the sequence of symbols
        :return: the new record
        :raises ValidationError: if the record is invalid
        """
        return cls(name=name, alphabet=alphabet, sequence=sequence)

    def replace(self, **changes: Any) -> "SequenceRecord":
        """Return a new record with ``changes`` applied and the whole record
        revalidated.
        """
        return self.model_validate({**self.model_dump(), **changes})

    @model_validator(mode="after")
    def check_symbols_in_alphabet(self) -> "SequenceRecord":
        """Ensure every symbol in the sequence belongs to the alphabet."""
        if symbols := sorted(set(self.sequence) - self.alphabet):
            raise PydanticCustomError(
                "symbol_not_in_alphabet",
                "Sequence contains symbols not in the alphabet: {symbols}",
                {"symbols": symbols, "alphabet": sorted(self.alphabet)},
            )

        return self


@length.register
def length_sequence_record(record: SequenceRecord) -> int:
    return len(record.sequence)


@reverse.register
def reverse_sequence_record(
    record: SequenceRecord,
    settings: RecordSettings | None = None,
) -> SequenceRecord:
    if settings is None:
        settings = DEFAULT_SETTINGS

    return record.replace(
        name=record.name + settings.reversed_suffix,
        sequence=record.sequence[::-1],
    )


@index.register
def index_sequence_record(
    record: SequenceRecord, start: int, stop: int
) -> SequenceRecord:
    if not 0 <= start <= stop <= len(record.sequence):
        logger.debug(
            "Requested range is out of bounds.",
            name=record.name,
            start=start,
            stop=stop,
            length=len(record.sequence),
        )

        raise IndexError(
            f"Range [{start}, {stop}) is out of bounds for a record of length "
            f"{len(record.sequence)}"
        )

    return record.with_sequence(record.sequence[start:stop])


@render.register
def render_sequence_record(record: SequenceRecord) -> str:
    return "\n".join(
        [
            f"Name: {record.name}",
            f"Length: {length(record)}",
            f"Alphabet: {' '.join(sorted(record.alphabet))}",
            f"Sequence: {record.sequence}",
        ]
    )
