from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from seqrecords.generics import index, length, render, reverse
from seqrecords.records.base import Record
from seqrecords.records.sequence import SequenceRecord
from seqrecords.settings import DEFAULT_SETTINGS, RecordSettings

RECORD_FIELDS = ("name", "alphabet", "sequence")
"""Fields that belong to the embedded sequence record."""


class DnaRecord(Record, BaseModel):
    """A DNA sequence record carrying an adapter sequence.

    The name, alphabet and sequence live in an embedded :class:`SequenceRecord`,
    so the record is held to the same validation. Operations a DNA record does not
    override are delegated to the embedded record.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    record: SequenceRecord
    """The embedded sequence record."""

    adapter_sequence: str
    """The adapter sequence ligated to the DNA fragment."""

    @property
    def name(self) -> str:
        """The record name."""
        return self.record.name

    @property
    def alphabet(self) -> frozenset[str]:
        """The symbols the sequence may be drawn from."""
        return self.record.alphabet

    @property
    def sequence(self) -> str:
        """The sequence of symbols."""
        return self.record.sequence

    @classmethod
    def create(
        cls,
        name: str,
        sequence: str,
        adapter_sequence: str,
        alphabet: str | frozenset[str] | None = None,
        settings: RecordSettings | None = None,
    ) -> "DnaRecord":
        """Create a validated DNA record.

        :param name: the record name
        :param sequence: the sequence of symbols
        :param adapter_sequence: the adapter sequence
        :param alphabet: the symbols the sequence may be drawn from, defaulting to
            the DNA alphabet from ``settings``
        :param settings: the settings providing the default DNA alphabet
        :return: the new record
        :raises ValidationError: if the record is invalid
        """
        if alphabet is None:
            alphabet = (settings or DEFAULT_SETTINGS).dna_alphabet

        return cls(
            name=name,
            alphabet=alphabet,
            sequence=sequence,
            adapter_sequence=adapter_sequence,
        )

    def replace(self, **changes: Any) -> "DnaRecord":
        """Return a new record with ``changes`` applied and the whole record
        revalidated.
        """
        record_changes = {
            key: changes.pop(key) for key in RECORD_FIELDS if key in changes
        }

        return self.model_validate(
            {
                **self.model_dump(),
                **changes,
                "record": {**self.record.model_dump(), **record_changes},
            }
        )

    def with_adapter_sequence(self, adapter_sequence: str) -> "DnaRecord":
        """Return a new record with ``adapter_sequence``."""
        return self.replace(adapter_sequence=adapter_sequence)

    @model_validator(mode="before")
    @classmethod
    def convert_flat_fields(cls, data: Any) -> Any:
        """Move flat name, alphabet and sequence fields into the embedded record."""
        if not isinstance(data, dict) or "record" in data:
            return data

        data = dict(data)

        data["record"] = {"alphabet": DEFAULT_SETTINGS.dna_alphabet} | {
            key: data.pop(key) for key in RECORD_FIELDS if key in data
        }

        return data


@length.register
def length_dna_record(record: DnaRecord) -> int:
    return length(record.record)


@reverse.register
def reverse_dna_record(
    record: DnaRecord,
    settings: RecordSettings | None = None,
) -> DnaRecord:
    return record.replace(**reverse(record.record, settings).model_dump())


@index.register
def index_dna_record(record: DnaRecord, start: int, stop: int) -> DnaRecord:
    return record.replace(**index(record.record, start, stop).model_dump())


@render.register
def render_dna_record(record: DnaRecord) -> str:
    return render(record.record) + f"\nAdapter: {record.adapter_sequence}"
