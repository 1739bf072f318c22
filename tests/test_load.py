import json

from seqrecords.load import load_record
from seqrecords.records import DnaRecord, SequenceRecord


def test_sequence_record(sequence_record: SequenceRecord):
    assert load_record(sequence_record.model_dump_json()) == sequence_record


def test_dna_record(dna_record: DnaRecord):
    record = load_record(dna_record.model_dump_json())

    assert isinstance(record, DnaRecord)
    assert record == dna_record


def test_flat_dna_record():
    record = load_record(
        json.dumps({"name": "dna1", "sequence": "ACGT", "adapter_sequence": "ATGA"})
    )

    assert isinstance(record, DnaRecord)
    assert record.alphabet == frozenset("ACGT")


def test_invalid():
    """Test that invalid data is logged and ``None`` is returned."""
    assert (
        load_record(json.dumps({"name": "seq1", "alphabet": ["A"], "sequence": "AT"}))
        is None
    )


def test_malformed():
    assert load_record("{") is None


def test_empty_sequence():
    """Test that a loaded record with no symbols is truthy."""
    record = load_record('{"name": "s", "alphabet": ["A"], "sequence": ""}')

    assert record is not None
    assert bool(record) is True
