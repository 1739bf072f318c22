import pytest

from seqrecords.records import DnaRecord, SequenceRecord


@pytest.fixture()
def sequence_record() -> SequenceRecord:
    return SequenceRecord.create("seq1", "AT", "ATTAAAAAAAA")


@pytest.fixture()
def dna_record() -> DnaRecord:
    return DnaRecord.create("dna1", "ACGTTAGC", adapter_sequence="ATGA")
