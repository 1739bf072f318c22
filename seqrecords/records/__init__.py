from seqrecords.records.dna import DnaRecord
from seqrecords.records.sequence import SequenceRecord

__all__ = ["DnaRecord", "SequenceRecord"]
