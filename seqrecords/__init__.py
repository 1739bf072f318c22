"""Typed sequence records with validated construction and per-variant dispatch."""

from pydantic import ValidationError

from seqrecords.generics import index, length, render, reverse
from seqrecords.load import load_record
from seqrecords.records import DnaRecord, SequenceRecord
from seqrecords.settings import DEFAULT_SETTINGS, RecordSettings

__all__ = [
    "DEFAULT_SETTINGS",
    "DnaRecord",
    "RecordSettings",
    "SequenceRecord",
    "ValidationError",
    "index",
    "length",
    "load_record",
    "render",
    "reverse",
]
