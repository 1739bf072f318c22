from pydantic import BaseModel, ConfigDict, Field, field_serializer

from seqrecords.models import Alphabet


class RecordSettings(BaseModel):
    """Defaults applied by record operations."""

    model_config = ConfigDict(frozen=True)

    reversed_suffix: str = Field("--reversed", min_length=1)
    """The annotation appended to a record name each time it is reversed."""

    dna_alphabet: Alphabet = frozenset("ACGT")
    """The alphabet given to a DNA record when none is provided."""

    @field_serializer("dna_alphabet")
    def serialize_dna_alphabet(self, alphabet: frozenset[str]) -> list[str]:
        """Serialize the alphabet as a sorted list of symbols."""
        return sorted(alphabet)


DEFAULT_SETTINGS = RecordSettings()
