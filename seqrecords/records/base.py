from abc import ABC, abstractmethod
from typing import Any, Self

from seqrecords.generics import index, length, render


class Record(ABC):
    """Update helpers and Python protocol support shared by record variants.

    Variants implement :meth:`replace`, the single entry point through which every
    update is made. It builds and validates a whole new record, so a failed update
    never leaves a partially updated record behind.
    """

    __slots__ = ()

    @abstractmethod
    def replace(self, **changes: Any) -> Self:
        """Return a new record with ``changes`` applied."""

    def with_name(self, name: str) -> Self:
        """Return a new record with ``name``."""
        return self.replace(name=name)

    def with_alphabet(self, alphabet: str | frozenset[str]) -> Self:
        """Return a new record with ``alphabet``, revalidating the sequence."""
        return self.replace(alphabet=alphabet)

    def with_sequence(self, sequence: str) -> Self:
        """Return a new record with ``sequence``.

        :raises ValidationError: if ``sequence`` contains a symbol not in the
            record's alphabet
        """
        return self.replace(sequence=sequence)

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        return length(self)

    def __getitem__(self, key: int | slice) -> Self:
        """Select symbols with 0-based positions.

        ``record[i]`` selects one symbol and ``record[start:stop]`` a half-open
        range. Negative positions and steps are not supported.
        """
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("Record slices do not support a step.")

            start = 0 if key.start is None else key.start
            stop = len(self) if key.stop is None else key.stop

            return index(self, start, stop)

        return index(self, key, key + 1)

    def __str__(self) -> str:
        return render(self)
