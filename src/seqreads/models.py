"""Data models for seqreads."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterator, Tuple

from .exceptions import MalformedRecordError


class ReadKind(Enum):
    """Grammar that produced a read collection."""
    FASTA = "fasta"
    FASTQ = "fastq"


@dataclass(frozen=True)
class ReadCollection:
    """Reads decoded from a single FASTA or FASTQ source.

    ``names``, ``sequences`` and ``qualities`` are parallel: entry ``i`` of
    each belongs to the same record. FASTA records carry an all-zero quality
    vector of the sequence's length.
    """

    kind: ReadKind
    names: Tuple[str, ...] = ()
    sequences: Tuple[str, ...] = ()
    qualities: Tuple[Tuple[int, ...], ...] = ()
    was_archived: bool = False

    def __post_init__(self):
        """Validate that the parallel fields line up."""
        if not (len(self.names) == len(self.sequences) == len(self.qualities)):
            raise MalformedRecordError(
                f"Unbalanced read collection: {len(self.names)} names, "
                f"{len(self.sequences)} sequences, {len(self.qualities)} quality vectors"
            )

    def __len__(self) -> int:
        return len(self.names)

    def records(self) -> Iterator[Tuple[str, str, Tuple[int, ...]]]:
        """Iterate over (name, sequence, qualities) triples in file order."""
        return zip(self.names, self.sequences, self.qualities)

    def as_archived(self) -> "ReadCollection":
        """Return a copy flagged as loaded from a compressed archive."""
        return replace(self, was_archived=True)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "kind": self.kind.value,
            "names": list(self.names),
            "sequences": list(self.sequences),
            "qualities": [list(q) for q in self.qualities],
            "was_archived": self.was_archived,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "ReadCollection":
        """Create from dictionary."""
        return cls(
            kind=ReadKind(data["kind"]),
            names=tuple(data.get("names", ())),
            sequences=tuple(data.get("sequences", ())),
            qualities=tuple(tuple(q) for q in data.get("qualities", ())),
            was_archived=bool(data.get("was_archived", False)),
        )
