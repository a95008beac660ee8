"""Pure string transforms on nucleotide sequences."""

from __future__ import annotations

from itertools import product
from typing import Dict, List

from ..exceptions import InvalidSymbolError

# IUPAC ambiguity codes; the order of each expansion is significant
IUPAC_TABLE: Dict[str, str] = {
    "A": "A", "C": "C", "G": "G", "T": "T",
    "R": "AG", "Y": "CT", "S": "GC", "W": "AT",
    "K": "GT", "M": "AC", "B": "CGT", "D": "AGT",
    "H": "ACT", "V": "ACG", "N": "ACGT",
}

# Watson-Crick pairs, lower-case input accepted, upper-case output
COMPLEMENT: Dict[str, str] = {
    "A": "T", "T": "A", "G": "C", "C": "G",
    "a": "T", "t": "A", "g": "C", "c": "G",
}

_STRIPPED_CHARS = str.maketrans("", "", "\n\r ")


def sanitize(sequence: str) -> str:
    """Remove newlines, carriage returns and spaces, then upper-case."""
    return sequence.translate(_STRIPPED_CHARS).upper()


def reverse_complement(sequence: str) -> str:
    """
    Get the reverse complement of a DNA sequence.

    Bases are swapped through a single lookup so that A/T and C/G
    substitutions never feed into each other. Characters other than
    A, C, G and T pass through, upper-cased.

    Example:
        >>> reverse_complement("aacg")
        'CGTT'
    """
    return "".join(COMPLEMENT.get(base, base.upper()) for base in reversed(sequence))


def expand_iupac(sequence: str) -> List[str]:
    """
    Expand IUPAC ambiguity codes into every concrete sequence they describe.

    Args:
        sequence: Nucleotide sequence, possibly containing ambiguity codes

    Returns:
        All concrete sequences in left-to-right order of the per-code
        alternatives, e.g. ``expand_iupac("RY") == ["AC", "AT", "GC", "GT"]``

    Raises:
        InvalidSymbolError: If a character is not an IUPAC nucleotide code
    """
    alternatives = []
    for position, symbol in enumerate(sequence.upper()):
        if symbol not in IUPAC_TABLE:
            raise InvalidSymbolError(sequence[position], position=position)
        alternatives.append(IUPAC_TABLE[symbol])

    return ["".join(bases) for bases in product(*alternatives)]
