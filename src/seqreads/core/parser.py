"""FASTA and FASTQ read file parsers."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from loguru import logger

from ..exceptions import IOFailureError, LengthMismatchError, MalformedRecordError
from ..models import ReadCollection, ReadKind
from .lines import LineBuffer

# Sanger / Illumina 1.8+ encoding
PHRED33_OFFSET = 33
MIN_PHRED33_CHAR = 33
MAX_PHRED33_CHAR = 126

FASTA_MARKER = ">"
FASTQ_MARKER = "@"
FASTQ_BLOCK_SIZE = 4


def decode_phred33(quality: str, line_number: int = None) -> Tuple[int, ...]:
    """
    Convert a Phred+33 quality string to integer scores.

    Args:
        quality: ASCII-encoded quality string
        line_number: 1-based line of the string, for error reporting

    Returns:
        One score per character, left to right

    Raises:
        MalformedRecordError: If a character lies outside ASCII 33-126
    """
    scores = []
    for char in quality:
        code = ord(char)
        if code < MIN_PHRED33_CHAR or code > MAX_PHRED33_CHAR:
            raise MalformedRecordError(
                f"Invalid Phred+33 quality character {char!r}",
                line_number=line_number,
                line_content=quality,
            )
        scores.append(code - PHRED33_OFFSET)
    return tuple(scores)


def _read_text(path: Path) -> str:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise IOFailureError(f"Failed to read input file: {e.strerror or e}", path=path) from e
    except UnicodeDecodeError as e:
        raise IOFailureError(f"Input file is not UTF-8 text: {e.reason}", path=path) from e


def _read_fasta_body(buffer: LineBuffer, cursor: int) -> Tuple[str, int]:
    """Concatenate trimmed sequence lines up to the next header, blank line or EOF."""
    fragments: List[str] = []
    while not buffer.is_blank(cursor):
        line = buffer.get(cursor)
        if line.startswith(FASTA_MARKER):
            break
        fragments.append(line.strip())
        cursor += 1
    return "".join(fragments), cursor


def parse_fasta(text: str) -> ReadCollection:
    """
    Parse FASTA text into a read collection.

    Scanning stops at the first blank line, even when more records follow it.

    Args:
        text: Full FASTA file content

    Returns:
        ReadCollection of kind FASTA with zero-filled quality vectors

    Raises:
        MalformedRecordError: If sequence lines appear before any header
    """
    buffer = LineBuffer.from_text(text)
    names: List[str] = []
    sequences: List[str] = []
    qualities: List[Tuple[int, ...]] = []
    awaiting_body = False
    cursor = 0

    while not buffer.is_blank(cursor):
        line = buffer.get(cursor)

        if line.startswith(FASTA_MARKER):
            # Header directly followed by another header has an empty body
            if awaiting_body:
                sequences.append("")
                qualities.append(())
            names.append(line[1:].rstrip("\r"))
            awaiting_body = True
            cursor += 1
            continue

        if not awaiting_body:
            raise MalformedRecordError(
                "Sequence line without a preceding '>' header",
                line_number=cursor + 1,
                line_content=line,
            )

        sequence, cursor = _read_fasta_body(buffer, cursor)
        sequences.append(sequence)
        qualities.append((0,) * len(sequence))
        awaiting_body = False

    if awaiting_body:
        sequences.append("")
        qualities.append(())

    if cursor < len(buffer) - 1:
        logger.debug(f"FASTA scan stopped at blank line {cursor + 1} of {len(buffer)}")

    return ReadCollection(
        kind=ReadKind.FASTA,
        names=tuple(names),
        sequences=tuple(sequences),
        qualities=tuple(qualities),
    )


def _read_fastq_block(
    buffer: LineBuffer,
    cursor: int,
    validate_lengths: bool = True
) -> Tuple[Tuple[str, str, Tuple[int, ...]], int]:
    """Decode the four-line record starting at ``cursor``."""
    header = buffer.get(cursor).rstrip("\r")
    if not header.startswith(FASTQ_MARKER):
        raise MalformedRecordError(
            "FASTQ header must start with '@'",
            line_number=cursor + 1,
            line_content=header,
        )

    for offset, role in ((1, "sequence"), (2, "separator"), (3, "quality")):
        if buffer.get(cursor + offset) is None:
            raise MalformedRecordError(
                f"Truncated FASTQ record: missing {role} line",
                line_number=cursor + offset + 1,
                line_content=header,
            )

    name = header[1:]
    sequence = buffer.get(cursor + 1).strip()
    quality_line = cursor + 3
    scores = decode_phred33(buffer.get(quality_line).strip(), line_number=quality_line + 1)

    if validate_lengths and len(scores) != len(sequence):
        raise LengthMismatchError(name, len(sequence), len(scores), line_number=quality_line + 1)

    return (name, sequence, scores), cursor + FASTQ_BLOCK_SIZE


def parse_fastq(text: str, validate_lengths: bool = True) -> ReadCollection:
    """
    Parse FASTQ text into a read collection.

    Records are fixed blocks of four lines: header, sequence, separator
    (ignored) and Phred+33 quality string.

    Args:
        text: Full FASTQ file content
        validate_lengths: Reject records whose quality string and sequence differ in length

    Returns:
        ReadCollection of kind FASTQ

    Raises:
        MalformedRecordError: If a record is truncated or its header/quality is invalid
        LengthMismatchError: If validate_lengths is set and lengths differ
    """
    buffer = LineBuffer.from_text(text)
    names: List[str] = []
    sequences: List[str] = []
    qualities: List[Tuple[int, ...]] = []
    cursor = 0

    while not buffer.is_blank(cursor):
        (name, sequence, scores), cursor = _read_fastq_block(buffer, cursor, validate_lengths)
        names.append(name)
        sequences.append(sequence)
        qualities.append(scores)

    return ReadCollection(
        kind=ReadKind.FASTQ,
        names=tuple(names),
        sequences=tuple(sequences),
        qualities=tuple(qualities),
    )


class FastaParser:
    """Parser for FASTA read files."""

    def __init__(self, input_file: Path):
        """Initialize parser with input file path."""
        self.input_file = Path(input_file)

    def parse(self) -> ReadCollection:
        """Read the file and return its records."""
        logger.info(f"Parsing FASTA file: {self.input_file}")
        collection = parse_fasta(_read_text(self.input_file))
        logger.info(f"Successfully parsed {len(collection)} FASTA records")
        return collection


class FastqParser:
    """Parser for FASTQ read files."""

    def __init__(self, input_file: Path, validate_lengths: bool = True):
        """
        Initialize parser.

        Args:
            input_file: Path to the FASTQ file
            validate_lengths: Reject records whose sequence and quality lengths differ
        """
        self.input_file = Path(input_file)
        self.validate_lengths = validate_lengths

    def parse(self) -> ReadCollection:
        """Read the file and return its records."""
        logger.info(f"Parsing FASTQ file: {self.input_file}")
        collection = parse_fastq(_read_text(self.input_file), self.validate_lengths)
        logger.info(f"Successfully parsed {len(collection)} FASTQ records")
        return collection
