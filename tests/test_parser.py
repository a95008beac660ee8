#!/usr/bin/env python3
"""
Tests for the FASTA and FASTQ parsers.
"""

import pytest
from pathlib import Path

from seqreads.core.lines import LineBuffer
from seqreads.core.parser import (
    FastaParser, FastqParser, decode_phred33, parse_fasta, parse_fastq
)
from seqreads.exceptions import IOFailureError, LengthMismatchError, MalformedRecordError
from seqreads.models import ReadKind


class TestLineBuffer:
    """Tests for the line buffer."""

    def test_get_past_end_returns_none(self):
        buffer = LineBuffer.from_text("a\nb")
        assert len(buffer) == 2
        assert buffer.get(1) == "b"
        assert buffer.get(2) is None
        assert buffer.get(-1) is None

    def test_blank_lines(self):
        buffer = LineBuffer.from_text("a\n\r\n\nb")
        assert not buffer.is_blank(0)
        assert not buffer.is_blank(1)
        assert buffer.is_blank(2)
        assert not buffer.is_blank(3)
        assert buffer.is_blank(4)


class TestFasta:
    """Tests for FASTA parsing."""

    def test_two_records(self):
        collection = parse_fasta(">r1\nACGT\n>r2\nTTTT\n")

        assert collection.kind == ReadKind.FASTA
        assert collection.names == ("r1", "r2")
        assert collection.sequences == ("ACGT", "TTTT")
        assert collection.qualities == ((0, 0, 0, 0), (0, 0, 0, 0))
        assert collection.was_archived is False

    def test_wrapped_sequence_is_trimmed_and_joined(self):
        collection = parse_fasta(">chr1 description here\nACGT  \n  GGCC\nTT\n>chr2\nA\n")

        assert collection.names == ("chr1 description here", "chr2")
        assert collection.sequences == ("ACGTGGCCTT", "A")
        assert collection.qualities[0] == (0,) * 10

    def test_crlf_line_endings(self):
        collection = parse_fasta(">r1\r\nACGT\r\nAC\r\n>r2\r\nGG\r\n")

        assert collection.names == ("r1", "r2")
        assert collection.sequences == ("ACGTAC", "GG")

    def test_crlf_separator_line_does_not_truncate(self):
        """A line holding only a carriage return is part of the body, not a blank line."""
        collection = parse_fasta(">r1\r\nACGT\r\n\r\n>r2\r\nTT\r\n")

        assert collection.names == ("r1", "r2")
        assert collection.sequences == ("ACGT", "TT")
        assert collection.qualities == ((0, 0, 0, 0), (0, 0))

    def test_no_trailing_newline(self):
        collection = parse_fasta(">r1\nACGT")
        assert collection.sequences == ("ACGT",)

    def test_empty_input(self):
        collection = parse_fasta("")

        assert len(collection) == 0
        assert collection.names == ()
        assert collection.sequences == ()
        assert collection.qualities == ()

    def test_blank_line_truncates_remaining_records(self):
        """Scanning stops at the first blank line, dropping later records."""
        collection = parse_fasta(">r1\nACGT\n\n>r2\nTTTT\n")

        assert collection.names == ("r1",)
        assert collection.sequences == ("ACGT",)

    def test_blank_line_inside_body_truncates(self):
        collection = parse_fasta(">r1\nAC\n\nGT\n>r2\nTT\n")

        assert collection.names == ("r1",)
        assert collection.sequences == ("AC",)

    def test_leading_blank_line_yields_nothing(self):
        assert len(parse_fasta("\n>r1\nACGT\n")) == 0

    def test_header_without_sequence(self):
        collection = parse_fasta(">empty\n>r2\nAC\n>last\n")

        assert collection.names == ("empty", "r2", "last")
        assert collection.sequences == ("", "AC", "")
        assert collection.qualities == ((), (0, 0), ())

    def test_sequence_before_header_is_malformed(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_fasta("ACGT\n>r1\nAC\n")

        assert exc_info.value.line_number == 1

    def test_parallel_lengths(self):
        text = "".join(f">read{i}\n{'ACGT' * i}\nGG\n" for i in range(1, 8))
        collection = parse_fasta(text)

        assert len(collection.names) == len(collection.sequences) == len(collection.qualities) == 7
        for sequence, qualities in zip(collection.sequences, collection.qualities):
            assert qualities == (0,) * len(sequence)

    def test_parser_reads_file(self, tmp_path):
        fasta_file = tmp_path / "reads.fasta"
        fasta_file.write_text(">r1\nAC\nGT\n")

        collection = FastaParser(fasta_file).parse()
        assert collection.sequences == ("ACGT",)

    def test_parser_missing_file(self, tmp_path):
        with pytest.raises(IOFailureError):
            FastaParser(tmp_path / "missing.fasta").parse()


class TestFastq:
    """Tests for FASTQ parsing."""

    def test_single_record(self):
        collection = parse_fastq("@r1\nACGT\n+\n!!!!\n")

        assert collection.kind == ReadKind.FASTQ
        assert collection.names == ("r1",)
        assert collection.sequences == ("ACGT",)
        assert collection.qualities == ((0, 0, 0, 0),)

    def test_phred33_decoding(self):
        collection = parse_fastq("@r1 extra words\nACGTN\n+r1\n!+5?I\n@r2\nGG\n+\n~~\n")

        assert collection.names == ("r1 extra words", "r2")
        assert collection.qualities == ((0, 10, 20, 30, 40), (93, 93))

    def test_scores_match_sequence_lengths(self):
        text = "".join(f"@r{i}\n{'A' * i}\n+\n{'I' * i}\n" for i in range(1, 6))
        collection = parse_fastq(text)

        assert len(collection) == 5
        for sequence, qualities in zip(collection.sequences, collection.qualities):
            assert len(qualities) == len(sequence)
            assert all(0 <= q <= 93 for q in qualities)

    def test_crlf_and_no_trailing_newline(self):
        collection = parse_fastq("@r1\r\nACGT\r\n+\r\nIIII")

        assert collection.names == ("r1",)
        assert collection.sequences == ("ACGT",)
        assert collection.qualities == ((40, 40, 40, 40),)

    def test_empty_input(self):
        assert len(parse_fastq("")) == 0

    def test_truncated_record(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_fastq("@r1\nACGT\n+\n!!!!\n@r2\nAC\n")

        assert exc_info.value.line_number == 8
        assert "quality" in str(exc_info.value)

    def test_header_must_start_with_marker(self):
        with pytest.raises(MalformedRecordError):
            parse_fastq("r1\nACGT\n+\n!!!!\n")

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError) as exc_info:
            parse_fastq("@r1\nACGT\n+\n!!!\n")

        assert exc_info.value.sequence_length == 4
        assert exc_info.value.quality_length == 3

    def test_length_mismatch_accepted_when_not_validating(self):
        collection = parse_fastq("@r1\nACGT\n+\n!!!\n", validate_lengths=False)
        assert collection.qualities == ((0, 0, 0),)

    def test_invalid_quality_character(self):
        with pytest.raises(MalformedRecordError):
            parse_fastq("@r1\nACGT\n+\n!!\x7f!\n")

    def test_parser_reads_file(self, tmp_path):
        fastq_file = tmp_path / "reads.fastq"
        fastq_file.write_text("@r1\nACGT\n+\nII!!\n")

        collection = FastqParser(fastq_file).parse()
        assert collection.qualities == ((40, 40, 0, 0),)


def test_decode_phred33():
    assert decode_phred33("") == ()
    assert decode_phred33("!5I~") == (0, 20, 40, 93)

    with pytest.raises(MalformedRecordError):
        decode_phred33(" ")
