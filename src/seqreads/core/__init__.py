"""Core processing modules for seqreads."""

from .lines import LineBuffer
from .parser import FastaParser, FastqParser, parse_fasta, parse_fastq, decode_phred33
from .transform import IUPAC_TABLE, sanitize, reverse_complement, expand_iupac
from .paths import app_data_dir, make_sure_directory
from .dispatch import load_file
from .archive import ArchiveResolver, GzipDecompressor, load_archive, load_any

__all__ = [
    "LineBuffer",
    "FastaParser",
    "FastqParser",
    "parse_fasta",
    "parse_fastq",
    "decode_phred33",
    "IUPAC_TABLE",
    "sanitize",
    "reverse_complement",
    "expand_iupac",
    "app_data_dir",
    "make_sure_directory",
    "load_file",
    "ArchiveResolver",
    "GzipDecompressor",
    "load_archive",
    "load_any"
]
