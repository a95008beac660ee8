"""seqreads.

Load FASTA and FASTQ read files, plain or gzip-compressed, into immutable
read collections, and transform nucleotide sequences (sanitize, reverse
complement, IUPAC ambiguity expansion).
"""

__version__ = "1.0.0"

from .config import LoaderConfig
from .models import ReadKind, ReadCollection
from .exceptions import (
    SeqReadsError, UnsupportedFileTypeError, MalformedRecordError, LengthMismatchError,
    InvalidSymbolError, IOFailureError, PlatformUnsupportedError, ConfigurationError
)
from .core import (
    FastaParser, FastqParser, parse_fasta, parse_fastq,
    sanitize, reverse_complement, expand_iupac, IUPAC_TABLE,
    app_data_dir, load_file, load_archive, load_any, ArchiveResolver, GzipDecompressor
)

__all__ = [
    "__version__",
    "LoaderConfig",
    "ReadKind",
    "ReadCollection",
    "SeqReadsError",
    "UnsupportedFileTypeError",
    "MalformedRecordError",
    "LengthMismatchError",
    "InvalidSymbolError",
    "IOFailureError",
    "PlatformUnsupportedError",
    "ConfigurationError",
    "FastaParser",
    "FastqParser",
    "parse_fasta",
    "parse_fastq",
    "sanitize",
    "reverse_complement",
    "expand_iupac",
    "IUPAC_TABLE",
    "app_data_dir",
    "load_file",
    "load_archive",
    "load_any",
    "ArchiveResolver",
    "GzipDecompressor"
]
