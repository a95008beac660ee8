"""Extension-based dispatch of read files to their parser."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Union

from loguru import logger

from ..config import LoaderConfig
from ..exceptions import IOFailureError, SeqReadsError, UnsupportedFileTypeError
from ..models import ReadCollection
from .parser import FastaParser, FastqParser

ErrorCallback = Callable[[str], None]

FASTA_EXTENSIONS = ("fa", "fasta")
FASTQ_EXTENSIONS = ("fastq",)
SUPPORTED_EXTENSIONS = FASTA_EXTENSIONS + FASTQ_EXTENSIONS


def file_extension(path: Union[str, Path]) -> str:
    """Return the lower-case final extension of ``path`` without the dot."""
    return Path(path).suffix[1:].lower()


def report_error(on_error: Optional[ErrorCallback], error: Exception) -> None:
    """Send ``error`` to the caller's error channel, if one was supplied."""
    logger.warning(f"Failed to load reads: {error}")
    if on_error is not None:
        on_error(str(error))


def load_file(
    path: Union[str, Path],
    on_error: Optional[ErrorCallback] = None,
    config: Optional[LoaderConfig] = None
) -> Optional[ReadCollection]:
    """
    Load a FASTA or FASTQ file chosen by its extension.

    Failures never propagate: unsupported extensions, read errors and
    malformed records are reported through ``on_error`` and the call
    returns None.

    Args:
        path: Path to a .fa, .fasta or .fastq file
        on_error: Called with a message when loading fails
        config: Loader settings (defaults to LoaderConfig())

    Returns:
        The parsed ReadCollection, or None on failure
    """
    path = Path(path)
    config = config or LoaderConfig()
    extension = file_extension(path)
    logger.debug(f"Dispatching {path} by extension {extension!r}")

    try:
        if extension in FASTA_EXTENSIONS:
            return FastaParser(path).parse()
        if extension in FASTQ_EXTENSIONS:
            return FastqParser(path, validate_lengths=config.validate_lengths).parse()
        raise UnsupportedFileTypeError(path)
    except SeqReadsError as e:
        report_error(on_error, e)
    except OSError as e:
        report_error(on_error, IOFailureError(f"Failed to read input file: {e}", path=path))
    return None
