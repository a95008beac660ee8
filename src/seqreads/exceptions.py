"""Custom exceptions for seqreads."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class SeqReadsError(Exception):
    """Base exception for all seqreads errors."""
    pass


class UnsupportedFileTypeError(SeqReadsError):
    """Exception raised when a file extension maps to no parser."""

    MESSAGE = "Unsupported file type"

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = path
        super().__init__(self.MESSAGE)


class MalformedRecordError(SeqReadsError):
    """Exception raised when a record violates the expected line layout."""

    def __init__(self, message: str, line_number: int = None, line_content: str = None):
        self.line_number = line_number
        self.line_content = line_content

        if line_number is not None:
            message = f"Line {line_number}: {message}"
        if line_content is not None:
            message = f"{message} (content: {line_content[:50]})"

        super().__init__(message)


class LengthMismatchError(MalformedRecordError):
    """Exception raised when a FASTQ quality string does not cover its sequence."""

    def __init__(self, name: str, sequence_length: int, quality_length: int, line_number: int = None):
        self.name = name
        self.sequence_length = sequence_length
        self.quality_length = quality_length

        super().__init__(
            f"Read {name!r} has {sequence_length} bases but {quality_length} quality scores",
            line_number=line_number,
        )


class InvalidSymbolError(SeqReadsError):
    """Exception raised for a character outside the IUPAC nucleotide table."""

    def __init__(self, symbol: str, position: int = None):
        self.symbol = symbol
        self.position = position

        message = f"Invalid IUPAC symbol: {symbol!r}"
        if position is not None:
            message = f"{message} at position {position}"

        super().__init__(message)


class IOFailureError(SeqReadsError):
    """Exception raised when reading or decompressing an input fails."""

    def __init__(self, message: str, path: Union[str, Path, None] = None):
        self.path = path

        if path is not None:
            message = f"{message} ({path})"

        super().__init__(message)


class PlatformUnsupportedError(SeqReadsError):
    """Exception raised when no application-data directory is known for a platform."""

    def __init__(self, platform: str, detail: str = None):
        self.platform = platform

        message = f"Unsupported platform: {platform}"
        if detail is not None:
            message = f"{message} ({detail})"

        super().__init__(message)


class ConfigurationError(SeqReadsError):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, config_file: str = None, parameter: str = None):
        self.config_file = config_file
        self.parameter = parameter

        if config_file is not None:
            message = f"Configuration error in {config_file}: {message}"
        if parameter is not None:
            message = f"{message} (parameter: {parameter})"

        super().__init__(message)
