#!/usr/bin/env python3
"""
Gzip archive handling for seqreads.

This module decompresses ``*.fa.gz``, ``*.fasta.gz`` and ``*.fastq.gz``
archives into a temporary plaintext file under the application-data
directory, loads it through the dispatch layer and removes it again.
"""

from __future__ import annotations

import asyncio
import uuid
from pathlib import Path
from typing import Awaitable, Callable, Optional, Union

from loguru import logger

from ..config import LoaderConfig
from ..exceptions import IOFailureError, SeqReadsError, UnsupportedFileTypeError
from ..models import ReadCollection
from .dispatch import SUPPORTED_EXTENSIONS, ErrorCallback, file_extension, load_file, report_error
from .paths import app_data_dir, make_sure_directory

ARCHIVE_EXTENSIONS = ("gz",)

Decompressor = Callable[[Path, Path], Awaitable[None]]


class GzipDecompressor:
    """Runs the external ``gzip`` program to inflate an archive."""

    def __init__(self, executable: str = "gzip"):
        """
        Initialize decompressor.

        Args:
            executable: Name or path of the gzip binary
        """
        self.executable = executable

    async def __call__(self, source: Path, destination: Path) -> None:
        """
        Decompress ``source`` into ``destination``.

        The destination is fully written once the call returns.

        Raises:
            IOFailureError: If gzip is missing or exits with an error
        """
        cmd = [self.executable, "-dc", str(source)]
        logger.debug(f"Running: {' '.join(cmd)} > {destination}")

        try:
            out = open(destination, 'wb')
        except OSError as e:
            raise IOFailureError(f"Cannot write decompressed output: {e}", path=destination) from e

        with out:
            try:
                process = await asyncio.create_subprocess_exec(
                    *cmd,
                    stdout=out,
                    stderr=asyncio.subprocess.PIPE,
                )
            except FileNotFoundError as e:
                raise IOFailureError(f"gzip not found in PATH: {e}", path=source) from e
            except OSError as e:
                raise IOFailureError(f"Decompression failed: {e}", path=source) from e
            _, stderr = await process.communicate()

        if process.returncode != 0:
            message = stderr.decode(errors="replace").strip()
            raise IOFailureError(
                f"Decompression failed (exit code: {process.returncode}): {message}",
                path=source,
            )


class ArchiveResolver:
    """Loads reads from gzip-compressed FASTA/FASTQ files."""

    def __init__(
        self,
        app_namespace: str,
        decompressor: Optional[Decompressor] = None,
        data_dir: Optional[Path] = None,
        temp_subdir: str = "tempGz",
        config: Optional[LoaderConfig] = None
    ):
        """
        Initialize resolver.

        Args:
            app_namespace: Application name that scopes the temporary directory
            decompressor: Coroutine function ``(source, destination)``; defaults to GzipDecompressor
            data_dir: Root directory replacing the platform application-data directory
            temp_subdir: Name of the temporary directory under the root
            config: Loader settings passed through to the dispatch layer
        """
        self.app_namespace = app_namespace
        self.decompressor = decompressor or GzipDecompressor()
        self.data_dir = Path(data_dir) if data_dir is not None else None
        self.temp_subdir = temp_subdir
        self.config = config or LoaderConfig()

    @classmethod
    def from_config(cls, config: LoaderConfig, decompressor: Optional[Decompressor] = None) -> "ArchiveResolver":
        """Create a resolver from loader settings."""
        return cls(
            config.app_name,
            decompressor=decompressor,
            data_dir=config.data_dir,
            temp_subdir=config.temp_subdir,
            config=config,
        )

    @staticmethod
    def accepts(path: Union[str, Path]) -> bool:
        """True for ``[name].<fa|fasta|fastq>.gz``, compared case-insensitively."""
        parts = Path(path).name.lower().split(".")
        if len(parts) < 2 or parts[-1] not in ARCHIVE_EXTENSIONS:
            return False
        return parts[-2] in SUPPORTED_EXTENSIONS

    def temp_dir(self) -> Path:
        """Return the temporary directory, creating it if needed."""
        root = self.data_dir if self.data_dir is not None else app_data_dir(self.app_namespace)
        return make_sure_directory(root / self.temp_subdir)

    async def load(
        self,
        path: Union[str, Path],
        on_error: Optional[ErrorCallback] = None
    ) -> Optional[ReadCollection]:
        """
        Decompress and load an archived read file.

        The temporary plaintext copy is deleted whether loading succeeds
        or fails. Failures are reported through ``on_error`` and yield None.

        Args:
            path: Path to a .fa.gz, .fasta.gz or .fastq.gz archive
            on_error: Called with a message when loading fails

        Returns:
            The parsed ReadCollection with ``was_archived`` set, or None
        """
        path = Path(path)
        if not self.accepts(path):
            report_error(on_error, UnsupportedFileTypeError(path))
            return None

        try:
            temp_file = self.temp_dir() / f"{uuid.uuid4().hex}.{path.stem}"
        except SeqReadsError as e:
            report_error(on_error, e)
            return None
        except OSError as e:
            report_error(on_error, IOFailureError(f"Cannot create temporary directory: {e}"))
            return None

        logger.info(f"Decompressing {path} to {temp_file}")
        try:
            await self.decompressor(path, temp_file)
            collection = load_file(temp_file, on_error, config=self.config)
        except SeqReadsError as e:
            report_error(on_error, e)
            return None
        except OSError as e:
            report_error(on_error, IOFailureError(f"Decompression failed: {e}", path=path))
            return None
        finally:
            temp_file.unlink(missing_ok=True)
            logger.debug(f"Removed temporary file {temp_file}")

        if collection is None:
            return None
        return collection.as_archived()


async def load_archive(
    path: Union[str, Path],
    app_namespace: str,
    on_error: Optional[ErrorCallback] = None,
    decompressor: Optional[Decompressor] = None,
    data_dir: Optional[Path] = None
) -> Optional[ReadCollection]:
    """Decompress and load a gzip-compressed FASTA/FASTQ file. See ArchiveResolver.load."""
    resolver = ArchiveResolver(app_namespace, decompressor=decompressor, data_dir=data_dir)
    return await resolver.load(path, on_error)


async def load_any(
    path: Union[str, Path],
    on_error: Optional[ErrorCallback] = None,
    config: Optional[LoaderConfig] = None,
    decompressor: Optional[Decompressor] = None
) -> Optional[ReadCollection]:
    """
    Load a read file, routing ``.gz`` archives through the archive resolver.

    Args:
        path: Plain or gzip-compressed FASTA/FASTQ file
        on_error: Called with a message when loading fails
        config: Loader settings (defaults to LoaderConfig())
        decompressor: Replacement for the external gzip call

    Returns:
        The parsed ReadCollection, or None on failure
    """
    config = config or LoaderConfig()
    if file_extension(path) in ARCHIVE_EXTENSIONS:
        resolver = ArchiveResolver.from_config(config, decompressor=decompressor)
        return await resolver.load(path, on_error)
    return load_file(path, on_error, config=config)
