"""Application-data directory resolution."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from ..exceptions import PlatformUnsupportedError


def app_data_dir(
    namespace: str,
    platform: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None
) -> Path:
    """
    Get the per-user data directory for an application.

    Args:
        namespace: Application name, used as the last path component
        platform: Platform identifier (defaults to ``sys.platform``)
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        Path to the application's data directory (not created)

    Raises:
        PlatformUnsupportedError: On an unknown platform or when the
            required environment variable is unset
    """
    platform = sys.platform if platform is None else platform
    environ = os.environ if environ is None else environ

    if platform == "darwin":
        variable, parts = "HOME", ("Library", "Application Support")
    elif platform == "win32":
        variable, parts = "APPDATA", ()
    elif platform.startswith("linux"):
        variable, parts = "HOME", ()
    else:
        raise PlatformUnsupportedError(platform)

    base = environ.get(variable)
    if not base:
        raise PlatformUnsupportedError(platform, detail=f"{variable} is not set")

    return Path(base).joinpath(*parts, namespace)


def make_sure_directory(directory: Path) -> Path:
    """Create ``directory`` and its parents if missing; return it."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory
