"""Locate the framework SDK that `asconfigc` should compile against.

Search order (first valid SDK wins):

1. The `sdk.framework` provider setting
2. `ROYALE_HOME`
3. `FLEX_HOME`
4. A directory on `PATH` containing the `mxmlc` compiler, whose parent is an SDK
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Mapping, Optional

from loguru import logger

from .constants import (
    COMPILER_EXECUTABLE,
    COMPILER_EXECUTABLE_WINDOWS,
    ENV_FLEX_HOME,
    ENV_ROYALE_HOME,
    SDK_DESCRIPTION_FILES,
)
from .models import HostPlatform


def is_valid_sdk(path: Optional[str | Path]) -> bool:
    """Return True if `path` looks like an Apache Flex or Royale SDK root."""
    if not path:
        return False
    root = Path(path).expanduser()
    if not root.is_dir():
        return False
    return any((root / name).is_file() for name in SDK_DESCRIPTION_FILES)


def _sdks_on_path(path_dirs: Iterable[str], platform: HostPlatform) -> Iterable[Path]:
    executable = COMPILER_EXECUTABLE_WINDOWS if platform is HostPlatform.WINDOWS else COMPILER_EXECUTABLE
    for entry in path_dirs:
        if not entry:
            continue
        candidate = Path(entry).expanduser() / executable
        if not candidate.is_file():
            continue
        # mxmlc lives in <sdk>/bin; follow symlinks such as /usr/local/bin/mxmlc.
        yield candidate.resolve().parent.parent


def find_framework_sdk(
    settings_sdk: Optional[str] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    path_dirs: Optional[Iterable[str]] = None,
    platform: HostPlatform = HostPlatform.OTHER,
) -> Optional[str]:
    """Resolve the framework SDK root.

    Args:
        settings_sdk: Explicit SDK path from provider settings.
        env: Environment variables (defaults to `os.environ`).
        path_dirs: Directories to search for the compiler (defaults to `PATH`).
        platform: Host platform, used to pick the compiler executable name.

    Returns:
        The SDK path as a string, or None if no valid SDK was found.
    """
    env = os.environ if env is None else env
    if path_dirs is None:
        path_dirs = (env.get("PATH") or "").split(os.pathsep)

    if settings_sdk:
        if is_valid_sdk(settings_sdk):
            return str(Path(settings_sdk).expanduser())
        logger.warning("Configured framework SDK is not valid: {}", settings_sdk)

    for var in (ENV_ROYALE_HOME, ENV_FLEX_HOME):
        value = env.get(var)
        if value and is_valid_sdk(value):
            logger.debug("Using framework SDK from {}: {}", var, value)
            return str(Path(value).expanduser())

    for sdk_root in _sdks_on_path(path_dirs, platform):
        if is_valid_sdk(sdk_root):
            logger.debug("Using framework SDK found on PATH: {}", sdk_root)
            return str(sdk_root)

    logger.debug("No framework SDK found")
    return None
