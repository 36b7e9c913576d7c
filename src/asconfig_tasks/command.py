"""Resolve the `asconfigc` executable used by every task."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger

from .constants import EXECUTABLE_NAME, EXECUTABLE_NAME_WINDOWS, LOCAL_BIN_DIR
from .models import HostPlatform


def executable_name(platform: HostPlatform) -> str:
    return EXECUTABLE_NAME_WINDOWS if platform is HostPlatform.WINDOWS else EXECUTABLE_NAME


def resolve_command(workspace_root: Optional[Path], platform: HostPlatform) -> str:
    """Prefer the workspace's local `node_modules/.bin` install over a global one.

    Returns:
        An absolute path to the local executable when it exists, otherwise the
        bare executable name to be looked up on `PATH`.
    """
    name = executable_name(platform)
    if workspace_root is not None:
        local = Path(workspace_root).joinpath(*LOCAL_BIN_DIR, name)
        if local.exists():
            logger.debug("Using workspace-local {}", local)
            return str(local)
    return name
