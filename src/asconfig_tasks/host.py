"""Gather the host facts the derivation engine needs."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Optional

from .models import HostFacts, HostPlatform
from .sdk import find_framework_sdk


def detect_host_facts(
    workspace_root: Optional[Path],
    *,
    active_file: Optional[str | Path] = None,
    platform: Optional[HostPlatform] = None,
    settings_sdk: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    path_dirs: Optional[Iterable[str]] = None,
) -> HostFacts:
    """Build a `HostFacts` value for the current machine.

    Args:
        workspace_root: Open workspace folder, or None when none is open.
        active_file: File shown in the active editor, if any.
        platform: Override for the host platform (defaults to `sys.platform`).
        settings_sdk: Framework SDK path from provider settings.
        env: Environment used for SDK lookup.
        path_dirs: Directories searched for the compiler during SDK lookup.
    """
    platform = HostPlatform.from_sys_platform() if platform is None else platform
    root = Path(workspace_root).expanduser().resolve() if workspace_root is not None else None
    sdk_path = find_framework_sdk(settings_sdk, env=env, path_dirs=path_dirs, platform=platform)
    return HostFacts(
        platform=platform,
        workspace_root=root,
        active_file=str(active_file) if active_file else None,
        sdk_path=sdk_path,
    )
