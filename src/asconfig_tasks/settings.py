"""Load optional provider settings from `.asconfig_tasks/config.yaml`."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .constants import SETTINGS_DIR_NAME, SETTINGS_FILES
from .io_utils import _load_data_with_error


@dataclass(frozen=True)
class ProviderSettings:
    """User overrides for SDK location and the `asconfigc` command."""

    framework_sdk: Optional[str] = None
    command: Optional[str] = None


def settings_path(project_dir: Path) -> Optional[Path]:
    """Return the first settings file that exists, or None."""
    settings_dir = Path(project_dir) / SETTINGS_DIR_NAME
    for name in SETTINGS_FILES:
        candidate = settings_dir / name
        if candidate.exists():
            return candidate
    return None


def load_settings_config(project_dir: Path) -> tuple[dict[str, Any], str | None]:
    """Load the optional settings file.

    Args:
        project_dir: Workspace root directory.

    Returns:
        A tuple of `(config, error_message)`. If no file exists, returns `({}, None)`.
    """
    path = settings_path(project_dir)
    if path is None:
        return {}, None
    data, err = _load_data_with_error(path, {})
    if err:
        return {}, err
    return data, None


def _get_nested(config: dict[str, Any], *keys: str) -> Any:
    cur: Any = config
    for key in keys:
        if not isinstance(cur, dict):
            return None
        cur = cur.get(key)
    return cur


def _clean_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def get_provider_settings(config: dict[str, Any]) -> ProviderSettings:
    """Extract typed settings from a raw settings mapping.

    Args:
        config: Settings dictionary as loaded from disk.

    Returns:
        The settings; unknown keys and values of the wrong type are ignored.
    """
    return ProviderSettings(
        framework_sdk=_clean_str(_get_nested(config, "sdk", "framework")),
        command=_clean_str(config.get("command")),
    )
