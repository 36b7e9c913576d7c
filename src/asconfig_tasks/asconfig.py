"""Read `asconfig.json` from a workspace root."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import json5
from loguru import logger

from .constants import ASCONFIG_JSON
from .models import AsconfigDocument


class AsconfigError(ValueError):
    """Raised when `asconfig.json` text is not a relaxed-JSON object."""


def asconfig_path(workspace_root: Path) -> Path:
    return Path(workspace_root) / ASCONFIG_JSON


def parse_asconfig_text(text: str) -> AsconfigDocument:
    """Parse `asconfig.json` contents.

    Raises:
        AsconfigError: If the text is not valid relaxed JSON or is not an object.
    """
    try:
        data = json5.loads(text)
    except ValueError as exc:
        raise AsconfigError(f"{ASCONFIG_JSON}: {exc}") from exc
    except RecursionError as exc:
        raise AsconfigError(f"{ASCONFIG_JSON}: nested too deeply") from exc
    if not isinstance(data, dict):
        raise AsconfigError(f"{ASCONFIG_JSON}: expected object, got {type(data).__name__}")
    return AsconfigDocument.from_mapping(data)


def load_asconfig(workspace_root: Optional[Path]) -> Optional[AsconfigDocument]:
    """Load the project's `asconfig.json`.

    Args:
        workspace_root: Workspace folder, or None when no folder is open.

    Returns:
        The parsed document, or None if the file is missing or cannot be parsed.
    """
    if workspace_root is None:
        return None
    path = asconfig_path(workspace_root)
    if not path.is_file():
        logger.debug("No {} found at {}", ASCONFIG_JSON, path)
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Ignoring unreadable {}: {}: {}", ASCONFIG_JSON, exc.__class__.__name__, exc)
        return None
    try:
        return parse_asconfig_text(text)
    except AsconfigError as exc:
        logger.warning("Ignoring unparsable {}", exc)
        return None
