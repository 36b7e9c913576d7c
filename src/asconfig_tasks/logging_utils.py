"""Logging setup and log-friendly formatting helpers."""

from __future__ import annotations

import json
import sys
from typing import Any, Iterable

from loguru import logger

from .constants import DEFAULT_LOG_LEVEL


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure loguru logger with the specified level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{module}</cyan>:<cyan>{line}</cyan>\n"
            "{message}"
        ),
    )


def summarize_tasks(tasks: Iterable[Any]) -> dict[str, Any]:
    """Render a compact, JSON-friendly summary of a task list.

    Args:
        tasks: Task descriptors (anything with `description` and `air` attributes).

    Returns:
        A dictionary with the task count, labels, and packaging targets.
    """
    labels: list[str] = []
    targets: list[str] = []
    for task in tasks:
        labels.append(str(getattr(task, "description", task)))
        air = getattr(task, "air", None)
        if air is not None:
            value = getattr(air, "value", str(air))
            if value not in targets:
                targets.append(value)
    return {"count": len(labels), "labels": labels, "targets": targets}


def pretty(obj: Any, *, indent: int = 2) -> str:
    """Serialize an object as JSON for readable output.

    Args:
        obj: Object to serialize.
        indent: Indentation level for JSON output.

    Returns:
        A JSON string when possible; otherwise `str(obj)`.
    """
    try:
        return json.dumps(obj, indent=indent, default=str)
    except (TypeError, ValueError):
        return str(obj)
