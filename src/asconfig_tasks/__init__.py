"""Provide the public `asconfig_tasks` package exports."""

from __future__ import annotations

from .asconfig import AsconfigError, load_asconfig, parse_asconfig_text
from .engine import classify, derive_tasks, is_eligible
from .models import (
    AirPlatform,
    AppKind,
    AsconfigDocument,
    Classification,
    HostFacts,
    HostPlatform,
    TaskDescriptor,
)
from .provider import ActionScriptTaskProvider

__all__ = [
    "ActionScriptTaskProvider",
    "AirPlatform",
    "AppKind",
    "AsconfigDocument",
    "AsconfigError",
    "Classification",
    "HostFacts",
    "HostPlatform",
    "TaskDescriptor",
    "classify",
    "derive_tasks",
    "is_eligible",
    "load_asconfig",
    "parse_asconfig_text",
]
