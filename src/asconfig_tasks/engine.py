"""Derive the build and packaging tasks offered for a project.

The engine is pure: the document and host facts are gathered by the caller,
and every call builds a fresh tuple of descriptors.

Order of the result is fixed:

1. compile debug build, compile release build
2. AIR mobile packages (iOS then Android, debug before release)
3. Windows captive runtime package
4. macOS captive runtime package
5. desktop shared runtime packages (debug, release)
"""

from __future__ import annotations

from typing import Optional, Sequence

from loguru import logger

from .constants import EXECUTABLE_NAME
from .models import (
    AirPlatform,
    AppKind,
    AsconfigDocument,
    Classification,
    HostFacts,
    HostPlatform,
    TaskDescriptor,
)


_MOBILE_TASKS = (
    ("package debug iOS application", True, AirPlatform.IOS),
    ("package release iOS application", False, AirPlatform.IOS),
    ("package debug Android application", True, AirPlatform.ANDROID),
    ("package release Android application", False, AirPlatform.ANDROID),
)
_WINDOWS_CAPTIVE_TASK = (
    "package release Windows application (captive runtime)",
    False,
    AirPlatform.WINDOWS,
)
_MAC_CAPTIVE_TASK = (
    "package release macOS application (captive runtime)",
    False,
    AirPlatform.MAC,
)
_SHARED_RUNTIME_TASKS = (
    ("package debug desktop application (shared runtime)", True, AirPlatform.AIR),
    ("package release desktop application (shared runtime)", False, AirPlatform.AIR),
)


def is_eligible(config: Optional[AsconfigDocument], facts: HostFacts) -> bool:
    """Return True when the project should be offered any tasks at all.

    A loaded ``asconfig.json`` always qualifies. Without one, an open workspace
    with an ``.as`` or ``.mxml`` file in the active editor is enough.
    """
    if config is not None:
        return True
    return facts.has_workspace and facts.active_file_is_source


def classify(config: Optional[AsconfigDocument], facts: HostFacts) -> Classification:
    """Fold the document predicates into a single classification.

    Mobile detection wins over desktop detection. A bundle target only counts
    when it names the platform the host is running.
    """
    if config is None:
        return Classification(platform=facts.platform)

    if config.is_air_mobile:
        kind = AppKind.AIR_MOBILE
    elif config.is_air_desktop:
        kind = AppKind.AIR_DESKTOP
    else:
        kind = AppKind.PLAIN

    bundle: Optional[AirPlatform] = None
    if facts.platform is HostPlatform.WINDOWS and config.windows_bundle:
        bundle = AirPlatform.WINDOWS
    elif facts.platform is HostPlatform.MACOS and config.mac_bundle:
        bundle = AirPlatform.MAC

    return Classification(kind=kind, bundle=bundle, platform=facts.platform)


def derive_tasks(
    config: Optional[AsconfigDocument],
    facts: HostFacts,
    command: str = EXECUTABLE_NAME,
    command_args: Sequence[str] = (),
) -> tuple[TaskDescriptor, ...]:
    """Build the ordered task list for a project.

    Args:
        config: Parsed ``asconfig.json``, or None when it is missing or unreadable.
        facts: Host platform, workspace and active editor state, SDK location.
        command: The ``asconfigc`` executable to invoke.
        command_args: Arguments placed before the generated ones, such as the
            script name when `command` is a launcher like `npx`.

    Returns:
        The descriptors to offer, possibly empty.
    """
    if not is_eligible(config, facts):
        return ()

    classification = classify(config, facts)
    entries: list[tuple[str, bool, Optional[AirPlatform]]] = [
        ("compile debug build", True, None),
        ("compile release build", False, None),
    ]
    if classification.packages_mobile:
        entries.extend(_MOBILE_TASKS)
    if classification.packages_windows_captive:
        entries.append(_WINDOWS_CAPTIVE_TASK)
    if classification.packages_mac_captive:
        entries.append(_MAC_CAPTIVE_TASK)
    if classification.packages_shared_runtime:
        entries.extend(_SHARED_RUNTIME_TASKS)

    logger.debug(
        "Derived {} task(s): kind={} bundle={} platform={}",
        len(entries),
        classification.kind.value,
        classification.bundle.value if classification.bundle else None,
        classification.platform.value,
    )
    return tuple(
        TaskDescriptor.build(
            description,
            command=command,
            sdk_path=facts.sdk_path,
            debug=debug,
            air=air,
            command_args=command_args,
        )
        for description, debug, air in entries
    )
