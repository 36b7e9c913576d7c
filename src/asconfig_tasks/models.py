"""Value types shared by the loader, the derivation engine and the provider.

Everything here is immutable: documents and host facts are read once per
derivation, and descriptors are never modified after the engine builds them.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    CONFIG_AIR,
    CONFIG_AIRMOBILE,
    FIELD_AIR_OPTIONS,
    FIELD_APPLICATION,
    FIELD_CONFIG,
    FIELD_MAC,
    FIELD_TARGET,
    FIELD_WINDOWS,
    MATCHER,
    SOURCE_ACTIONSCRIPT,
    SOURCE_AIR,
    SOURCE_FILE_EXTENSIONS,
    TARGET_BUNDLE,
    TASK_GROUP_BUILD,
    TASK_TYPE,
)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class HostPlatform(str, Enum):
    """Operating system family of the machine the tasks will run on."""

    WINDOWS = "windows"
    MACOS = "mac"
    OTHER = "other"

    @classmethod
    def from_sys_platform(cls, value: Optional[str] = None) -> "HostPlatform":
        """Map a ``sys.platform`` style identifier to a host platform."""
        value = sys.platform if value is None else value
        if value == "win32":
            return cls.WINDOWS
        if value == "darwin":
            return cls.MACOS
        return cls.OTHER

    @classmethod
    def parse(cls, value: str) -> "HostPlatform":
        """Accept either a member value (``mac``) or a ``sys.platform`` name (``darwin``)."""
        raw = (value or "").strip().lower()
        for member in cls:
            if member.value == raw:
                return member
        return cls.from_sys_platform(raw)


class AirPlatform(str, Enum):
    """Packaging target passed to ``asconfigc --air``."""

    IOS = "ios"
    ANDROID = "android"
    AIR = "air"
    WINDOWS = "windows"
    MAC = "mac"


class AppKind(str, Enum):
    """What kind of application an ``asconfig.json`` describes."""

    PLAIN = "plain"
    AIR_MOBILE = "air_mobile"
    AIR_DESKTOP = "air_desktop"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class AsconfigDocument:
    """The parts of ``asconfig.json`` that decide which tasks are offered.

    Presence-only keys (``application``, ``airOptions``) count as present even
    when their value is ``null``. Values of the wrong shape read as absent.
    """

    config: Optional[str] = None
    has_application: bool = False
    has_air_options: bool = False
    windows_target: Optional[str] = None
    mac_target: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AsconfigDocument":
        return cls(
            config=_as_str(data.get(FIELD_CONFIG)),
            has_application=FIELD_APPLICATION in data,
            has_air_options=FIELD_AIR_OPTIONS in data,
            windows_target=_as_str(_as_dict(data.get(FIELD_WINDOWS)).get(FIELD_TARGET)),
            mac_target=_as_str(_as_dict(data.get(FIELD_MAC)).get(FIELD_TARGET)),
        )

    @property
    def is_air_mobile(self) -> bool:
        return self.config == CONFIG_AIRMOBILE

    @property
    def is_air_desktop(self) -> bool:
        """Desktop AIR detection; callers must check :attr:`is_air_mobile` first."""
        return self.has_application or self.has_air_options or self.config == CONFIG_AIR

    @property
    def windows_bundle(self) -> bool:
        return self.windows_target == TARGET_BUNDLE

    @property
    def mac_bundle(self) -> bool:
        return self.mac_target == TARGET_BUNDLE


@dataclass(frozen=True)
class HostFacts:
    """Environment facts gathered by the host before tasks are derived."""

    platform: HostPlatform = HostPlatform.OTHER
    workspace_root: Optional[Path] = None
    active_file: Optional[str] = None
    sdk_path: Optional[str] = None

    @property
    def has_workspace(self) -> bool:
        return self.workspace_root is not None

    @property
    def active_file_is_source(self) -> bool:
        if not self.active_file:
            return False
        return self.active_file.endswith(SOURCE_FILE_EXTENSIONS)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Classification:
    """Single ordered verdict about a project on a given host.

    ``bundle`` is only ever the current host's own platform: a ``mac`` bundle
    target is ignored on Windows and vice versa.
    """

    kind: AppKind = AppKind.PLAIN
    bundle: Optional[AirPlatform] = None
    platform: HostPlatform = HostPlatform.OTHER

    @property
    def packages_mobile(self) -> bool:
        return self.kind is AppKind.AIR_MOBILE

    @property
    def packages_windows_captive(self) -> bool:
        desktop_here = self.kind is AppKind.AIR_DESKTOP and self.platform is HostPlatform.WINDOWS
        return desktop_here or self.bundle is AirPlatform.WINDOWS

    @property
    def packages_mac_captive(self) -> bool:
        desktop_here = self.kind is AppKind.AIR_DESKTOP and self.platform is HostPlatform.MACOS
        return desktop_here or self.bundle is AirPlatform.MAC

    @property
    def packages_shared_runtime(self) -> bool:
        return self.kind is AppKind.AIR_DESKTOP and self.bundle is None


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

class TaskDescriptor(BaseModel):
    """An invocable build task, ready to hand to the IDE's task runner."""

    model_config = ConfigDict(frozen=True)

    description: str
    type: str = TASK_TYPE
    debug: bool
    air: Optional[AirPlatform] = None
    command: str
    args: tuple[str, ...] = Field(default_factory=tuple)
    source: str = SOURCE_ACTIONSCRIPT
    group: str = TASK_GROUP_BUILD
    problem_matcher: str = MATCHER

    @classmethod
    def build(
        cls,
        description: str,
        *,
        command: str,
        sdk_path: Optional[str],
        debug: bool,
        air: Optional[AirPlatform] = None,
        command_args: Sequence[str] = (),
    ) -> "TaskDescriptor":
        args: list[str] = list(command_args)
        if sdk_path:
            args.extend(["--flexHome", sdk_path])
        args.append("--debug=true" if debug else "--debug=false")
        if air is not None:
            args.extend(["--air", air.value])
        return cls(
            description=description,
            debug=debug,
            air=air,
            command=command,
            args=tuple(args),
            source=SOURCE_ACTIONSCRIPT if air is None else SOURCE_AIR,
        )

    @property
    def command_line(self) -> list[str]:
        return [self.command, *self.args]

    def to_task_definition(self) -> dict[str, Any]:
        """Render the entry as it would appear in a ``tasks.json`` file."""
        definition: dict[str, Any] = {"type": self.type, "debug": self.debug}
        if self.air is not None:
            definition["air"] = self.air.value
        definition.update(
            {
                "label": self.description,
                "source": self.source,
                "command": self.command,
                "args": list(self.args),
                "group": self.group,
                "problemMatcher": self.problem_matcher,
            }
        )
        return definition
