"""Task provider glue: load inputs once, then hand them to the engine."""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from loguru import logger

from .asconfig import load_asconfig
from .command import resolve_command
from .engine import derive_tasks
from .host import detect_host_facts
from .models import HostPlatform, TaskDescriptor
from .settings import ProviderSettings


class ActionScriptTaskProvider:
    """Offer `asconfigc` build tasks for a workspace.

    The provider holds no state between calls; every `provide_tasks()` call
    re-reads `asconfig.json` and re-detects the host.
    """

    def __init__(
        self,
        workspace_root: Optional[Path],
        *,
        active_file: Optional[str | Path] = None,
        platform: Optional[HostPlatform] = None,
        settings: Optional[ProviderSettings] = None,
        env: Optional[Mapping[str, str]] = None,
        path_dirs: Optional[Iterable[str]] = None,
    ):
        self.workspace_root = Path(workspace_root) if workspace_root is not None else None
        self.active_file = active_file
        self.platform = platform
        self.settings = settings or ProviderSettings()
        self.env = env
        self.path_dirs = list(path_dirs) if path_dirs is not None else None

    def provide_tasks(self) -> list[TaskDescriptor]:
        """Return the tasks to offer; empty when the workspace is not eligible."""
        if self.workspace_root is None:
            return []
        facts = detect_host_facts(
            self.workspace_root,
            active_file=self.active_file,
            platform=self.platform,
            settings_sdk=self.settings.framework_sdk,
            env=self.env,
            path_dirs=self.path_dirs,
        )
        config = load_asconfig(facts.workspace_root)
        command, command_args = self._command(facts.workspace_root, facts.platform)
        tasks = list(derive_tasks(config, facts, command=command, command_args=command_args))
        logger.debug("Providing {} task(s) for {}", len(tasks), facts.workspace_root)
        return tasks

    def _command(self, workspace_root: Optional[Path], platform: HostPlatform) -> tuple[str, list[str]]:
        """Split a configured command such as `npx asconfigc` into executable and leading args."""
        raw = self.settings.command
        try:
            parts = shlex.split(raw) if raw else []
        except ValueError as exc:
            logger.warning("Using configured command {!r} unsplit: {}", raw, exc)
            parts = [raw]
        if not parts:
            return resolve_command(workspace_root, platform), []
        return parts[0], parts[1:]

    def resolve_task(self, task: Any) -> None:
        """Resolving tasks that were not produced by `provide_tasks()` is not supported."""
        logger.debug("Cannot resolve task {!r}", task)
        return None
