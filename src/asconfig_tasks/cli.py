"""Provide the `asconfig-tasks` command line entrypoint."""

from __future__ import annotations

import argparse
import shlex
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

from loguru import logger
from rich.console import Console
from rich.table import Table

from .constants import DEFAULT_LOG_LEVEL
from .host import detect_host_facts
from .logging_utils import configure_logging, pretty, summarize_tasks
from .models import HostPlatform, TaskDescriptor
from .provider import ActionScriptTaskProvider
from .settings import get_provider_settings, load_settings_config


def _resolve_project_dir(project_dir: Optional[str]) -> Path:
    return Path(project_dir).expanduser().resolve() if project_dir else Path.cwd().resolve()


def _platform(args: argparse.Namespace) -> Optional[HostPlatform]:
    return HostPlatform.parse(args.platform) if args.platform else None


def _render_table(tasks: list[TaskDescriptor]) -> None:
    console = Console(width=160)
    if not tasks:
        console.print("No tasks available for this workspace.")
        return
    table = Table(title="ActionScript build tasks")
    table.add_column("Task", no_wrap=True)
    table.add_column("Source", no_wrap=True)
    table.add_column("Command")
    for task in tasks:
        table.add_row(task.description, task.source, shlex.join(task.command_line))
    console.print(table)


def _list(args: argparse.Namespace) -> int:
    project_dir = _resolve_project_dir(args.project_dir)
    raw_settings, settings_err = load_settings_config(project_dir)
    if settings_err:
        logger.error("Ignoring provider settings: {}", settings_err)
    settings = get_provider_settings(raw_settings)
    if args.sdk:
        settings = replace(settings, framework_sdk=args.sdk)

    provider = ActionScriptTaskProvider(
        None if args.no_workspace else project_dir,
        active_file=args.active_file,
        platform=_platform(args),
        settings=settings,
    )
    tasks = provider.provide_tasks()
    logger.info("Task summary: {}", pretty(summarize_tasks(tasks)))

    if args.json:
        payload = {"tasks": [task.to_task_definition() for task in tasks]}
        if settings_err:
            payload["errors"] = [settings_err]
        sys.stdout.write(pretty(payload) + "\n")
    else:
        _render_table(tasks)
    return 2 if settings_err else 0


def _sdk(args: argparse.Namespace) -> int:
    project_dir = _resolve_project_dir(args.project_dir)
    raw_settings, settings_err = load_settings_config(project_dir)
    if settings_err:
        logger.error("Ignoring provider settings: {}", settings_err)
    settings = get_provider_settings(raw_settings)
    facts = detect_host_facts(
        project_dir,
        platform=_platform(args),
        settings_sdk=settings.framework_sdk,
    )
    if args.json:
        sys.stdout.write(pretty({"sdk": facts.sdk_path, "platform": facts.platform.value}) + "\n")
    elif facts.sdk_path:
        sys.stdout.write(f"{facts.sdk_path}\n")
    else:
        sys.stdout.write("No framework SDK found\n")
    return 0 if facts.sdk_path else 1


def _common_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--project-dir", default=None, help="Workspace root (default: current working directory)")
    common.add_argument(
        "--platform",
        default=None,
        choices=[p.value for p in HostPlatform] + ["win32", "darwin", "linux"],
        help="Host platform to assume (default: the current machine)",
    )
    common.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="Log level (default: %(default)s)")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List the asconfigc build tasks offered for a workspace")
    common = _common_parser()
    subparsers = parser.add_subparsers(dest="command", required=True)

    tasks = subparsers.add_parser("list", parents=[common], help="List the available build tasks")
    tasks.add_argument("--active-file", default=None, help="File open in the active editor")
    tasks.add_argument("--sdk", default=None, help="Framework SDK path (overrides settings)")
    tasks.add_argument("--no-workspace", action="store_true", help="Behave as if no workspace folder is open")
    tasks.add_argument("--json", action="store_true", help="Print tasks.json-style JSON")
    tasks.set_defaults(func=_list)

    sdk = subparsers.add_parser("sdk", parents=[common], help="Show the framework SDK that tasks will use")
    sdk.add_argument("--json", action="store_true", help="Print machine-readable JSON")
    sdk.set_defaults(func=_sdk)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    handler = getattr(args, "func", None)
    if handler is None:
        parser.print_help()
        return 1
    return int(handler(args) or 0)


if __name__ == "__main__":
    raise SystemExit(main())
