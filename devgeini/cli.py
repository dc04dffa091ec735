"""Command-line entry point: menus, project creation and self-update."""

from __future__ import annotations

import argparse
import os
import shutil
import sys
import threading
from collections.abc import Sequence
from pathlib import Path

import requests

from devgeini.instructions import show_next_steps
from devgeini.scaffold import create_frontend_files, get_project_config_interactive, get_project_name
from devgeini.structure import ProjectConfig, ProjectType
from devgeini.updater import (
    CURRENT_VERSION,
    check_for_updates,
    check_for_updates_silent,
    handle_update,
)

_NETWORK_ERRORS = (requests.RequestException, RuntimeError, OSError, ValueError)

_MENU_OPTIONS = (
    "🎯 Create a new project",
    "🔄 Check for updates",
    "📖 Show help",
    "🚪 Exit",
)

_HELP_TEXT = """\

📖 Devgeini Help
================
Available commands:

🎯 devgeini init                    - Start creating a new project
🎯 devgeini init --name <name>      - Create project with specific name
🎯 devgeini init --interactive      - Run in full interactive mode

🔄 devgeini --update               - Update to latest version
🔍 devgeini --check-update         - Check if updates are available
❓ devgeini --help                 - Show this help message
📋 devgeini --version              - Show current version

💡 Pro tip: Just run 'devgeini' to see the interactive menu!

Supported Project Types:
• 🌐 Full-Stack Web Applications
• 🎨 Frontend Applications (React, Vue, Angular, Svelte, Next.js)
• ⚙️  Backend APIs (Node.js, Python, Rust, Go, Java, PHP)
• 🛠️  CLI Tools (Rust)
• 🧩 Browser Extensions
"""


def _banner(rule: str) -> None:
    print("\n🚀 Welcome to Devgeini - Your Dev CLI Companion!")
    print(rule)
    print("This tool helps you scaffold your project setup faster.\n")


def _start_background_update_check() -> None:
    """Look for a newer release without blocking; set DEVGEINI_NO_UPDATE_CHECK to skip."""
    if os.environ.get("DEVGEINI_NO_UPDATE_CHECK"):
        return

    def run() -> None:
        try:
            check_for_updates_silent()
        except Exception:
            pass

    threading.Thread(target=run, daemon=True).start()


def _choose(prompt: str, options: Sequence[str], default: int = 0) -> int:
    print(f"? {prompt}")
    for number, option in enumerate(options, start=1):
        print(f"  {number}) {option}")
    while True:
        answer = input(f"Choice [{default + 1}]: ").strip()
        if not answer:
            return default
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return int(answer) - 1
        print(f"Please enter a number between 1 and {len(options)}.")


def _confirm(prompt: str) -> bool:
    while True:
        answer = input(f"? {prompt} [y/n] ").strip().lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False


def _create_project(config: ProjectConfig) -> None:
    if config.project_type is not ProjectType.FRONTEND:
        raise RuntimeError(
            f"no template is available for {config.project_type.value} projects"
        )
    project_path = Path(config.name)
    if project_path.exists():
        if not _confirm("Project directory already exists. Overwrite?"):
            return
        shutil.rmtree(project_path)
    project_path.mkdir(parents=True)
    create_frontend_files(config, project_path)
    print("\n🔧 Setting up project dependencies...")


def _create_and_report(config: ProjectConfig) -> int:
    try:
        _create_project(config)
    except (RuntimeError, OSError, ValueError) as error:
        print(f"❌ Error creating project: {error}", file=sys.stderr)
        return 1
    print(f"🎉 Project '{config.name}' created successfully!")
    print(f"📁 Navigate to your project: cd {config.name}")
    show_next_steps(config)
    return 0


def show_help_menu() -> None:
    """Print the list of commands and supported project types."""
    print(_HELP_TEXT)


def show_welcome_menu() -> int:
    """Show the interactive main menu and run the chosen action; return an exit code."""
    _banner("=================================================")
    _start_background_update_check()

    selection = _choose("What would you like to do?", _MENU_OPTIONS)
    if selection == 0:
        print("\n🛠️  Starting project creation...\n")
        config = get_project_config_interactive(get_project_name())
        return _create_and_report(config)
    if selection == 1:
        try:
            check_for_updates()
        except _NETWORK_ERRORS as error:
            print(f"❌ Failed to check for updates: {error}", file=sys.stderr)
        return 0
    if selection == 2:
        show_help_menu()
        return 0
    print("👋 Thanks for using Devgeini! Happy coding!")
    return 0


def _handle_init(name: str | None) -> int:
    _banner("-----------------------------------------------")
    _start_background_update_check()
    config = get_project_config_interactive(name if name is not None else get_project_name())
    return _create_and_report(config)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devgeini",
        description="Initialize development projects with proper structure and boilerplate",
    )
    parser.add_argument("--version", action="version", version=f"devgeini {CURRENT_VERSION}")
    parser.add_argument(
        "-u", "--update", action="store_true", help="Update devgeini to the latest version"
    )
    parser.add_argument(
        "--check-update", action="store_true", help="Check if a new version is available"
    )
    commands = parser.add_subparsers(dest="command")
    init = commands.add_parser("init", help="Initialize a new project")
    init.add_argument("-n", "--name", metavar="PROJECT_NAME", help="Sets the project name")
    init.add_argument(
        "-i", "--interactive", action="store_true", help="Run in interactive mode"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit code."""
    args = _build_parser().parse_args(argv)

    if args.update:
        try:
            handle_update()
        except _NETWORK_ERRORS as error:
            print(f"❌ Update failed: {error}", file=sys.stderr)
            return 1
        return 0

    if args.check_update:
        try:
            check_for_updates()
        except _NETWORK_ERRORS as error:
            print(f"❌ Failed to check for updates: {error}", file=sys.stderr)
            return 1
        return 0

    if args.command == "init":
        return _handle_init(args.name)
    return show_welcome_menu()


if __name__ == "__main__":
    raise SystemExit(main())