"""Interactive project setup and dispatch to the frontend template writers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from devgeini.frontend import (
    create_angular_project,
    create_nextjs_project,
    create_nextjs_ts_project,
    create_react_project,
    create_react_ts_project,
    create_svelte_project,
    create_svelte_ts_project,
    create_vanilla_project,
    create_vanilla_ts_project,
    create_vue_project,
    create_vue_ts_project,
)
from devgeini.structure import BackendStack, FrontendStack, ProjectConfig, ProjectType

_FRONTEND_WRITERS: dict[FrontendStack, Callable[[ProjectConfig, Path], None]] = {
    FrontendStack.REACT: create_react_project,
    FrontendStack.REACT_TS: create_react_ts_project,
    FrontendStack.VUE: create_vue_project,
    FrontendStack.VUE_TS: create_vue_ts_project,
    FrontendStack.NEXT_JS: create_nextjs_project,
    FrontendStack.NEXT_JS_TS: create_nextjs_ts_project,
    FrontendStack.SVELTE: create_svelte_project,
    FrontendStack.SVELTE_TS: create_svelte_ts_project,
    FrontendStack.VANILLA: create_vanilla_project,
    FrontendStack.VANILLA_TS: create_vanilla_ts_project,
    FrontendStack.ANGULAR: create_angular_project,
}

_PROJECT_TYPE_OPTIONS = (
    ("Full Stack Web Application", ProjectType.FULL_STACK_WEB),
    ("Frontend Only", ProjectType.FRONTEND),
    ("Backend Only", ProjectType.BACKEND),
    ("CLI Tool", ProjectType.CLI_TOOL),
    ("Web Extension", ProjectType.WEB_EXTENSION),
)

_FRONTEND_LABELS = (
    "React (TypeScript)",
    "Vue.js (TypeScript)",
    "Svelte (TypeScript)",
    "Next.js (TypeScript)",
    "Vanilla JavaScript",
)

# Choices map onto stacks by position in this order, whatever the label says.
_FRONTEND_BY_POSITION = (
    FrontendStack.REACT_TS,
    FrontendStack.REACT,
    FrontendStack.VUE_TS,
    FrontendStack.VUE,
    FrontendStack.ANGULAR,
    FrontendStack.SVELTE_TS,
    FrontendStack.SVELTE,
    FrontendStack.NEXT_JS_TS,
    FrontendStack.NEXT_JS,
    FrontendStack.VANILLA_TS,
    FrontendStack.VANILLA,
)

_BACKEND_LABELS = (
    "Node.js (TypeScript)",
    "Node.js (JavaScript)",
    "Python (FastAPI)",
    "Rust (Actix)",
    "Go",
)

_BACKEND_BY_POSITION = (
    BackendStack.NODE_JS_TS,
    BackendStack.NODE_JS,
    BackendStack.PYTHON,
    BackendStack.RUST,
    BackendStack.GO,
    BackendStack.JAVA,
    BackendStack.PHP,
)


def _select(prompt: str, options: Sequence[str], default: int = 0) -> int:
    """Ask the user to pick one of ``options``; return its zero-based index."""
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


def create_frontend_files(config: ProjectConfig, path: Path) -> None:
    """Write the frontend template chosen in ``config`` into ``path``."""
    if config.frontend_stack is None:
        raise ValueError("project configuration has no frontend stack")
    _FRONTEND_WRITERS[config.frontend_stack](config, Path(path))


def get_project_name() -> str:
    """Prompt until a non-empty project name is entered."""
    while True:
        name = input("? Enter project name: ").strip()
        if name:
            return name


def get_project_config_interactive(name: str) -> ProjectConfig:
    """Ask for the project type and whatever stacks it needs."""
    project_type = select_project_type()
    config = ProjectConfig(name=name, project_type=project_type)
    if project_type in (ProjectType.FULL_STACK_WEB, ProjectType.FRONTEND):
        config.frontend_stack = select_frontend_stack()
    if project_type in (ProjectType.FULL_STACK_WEB, ProjectType.BACKEND):
        config.backend_stack = select_backend_stack()
    return config


def select_project_type() -> ProjectType:
    """Ask which kind of project to create."""
    labels = [label for label, _ in _PROJECT_TYPE_OPTIONS]
    choice = _select("Select project type", labels)
    return _PROJECT_TYPE_OPTIONS[choice][1]


def select_frontend_stack() -> FrontendStack:
    """Ask which frontend technology to use."""
    choice = _select("Select frontend technology", _FRONTEND_LABELS)
    return _FRONTEND_BY_POSITION[choice]


def select_backend_stack() -> BackendStack:
    """Ask which backend technology to use."""
    choice = _select("Select backend technology", _BACKEND_LABELS)
    return _BACKEND_BY_POSITION[choice]