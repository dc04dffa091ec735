"""Project configuration: project kinds, technology stacks and the chosen setup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProjectType(Enum):
    """The kind of project to scaffold."""

    FULL_STACK_WEB = "full_stack_web"
    FRONTEND = "frontend"
    BACKEND = "backend"
    CLI_TOOL = "cli_tool"
    WEB_EXTENSION = "web_extension"


class FrontendStack(Enum):
    """Frontend technologies that can be scaffolded."""

    REACT = "react"
    REACT_TS = "react_ts"
    VUE = "vue"
    VUE_TS = "vue_ts"
    ANGULAR = "angular"
    SVELTE = "svelte"
    SVELTE_TS = "svelte_ts"
    NEXT_JS = "next_js"
    NEXT_JS_TS = "next_js_ts"
    VANILLA = "vanilla"
    VANILLA_TS = "vanilla_ts"


class BackendStack(Enum):
    """Backend technologies that can be scaffolded."""

    NODE_JS = "node_js"
    NODE_JS_TS = "node_js_ts"
    PYTHON = "python"
    RUST = "rust"
    GO = "go"
    JAVA = "java"
    PHP = "php"


@dataclass
class ProjectConfig:
    """Everything chosen for a new project."""

    name: str
    project_type: ProjectType
    frontend_stack: FrontendStack | None = None
    backend_stack: BackendStack | None = None