"""Follow-up instructions shown once a project has been created."""

from __future__ import annotations

from devgeini.structure import BackendStack, FrontendStack, ProjectConfig, ProjectType

_CLI_TOOL_STEPS = (
    "🦀 Build project: cargo build",
    "🏃 Run project: cargo run",
    "🧪 Run tests: cargo test",
)

_WEB_EXTENSION_STEPS = (
    "📦 Install dependencies: npm install",
    "🔧 Build extension: npm run build",
    "🔍 Load extension in browser for testing",
)

_FULLSTACK_BACKEND_STEPS: dict[BackendStack, tuple[str, ...]] = {
    BackendStack.NODE_JS: (
        "📦 Install backend deps: cd backend && npm install",
        "🚀 Start backend: npm run dev (usually on port 3001)",
    ),
    BackendStack.NODE_JS_TS: (
        "📦 Install backend deps: cd backend && npm install",
        "🚀 Start backend: npm run dev (TypeScript)",
    ),
    BackendStack.PYTHON: (
        "🐍 Setup virtual env: cd backend && python -m venv venv",
        "📦 Activate & install: source venv/bin/activate && pip install -r requirements.txt",
        "🚀 Start backend: python app.py",
    ),
    BackendStack.RUST: (
        "🦀 Build backend: cd backend && cargo build",
        "🚀 Start backend: cargo run",
    ),
    BackendStack.GO: (
        "📦 Install deps: cd backend && go mod tidy",
        "🚀 Start backend: go run main.go",
    ),
    BackendStack.JAVA: (
        "☕ Build project: cd backend && mvn clean install",
        "🚀 Start backend: mvn spring-boot:run",
    ),
    BackendStack.PHP: (
        "🐘 Install deps: cd backend && composer install",
        "🚀 Start backend: php -S localhost:8000",
    ),
}

_FULLSTACK_FRONTEND_INSTALL = "📦 Install frontend deps: cd frontend && npm install"

_FULLSTACK_FRONTEND_START: dict[FrontendStack, str] = {
    FrontendStack.REACT: "🚀 Start frontend: npm start (usually on port 3000)",
    FrontendStack.REACT_TS: "🚀 Start frontend: npm start (React + TypeScript)",
    FrontendStack.VUE: "🚀 Start frontend: npm run serve",
    FrontendStack.VUE_TS: "🚀 Start frontend: npm run serve (Vue + TypeScript)",
    FrontendStack.ANGULAR: "🚀 Start frontend: ng serve",
    FrontendStack.SVELTE: "🚀 Start frontend: npm run dev",
    FrontendStack.SVELTE_TS: "🚀 Start frontend: npm run dev (Svelte + TypeScript)",
    FrontendStack.NEXT_JS: "🚀 Start frontend: npm run dev",
    FrontendStack.NEXT_JS_TS: "🚀 Start frontend: npm run dev (Next.js + TypeScript)",
    FrontendStack.VANILLA: "🚀 Start frontend: npm run dev",
    FrontendStack.VANILLA_TS: "🚀 Start frontend: npm run dev (Vanilla + TypeScript)",
}

_INSTALL = "📦 Install dependencies: npm install"
_BUILD = "🏗️  Build for production: npm run build"

_FRONTEND_STEPS: dict[FrontendStack, tuple[str, ...]] = {
    FrontendStack.REACT: (_INSTALL, "🚀 Start development: npm start", _BUILD),
    FrontendStack.REACT_TS: (
        _INSTALL,
        "🚀 Start development: npm start (React + TypeScript)",
        _BUILD,
        "🔧 Type check: npm run type-check",
    ),
    FrontendStack.VUE: (_INSTALL, "🚀 Start development: npm run serve", _BUILD),
    FrontendStack.VUE_TS: (
        _INSTALL,
        "🚀 Start development: npm run serve (Vue + TypeScript)",
        _BUILD,
        "🔧 Type check: npm run type-check",
    ),
    FrontendStack.ANGULAR: (
        _INSTALL,
        "🚀 Start development: ng serve",
        "🏗️  Build for production: ng build",
        "🧪 Run tests: ng test",
    ),
    FrontendStack.SVELTE: (_INSTALL, "🚀 Start development: npm run dev", _BUILD),
    FrontendStack.SVELTE_TS: (
        _INSTALL,
        "🚀 Start development: npm run dev (Svelte + TypeScript)",
        _BUILD,
        "🔧 Type check: npm run check",
    ),
    FrontendStack.NEXT_JS: (
        _INSTALL,
        "🚀 Start development: npm run dev",
        _BUILD,
        "🌐 Start production: npm start",
    ),
    FrontendStack.NEXT_JS_TS: (
        _INSTALL,
        "🚀 Start development: npm run dev (Next.js + TypeScript)",
        _BUILD,
        "🌐 Start production: npm start",
        "🔧 Type check: npm run type-check",
    ),
    FrontendStack.VANILLA: (_INSTALL, "🚀 Start development: npm run dev", _BUILD),
    FrontendStack.VANILLA_TS: (
        _INSTALL,
        "🚀 Start development: npm run dev (Vanilla + TypeScript)",
        _BUILD,
        "🔧 Type check: tsc --noEmit",
    ),
}

_BACKEND_STEPS: dict[BackendStack, tuple[str, ...]] = {
    BackendStack.NODE_JS: (
        _INSTALL,
        "🚀 Start development: npm run dev",
        "🏗️  Start production: npm start",
    ),
    BackendStack.NODE_JS_TS: (
        _INSTALL,
        "🚀 Start development: npm run dev (Node.js + TypeScript)",
        "🏗️  Build project: npm run build",
        "🌐 Start production: npm start",
        "🔧 Type check: npm run type-check",
    ),
    BackendStack.PYTHON: (
        "🐍 Create virtual environment: python -m venv venv",
        "📦 Activate and install: source venv/bin/activate && pip install -r requirements.txt",
        "🚀 Start development: python app.py",
        "🧪 Run tests: pytest",
    ),
    BackendStack.RUST: (
        "📦 Build dependencies: cargo build",
        "🚀 Start development: cargo run",
        "🧪 Run tests: cargo test",
        "🏗️  Build release: cargo build --release",
    ),
    BackendStack.GO: (
        "📦 Install dependencies: go mod tidy",
        "🚀 Start development: go run main.go",
        "🏗️  Build binary: go build",
        "🧪 Run tests: go test",
    ),
    BackendStack.JAVA: (
        "📦 Install dependencies: mvn clean install",
        "🚀 Start development: mvn spring-boot:run",
        "🏗️  Build project: mvn clean package",
        "🧪 Run tests: mvn test",
    ),
    BackendStack.PHP: (
        "📦 Install dependencies: composer install",
        "🚀 Start development: php -S localhost:8000",
        "🧪 Run tests: vendor/bin/phpunit",
        "📋 Check syntax: composer run-script lint",
    ),
}

_FULLSTACK_TIP = "💡 Pro tip: Run backend and frontend in separate terminals!"


def _fullstack_steps(config: ProjectConfig) -> list[str]:
    lines: list[str] = []
    if config.backend_stack is not None:
        lines += ["", "🔧 Backend Setup:"]
        lines += _FULLSTACK_BACKEND_STEPS[config.backend_stack]
    if config.frontend_stack is not None:
        lines += ["", "🎨 Frontend Setup:", _FULLSTACK_FRONTEND_INSTALL]
        lines.append(_FULLSTACK_FRONTEND_START[config.frontend_stack])
    lines += ["", _FULLSTACK_TIP]
    return lines


def next_steps(config: ProjectConfig) -> list[str]:
    """Return the lines telling the user how to build and run the new project."""
    kind = config.project_type
    if kind is ProjectType.FULL_STACK_WEB:
        return _fullstack_steps(config)
    if kind is ProjectType.FRONTEND:
        if config.frontend_stack is None:
            return []
        return list(_FRONTEND_STEPS[config.frontend_stack])
    if kind is ProjectType.BACKEND:
        if config.backend_stack is None:
            return []
        return list(_BACKEND_STEPS[config.backend_stack])
    if kind is ProjectType.CLI_TOOL:
        return list(_CLI_TOOL_STEPS)
    return list(_WEB_EXTENSION_STEPS)


def show_next_steps(config: ProjectConfig) -> None:
    """Print the follow-up instructions for ``config``."""
    for line in next_steps(config):
        print(line)