"""Writers for frontend project templates.

Every writer returns the paths it created, in the order they were created.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from devgeini.structure import ProjectConfig


class _Project:
    """Writes files under a root directory and remembers what it made."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)
        self.created: list[Path] = []

    def directory(self, relative: str) -> Path:
        target = self.root / relative
        target.mkdir(parents=True, exist_ok=True)
        self.created.append(target)
        return target

    def text(self, relative: str, content: str) -> Path:
        target = self.root / relative
        target.write_text(content, encoding="utf-8")
        self.created.append(target)
        return target

    def json(self, relative: str, data: Any) -> Path:
        return self.text(relative, json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False))

    def package(self, name: str, **sections: Mapping[str, str]) -> Path:
        return self.json(
            "package.json",
            {"name": name, "version": "1.0.0", "private": True, **sections},
        )


def _fill(template: str, name: str, **values: str) -> str:
    for key, value in values.items():
        template = template.replace("{" + key + "}", value)
    return template.replace("{name}", name)


def _css(
    rules: Iterable[tuple[str, Mapping[str, str]]],
    indent: str = "  ",
    base: str = "",
    sep: str = "\n\n",
) -> str:
    blocks = []
    for selector, declarations in rules:
        body = "".join(f"{base}{indent}{prop}: {value};\n" for prop, value in declarations.items())
        blocks.append(f"{base}{selector} {{\n{body}{base}}}")
    return sep.join(blocks)


def _index_html(
    *,
    script: str,
    body: Sequence[str] = (),
    icon: bool = False,
    stylesheet: str | None = None,
    escaped: bool = False,
) -> str:
    head = ['<meta charset="UTF-8" />']
    if icon:
        head.append('<link rel="icon" type="image/svg+xml" href="/vite.svg" />')
    head.append('<meta name="viewport" content="width=device-width, initial-scale=1.0" />')
    head.append("<title>{name}</title>")
    if stylesheet:
        head.append(f'<link rel="stylesheet" href="{stylesheet}">')
    inner_body = [*body, f'<script type="module" src="{script}"></script>']
    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        *(f"    {line}" for line in head),
        "</head>",
        "<body>",
        *(f"    {line}" for line in inner_body),
        "</body>",
        "</html>",
    ]
    page = "\n".join(lines)
    if escaped:
        page = page.replace('"', '\\"')
    return page


def _vite_config(plugin: str, package: str, trailing: str = "") -> str:
    return (
        "import { defineConfig } from 'vite'\n"
        f"import {plugin} from '{package}'\n\n"
        "export default defineConfig({\n"
        f"  plugins: [{plugin}()]{trailing}\n"
        "})"
    )


_APP_CSS = _css([
    ("#root", {"max-width": "1280px", "margin": "0 auto", "padding": "2rem",
               "text-align": "center"}),
    (".card", {"padding": "2em"}),
    ("button", {
        "border-radius": "8px",
        "border": "1px solid transparent",
        "padding": "0.6em 1.2em",
        "font-size": "1em",
        "font-weight": "500",
        "font-family": "inherit",
        "background-color": "#1a1a1a",
        "cursor": "pointer",
        "transition": "border-color 0.25s",
    }),
    ("button:hover", {"border-color": "#646cff"}),
    ("button:focus,\nbutton:focus-visible", {"outline": "4px auto -webkit-focus-ring-color"}),
])

_INDEX_CSS = _css([
    ("body", {
        "margin": "0",
        "display": "flex",
        "place-items": "center",
        "min-width": "320px",
        "min-height": "100vh",
        "font-family": "Inter, system-ui, Avenir, Helvetica, Arial, sans-serif",
        "line-height": "1.5",
        "font-weight": "400",
    }),
    ("h1", {"font-size": "3.2em", "line-height": "1.1"}),
])

_VANILLA_CSS = _css(
    [
        ("body", {"font-family": "Arial, sans-serif", "margin": "0", "padding": "2rem",
                  "text-align": "center"}),
        ("#app", {"max-width": "800px", "margin": "0 auto"}),
        ("button", {"padding": "10px 20px", "font-size": "16px", "cursor": "pointer"}),
    ],
    indent="    ",
)

_REACT_MAIN = (
    "import React from 'react'\n"
    "import ReactDOM from 'react-dom/client'\n"
    "import App from './App.{ext}'\n"
    "import './index.css'\n\n"
    "ReactDOM.createRoot(document.getElementById('root'){bang}).render(\n"
    "  <React.StrictMode>\n"
    "    <App />\n"
    "  </React.StrictMode>,\n"
    ")"
)

_REACT_APP = """\
import { useState } from 'react'
import './App.css'

{signature} {
  const [count, setCount] = {state}

  return (
    <div className="App">
      <h1>{name}</h1>
      <div className="card">
        <button onClick={() => setCount((count) => count + 1)}>
          count is {count}
        </button>
        <p>
          Edit <code>src/App.{ext}</code> and save to test HMR
        </p>
      </div>
    </div>
  )
}

export default App"""

_VUE_MAIN = "import { createApp } from 'vue'\nimport App from './App.vue'\n\ncreateApp(App).mount('#app')"

_VUE_TEMPLATE = (
    "<template>\n"
    '  <div id="app">\n'
    "    <h1>{name}</h1>\n"
    '    <button @click="{click}">Count: { count }</button>\n'
    "  </div>\n"
    "</template>"
)

_VUE_SCRIPT = (
    "<script>\n"
    "import { ref } from 'vue'\n\n"
    "export default {\n"
    "  name: 'App',\n"
    "  setup() {\n"
    "    const count = ref(0)\n"
    "    return { count }\n"
    "  }\n"
    "}\n"
    "</script>"
)

_VUE_TS_SCRIPT = (
    '<script setup lang="ts">\n'
    "import { ref } from 'vue'\n\n"
    "const count = ref<number>(0)\n\n"
    "const increment = (): void => {\n"
    "  count.value++\n"
    "}\n"
    "</script>"
)

_VUE_STYLE = "<style>\n" + _css([("#app", {
    "font-family": "Avenir, Helvetica, Arial, sans-serif",
    "text-align": "center",
    "color": "#2c3e50",
    "margin-top": "60px",
})]) + "\n</style>"

_VITE_ENV_DTS = '/// <reference types="vite/client" />\n'

_NEXT_INDEX_JS = (
    "export default function Home() {\n"
    "  return (\n"
    "    <div>\n"
    "      <h1>Welcome to {name}</h1>\n"
    "      <p>Built with Next.js</p>\n"
    "    </div>\n"
    "  )\n"
    "}"
)

_NEXT_INDEX_TSX = (
    "import type { NextPage } from 'next'\n"
    "import Head from 'next/head'\n\n"
    "const Home: NextPage = () => {\n"
    "  return (\n"
    "    <div>\n"
    "      <Head>\n"
    "        <title>{name}</title>\n"
    '        <meta name="description" content="Generated by DevGeini" />\n'
    '        <link rel="icon" href="/favicon.ico" />\n'
    "      </Head>\n\n"
    "      <main>\n"
    "        <h1>Welcome to {name}</h1>\n"
    "        <p>Built with Next.js and TypeScript</p>\n"
    "      </main>\n"
    "    </div>\n"
    "  )\n"
    "}\n\n"
    "export default Home"
)

_NEXT_ENV_DTS = (
    '/// <reference types="next" />\n'
    '/// <reference types="next/image-types/global" />\n\n'
    "// NOTE: This file should not be edited\n"
)

_VANILLA_MAIN = (
    "let count = 0;\n"
    "const button = document.getElementById('counter');\n\n"
    "button.addEventListener('click', () => {\n"
    "    count++;\n"
    "    button.textContent = `Count: ${count}`;\n"
    "});"
)

_SVELTE_APP = (
    "<script>\n"
    "    let count = 0;\n"
    "</script>\n\n"
    "<main>\n"
    "    <h1>{name}</h1>\n"
    "    <button on:click={() => count++}>Count: {count}</button>\n"
    "</main>\n\n"
    "<style>\n"
    + _css(
        [
            ("main", {"text-align": "center", "padding": "2rem", "margin": "0 auto"}),
            ("button", {"padding": "10px 20px", "font-size": "16px", "cursor": "pointer"}),
        ],
        indent="    ",
        base="    ",
        sep="\n",
    )
    + "\n</style>\n"
)

_SVELTE_MAIN = (
    "import App from './App.svelte';\n\n"
    "const app = new App({\n"
    "    target: document.body\n"
    "});\n\n"
    "export default app;\n"
)

_VITE_SCRIPTS = {"dev": "vite", "build": "vite build", "preview": "vite preview"}
_NEXT_SCRIPTS = {"dev": "next dev", "build": "next build", "start": "next start",
                 "lint": "next lint"}
_REACT_DEPS = {"react": "^18.2.0", "react-dom": "^18.2.0"}
_NEXT_DEPS = {"next": "13.4.19", **_REACT_DEPS}


def _write_react_sources(project: _Project, name: str, *, typed: bool) -> None:
    ext = "tsx" if typed else "jsx"
    project.text("index.html", _fill(_index_html(script=f"/src/main.{ext}",
                                                  body=['<div id="root"></div>'],
                                                  icon=typed), name))
    project.text(f"src/main.{ext}", _fill(_REACT_MAIN, name, ext=ext, bang="!" if typed else ""))
    project.text(f"src/App.{ext}", _fill(
        _REACT_APP,
        name,
        ext=ext,
        signature="function App(): JSX.Element" if typed else "function App()",
        state="useState<number>(0)" if typed else "useState(0)",
    ))
    project.text("src/App.css", _APP_CSS)
    project.text("src/index.css", _INDEX_CSS)


def create_react_ts_project(config: ProjectConfig, path: Path) -> list[Path]:
    """Write a Vite + React + TypeScript project into ``path``."""
    project = _Project(path)
    project.package(
        config.name,
        dependencies=_REACT_DEPS,
        devDependencies={
            "@types/react": "^18.2.0",
            "@types/react-dom": "^18.2.0",
            "@typescript-eslint/eslint-plugin": "^6.0.0",
            "@typescript-eslint/parser": "^6.0.0",
            "@vitejs/plugin-react": "^4.0.0",
            "eslint": "^8.45.0",
            "eslint-plugin-react-hooks": "^4.6.0",
            "eslint-plugin-react-refresh": "^0.4.0",
            "typescript": "^5.0.2",
            "vite": "^4.4.0",
        },
        scripts={
            "dev": "vite",
            "build": "tsc && vite build",
            "lint": "eslint . --ext ts,tsx --report-unused-disable-directives --max-warnings 0",
            "preview": "vite preview",
        },
    )
    project.directory("src")
    project.directory("public")
    _write_react_sources(project, config.name, typed=True)

    strict_flags = ("strict", "noUnusedLocals", "noUnusedParameters", "noFallthroughCasesInSwitch")
    project.json("tsconfig.json", {
        "compilerOptions": {
            "target": "ES2020",
            "useDefineForClassFields": True,
            "lib": ["ES2020", "DOM", "DOM.Iterable"],
            "module": "ESNext",
            "skipLibCheck": True,
            "moduleResolution": "bundler",
            "allowImportingTsExtensions": True,
            "resolveJsonModule": True,
            "isolatedModules": True,
            "noEmit": True,
            "jsx": "react-jsx",
            **dict.fromkeys(strict_flags, True),
        },
        "include": ["src"],
        "references": [{"path": "./tsconfig.node.json"}],
    })
    project.json("tsconfig.node.json", {
        "compilerOptions": {
            "composite": True,
            "skipLibCheck": True,
            "module": "ESNext",
            "moduleResolution": "bundler",
            "allowSyntheticDefaultImports": True,
        },
        "include": ["vite.config.ts"],
    })
    project.text("vite.config.ts", _vite_config("react", "@vitejs/plugin-react", ","))
    return project.created


def create_react_project(config: ProjectConfig, path: Path) -> list[Path]:
    """Write a Vite + React project into ``path``."""
    project = _Project(path)
    project.package(
        config.name,
        dependencies=_REACT_DEPS,
        devDependencies={"@vitejs/plugin-react": "^4.0.0", "vite": "^4.4.0"},
        scripts=_VITE_SCRIPTS,
    )
    project.directory("src")
    project.directory("public")
    _write_react_sources(project, config.name, typed=False)
    project.text("vite.config.js", _vite_config("react", "@vitejs/plugin-react", ","))
    return project.created


def _vue_index(name: str, entry: str) -> str:
    return _fill(_index_html(script=f"/src/{entry}", body=['<div id="app"></div>']), name)


def create_vue_project(config: ProjectConfig, path: Path) -> list[Path]:
    """Write a Vite + Vue project into ``path``."""
    project = _Project(path)
    project.package(
        config.name,
        dependencies={"vue": "^3.3.0"},
        devDependencies={"@vitejs/plugin-vue": "^4.2.0", "vite": "^4.4.0"},
        scripts=_VITE_SCRIPTS,
    )
    project.directory("src")
    project.text("index.html", _vue_index(config.name, "main.js"))
    project.text("src/main.js", _VUE_MAIN)
    app = "\n\n".join([_fill(_VUE_TEMPLATE, config.name, click="count++"), _VUE_SCRIPT, _VUE_STYLE])
    project.text("src/App.vue", app)
    project.text("vite.config.js", _vite_config("vue", "@vitejs/plugin-vue"))
    return project.created


def create_nextjs_project(config: ProjectConfig, path: Path) -> list[Path]:
    """Write a Next.js project into ``path``."""
    project = _Project(path)
    project.package(config.name, dependencies=_NEXT_DEPS, scripts=_NEXT_SCRIPTS)
    project.directory("pages")
    project.directory("public")
    project.text("pages/index.js", _fill(_NEXT_INDEX_JS, config.name))
    return project.created


def create_vanilla_project(config: ProjectConfig, path: Path) -> list[Path]:
    """Write a plain JavaScript project served by Vite into ``path``."""
    project = _Project(path)
    project.package(config.name, devDependencies={"vite": "^4.4.0"}, scripts=_VITE_SCRIPTS)
    body = [
        '<div id="app">',
        "    <h1>{name}</h1>",
        '    <button id="counter">Count: 0</button>',
        "</div>",
    ]
    page = _index_html(script="main.js", body=body, stylesheet="style.css")
    project.text("index.html", _fill(page, config.name))
    project.text("main.js", _VANILLA_MAIN)
    project.text("style.css", _VANILLA_CSS)
    return project.created


def create_svelte_project(config: ProjectConfig, path: Path) -> list[Path]:
    """Write a Svelte project into ``path``."""
    project = _Project(path)
    project.package(
        config.name,
        dependencies={"svelte": "^4.0.5"},
        devDependencies={
            "@sveltejs/adapter-auto": "^2.0.0",
            "@sveltejs/kit": "^1.20.4",
            "vite": "^4.4.2",
        },
        scripts=_VITE_SCRIPTS,
    )
    project.directory("src")
    project.text("src/App.svelte", _fill(_SVELTE_APP, config.name))
    project.text("src/main.js", _SVELTE_MAIN)
    # The page is written with backslashes before its attribute quotes.
    page = _index_html(script="/src/main.js", escaped=True)
    project.text("index.html", _fill(page, config.name))
    return project.created


def create_vue_ts_project(config: ProjectConfig, path: Path) -> list[Path]:
    """Write a Vite + Vue + TypeScript project into ``path``."""
    project = _Project(path)
    project.package(
        config.name,
        dependencies={"vue": "^3.3.0"},
        devDependencies={
            "@vitejs/plugin-vue": "^4.2.0",
            "@vue/tsconfig": "^0.4.0",
            "typescript": "^5.0.0",
            "vue-tsc": "^1.4.2",
            "vite": "^4.4.0",
        },
        scripts={**_VITE_SCRIPTS, "build": "vue-tsc && vite build"},
    )
    project.directory("src")
    project.text("index.html", _vue_index(config.name, "main.ts"))
    project.text("src/main.ts", _VUE_MAIN)
    app = "\n\n".join([_fill(_VUE_TEMPLATE, config.name, click="increment"),
                       _VUE_TS_SCRIPT, _VUE_STYLE])
    project.text("src/App.vue", app)
    project.json("tsconfig.json", {
        "extends": "@vue/tsconfig/tsconfig.dom.json",
        "include": ["env.d.ts", "src/**/*", "src/**/*.vue"],
        "exclude": ["src/**/__tests__/*"],
        "compilerOptions": {
            "composite": True,
            "baseUrl": ".",
            "paths": {"@/*": ["./src/*"]},
        },
    })
    project.text("src/env.d.ts", _VITE_ENV_DTS)
    project.text("vite.config.ts", _vite_config("vue", "@vitejs/plugin-vue"))
    return project.created


def create_nextjs_ts_project(config: ProjectConfig, path: Path) -> list[Path]:
    """Write a Next.js + TypeScript project into ``path``."""
    project = _Project(path)
    project.package(
        config.name,
        dependencies=_NEXT_DEPS,
        devDependencies={
            "@types/node": "^20",
            "@types/react": "^18",
            "@types/react-dom": "^18",
            "eslint": "^8",
            "eslint-config-next": "13.4.19",
            "typescript": "^5",
        },
        scripts=_NEXT_SCRIPTS,
    )
    project.directory("pages")
    project.directory("public")
    project.text("pages/index.tsx", _fill(_NEXT_INDEX_TSX, config.name))
    enabled = ("allowJs", "skipLibCheck", "strict", "forceConsistentCasingInFileNames",
               "noEmit", "esModuleInterop")
    project.json("tsconfig.json", {
        "compilerOptions": {
            "target": "es5",
            "lib": ["dom", "dom.iterable", "es6"],
            **dict.fromkeys(enabled, True),
            "module": "esnext",
            "moduleResolution": "node",
            "resolveJsonModule": True,
            "isolatedModules": True,
            "jsx": "preserve",
            "incremental": True,
            "baseUrl": ".",
            "paths": {"@/*": ["./*"]},
        },
        "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx"],
        "exclude": ["node_modules"],
    })
    project.text("next-env.d.ts", _NEXT_ENV_DTS)
    return project.created


def create_svelte_ts_project(config: ProjectConfig, path: Path) -> list[Path]:
    """Write a Svelte project; TypeScript is not offered, so plain Svelte is used."""
    print("Currently TS not supported for Svelte")
    return create_svelte_project(config, path)


def create_angular_project(config: ProjectConfig, path: Path) -> list[Path]:
    """Angular has no template; raises ``RuntimeError`` naming the project and its path."""
    print("Currently TS not supported for Angular")
    target = Path(path)
    raise RuntimeError(
        f"Angular projects are not supported: cannot create {config.name!r} in {target}"
    )


def create_vanilla_ts_project(config: ProjectConfig, path: Path) -> list[Path]:
    """Write a vanilla project; TypeScript is not offered, so plain JavaScript is used."""
    print("Currently TS not supported for Vanilla")
    return create_vanilla_project(config, path)