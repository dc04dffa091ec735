import json

import pytest

from devgeini import frontend
from devgeini.structure import FrontendStack, ProjectConfig, ProjectType


def _config(name="demo-app"):
    return ProjectConfig(name=name, project_type=ProjectType.FRONTEND,
                         frontend_stack=FrontendStack.REACT)


def _tree(root):
    return {p.relative_to(root).as_posix() for p in root.rglob("*")}


EXPECTED_TREES = [
    (
        frontend.create_react_ts_project,
        {
            "package.json", "src", "public", "index.html", "src/main.tsx",
            "src/App.tsx", "src/App.css", "src/index.css", "tsconfig.json",
            "tsconfig.node.json", "vite.config.ts",
        },
    ),
    (
        frontend.create_react_project,
        {
            "package.json", "src", "public", "index.html", "src/main.jsx",
            "src/App.jsx", "src/App.css", "src/index.css", "vite.config.js",
        },
    ),
    (
        frontend.create_vue_project,
        {"package.json", "src", "index.html", "src/main.js", "src/App.vue", "vite.config.js"},
    ),
    (
        frontend.create_vue_ts_project,
        {
            "package.json", "src", "index.html", "src/main.ts", "src/App.vue",
            "tsconfig.json", "src/env.d.ts", "vite.config.ts",
        },
    ),
    (frontend.create_nextjs_project, {"package.json", "pages", "public", "pages/index.js"}),
    (
        frontend.create_nextjs_ts_project,
        {"package.json", "pages", "public", "pages/index.tsx", "tsconfig.json", "next-env.d.ts"},
    ),
    (frontend.create_vanilla_project, {"package.json", "index.html", "main.js", "style.css"}),
    (
        frontend.create_svelte_project,
        {"package.json", "src", "src/App.svelte", "src/main.js", "index.html"},
    ),
]


@pytest.mark.parametrize("creator, expected", EXPECTED_TREES)
def test_creates_expected_tree(tmp_path, creator, expected):
    created = creator(_config(), tmp_path)
    assert {p.relative_to(tmp_path).as_posix() for p in created} == expected
    assert len(created) == len(expected)
    assert _tree(tmp_path) == expected


@pytest.mark.parametrize("creator, _expected", EXPECTED_TREES)
def test_package_json_names_project_with_sorted_keys(tmp_path, creator, _expected):
    created = creator(_config("my-project"), tmp_path)
    assert created[0] == tmp_path / "package.json"
    text = created[0].read_text(encoding="utf-8")
    data = json.loads(text)
    assert data["name"] == "my-project"
    assert data["version"] == "1.0.0"
    assert data["private"] is True
    assert list(data) == sorted(data)
    assert not text.endswith("\n")


def test_package_json_pretty_layout(tmp_path):
    frontend.create_react_project(_config(), tmp_path)
    text = (tmp_path / "package.json").read_text(encoding="utf-8")
    assert text.startswith('{\n  "dependencies": {')


def test_non_ascii_name_kept_verbatim(tmp_path):
    frontend.create_vanilla_project(_config("café"), tmp_path)
    assert '"café"' in (tmp_path / "package.json").read_text(encoding="utf-8")
    assert (tmp_path / "index.html").read_text(encoding="utf-8").count("café") == 2


def test_react_app_uses_single_braces(tmp_path):
    frontend.create_react_project(_config(), tmp_path)
    app = (tmp_path / "src" / "App.jsx").read_text(encoding="utf-8")
    assert "<h1>demo-app</h1>" in app
    assert "count is {count}" in app
    assert "{{" not in app
    index = (tmp_path / "index.html").read_text(encoding="utf-8")
    assert "<title>demo-app</title>" in index
    assert '<script type="module" src="/src/main.jsx"></script>' in index


def test_react_ts_package_and_tsconfig(tmp_path):
    frontend.create_react_ts_project(_config(), tmp_path)
    package = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
    assert package["devDependencies"]["typescript"] == "^5.0.2"
    assert package["scripts"]["build"] == "tsc && vite build"
    node = json.loads((tmp_path / "tsconfig.node.json").read_text(encoding="utf-8"))
    assert node["include"] == ["vite.config.ts"]
    tsconfig = json.loads((tmp_path / "tsconfig.json").read_text(encoding="utf-8"))
    assert tsconfig["references"] == [{"path": "./tsconfig.node.json"}]
    assert tsconfig["compilerOptions"]["jsx"] == "react-jsx"


def test_vue_template_counter_text(tmp_path):
    frontend.create_vue_project(_config(), tmp_path)
    app = (tmp_path / "src" / "App.vue").read_text(encoding="utf-8")
    assert "Count: { count }" in app
    index = (tmp_path / "index.html").read_text(encoding="utf-8")
    assert '<script type="module" src="/src/main.js"></script>' in index


def test_vue_ts_entry_and_env(tmp_path):
    frontend.create_vue_ts_project(_config(), tmp_path)
    index = (tmp_path / "index.html").read_text(encoding="utf-8")
    assert '<script type="module" src="/src/main.ts"></script>' in index
    env = (tmp_path / "src" / "env.d.ts").read_text(encoding="utf-8")
    assert env == '/// <reference types="vite/client" />\n'
    tsconfig = json.loads((tmp_path / "tsconfig.json").read_text(encoding="utf-8"))
    assert tsconfig["extends"] == "@vue/tsconfig/tsconfig.dom.json"


def test_nextjs_ts_page_mentions_name_twice(tmp_path):
    frontend.create_nextjs_ts_project(_config(), tmp_path)
    page = (tmp_path / "pages" / "index.tsx").read_text(encoding="utf-8")
    assert page.count("demo-app") == 2
    assert "<h1>Welcome to demo-app</h1>" in page


def test_nextjs_page(tmp_path):
    frontend.create_nextjs_project(_config(), tmp_path)
    page = (tmp_path / "pages" / "index.js").read_text(encoding="utf-8")
    assert "<h1>Welcome to demo-app</h1>" in page
    package = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
    assert package["dependencies"]["next"] == "13.4.19"


def test_vanilla_main_keeps_template_literal(tmp_path):
    frontend.create_vanilla_project(_config(), tmp_path)
    main_js = (tmp_path / "main.js").read_text(encoding="utf-8")
    assert "button.textContent = `Count: ${count}`;" in main_js


def test_svelte_files(tmp_path):
    frontend.create_svelte_project(_config(), tmp_path)
    app = (tmp_path / "src" / "App.svelte").read_text(encoding="utf-8")
    assert "<h1>demo-app</h1>" in app
    assert app.endswith("\n")
    index = (tmp_path / "index.html").read_text(encoding="utf-8")
    assert '<html lang=\\"en\\">' in index
    assert "<title>demo-app</title>" in index


def test_svelte_ts_falls_back_to_svelte(tmp_path, capsys):
    plain = tmp_path / "plain"
    typed = tmp_path / "typed"
    plain.mkdir()
    typed.mkdir()
    frontend.create_svelte_project(_config(), plain)
    frontend.create_svelte_ts_project(_config(), typed)
    assert "Currently TS not supported for Svelte" in capsys.readouterr().out
    assert _tree(plain) == _tree(typed)
    assert (plain / "index.html").read_text() == (typed / "index.html").read_text()


def test_vanilla_ts_falls_back_to_vanilla(tmp_path, capsys):
    frontend.create_vanilla_ts_project(_config(), tmp_path)
    assert "Currently TS not supported for Vanilla" in capsys.readouterr().out
    assert _tree(tmp_path) == {"package.json", "index.html", "main.js", "style.css"}


def test_angular_is_rejected(tmp_path):
    with pytest.raises(RuntimeError):
        frontend.create_angular_project(_config(), tmp_path)
    assert _tree(tmp_path) == set()


def test_missing_target_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        frontend.create_vanilla_project(_config(), tmp_path / "absent")