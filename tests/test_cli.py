import json
from unittest.mock import MagicMock, patch

import pytest

from devgeini.cli import main, show_help_menu, show_welcome_menu


@pytest.fixture(autouse=True)
def _no_background_check(monkeypatch, tmp_path):
    monkeypatch.setenv("DEVGEINI_NO_UPDATE_CHECK", "1")
    monkeypatch.chdir(tmp_path)


def _answers(monkeypatch, *replies):
    it = iter(replies)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def _release_response(tag, body="notes"):
    response = MagicMock()
    response.ok = True
    response.json.return_value = {"tag_name": tag, "name": "", "body": body, "assets": []}
    return response


def test_help_menu_lists_commands(capsys):
    show_help_menu()
    out = capsys.readouterr().out
    assert "🎯 devgeini init --name <name>      - Create project with specific name" in out
    assert "• 🧩 Browser Extensions" in out


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out == "devgeini 1.0.1\n"


def test_check_update_reports_newer_release(capsys):
    with patch("requests.get", return_value=_release_response("v9.0.0", "fixes")):
        code = main(["--check-update"])
    out = capsys.readouterr().out
    assert code == 0
    assert "🆕 Latest version: 9.0.0" in out
    assert "🎉 A new version is available!" in out
    assert "fixes" in out


def test_check_update_failure_exits_with_error(capsys):
    response = MagicMock()
    response.ok = False
    response.status_code = 500
    response.reason = "Server Error"
    with patch("requests.get", return_value=response):
        code = main(["--check-update"])
    assert code == 1
    assert "❌ Failed to check for updates" in capsys.readouterr().err


def test_update_when_already_latest(capsys):
    with patch("requests.get", return_value=_release_response("v1.0.1")):
        code = main(["--update"])
    assert code == 0
    assert "✅ You're already running the latest version (1.0.1)" in capsys.readouterr().out


def test_init_with_name_creates_frontend_project(monkeypatch, tmp_path, capsys):
    _answers(monkeypatch, "2", "1")
    code = main(["init", "--name", "demo"])
    out = capsys.readouterr().out
    assert code == 0
    assert (tmp_path / "demo" / "src" / "App.tsx").exists()
    package = json.loads((tmp_path / "demo" / "package.json").read_text(encoding="utf-8"))
    assert package["name"] == "demo"
    assert "🎉 Project 'demo' created successfully!" in out
    assert "📁 Navigate to your project: cd demo" in out


def test_init_prompts_for_name(monkeypatch, tmp_path):
    _answers(monkeypatch, "webapp", "2", "2")
    code = main(["init"])
    assert code == 0
    assert (tmp_path / "webapp" / "src" / "App.jsx").exists()


def test_init_backend_reports_error(monkeypatch, capsys):
    _answers(monkeypatch, "3", "1")
    code = main(["init", "-n", "api"])
    assert code == 1
    assert "❌ Error creating project" in capsys.readouterr().err


def test_init_declining_overwrite_keeps_directory(monkeypatch, tmp_path):
    existing = tmp_path / "demo"
    existing.mkdir()
    marker = existing / "keep.txt"
    marker.write_text("kept", encoding="utf-8")
    _answers(monkeypatch, "2", "1", "n")
    code = main(["init", "--name", "demo"])
    assert code == 0
    assert marker.read_text(encoding="utf-8") == "kept"
    assert not (existing / "package.json").exists()


def test_init_accepting_overwrite_replaces_directory(monkeypatch, tmp_path):
    existing = tmp_path / "demo"
    existing.mkdir()
    (existing / "old.txt").write_text("old", encoding="utf-8")
    _answers(monkeypatch, "2", "1", "y")
    code = main(["init", "--name", "demo"])
    assert code == 0
    assert not (existing / "old.txt").exists()
    assert (existing / "package.json").exists()


def test_welcome_menu_exit(monkeypatch, capsys):
    _answers(monkeypatch, "4")
    assert show_welcome_menu() == 0
    assert "👋 Thanks for using Devgeini! Happy coding!" in capsys.readouterr().out


def test_welcome_menu_help(monkeypatch, capsys):
    _answers(monkeypatch, "3")
    assert main([]) == 0
    assert "Supported Project Types:" in capsys.readouterr().out


def test_welcome_menu_create(monkeypatch, tmp_path):
    _answers(monkeypatch, "1", "site", "2", "1")
    assert main([]) == 0
    assert (tmp_path / "site" / "vite.config.ts").exists()