"""Self-update: query the latest release, compare versions and install it."""

from __future__ import annotations

import io
import os
import platform
import re
import shutil
import sys
import tarfile
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import requests

CURRENT_VERSION = "1.0.1"
GITHUB_REPO = os.environ.get("DEVGEINI_REPO", "devgeini/devgeini")
_API_ROOT = "https://api.github.com"
_TIMEOUT = 30
_U32_MAX = 2**32 - 1
_NUMBER = re.compile(r"\+?[0-9]+")

_PLATFORM_PATTERNS: dict[tuple[str, str], tuple[str, ...]] = {
    ("windows", "x86_64"): ("windows", "win64", "x86_64-pc-windows"),
    ("windows", "x86"): ("windows", "win32", "i686-pc-windows"),
    ("macos", "x86_64"): ("macos", "darwin", "x86_64-apple-darwin"),
    ("macos", "aarch64"): ("macos", "darwin", "aarch64-apple-darwin"),
    ("linux", "x86_64"): ("linux", "x86_64-unknown-linux"),
    ("linux", "aarch64"): ("linux", "aarch64-unknown-linux"),
}

_ARCH_ALIASES = {
    "amd64": "x86_64",
    "x86_64": "x86_64",
    "x64": "x86_64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
    "arm64": "aarch64",
    "aarch64": "aarch64",
}


@dataclass
class GitHubAsset:
    """A downloadable file attached to a release."""

    name: str
    browser_download_url: str
    size: int


@dataclass
class GitHubRelease:
    """A published release and its assets."""

    tag_name: str
    name: str
    body: str
    assets: list[GitHubAsset] = field(default_factory=list)
    prerelease: bool = False

    @property
    def version(self) -> str:
        return self.tag_name.lstrip("v")


def _release_from_json(data: dict[str, Any]) -> GitHubRelease:
    return GitHubRelease(
        tag_name=data["tag_name"],
        name=data.get("name") or "",
        body=data.get("body") or "",
        assets=[
            GitHubAsset(
                name=asset["name"],
                browser_download_url=asset["browser_download_url"],
                size=int(asset["size"]),
            )
            for asset in data.get("assets", [])
        ],
        prerelease=bool(data.get("prerelease", False)),
    )


def _headers() -> dict[str, str]:
    return {"User-Agent": f"devgeini/{CURRENT_VERSION}"}


def _status(response: requests.Response) -> str:
    return f"{response.status_code} {response.reason}".strip()


def _version_parts(version: str) -> list[int]:
    parts = []
    for piece in version.split("."):
        if _NUMBER.fullmatch(piece) and int(piece) <= _U32_MAX:
            parts.append(int(piece))
    return parts


def version_compare(current: str, latest: str) -> int:
    """Return -1, 0 or 1 as ``current`` is older than, equal to or newer than ``latest``.

    Non-numeric components are dropped; missing components count as zero.
    """
    current_parts = _version_parts(current)
    latest_parts = _version_parts(latest)
    width = max(len(current_parts), len(latest_parts))
    current_parts += [0] * (width - len(current_parts))
    latest_parts += [0] * (width - len(latest_parts))
    for mine, theirs in zip(current_parts, latest_parts):
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
    return 0


def _current_os() -> str:
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform == "darwin":
        return "macos"
    if sys.platform.startswith("linux"):
        return "linux"
    return sys.platform


def _current_arch() -> str:
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine)


def find_matching_asset(
    assets: list[GitHubAsset], os_name: str | None = None, arch: str | None = None
) -> GitHubAsset:
    """Pick the asset built for the platform, falling back to the first one."""
    key = (os_name or _current_os(), arch or _current_arch())
    patterns = _PLATFORM_PATTERNS.get(key, ("universal",))
    for asset in assets:
        lowered = asset.name.lower()
        if any(pattern in lowered for pattern in patterns):
            return asset
    if not assets:
        raise RuntimeError("No suitable release asset found for your platform")
    return assets[0]


def get_latest_release() -> GitHubRelease:
    """Fetch the latest published release."""
    url = f"{_API_ROOT}/repos/{GITHUB_REPO}/releases/latest"
    response = requests.get(url, headers=_headers(), timeout=_TIMEOUT)
    if not response.ok:
        raise RuntimeError(f"GitHub API request failed: {_status(response)}")
    return _release_from_json(response.json())


def _make_executable(path: Path) -> None:
    if os.name == "posix":
        path.chmod(0o755)


def extract_executable(data: bytes, target_path: Path, filename: str) -> None:
    """Write the executable found in a ``.tar.gz`` or ``.zip`` archive to ``target_path``."""
    target_path = Path(target_path)
    if filename.endswith(".tar.gz"):
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:gz") as archive:
            for member in archive:
                if not member.isfile():
                    continue
                if Path(member.name).name.startswith("devgeini"):
                    extracted = archive.extractfile(member)
                    if extracted is None:
                        continue
                    target_path.write_bytes(extracted.read())
                    _make_executable(target_path)
                    return
    elif filename.endswith(".zip"):
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            for info in archive.infolist():
                if info.filename.endswith(".exe") or info.filename.endswith("devgeini"):
                    target_path.write_bytes(archive.read(info))
                    return
    raise RuntimeError("Could not find executable in archive")


def _current_executable() -> Path:
    return Path(sys.argv[0]).resolve()


def download_and_install_update(release: GitHubRelease) -> None:
    """Download the platform's asset and replace the running program with it."""
    asset = find_matching_asset(release.assets)
    print(f"📥 Downloading {asset.name} ({asset.size} bytes)...")

    response = requests.get(asset.browser_download_url, headers=_headers(), timeout=_TIMEOUT)
    if not response.ok:
        raise RuntimeError(f"Failed to download update: {_status(response)}")
    data = response.content

    current = _current_executable()
    backup = current.with_suffix(".bak")
    shutil.copy(current, backup)
    print(f"📁 Created backup at: {backup}")

    if asset.name.endswith(".tar.gz") or asset.name.endswith(".zip"):
        extract_executable(data, current, asset.name)
    else:
        current.write_bytes(data)
        _make_executable(current)

    print("✅ Installation completed!")
    try:
        backup.unlink()
    except OSError as error:
        print(f"⚠️  Warning: Could not remove backup file: {error}")


def _confirm(prompt: str, default: bool | None = None) -> bool:
    hint = {True: "[Y/n]", False: "[y/N]", None: "[y/n]"}[default]
    while True:
        answer = input(f"? {prompt} {hint} ").strip().lower()
        if not answer and default is not None:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False


def check_for_updates() -> bool:
    """Report the current and latest versions; return whether a newer one exists."""
    print("🔍 Checking for updates...")
    release = get_latest_release()
    latest = release.version
    print(f"📦 Current version: {CURRENT_VERSION}")
    print(f"🆕 Latest version: {latest}")
    if version_compare(CURRENT_VERSION, latest) < 0:
        print("🎉 A new version is available!")
        print(f"📋 Release notes:\n{release.body}")
        print("🚀 Run 'devgeini --update' to update to the latest version.")
        return True
    print("✅ You're running the latest version!")
    return False


def check_for_updates_silent() -> bool:
    """Mention a newer release only if there is one; return whether there is."""
    release = get_latest_release()
    latest = release.version
    if version_compare(CURRENT_VERSION, latest) < 0:
        print(
            f"💡 A new version ({latest}) is available! "
            "Run 'devgeini --update' to upgrade."
        )
        return True
    return False


def handle_update() -> bool:
    """Offer to install the latest release; return whether it was installed."""
    print("🔍 Checking for updates...")
    release = get_latest_release()
    latest = release.version
    if version_compare(CURRENT_VERSION, latest) >= 0:
        print(f"✅ You're already running the latest version ({CURRENT_VERSION})")
        return False

    print(f"🆕 New version available: {CURRENT_VERSION} -> {latest}")
    print(f"📋 Release notes:\n{release.body}")
    if not _confirm("Do you want to update now?", default=True):
        print("Update cancelled.")
        return False

    download_and_install_update(release)
    print(f"✅ Successfully updated to version {latest}!")
    print("🔄 Please restart your terminal or run 'devgeini --version' to verify the update.")
    return True