"""Bootstrap progress tracking and shared helpers for platform installers."""

from __future__ import annotations

import os
import shutil
import subprocess
import tempfile
from dataclasses import dataclass, field
from typing import Any

SUPPORTED_VERSIONS: dict[str, dict[str, list[str]]] = {
    "darwin": {
        "macos": ["12", "13", "14", "15"],
    },
    "linux": {
        "fedora": ["38", "39", "40", "41", "42"],
        "ubuntu": ["20.04", "22.04", "24.04"],
        "debian": ["11", "12"],
        "arch": ["rolling"],
    },
}

PHP_VERSIONS: list[str] = ["8.1", "8.2", "8.3", "8.4", "8.5"]

REQUIRED_PHP_EXTENSIONS: list[str] = [
    "bcmath", "cli", "common", "curl", "fpm", "gd", "intl",
    "mbstring", "mysql", "opcache", "soap", "xml", "zip",
]


@dataclass
class OSVersionInfo:
    """Details of the detected operating system version."""

    name: str = ""
    version: str = ""
    codename: str = ""
    supported: bool = False
    message: str = ""


@dataclass
class InstallResult:
    """Outcome of a single installation step."""

    step: str
    success: bool
    error: BaseException | None = None
    message: str = ""


@dataclass
class BootstrapProgress:
    """Progress of the whole bootstrap run."""

    total_steps: int = 0
    current_step: int = 0
    step_name: str = ""
    results: list[InstallResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    php_installed: list[str] = field(default_factory=list)

    def add_result(
        self, step: str, success: bool, error: BaseException | None, message: str
    ) -> None:
        """Record a step result; a failure is also listed among the errors."""
        self.results.append(InstallResult(step, success, error, message))
        if error is not None:
            self.errors.append(f"{step}: {error}")

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)


def new_progress(total_steps: int) -> BootstrapProgress:
    """Return an empty progress tracker for ``total_steps`` steps."""
    return BootstrapProgress(total_steps=total_steps)


@dataclass
class BaseInstaller:
    """Command and file helpers shared by platform installers.

    The ``run_*`` methods raise :class:`subprocess.CalledProcessError` on failure.
    """

    platform: Any = None

    def run_command(self, cmd: str) -> None:
        """Run a shell command attached to the terminal."""
        subprocess.run(["sh", "-c", cmd], check=True)

    def run_command_silent(self, cmd: str) -> None:
        """Run a shell command with its input and output discarded."""
        subprocess.run(["sh", "-c", cmd], check=True, **_SILENT)

    def run_sudo(self, *args: str) -> None:
        """Run a command through sudo attached to the terminal."""
        subprocess.run(["sudo", *args], check=True)

    def run_sudo_silent(self, *args: str) -> None:
        """Run a command through sudo with its input and output discarded."""
        subprocess.run(["sudo", *args], check=True, **_SILENT)

    def file_exists(self, path: str | os.PathLike) -> bool:
        return os.path.exists(path)

    def write_file(self, path: str | os.PathLike, content: str) -> None:
        """Write ``content`` to ``path`` by copying a temporary file with sudo."""
        handle, tmp_path = tempfile.mkstemp(prefix="magebox-")
        try:
            with os.fdopen(handle, "w", encoding="utf-8") as tmp:
                tmp.write(content)
            self.run_sudo_silent("cp", tmp_path, os.fspath(path))
        finally:
            os.remove(tmp_path)

    def command_exists(self, name: str) -> bool:
        return shutil.which(name) is not None


_SILENT = {
    "stdin": subprocess.DEVNULL,
    "stdout": subprocess.DEVNULL,
    "stderr": subprocess.DEVNULL,
}