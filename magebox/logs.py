"""Tailing of log files, with Magento log levels coloured by severity."""

from __future__ import annotations

import fnmatch
import os
import re
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from typing import BinaryIO

from magebox.colors import header, log_file, log_level, print_info, print_warning

_CHUNK_SIZE = 8192
_POLL_INTERVAL = 0.1
_DEFAULT_PATTERN = "*.log"

# Magento format: [2024-01-15T10:30:45.123456+00:00] main.CRITICAL: ...
_LEVEL_RE = re.compile(r"\]\s+\w+\.(\w+):", re.ASCII)


@dataclass
class _TailedFile:
    path: str
    handle: BinaryIO
    offset: int
    name: str


class LogTailer:
    """Prints the last lines of matching log files and optionally follows them."""

    def __init__(self, log_dir: str | os.PathLike, pattern: str, follow: bool, lines: int) -> None:
        self.log_dir = os.fspath(log_dir)
        self.pattern = pattern
        self.follow = follow
        self.lines = lines
        self._files: dict[str, _TailedFile] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()

    def __enter__(self) -> LogTailer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    @property
    def _pattern(self) -> str:
        return self.pattern or _DEFAULT_PATTERN

    def start(self) -> None:
        """Print the tail of every matching file; in follow mode, block until stopped.

        Raises FileNotFoundError when no file matches the pattern.
        """
        files = self.find_log_files()
        if not files:
            raise FileNotFoundError(
                f"no log files found matching pattern '{self.pattern}' in {self.log_dir}"
            )

        for file_path in files:
            try:
                self._init_file(file_path)
            except OSError as exc:
                print_warning("Could not read %s: %s", os.path.basename(file_path), exc)

        if not self.follow:
            return

        print()
        print_info("Watching for changes... (Ctrl+C to stop)")
        print()

        while not self._stop.wait(_POLL_INTERVAL):
            self._pick_up_new_files()
            self._check_all_files()

    def stop(self) -> None:
        """Stop following and close every open file."""
        self._stop.set()
        with self._lock:
            for tailed in self._files.values():
                tailed.handle.close()

    def find_log_files(self) -> list[str]:
        """Return the files under the log directory whose names match the pattern."""
        pattern = self._pattern
        return [
            file_path
            for file_path in _walk_files(self.log_dir)
            if fnmatch.fnmatchcase(os.path.basename(file_path), pattern)
        ]

    def read_last_lines(self, file: BinaryIO, n: int) -> list[str]:
        """Return up to the last ``n`` non-empty lines of a binary file."""
        size = file.seek(0, os.SEEK_END)
        if size == 0 or n <= 0:
            return []

        data = b""
        offset = size
        while offset > 0:
            start = max(0, offset - _CHUNK_SIZE)
            file.seek(start)
            data = file.read(offset - start) + data
            offset = start
            # The first piece may be cut off mid-line until the start is reached.
            complete = data.split(b"\n")[1:]
            if sum(1 for line in complete if line.rstrip(b"\r")) >= n:
                break

        pieces = data.split(b"\n")
        if offset > 0:
            pieces = pieces[1:]
        lines = [
            text
            for text in (piece.decode("utf-8", errors="replace").rstrip("\r") for piece in pieces)
            if text
        ]
        return lines[-n:]

    def extract_level(self, line: str) -> str | None:
        """Return the log level of a Magento log line, or None if it has none."""
        match = _LEVEL_RE.search(line)
        return match.group(1) if match else None

    def _init_file(self, file_path: str) -> None:
        handle = open(file_path, "rb")
        try:
            name = os.path.basename(file_path)
            size = os.fstat(handle.fileno()).st_size
            if self.lines > 0 and size > 0:
                lines = self.read_last_lines(handle, self.lines)
                if lines:
                    print(header(name))
                    for line in lines:
                        self._print_log_line(name, line)
                offset = handle.seek(0, os.SEEK_END)
            else:
                offset = size
        except OSError:
            handle.close()
            raise
        with self._lock:
            self._files[file_path] = _TailedFile(file_path, handle, offset, name)

    def _pick_up_new_files(self) -> None:
        pattern = self._pattern
        try:
            entries = sorted(os.scandir(self.log_dir), key=lambda entry: entry.name)
        except OSError:
            return
        for entry in entries:
            with self._lock:
                known = entry.path in self._files
            if known or not fnmatch.fnmatchcase(entry.name, pattern):
                continue
            try:
                if entry.is_file():
                    self._init_file(entry.path)
            except OSError:
                continue

    def _check_all_files(self) -> None:
        with self._lock:
            files = list(self._files.values())
        for tailed in files:
            self._read_new_content(tailed)

    def _read_new_content(self, tailed: _TailedFile) -> None:
        try:
            size = os.fstat(tailed.handle.fileno()).st_size
        except (OSError, ValueError):
            return

        if size < tailed.offset:  # truncated, e.g. by log rotation
            tailed.offset = 0
        if size <= tailed.offset:
            return

        tailed.handle.seek(tailed.offset)
        data = tailed.handle.read(size - tailed.offset)
        end = data.rfind(b"\n")
        if end < 0:
            return  # only a partial line so far; wait for its newline

        complete = data[: end + 1]
        for raw in complete.split(b"\n"):
            line = raw.decode("utf-8", errors="replace").rstrip("\r")
            if line:
                self._print_log_line(tailed.name, line)
        tailed.offset += len(complete)

    def _print_log_line(self, filename: str, line: str) -> None:
        level = self.extract_level(line)
        if level is not None:
            line = line.replace(f".{level}:", f".{log_level(level)}:", 1)
        print(f"{log_file(f'[{filename}]')} {line}")


def _walk_files(root: str) -> Iterator[str]:
    """Yield files under ``root`` in lexical order; unreadable entries are skipped."""
    try:
        entries = sorted(os.scandir(root), key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        try:
            is_dir = entry.is_dir()
        except OSError:
            continue
        if is_dir:
            yield from _walk_files(entry.path)
        else:
            yield entry.path


def tail_logs(log_dir: str | os.PathLike, pattern: str, follow: bool, lines: int) -> None:
    """Tail the matching log files; in follow mode, run until interrupted."""
    tailer = LogTailer(log_dir, pattern, follow, lines)
    try:
        tailer.start()
    except KeyboardInterrupt:
        pass
    finally:
        tailer.stop()