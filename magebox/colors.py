"""Terminal styling helpers: ANSI colours, status symbols and message printers."""

from __future__ import annotations

import os
import sys

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
UNDERLINE = "\033[4m"

BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"

BRIGHT_BLACK = "\033[90m"
BRIGHT_RED = "\033[91m"
BRIGHT_GREEN = "\033[92m"
BRIGHT_YELLOW = "\033[93m"
BRIGHT_BLUE = "\033[94m"
BRIGHT_MAGENTA = "\033[95m"
BRIGHT_CYAN = "\033[96m"
BRIGHT_WHITE = "\033[97m"

ORANGE = "\033[38;5;208m"

BG_RED = "\033[41m"
BG_GREEN = "\033[42m"
BG_YELLOW = "\033[43m"
BG_BLUE = "\033[44m"

SYMBOL_CHECK = "✓"
SYMBOL_CROSS = "✗"
SYMBOL_WARNING = "⚠"
SYMBOL_INFO = "ℹ"
SYMBOL_ARROW = "→"
SYMBOL_DOT = "•"
SYMBOL_STAR = "★"


def _detect_colors() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    stream = sys.stdout
    if stream is None or not hasattr(stream, "isatty") or not stream.isatty():
        return False
    if os.name == "nt" and not os.environ.get("TERM") and not os.environ.get("WT_SESSION"):
        return False
    return True


class _Settings:
    enabled: bool = _detect_colors()


def disable_colors() -> None:
    """Turn coloured output off."""
    _Settings.enabled = False


def enable_colors() -> None:
    """Turn coloured output on."""
    _Settings.enabled = True


def colors_enabled() -> bool:
    """Return whether coloured output is on."""
    return _Settings.enabled


def _colorize(color: str, text: str) -> str:
    if not _Settings.enabled:
        return text
    return color + text + RESET


def success(text: str) -> str:
    """Green text with a check mark, or ``[OK]`` without colours."""
    if not _Settings.enabled:
        return "[OK] " + text
    return _colorize(GREEN, SYMBOL_CHECK + " " + text)


def error(text: str) -> str:
    """Red text with a cross, or ``[ERROR]`` without colours."""
    if not _Settings.enabled:
        return "[ERROR] " + text
    return _colorize(RED, SYMBOL_CROSS + " " + text)


def warning(text: str) -> str:
    """Yellow text with a warning sign, or ``[WARN]`` without colours."""
    if not _Settings.enabled:
        return "[WARN] " + text
    return _colorize(YELLOW, SYMBOL_WARNING + " " + text)


def info(text: str) -> str:
    """Cyan text with an info sign, or ``[INFO]`` without colours."""
    if not _Settings.enabled:
        return "[INFO] " + text
    return _colorize(CYAN, SYMBOL_INFO + " " + text)


def title(text: str) -> str:
    """Bold bright text, or ``=== text ===`` without colours."""
    if not _Settings.enabled:
        return "=== " + text + " ==="
    return _colorize(BOLD + BRIGHT_WHITE, text)


def subtitle(text: str) -> str:
    return _colorize(DIM, text)


def highlight(text: str) -> str:
    return _colorize(BOLD + CYAN, text)


def command(text: str) -> str:
    return _colorize(YELLOW, text)


def path(text: str) -> str:
    return _colorize(BLUE, text)


def url(text: str) -> str:
    return _colorize(UNDERLINE + CYAN, text)


def status(running: bool) -> str:
    """``running`` in green or ``stopped`` in red."""
    if running:
        return _colorize(GREEN, "running")
    return _colorize(RED, "stopped")


def status_installed(installed: bool) -> str:
    """``installed`` in green or ``not installed`` in red."""
    if installed:
        return _colorize(GREEN, "installed")
    return _colorize(RED, "not installed")


def bullet(text: str) -> str:
    if not _Settings.enabled:
        return "  - " + text
    return _colorize(DIM, "  " + SYMBOL_DOT + " ") + text


def arrow(text: str) -> str:
    if not _Settings.enabled:
        return "  -> " + text
    return _colorize(CYAN, "  " + SYMBOL_ARROW + " ") + text


def header(text: str) -> str:
    """A section header: the text on its own line, underlined."""
    if not _Settings.enabled:
        return "\n" + text + "\n" + repeat_char("-", len(text))
    return (
        "\n"
        + _colorize(BOLD + BRIGHT_WHITE, text)
        + "\n"
        + _colorize(DIM, repeat_char("─", len(text)))
    )


def box(text: str) -> str:
    """The text framed by a box."""
    if not _Settings.enabled:
        return "+------------------+\n| " + text + " |\n+------------------+"
    top = _colorize(DIM, "┌" + repeat_char("─", len(text) + 2) + "┐")
    middle = _colorize(DIM, "│ ") + text + _colorize(DIM, " │")
    bottom = _colorize(DIM, "└" + repeat_char("─", len(text) + 2) + "┘")
    return top + "\n" + middle + "\n" + bottom


def progress_dot() -> str:
    return _colorize(CYAN, ".")


_LEVEL_COLORS = {
    "DEBUG": DIM,
    "INFO": BLUE,
    "NOTICE": CYAN,
    "WARNING": YELLOW,
    "ERROR": RED,
    "CRITICAL": BOLD + RED,
    "ALERT": BOLD + RED,
    "EMERGENCY": BOLD + RED,
}


def log_level(level: str) -> str:
    """Colour a log level name by severity; unknown levels are returned as is."""
    color = _LEVEL_COLORS.get(level)
    if color is None:
        return level
    return _colorize(color, level)


def log_file(filename: str) -> str:
    return _colorize(MAGENTA, filename)


def timestamp(ts: str) -> str:
    return _colorize(DIM, ts)


def repeat_char(char: str, n: int) -> str:
    """Return ``char`` repeated ``n`` times."""
    return char * max(n, 0)


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def print_success(fmt: str, *args: object) -> None:
    print(success(_format(fmt, args)))


def print_error(fmt: str, *args: object) -> None:
    print(error(_format(fmt, args)))


def print_warning(fmt: str, *args: object) -> None:
    print(warning(_format(fmt, args)))


def print_info(fmt: str, *args: object) -> None:
    print(info(_format(fmt, args)))


def print_title(fmt: str, *args: object) -> None:
    print(title(_format(fmt, args)))


def print_header(fmt: str, *args: object) -> None:
    print(header(_format(fmt, args)))


def print_logo(version: str) -> None:
    """Print the large logo with the version."""
    if _Settings.enabled:
        o, w, r, d = ORANGE, BRIGHT_WHITE, RESET, DIM
    else:
        o = w = r = d = ""

    blank = " " * 39

    def row(content: str) -> str:
        return o + "    │" + r + content + o + "│" + r

    rows = [
        o + "    ╭───────────────────────────────────────╮" + r,
        row(blank),
        row("   " + o + "███╗   ███╗" + r + " " + w + "█████╗  ██████╗ ███████╗" + r + "  "),
        row("   " + o + "████╗ ████║" + r + " " + w + "██╔══██╗██╔════╝ ██╔════╝" + r + "  "),
        row("   " + o + "██╔████╔██║" + r + " " + w + "███████║██║  ███╗█████╗" + r + "    "),
        row("   " + o + "██║╚██╔╝██║" + r + " " + w + "██╔══██║██║   ██║██╔══╝" + r + "    "),
        row("   " + o + "██║ ╚═╝ ██║" + r + " " + w + "██║  ██║╚██████╔╝███████╗" + r + "  "),
        row("   " + o + "╚═╝     ╚═╝" + r + " " + w + "╚═╝  ╚═╝ ╚═════╝ ╚══════╝" + r + "  "),
        row(blank),
        row("   " + o + "██████╗  ██████╗ ██╗  ██╗" + r + " " * 13),
        row("   " + o + "██╔══██╗██╔═══██╗╚██╗██╔╝" + r + " " * 13),
        row("   " + o + "██████╔╝██║   ██║ ╚███╔╝" + r + " " * 14),
        row("   " + o + "██╔══██╗██║   ██║ ██╔██╗" + r + " " * 14),
        row("   " + o + "██████╔╝╚██████╔╝██╔╝ ██╗" + r + " " * 13),
        row("   " + o + "╚═════╝  ╚═════╝ ╚═╝  ╚═╝" + r + " " * 13),
        row(blank),
        row("   " + d + "Modern Magento Development" + r + " " * 12),
        row("   " + d + "Version " + w + version + r + " " * 25),
        row(blank),
        o + "    ╰───────────────────────────────────────╯" + r,
    ]
    print("\n" + "\n".join(rows) + "\n", end="")


_SMALL_LOGO = r"""                            _
                           | |
 _ __ ___   __ _  __ _  ___| |__   _____  __
| '_ ` _ \ / _` |/ _` |/ _ \ '_ \ / _ \ \/ /
| | | | | | (_| | (_| |  __/ |_) | (_) >  <
|_| |_| |_|\__,_|\__, |\___|_.__/ \___/_/\_\
                  __/ |
                 |___/"""


def print_logo_small(version: str) -> None:
    """Print the compact logo with the version."""
    if _Settings.enabled:
        o, r = ORANGE, RESET
    else:
        o = r = ""
    print(o + _SMALL_LOGO + r + "  " + version + "\n", end="")