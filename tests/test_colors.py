import pytest

from magebox import colors


@pytest.fixture
def colored():
    previous = colors.colors_enabled()
    colors.enable_colors()
    yield
    if not previous:
        colors.disable_colors()


@pytest.fixture
def plain():
    previous = colors.colors_enabled()
    colors.disable_colors()
    yield
    if previous:
        colors.enable_colors()


def test_success_colored(colored):
    result = colors.success("test message")
    assert "test message" in result
    assert colors.GREEN in result
    assert colors.SYMBOL_CHECK in result


def test_error_colored(colored):
    result = colors.error("error message")
    assert "error message" in result
    assert colors.RED in result
    assert colors.SYMBOL_CROSS in result


def test_warning_colored(colored):
    result = colors.warning("warning message")
    assert "warning message" in result
    assert colors.YELLOW in result


def test_info_colored(colored):
    result = colors.info("info message")
    assert "info message" in result
    assert colors.CYAN in result


@pytest.mark.parametrize(
    "func, prefix",
    [
        (colors.success, "[OK]"),
        (colors.error, "[ERROR]"),
        (colors.warning, "[WARN]"),
        (colors.info, "[INFO]"),
    ],
)
def test_plain_prefixes(plain, func, prefix):
    result = func("test")
    assert "\033[" not in result
    assert result == prefix + " test"


def test_status(colored):
    running = colors.status(True)
    assert "running" in running and colors.GREEN in running
    stopped = colors.status(False)
    assert "stopped" in stopped and colors.RED in stopped


def test_status_installed(colored):
    installed = colors.status_installed(True)
    assert "installed" in installed and colors.GREEN in installed
    missing = colors.status_installed(False)
    assert "not installed" in missing and colors.RED in missing


@pytest.mark.parametrize(
    "level, expected",
    [
        ("DEBUG", colors.DIM),
        ("INFO", colors.BLUE),
        ("NOTICE", colors.CYAN),
        ("WARNING", colors.YELLOW),
        ("ERROR", colors.RED),
        ("CRITICAL", colors.BOLD + colors.RED),
    ],
)
def test_log_level(colored, level, expected):
    assert expected in colors.log_level(level)


def test_log_level_unknown_unchanged(colored):
    assert colors.log_level("TRACE") == "TRACE"


def test_title(colored):
    result = colors.title("Test Title")
    assert "Test Title" in result
    assert colors.BOLD in result


def test_title_plain(plain):
    assert colors.title("Hi") == "=== Hi ==="


def test_header(colored):
    result = colors.header("Test Header")
    assert "Test Header" in result
    assert "─" in result


def test_header_plain(plain):
    assert colors.header("abc") == "\nabc\n---"


def test_highlight(colored):
    result = colors.highlight("highlighted")
    assert "highlighted" in result
    assert colors.CYAN in result
    assert colors.BOLD in result


def test_url(colored):
    result = colors.url("https://example.com")
    assert "https://example.com" in result
    assert colors.UNDERLINE in result


def test_url_plain(plain):
    assert colors.url("https://example.com") == "https://example.com"


def test_repeat_char():
    assert colors.repeat_char("-", 5) == "-----"
    assert colors.repeat_char("=", 0) == ""


def test_plain_helpers(plain):
    assert colors.bullet("x") == "  - x"
    assert colors.arrow("x") == "  -> x"
    assert colors.highlight("x") == "x"
    assert colors.box("x") == "+------------------+\n| x |\n+------------------+"


def test_box_colored_width(colored):
    lines = colors.box("abcd").split("\n")
    assert len(lines) == 3
    assert "─" * 6 in lines[0]
    assert "abcd" in lines[1]


def test_print_success_formats(plain, capsys):
    colors.print_success("done %s", "now")
    assert capsys.readouterr().out == "[OK] done now\n"


def test_print_error_without_args(plain, capsys):
    colors.print_error("100% broken")
    assert capsys.readouterr().out == "[ERROR] 100% broken\n"


def test_print_logo_small_plain(plain, capsys):
    colors.print_logo_small("1.2.3")
    out = capsys.readouterr().out
    assert out.endswith("|___/  1.2.3\n")
    assert "\033[" not in out


def test_print_logo_contains_version(plain, capsys):
    colors.print_logo("9.9.9")
    out = capsys.readouterr().out
    assert "Version 9.9.9" in out
    assert "Modern Magento Development" in out
    assert out.startswith("\n    ╭")


def test_print_logo_colored_uses_orange(colored, capsys):
    colors.print_logo("1.0")
    assert colors.ORANGE in capsys.readouterr().out