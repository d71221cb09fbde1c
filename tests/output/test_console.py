"""Tests for Rich Console factory and theme."""

from io import StringIO

from rfc3339kit.output.console import KIT_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        console = create_console(width=80)
        assert console.width == 80

    def test_default_width(self) -> None:
        console = create_console()
        assert console.width == 120


class TestTheme:
    def test_offset_styles_match_offset_kinds(self) -> None:
        assert "kit.offset.zulu" in KIT_THEME.styles
        assert "kit.offset.numeric" in KIT_THEME.styles
