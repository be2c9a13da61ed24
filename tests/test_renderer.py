"""Tests for the renderer."""

from lx import DisplayMode, Visibility
from lx.output.renderer import detailed_line, render, render_json_items
from lx.output.styles import DIRECTORY_STYLE, wrap

START, RESET = DIRECTORY_STYLE


class TestGridMode:
    """Test plain-grid rendering."""

    def test_empty(self, make_item):
        assert render([], Visibility.SHOW_ALL, DisplayMode.GRID, terminal_width=80) == ""

    def test_only_hidden_items_filtered_out(self, make_item):
        items = [make_item(".DS_Store")]

        assert render(items, Visibility.HIDE_HIDDEN, DisplayMode.GRID, terminal_width=80) == ""

    def test_styles_directories(self, make_item):
        items = [make_item("testfile.txt"), make_item("subdir", is_dir=True)]

        result = render(items, Visibility.SHOW_ALL, DisplayMode.GRID, terminal_width=80)

        assert result == f"{START}subdir{RESET}        testfile.txt"

    def test_show_all_includes_hidden(self, make_item):
        items = [make_item(".env"), make_item("a")]

        hidden = render(items, Visibility.HIDE_HIDDEN, DisplayMode.GRID, terminal_width=80)
        everything = render(items, Visibility.SHOW_ALL, DisplayMode.GRID, terminal_width=80)

        assert hidden == "a"
        assert everything == ".env  a"


class TestDetailedMode:
    """Test detailed-list rendering."""

    def test_empty(self):
        assert render([], Visibility.SHOW_ALL, DisplayMode.DETAILED) == ""

    def test_line_format(self, make_item):
        assert detailed_line(make_item("a.txt", size=512)) == "2024-01-02 rw-r--r--     512b a.txt"

    def test_directory_line_is_styled(self, make_item):
        item = make_item("b", is_dir=True, file_permissions="rwxr-xr-x", size=4096)

        assert detailed_line(item) == f"2024-01-02 rwxr-xr-x    4.0kb {START}b{RESET}"

    def test_directories_before_files(self, make_item):
        items = [make_item("a.txt"), make_item("b", is_dir=True)]

        lines = render(items, Visibility.SHOW_ALL, DisplayMode.DETAILED).split("\n")

        assert len(lines) == 2
        assert lines[0].endswith(wrap("b", DIRECTORY_STYLE))
        assert lines[1].endswith("a.txt")

    def test_sort_is_stable(self, make_item):
        items = [
            make_item("z.txt"),
            make_item("m", is_dir=True),
            make_item("a.txt"),
            make_item("c", is_dir=True),
        ]

        lines = render(items, Visibility.SHOW_ALL, DisplayMode.DETAILED).split("\n")
        names = [line.rsplit(" ", 1)[1] for line in lines]

        assert names == [wrap("m", DIRECTORY_STYLE), wrap("c", DIRECTORY_STYLE), "z.txt", "a.txt"]

    def test_hide_hidden(self, make_item):
        items = [make_item(".DS_Store", file_permissions="rwxrwxrwx"), make_item("x")]

        result = render(items, Visibility.HIDE_HIDDEN, DisplayMode.DETAILED)

        assert result == "2024-01-02 rw-r--r--       0b x"

    def test_custom_size_width(self, make_item):
        assert detailed_line(make_item("a", size=7), size_width=3) == "2024-01-02 rw-r--r--  7b a"


class TestJsonItems:
    """Test JSON rendering."""

    def test_filters_and_orders(self, make_item):
        items = [make_item("a.txt", size=1536), make_item(".git", is_dir=True), make_item("src", is_dir=True)]

        data = render_json_items(items, Visibility.HIDE_HIDDEN)

        assert [d.name for d in data] == ["src", "a.txt"]
        assert data[1].human_size == "1.5kb"
        assert data[0].is_dir is True


class TestControlCharacterNames:
    """Test names that embed terminal control characters."""

    def test_escape_sequences_in_file_name_are_replaced(self, make_item):
        items = [make_item("\x1b[1m\x1b[95mfile"), make_item("real_dir", is_dir=True)]

        result = render(items, Visibility.SHOW_ALL, DisplayMode.GRID, terminal_width=80)

        assert result == f"{START}real_dir{RESET}       ?[1m?[95mfile"

    def test_escape_sequences_in_directory_name_are_replaced(self, make_item):
        item = make_item("evil\x1b[0m", is_dir=True, file_permissions="rwxr-xr-x")

        assert detailed_line(item).endswith(f"{START}evil?[0m{RESET}")

    def test_newline_in_name_stays_on_one_line(self, make_item):
        result = render([make_item("two\nlines")], Visibility.SHOW_ALL, DisplayMode.DETAILED)

        assert "\n" not in result
        assert result.endswith("two?lines")


class TestSizeColumn:
    """Test detailed-mode size alignment."""

    def test_wide_sizes_widen_the_column(self, make_item):
        items = [make_item("small", size=10), make_item("big", size=204800 * 1024)]

        lines = render(items, Visibility.SHOW_ALL, DisplayMode.DETAILED).split("\n")

        assert lines == [
            "2024-01-02 rw-r--r--        10b small",
            "2024-01-02 rw-r--r-- 204800.0kb big",
        ]

    def test_minimum_width_kept_for_small_sizes(self, make_item):
        items = [make_item("a", size=1), make_item("b", size=2048)]

        lines = render(items, Visibility.SHOW_ALL, DisplayMode.DETAILED).split("\n")

        assert lines == [
            "2024-01-02 rw-r--r--       1b a",
            "2024-01-02 rw-r--r--    2.0kb b",
        ]

    def test_hidden_items_do_not_widen_the_column(self, make_item):
        items = [make_item(".huge", size=204800 * 1024), make_item("a", size=1)]

        result = render(items, Visibility.HIDE_HIDDEN, DisplayMode.DETAILED)

        assert result == "2024-01-02 rw-r--r--       1b a"


class TestDefaultWidth:
    """Test the grid fallback width when no terminal is attached."""

    def test_default_width_used_without_terminal(self, make_item, monkeypatch):
        import lx.terminal as terminal_module
        from lx.exceptions import TerminalSizeUnavailableException

        def no_terminal(stream=None):
            raise TerminalSizeUnavailableException()

        monkeypatch.setattr(terminal_module, "get_terminal_width", no_terminal)
        items = [make_item("ab"), make_item("cd")]

        narrow = render(items, Visibility.SHOW_ALL, DisplayMode.GRID, default_width=6)
        wide = render(items, Visibility.SHOW_ALL, DisplayMode.GRID, default_width=80)

        assert narrow == "ab  \ncd"
        assert wide == "ab  cd"
