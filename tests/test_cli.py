"""
Unit tests for loading, rendering, the interactive menu and the CLI
Run with: pytest tests/test_cli.py -v
"""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.data.data_loader import LineLoader
from src.linesearch import LineIndex
from src.utils.menu import MenuSession, MENU
from src.utils.result_renderer import ResultRenderer, NO_MATCHES_MESSAGE
from main import LineSearchCLI


PEOPLE = [
    "Alice Smith alice@x.com",
    "Bob Jones bob@x.com",
    "Alice Jones",
]


@pytest.fixture
def people_file(tmp_path):
    """Data file with one person per line."""
    path = tmp_path / "people.txt"
    path.write_text("\n".join(PEOPLE) + "\n", encoding="utf-8")
    return path


class TestLineLoader:
    """Test LineLoader class."""

    def test_load_lines(self, people_file):
        assert LineLoader().load_lines(people_file) == PEOPLE

    def test_no_trailing_newline(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("a\nb", encoding="utf-8")
        assert LineLoader().load_lines(path) == ["a", "b"]

    def test_blank_lines_kept(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("a\n\nb  \n", encoding="utf-8")
        assert LineLoader().load_lines(path) == ["a", "", "b  "]

    def test_crlf_line_endings(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_bytes(b"a b\r\nc\r\n")
        assert LineLoader().load_lines(path) == ["a b", "c"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        assert LineLoader().load_lines(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LineLoader().load_lines(tmp_path / "missing.txt")

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LineLoader().load_lines(tmp_path)


class TestResultRenderer:
    """Test ResultRenderer class."""

    def setup_method(self):
        self.index = LineIndex.build(PEOPLE)

    def test_render_matches_sorted(self):
        output = ResultRenderer().render({2, 0}, self.index)
        assert "2 persons found:" in output
        assert output.index("Alice Smith alice@x.com") < output.index("Alice Jones")

    def test_render_no_matches(self):
        assert ResultRenderer().render(set(), self.index).strip() == NO_MATCHES_MESSAGE

    def test_render_unsorted_contains_all_lines(self):
        output = ResultRenderer(sort_results=False).render({0, 1, 2}, self.index)
        assert "3 persons found:" in output
        for line in PEOPLE:
            assert line in output

    def test_render_all(self):
        output = ResultRenderer.render_all(self.index)
        assert output.splitlines() == ["=== List of data ==="] + PEOPLE

    def test_render_all_empty(self):
        output = ResultRenderer.render_all(LineIndex.build([]))
        assert output.splitlines() == ["=== List of data ==="]


class TestMenuSession:
    """Test the interactive menu loop."""

    def run_session(self, inputs, lines=PEOPLE):
        """Run a session over scripted inputs and return everything printed."""
        scripted = iter(inputs)
        printed = []

        def read():
            try:
                return next(scripted)
            except StopIteration:
                raise EOFError

        session = MenuSession(LineIndex.build(lines), input_fn=read, output_fn=printed.append)
        session.run()
        return "\n".join(printed)

    def test_exit(self):
        output = self.run_session(["0"])
        assert MENU in output
        assert "Bye!" in output

    def test_search_any(self):
        output = self.run_session(["1", "ANY", "ALICE", "0"])
        assert "Select a matching strategy: ALL, ANY, NONE" in output
        assert "2 persons found:" in output
        assert "Alice Smith alice@x.com" in output
        assert "Alice Jones" in output

    def test_search_all(self):
        output = self.run_session(["1", "ALL", "alice jones", "0"])
        assert "1 persons found:" in output
        assert "Alice Jones" in output
        assert "Bob Jones" not in output

    def test_search_none(self):
        output = self.run_session(["1", "NONE", "bob", "0"])
        assert "2 persons found:" in output
        assert "Bob Jones" not in output

    def test_search_no_matches(self):
        output = self.run_session(["1", "ANY", "carol", "0"])
        assert NO_MATCHES_MESSAGE in output

    def test_invalid_strategy(self):
        output = self.run_session(["1", "any", "alice", "0"])
        assert "Unknown matching strategy: any" in output
        assert "persons found" not in output
        assert "Bye!" in output

    def test_list_all(self):
        output = self.run_session(["2", "0"])
        assert "=== List of data ===" in output
        for line in PEOPLE:
            assert line in output

    def test_incorrect_option(self):
        output = self.run_session(["7", "abc", "0"])
        assert output.count("Incorrect option! Try again.") == 2

    def test_end_of_input_stops(self):
        output = self.run_session(["2"])
        assert "Bye!" not in output

    def test_end_of_input_during_search(self):
        output = self.run_session(["1", "ANY"])
        assert "persons found" not in output

    def test_empty_data(self):
        output = self.run_session(["1", "ALL", "alice", "2", "0"], lines=[])
        assert NO_MATCHES_MESSAGE in output
        assert "Bye!" in output


class TestLineSearchCLI:
    """Test the Fire CLI commands."""

    def test_search(self, people_file, capsys):
        LineSearchCLI().search("ALL", "alice jones", data=str(people_file))
        output = capsys.readouterr().out
        assert "1 persons found:" in output
        assert "Alice Jones" in output

    def test_search_invalid_strategy(self, people_file, capsys):
        LineSearchCLI().search("SOME", "alice", data=str(people_file))
        output = capsys.readouterr().out
        assert "Unknown matching strategy: SOME" in output

    def test_search_numeric_query(self, tmp_path, capsys):
        path = tmp_path / "codes.txt"
        path.write_text("room 101\nroom 102\n", encoding="utf-8")
        LineSearchCLI().search("ANY", 101, data=str(path))
        output = capsys.readouterr().out
        assert "1 persons found:" in output
        assert "room 101" in output

    def test_missing_file_gives_empty_index(self, tmp_path, capsys):
        LineSearchCLI().search("NONE", "", data=str(tmp_path / "missing.txt"))
        output = capsys.readouterr().out
        assert "File not found." in output
        assert NO_MATCHES_MESSAGE in output

    def test_data_path_from_environment(self, people_file, monkeypatch, capsys):
        monkeypatch.setenv("LINESEARCH_DATA", str(people_file))
        LineSearchCLI().search("ANY", "bob")
        output = capsys.readouterr().out
        assert "Bob Jones bob@x.com" in output

    def test_list_lines(self, people_file, capsys):
        LineSearchCLI().list_lines(data=str(people_file))
        output = capsys.readouterr().out
        for line in PEOPLE:
            assert line in output

    def test_stats(self, people_file):
        stats = LineSearchCLI().stats(data=str(people_file))
        assert stats['num_lines'] == 3
        assert stats['vocabulary_size'] == 6

    def test_interactive(self, people_file, monkeypatch, capsys):
        inputs = iter(["1", "ANY", "smith", "0"])
        monkeypatch.setattr("builtins.input", lambda *args: next(inputs))
        LineSearchCLI().interactive(data=str(people_file))
        output = capsys.readouterr().out
        assert "1 persons found:" in output
        assert "Bye!" in output

    def test_show_config(self, capsys):
        LineSearchCLI().show_config()
        output = capsys.readouterr().out
        assert "sort_results: true" in output


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
