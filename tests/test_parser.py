"""Tests for the line classifier and SpecParser."""

from __future__ import annotations

import warnings
from pathlib import Path

import pytest

from pyspecfile.consts import LineKind
from pyspecfile.errors import InvalidKey, MalformedScript, SpecSyntaxError
from pyspecfile.model import SpecStore
from pyspecfile.parser import ParseState, SpecParser, classify

from .conftest import write_spec


def parse(text: str, **kwargs) -> SpecStore:
    return SpecParser.readstream(text.splitlines(keepends=True), **kwargs)


# === classify() ===


class TestClassify:
    @pytest.mark.parametrize("line", ["", "# note", "// note", "#"])
    def test_blank_and_comments(self, line: str) -> None:
        assert classify(line) is LineKind.BLANK
        assert classify(line, in_script=True) is LineKind.BLANK

    def test_structural_lines_win_inside_scripts(self) -> None:
        assert classify("[net]", True) is LineKind.SECTION
        assert classify("{", True) is LineKind.SCRIPT_OPEN
        assert classify("}", True) is LineKind.SCRIPT_CLOSE

    def test_script_vs_key_value(self) -> None:
        assert classify("move 1 2", in_script=True) is LineKind.SCRIPT_LINE
        assert classify("move 1 2") is LineKind.KEY_VALUE
        assert classify("/ single slash") is LineKind.KEY_VALUE

    def test_parse_state_defaults(self) -> None:
        state = ParseState()
        assert state.section == ""
        assert not state.in_script
        assert state.script == []
        assert state.scoped_key is None


# === readstream() ===


class TestReadStream:
    def test_key_value_tokens(self) -> None:
        store = parse('key = a, "b c", d\n')
        assert store["::key"] == ["a", "b c", "d"]

    def test_values_folded_unless_quoted(self) -> None:
        store = parse('Key = Alpha, "Beta"\n')
        assert store["::key"] == ["alpha", "Beta"]

    def test_key_without_equals_has_empty_list(self) -> None:
        store = parse("standalone\n")
        assert store["::standalone"] == []

    def test_sections_scope_keys(self) -> None:
        store = parse("port = 80\n[net]\nport = 9000\n")
        assert store["::port"] == ["80"]
        assert store["net::port"] == ["9000"]

    def test_section_name_spelling_kept(self) -> None:
        store = parse("[Net]\nPort = 1\n")
        assert list(store) == ["Net::port"]
        assert store["net::port"] == ["1"]

    def test_overwrite_in_same_section(self) -> None:
        store = parse("[a]\nx = 1, 2\nx = 3\n")
        assert store["a::x"] == ["3"]

    def test_redeclared_section_merges(self) -> None:
        store = parse("[a]\nx = 1\n[b]\ny = 2\n[a]\nz = 3\n")
        assert store["a::x"] == ["1"]
        assert store["a::z"] == ["3"]

    def test_comments_and_tabs(self) -> None:
        store = parse("  # c\n\t// c\n\tkey\t=\t1\t2\r\n")
        assert len(store) == 1
        assert store["::key"] == ["1", "2"]

    def test_script_after_key_line(self) -> None:
        store = parse("init =\n{\nMove 10 20\n\twait 5\n}\n")
        assert store["::init"] == ["Move 10 20", "wait 5"]
        assert store.is_script("::init")

    def test_script_opened_on_key_line(self) -> None:
        store = parse("init = {\nmove 10 20\nwait 5\n}\n")
        assert store["::init"] == ["move 10 20", "wait 5"]
        assert store.is_script("::init")

    def test_quoted_brace_is_a_value(self) -> None:
        store = parse('brace = "{"\n')
        assert store["::brace"] == ["{"]
        assert not store.is_script("::brace")

    def test_unterminated_quoted_brace_is_a_value(self) -> None:
        store = parse("x = '{\ny = 2\n")
        assert store["::x"] == ["{"]
        assert not store.is_script("::x")
        assert store["::y"] == ["2"]

    def test_script_skips_comments(self) -> None:
        store = parse("s =\n{\n# not recorded\nrun\n}\n")
        assert store["::s"] == ["run"]

    def test_script_in_section(self) -> None:
        store = parse("[bot]\nboot = {\nbeep\n}\nafter = 1\n")
        assert store["bot::boot"] == ["beep"]
        assert store["bot::after"] == ["1"]

    def test_into_existing_store(self) -> None:
        store = parse("a = 1\n")
        SpecParser.readstream(["b = 2\n"], store)
        assert set(store) == {"::a", "::b"}


class TestMalformed:
    def test_orphan_close_warns(self) -> None:
        with pytest.warns(UserWarning):
            store = parse("a = 1\n}\n")
        assert store["::a"] == ["1"]

    def test_unterminated_script_dropped_with_warning(self) -> None:
        with pytest.warns(UserWarning, match="not terminated"):
            store = parse("s = {\nline\n")
        assert "::s" not in store

    def test_script_without_key_warns(self) -> None:
        with pytest.warns(UserWarning):
            store = parse("{\nline\n}\n")
        assert len(store) == 0

    def test_scoped_key_in_file_warns(self) -> None:
        with pytest.warns(UserWarning):
            store = parse("net::port = 1\n")
        assert len(store) == 0

    def test_strict_raises_with_lineno(self) -> None:
        with pytest.raises(MalformedScript) as exc:
            parse("a = 1\n\n}\n", strict=True)
        assert exc.value.lineno == 3

    def test_strict_unterminated(self) -> None:
        with pytest.raises(MalformedScript):
            parse("s = {\nline\n", strict=True)

    def test_strict_bad_key(self) -> None:
        with pytest.raises(InvalidKey):
            parse("= 5\n", strict=True)
        with pytest.raises(SpecSyntaxError):
            parse("a::b = 5\n", strict=True)

    def test_scoped_section_name_drops_its_keys(self) -> None:
        text = "[a::b]\nx = 1\ns = {\nz = 3\n}\n[c]\ny = 2\n"
        with pytest.warns(UserWarning, match="bad section name"):
            store = parse(text)
        assert "a::b::x" not in store
        assert "::z" not in store
        assert store["c::y"] == ["2"]
        assert store.sections() == ["c"]

    def test_strict_scoped_section_name(self) -> None:
        with pytest.raises(InvalidKey) as exc:
            parse("x = 1\n[a::b]\ny = 2\n", strict=True)
        assert exc.value.lineno == 2


# === read() ===


class TestRead:
    def test_read_file(self, sample_file: Path) -> None:
        store = SpecParser(sample_file).read()
        assert store["net::port"] == ["9000"]
        assert store["motion::home"] == ['Goto "Dock A" 0.5', "wait 5"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            SpecParser(tmp_path / "nope.cfg").read()

    def test_wrong_encoding_falls_back(self, tmp_path: Path) -> None:
        text = "name = \"Grüße aus Köln, schöne Grüße\"\n" * 20
        path = write_spec(tmp_path / "latin.cfg", text, "latin-1")
        store = SpecParser(path, "utf-8").read()
        assert store["::name"] == ["Grüße aus Köln, schöne Grüße"]

    def test_encoding_retry_warns_once(self, tmp_path: Path) -> None:
        text = "}\n" + "name = \"Grüße aus Köln, schöne Grüße\"\n" * 20
        path = write_spec(tmp_path / "latin.cfg", text, "latin-1")
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            store = SpecParser(path, "utf-8").read()
        assert len(caught) == 1
        assert store["::name"] == ["Grüße aus Köln, schöne Grüße"]

    def test_str(self, sample_file: Path) -> None:
        assert str(sample_file) in str(SpecParser(sample_file, "utf-8"))
