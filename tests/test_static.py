"""Tests for the static CSV dataset loader."""

import pytest

from german_chancellors_presidents.config import Config
from german_chancellors_presidents.static.loader import (
    MalformedStaticRow,
    StaticRow,
    expand_type_code,
    load_static_rows,
    parse_row,
)

HEADER = "#name,type,date,article,image,attribution\n"
ADENAUER = '"Konrad Adenauer (CDU)",C,"FROM 15 SEP 1949 TO 16 OCT 1963",Konrad_Adenauer,,\n'


def _write(tmp_path, text):
    path = tmp_path / "events.csv"
    path.write_text(text, encoding="utf-8")
    return path


class TestParseRow:
    """Tests for parse_row."""

    def test_valid_row(self):
        row = parse_row(["Willy Brandt (SPD)", "C", "FROM 21 OCT 1969 TO 7 MAY 1974", "Willy_Brandt", "", ""])
        assert row == StaticRow("Willy Brandt (SPD)", "C", "FROM 21 OCT 1969 TO 7 MAY 1974", "Willy_Brandt")

    def test_combined_type_code(self):
        row = parse_row(["Walter Scheel (FDP)", "C (A)", "FROM 7 MAY 1974 TO 16 MAY 1974", "Walter_Scheel", "", ""])
        assert row.type_code == "C (A)"

    def test_wrong_column_count(self):
        with pytest.raises(MalformedStaticRow):
            parse_row(["Willy Brandt (SPD)", "C", "FROM 21 OCT 1969"])

    @pytest.mark.parametrize("code", ["X", "K", "", "C,P", "()"])
    def test_unknown_type_code(self, code):
        with pytest.raises(MalformedStaticRow):
            parse_row(["Somebody", code, "FROM 1 JAN 2000", "Somebody", "", ""])


class TestExpandTypeCode:
    """Tests for expand_type_code."""

    def test_english(self):
        assert expand_type_code("C", "en") == "Chancellor of Germany"
        assert expand_type_code("P (A)", "en") == "President of Germany (acting)"

    def test_german(self):
        assert expand_type_code("C (A)", "de-DE") == "Bundeskanzler von Deutschland (nur geschäftsführend)"

    def test_replacement_text_not_rescanned(self):
        # "Chancellor" starts with a "C" that must not be replaced again
        assert expand_type_code("C", "en").count("Chancellor") == 1


class TestLoadStaticRows:
    """Tests for load_static_rows."""

    def test_header_is_ignored(self, tmp_path):
        path = _write(tmp_path, HEADER + ADENAUER)
        rows = load_static_rows(path)
        assert [r.name for r in rows] == ["Konrad Adenauer (CDU)"]

    def test_comment_rows_skipped(self, tmp_path):
        path = _write(tmp_path, HEADER + "# Bundespräsidenten\n" + ADENAUER)
        rows = load_static_rows(path)
        assert len(rows) == 1

    def test_only_comments(self, tmp_path):
        path = _write(tmp_path, HEADER + "# nothing here,C,x,y,,\n")
        assert load_static_rows(path) == []

    def test_malformed_rows_skipped(self, tmp_path):
        text = HEADER + "broken,row\n" + '"Nobody",X,"FROM 1 JAN 2000",Nobody,,\n' + ADENAUER
        rows = load_static_rows(_write(tmp_path, text))
        assert [r.article for r in rows] == ["Konrad_Adenauer"]

    def test_blank_lines_skipped(self, tmp_path):
        rows = load_static_rows(_write(tmp_path, HEADER + "\n" + ADENAUER + "\n"))
        assert len(rows) == 1

    def test_quoted_attribution_with_commas(self, tmp_path):
        line = '"Konrad Adenauer (CDU)",C,"FROM 15 SEP 1949",Konrad_Adenauer,img.example/a.jpg,"A, B, C"\n'
        rows = load_static_rows(_write(tmp_path, HEADER + line))
        assert rows[0].image == "img.example/a.jpg"
        assert rows[0].attribution == "A, B, C"

    def test_bundled_dataset(self):
        rows = load_static_rows(Config().static_dataset_path)
        names = [r.name for r in rows]
        assert "Konrad Adenauer (CDU)" in names
        assert "Frank-Walter Steinmeier (SPD)" in names
        assert all(not n.startswith("#") for n in names)
