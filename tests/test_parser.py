import pytest
from hearttree import read_records
from hearttree.errors import DataFileError, ParseError, PipelineError


def _write(tmp_path, text, name="data.csv"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_reads_header_and_rows(tmp_path):
    path = _write(tmp_path, "a,b,label\n1.0,2.0,0\n3.0,4.0,1\n")
    header, rows = read_records(path)
    assert header == ["a", "b", "label"]
    assert rows == [["1.0", "2.0", "0"], ["3.0", "4.0", "1"]]


def test_strips_whitespace_and_skips_blank_lines(tmp_path):
    path = _write(tmp_path, " a , b ,label\n\n1, 2 ,0\n\n")
    header, rows = read_records(path)
    assert header == ["a", "b", "label"]
    assert rows == [["1", "2", "0"]]


def test_short_row_is_rejected(tmp_path):
    # header declares 3 columns, second data line has 2
    path = _write(tmp_path, "a,b,label\n1,2,0\n3,4\n")
    with pytest.raises(ParseError) as exc:
        read_records(path)
    assert exc.value.line == 3
    assert exc.value.stage == "parse"


def test_long_row_is_rejected(tmp_path):
    path = _write(tmp_path, "a,b,label\n1,2,0,9\n")
    with pytest.raises(ParseError):
        read_records(path)


def test_header_only_gives_no_rows(tmp_path):
    path = _write(tmp_path, "a,b,label\n")
    header, rows = read_records(path)
    assert header == ["a", "b", "label"]
    assert rows == []


def test_empty_file_is_rejected(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(ParseError):
        read_records(path)


def test_single_column_header_is_rejected(tmp_path):
    path = _write(tmp_path, "label\n0\n1\n")
    with pytest.raises(ParseError):
        read_records(path)


def test_missing_file(tmp_path):
    with pytest.raises(DataFileError) as exc:
        read_records(tmp_path / "nope.csv")
    # still an OSError for callers that only know the builtin
    assert isinstance(exc.value, OSError)
    assert isinstance(exc.value, PipelineError)
    assert exc.value.stage == "parse"


def test_other_delimiter(tmp_path):
    path = _write(tmp_path, "a;b\n1;0\n")
    header, rows = read_records(path, delimiter=";")
    assert header == ["a", "b"]
    assert rows == [["1", "0"]]


def test_delimiter_only_line_is_kept(tmp_path):
    path = _write(tmp_path, "a,b,label\n1,2,0\n,,\n3,4,1\n")
    header, rows = read_records(path)
    assert len(rows) == 3
    assert rows[1] == ["", "", ""]
