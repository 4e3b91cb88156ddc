import pytest

from cmime.scanning import (
    CR,
    CRLF,
    LF,
    BoundaryType,
    determine_linebreak,
    determine_linebreak_from_file,
    get_boundary_info,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a\r\nb", CRLF),
        ("a\nb", LF),
        ("a\rb", CR),
        ("a\nb\r\nc", CRLF),
        ("a\rb\nc", LF),
        ("plain", None),
    ],
)
def test_determine_linebreak(text, expected):
    assert determine_linebreak(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("line\r\n", "\r\n"),
        ("line\n", "\n"),
        ("line\r", "\r"),
    ],
)
def test_determine_linebreak_returns_literal_sequences(text, expected):
    assert determine_linebreak(text) == expected


def test_linebreak_from_file_lf(tmp_path):
    path = tmp_path / "msg.eml"
    path.write_bytes(b"Subject: hi\nFrom: a@example.com\n\nbody\n")
    assert determine_linebreak_from_file(path) == LF


def test_linebreak_from_file_crlf(tmp_path):
    path = tmp_path / "msg.eml"
    path.write_bytes(b"Subject: hi\r\n\r\nbody\r\n")
    assert determine_linebreak_from_file(str(path)) == CRLF


def test_linebreak_from_file_cr(tmp_path):
    path = tmp_path / "msg.eml"
    path.write_bytes(b"Subject: hi\rbody\r")
    assert determine_linebreak_from_file(path) == CR


def test_linebreak_from_file_defaults_to_crlf(tmp_path):
    path = tmp_path / "msg.eml"
    path.write_bytes(b"no line breaks at all")
    assert determine_linebreak_from_file(path) == CRLF


def test_linebreak_from_missing_file(tmp_path):
    with pytest.raises(OSError):
        determine_linebreak_from_file(tmp_path / "absent.eml")


def test_boundary_open():
    info = get_boundary_info(["xyz", "abc"], "--abc\r\nContent-Type: text/plain", CRLF)
    assert info.type is BoundaryType.OPEN
    assert info.marker == "--abc"
    assert info.length == len("--abc")


def test_boundary_close():
    info = get_boundary_info(["abc"], "--abc--\nrest", LF)
    assert info.type is BoundaryType.CLOSE
    assert info.marker == "--abc--"
    assert info.length == len(info.marker)


def test_boundary_requires_exact_line():
    assert get_boundary_info(["abc"], "--abcd\n", LF) is None
    assert get_boundary_info(["abc"], " --abc\n", LF) is None


def test_boundary_without_newline():
    assert get_boundary_info(["abc"], "--abc", LF) is None
    assert get_boundary_info(["abc"], "--abc\n", None) is None


def test_boundary_unknown():
    assert get_boundary_info([], "--abc\n", LF) is None
    assert get_boundary_info(["other"], "--abc\n", LF) is None


def test_boundary_first_match_wins():
    info = get_boundary_info(["a", "a-"], "--a--\n", LF)
    assert info.type is BoundaryType.CLOSE
    assert info.marker == "--a--"