import pytest

from bitmap_utility.codefile import format_code, parse_code, read_code_file, write_code_file
from bitmap_utility.errors import ArgumentError, CodeParseError


def test_format_declaration_and_closing():
    text = format_code(bytes([1, 2, 3]))
    assert text == "static const unsigned char myImage[3] = {\n0x01, 0x02, 0x03\n};\n"


@pytest.mark.parametrize("value, literal", [(0, "0x00"), (5, "0x05"), (0xAB, "0xAB"), (255, "0xFF")])
def test_hex_literals_are_uppercase_and_padded(value, literal):
    body = format_code(bytes([value])).splitlines()[1]
    assert body == literal


def test_wraps_after_every_40_values():
    lines = format_code(bytes(range(81))).splitlines()
    body = lines[1:-1]
    assert len(body) == 3
    assert body[0].count("0x") == 40
    assert body[1].count("0x") == 40
    assert body[0].endswith(", ")
    assert body[2] == "0x50"
    assert lines[-1] == "};"


def test_exact_multiple_of_40_ends_with_blank_line():
    lines = format_code(bytes(40)).splitlines()
    assert lines[1].count("0x") == 40
    assert not lines[1].endswith(",")
    assert lines[2] == ""
    assert lines[3] == "};"


def test_empty_data_is_rejected(tmp_path):
    target = tmp_path / "out.h"
    with pytest.raises(ArgumentError):
        write_code_file(b"", target)
    assert not target.exists()


def test_ignores_lines_without_prefix():
    lines = ["static const unsigned char myImage[2] = {", "0x01, 0x02", "};"]
    assert parse_code(lines) == bytes([1, 2])


def test_tolerates_trailing_commas_and_whitespace():
    assert parse_code(["   0x0A,  0x0B, ", "0x0C,,0x0D,"]) == bytes([10, 11, 12, 13])


def test_no_matching_lines_gives_empty_bytes():
    assert parse_code(["// nothing here", "", "int x = 0;"]) == b""


@pytest.mark.parametrize("line", ["0xZZ", "0x100", "0x01, -0x01", "0x01, -0x00", "0x0_A", "0x0FF", "0x 1"])
def test_invalid_token_raises(line):
    with pytest.raises(CodeParseError) as excinfo:
        parse_code(["", line])
    assert excinfo.value.line_number == 2


def test_round_trip(tmp_path):
    data = bytes(range(256)) * 3 + b"\x00\xff"
    target = tmp_path / "image.h"
    write_code_file(data, target)
    assert read_code_file(target) == data


def test_read_with_byte_order_mark(tmp_path):
    target = tmp_path / "bom.h"
    target.write_bytes(b"\xef\xbb\xbf0x42, 0x43\n")
    assert read_code_file(target) == b"BC"


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_code_file(tmp_path / "missing.h")


def test_lowercase_and_bare_hex_digits():
    assert parse_code(["0x0a, 0XfF, 02"]) == bytes([10, 255, 2])


def test_read_skips_undecodable_bytes(tmp_path):
    target = tmp_path / "notes.h"
    target.write_bytes(b"// caf\xe9 icon\n0x01, 0x02\n")
    assert read_code_file(target) == bytes([1, 2])
