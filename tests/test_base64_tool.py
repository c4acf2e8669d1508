import base64

import pytest

from ugkit.base64_tool import InvalidBase64Error, decode, encode, main


@pytest.mark.parametrize("text", ["", "Man", "abcdef", "hello world!", "123456789"])
def test_encode_matches_standard_for_whole_groups(text):
    assert encode(text) == base64.b64encode(text.encode()).decode()


@pytest.mark.parametrize("text", ["a", "ab", "hello", "Mana"])
def test_encode_fills_last_group_with_equals_bytes(text):
    filled = text.encode() + b"=" * (-len(text) % 3)
    assert encode(text) == base64.b64encode(filled).decode()
    assert "=" not in encode(text)


def test_encode_pinned_value():
    assert encode("Man") == "TWFu"


def test_encode_accepts_bytes():
    assert encode(b"\x00\xff\x10") == base64.b64encode(b"\x00\xff\x10").decode()


@pytest.mark.parametrize("text", ["", "Man", "abcdef", "hello world!"])
def test_round_trip_whole_groups(text):
    assert decode(encode(text)) == text.encode()


def test_round_trip_keeps_fill_bytes():
    assert decode(encode("a")) == b"a=="
    assert decode(encode("ab")) == b"ab="


@pytest.mark.parametrize("text", ["abc", "TWF", "TWFuT"])
def test_decode_rejects_bad_length(text):
    with pytest.raises(InvalidBase64Error):
        decode(text)


@pytest.mark.parametrize("text", ["TW*u", "TW u", "T-Fu"])
def test_decode_rejects_bad_characters(text):
    with pytest.raises(InvalidBase64Error):
        decode(text)


def test_decode_rejects_padding_character():
    with pytest.raises(InvalidBase64Error):
        decode("YQ==")


def test_decode_matches_standard():
    encoded = base64.b64encode(b"\x01\x02\x03\xfe\xfd\xfc").decode()
    assert decode(encoded) == b"\x01\x02\x03\xfe\xfd\xfc"


def test_main_encode_prints_text_and_hex(capsys):
    assert main(["encode", "Man"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "TWFu"
    assert lines[1].split() == ["0x" + format(ord(char), "x") for char in "TWFu"]


def test_main_decode_prints_text(capsys):
    assert main(["decode", encode("hello world!")]) == 0
    assert capsys.readouterr().out == "hello world!\n"


def test_main_decode_invalid_reports_error(capsys):
    assert main(["decode", "abc"]) == 0
    captured = capsys.readouterr()
    assert "Invalid base64 string" in captured.err
    assert captured.out == ""


def test_main_without_operation_fails(capsys):
    assert main([]) == 1
    assert "Please specify an operation" in capsys.readouterr().err


def test_main_unknown_operation(capsys):
    assert main(["rot13", "x"]) == 0
    assert "Unknown operation: rot13" in capsys.readouterr().err


@pytest.mark.parametrize("operation", ["encode", "decode"])
def test_main_missing_string(operation, capsys):
    assert main([operation]) == 0
    assert f"Please specify a string to {operation}" in capsys.readouterr().err