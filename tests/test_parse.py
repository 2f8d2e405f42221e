import pytest
from hypothesis import given

from _vhexio.errors import BadNumberConversion, InvalidSyntax
from _vhexio.parser import MAX_ADDRESS, parse_hex, parse_record
from _vhexio.records import Comment, Data, DataType, NewAddress

from .generators.hex_file_contents import addresses, hex_bytes


def test_empty_token():
    with pytest.raises(InvalidSyntax):
        parse_record("", 0)


@pytest.mark.parametrize("token", ["//", "//comment", "///", "//@10", "//ZZ"])
def test_parse_comment(token):
    assert parse_record(token, 0) == Comment()


@pytest.mark.parametrize(
    "token, expected",
    [
        ("@81000000", 0x81000000),
        ("@0", 0),
        ("@abcdef", 0xABCDEF),
        ("@AbCdEf", 0xABCDEF),
        ("@0000000081000000", 0x81000000),
        ("@FFFFFFFFFFFFFFFF", MAX_ADDRESS),
        ("@+1", 1),
        ("@+81000000", 0x81000000),
    ],
)
def test_parse_new_address(token, expected):
    assert parse_record(token, 0x1234) == NewAddress(expected)


@pytest.mark.parametrize(
    "token",
    ["@", "@@10", "@0x10", "@G0", "@-1", "@+", "@++1", "@1_0", "@10000000000000000"],
)
def test_parse_bad_address(token):
    with pytest.raises(BadNumberConversion):
        parse_record(token, 0)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("09", 0x09),
        ("a0", 0xA0),
        ("F3", 0xF3),
        ("0", 0),
        ("ff", 0xFF),
        ("009", 9),
        ("+9", 9),
        ("+FF", 0xFF),
    ],
)
def test_parse_data(token, expected):
    assert parse_record(token, 0x81000000) == Data(
        0x81000000, DataType(1, expected)
    )


@pytest.mark.parametrize(
    "token", ["ZZ", "100", "0x1", "-1", "+", "++1", "+100", "1_0", "/1", "g", "1٠"]
)
def test_parse_bad_data(token):
    with pytest.raises(BadNumberConversion):
        parse_record(token, 0)


def test_parse_data_uses_given_address():
    assert parse_record("09", 0).address == 0
    assert parse_record("09", 42).address == 42


def test_parse_hex_range():
    assert parse_hex("FF", 0xFF) == 0xFF
    with pytest.raises(BadNumberConversion):
        parse_hex("100", 0xFF)


def test_error_message_names_token():
    with pytest.raises(BadNumberConversion, match="'ZZ'"):
        parse_record("ZZ", 0)


@given(hex_bytes)
def test_any_byte(value):
    assert parse_record(f"{value:02x}", 7) == Data(7, DataType(1, value))


@given(addresses)
def test_any_address(address):
    assert parse_record(f"@{address:X}", 0) == NewAddress(address)
