"""
The parser turns one token (see _vhexio.tokenizer) into a record (see
_vhexio.records). Values in the file only have an implicit address, so the
parser has to be given the address the value would be loaded at.
"""

import re

from _vhexio.errors import BadNumberConversion, InvalidSyntax
from _vhexio.records import Comment, Data, DataType, NewAddress

MAX_ADDRESS = (1 << 64) - 1
MAX_BYTE = 0xFF

# int(x, 16) also accepts "0x", "_", "-" and surrounding whitespace,
# none of which are allowed in the format. A single "+" is.
hex_digits = re.compile(r"\+?[0-9a-fA-F]+")


def parse_hex(digits, max_value):
    """
    Parse an unsigned hexadecimal number.

    :param digits: The hexadecimal digits, without prefix.
    :param max_value: The largest value allowed.
    :returns: The parsed number.
    """
    if not hex_digits.fullmatch(digits):
        raise BadNumberConversion(f"{digits!r} is not a hexadecimal number")
    value = int(digits, 16)
    if value > max_value:
        raise BadNumberConversion(f"{digits!r} is larger than 0x{max_value:X}")
    return value


def parse_record(token, current_address):
    """
    Parse a token of a hex file.

    >>> parse_record("@81000000", 0)
    NewAddress(address=2164260864)
    >>> parse_record("09", 0x81000000)
    Data(address=2164260864, value=DataType(width=1, value=9))

    :param token: The token as a string.
    :param current_address: The address of the token, if it is a value.
    :returns: The record for the token. Never EndOfFile.
    :raises InvalidSyntax: If the token is empty.
    :raises BadNumberConversion: If the token is an address directive
        or value which is not a valid hexadecimal number.
    """
    if not token:
        raise InvalidSyntax("empty token")

    if token.startswith("//"):
        return Comment()

    if token.startswith("@"):
        return NewAddress(parse_hex(token[1:], MAX_ADDRESS))

    return Data(current_address, DataType.from_byte(parse_hex(token, MAX_BYTE)))
