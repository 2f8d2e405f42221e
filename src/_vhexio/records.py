"""
The records a verilog hex file is made of. Each token of the file is parsed
into one record, except when grouping, where consecutive bytes are merged
into one Data record (see _vhexio.reader).
"""

from dataclasses import dataclass

# Bytes are grouped into at most 64 bit values.
MAX_WIDTH = 8


def format_address(address):
    return f"0x{address:08X}"


@dataclass(frozen=True)
class DataType:
    """
    An unsigned little endian value of 1 to 8 bytes.

    :param width: The number of bytes the value was read from.
    :param value: The value, the bits above width * 8 are always zero.
    """

    width: int
    value: int

    def __post_init__(self):
        if not 1 <= self.width <= MAX_WIDTH:
            raise ValueError(
                f"width has to be between 1 and {MAX_WIDTH} bytes, got {self.width}"
            )
        if not 0 <= self.value < 1 << (8 * self.width):
            raise ValueError(
                f"value {self.value} does not fit in {self.width} unsigned bytes"
            )

    @classmethod
    def from_byte(cls, byte):
        return cls(1, byte)

    def combine(self, next_byte):
        return group_new_data(self, next_byte)

    def to_bytes(self):
        """
        :returns: The bytes of the value in the order they
            appeared in the file.
        """
        return self.value.to_bytes(self.width, "little")


def group_new_data(value, next_byte):
    """
    Widen value by one byte, next_byte becomes the most
    significant byte.

    >>> group_new_data(DataType(1, 0x09), 0xA0)
    DataType(width=2, value=40969)

    Values which are already 8 bytes wide are returned unchanged.
    """
    if value.width >= MAX_WIDTH:
        return value
    return DataType(value.width + 1, value.value | (next_byte << (8 * value.width)))


class Record:
    """
    One parsed unit of a hex file.
    """

    __slots__ = ()


@dataclass(frozen=True)
class Data(Record):
    """
    A value found at the given address, ie. "09" in "@81000000 09".
    """

    address: int
    value: DataType

    def __str__(self):
        # Padded to the magnitude of the value, not to its width
        return f"{format_address(self.address)}: {self.value.value:02X}"


@dataclass(frozen=True)
class EndOfFile(Record):
    """
    Marks the end of the file. No token in the format produces this
    record, it is kept so that readers may terminate on it.
    """

    def __str__(self):
        return "EOF"


@dataclass(frozen=True)
class Comment(Record):
    """
    A token starting with "//". Only that token is taken as the
    comment, not the rest of the line.
    """

    def __str__(self):
        return "comment"


@dataclass(frozen=True)
class NewAddress(Record):
    """
    Address directive, ie. "@81000000", setting the address
    of the following values.
    """

    address: int

    def __str__(self):
        return f"new address: {format_address(self.address)}"
