import vhexio.version
from _vhexio.errors import BadNumberConversion, InvalidSyntax, ReaderError
from _vhexio.parser import parse_record
from _vhexio.reader import Reader, ReaderOptions
from _vhexio.reading import lazy_read, read, read_file
from _vhexio.records import (
    Comment,
    Data,
    DataType,
    EndOfFile,
    NewAddress,
    Record,
    group_new_data,
)

__version__ = vhexio.version.version

__all__ = [
    "BadNumberConversion",
    "Comment",
    "Data",
    "DataType",
    "EndOfFile",
    "InvalidSyntax",
    "NewAddress",
    "Reader",
    "ReaderError",
    "ReaderOptions",
    "Record",
    "group_new_data",
    "lazy_read",
    "parse_record",
    "read",
    "read_file",
]
