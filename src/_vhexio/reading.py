import pathlib
import warnings
from contextlib import contextmanager

import numpy as np

from _vhexio.errors import ReaderError
from _vhexio.reader import Reader, ReaderOptions
from _vhexio.records import Data, NewAddress


def read_file(filepath):
    """
    Reads the text contents of the file at filepath.

    :returns: The contents, or None if the file could not be read, in
        which case a warning describing the failure is emitted.
    """
    try:
        with open(filepath, "rt", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as err:
        warnings.warn(f"Could not read hex file {filepath}: {err}")
        return None


def read_contents(filelike):
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "rt", encoding="utf-8") as f:
            return f.read()
    contents = filelike.read()
    if hasattr(contents, "decode"):
        contents = contents.decode("utf-8")
    return contents


@contextmanager
def lazy_read(filelike, group=False):
    """
    Context manager giving a Reader of the records in the
    given hex file, ie. with lazy_read("/my/file.hex") as records:
    gives the records of "/my/file.hex" when iterated over.

    :param filelike: Either a path to the file, or a stream. A stream
        is read from its current position, and is not closed.
    :param group: Whether to group consecutive bytes, see ReaderOptions.
    """
    yield Reader(read_contents(filelike), ReaderOptions(group=group))


def read(filelike):
    """
    Reads a hex file and returns the list of segments in it,
    ie. segments = read("/my/file.hex")

    Each address directive starts a new segment, which is a tuple of
    the start address and a numpy array of the bytes that follow. Bytes
    before the first address directive are placed at address 0. Segments
    are given in the order of the file, even if they overlap.

    :raises ReaderError: If the file could not be parsed.
    """
    segments = []
    start = 0
    values = bytearray()

    def end_segment():
        if values:
            segments.append((start, np.frombuffer(values, dtype=np.uint8)))

    with lazy_read(filelike) as records:
        for record in records:
            if isinstance(record, ReaderError):
                raise record
            if isinstance(record, NewAddress):
                end_segment()
                start = record.address
                values = bytearray()
            elif isinstance(record, Data):
                values += record.value.to_bytes()
    end_segment()

    return segments
