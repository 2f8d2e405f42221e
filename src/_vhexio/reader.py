from dataclasses import dataclass
from itertools import islice

from _vhexio.errors import ReaderError
from _vhexio.parser import MAX_ADDRESS, parse_record
from _vhexio.records import MAX_WIDTH, Data, EndOfFile, NewAddress, group_new_data
from _vhexio.tokenizer import Tokenizer


@dataclass
class ReaderOptions:
    """
    :param group: Whether to group consecutive bytes into values
        of up to 8 bytes.
    """

    group: bool = False

    def __post_init__(self):
        if not isinstance(self.group, bool):
            raise TypeError(f"group has to be a bool, got {self.group!r}")


class Reader:
    """
    A lazy reader of verilog hex files, as created by
    `objcopy -O verilog`. Iterating over the reader gives the
    records of the file, or a ReaderError after which the
    iteration stops.

    >>> reader = Reader("@81000000\\n09 A0")
    >>> [str(r) for r in reader]
    ['new address: 0x81000000', '0x81000000: 09', '0x81000001: A0']

    When grouping, consecutive bytes are combined into little
    endian values of up to 8 bytes:

    >>> reader = Reader("@81000000\\n09 A0 F3 22", ReaderOptions(group=True))
    >>> [str(r) for r in reader]
    ['new address: 0x81000000', '0x81000000: 22F3A009']

    Grouping stops at anything but a byte, ie. a comment or address
    directive, which is then read as usual.
    """

    def __init__(self, text, options=None):
        """
        :param text: The contents of the hex file.
        :param options: ReaderOptions, defaults to no grouping.
        """
        if options is None:
            options = ReaderOptions()
        self._tokens = Tokenizer(text)
        self._finished = False
        self._options = options
        self._current_address = 0

    @property
    def options(self):
        return self._options

    @property
    def finished(self):
        return self._finished

    @property
    def current_address(self):
        """
        The address the next byte is loaded at.
        """
        return self._current_address

    def __iter__(self):
        return self

    def __next__(self):
        if self._finished:
            raise StopIteration

        token = next(self._tokens, None)
        if token is None:
            self._finished = True
            raise StopIteration

        try:
            record = parse_record(token.value, self._current_address)
        except ReaderError as err:
            self._finished = True
            err.offset = token.start
            return err

        if isinstance(record, EndOfFile):
            self._finished = True
        elif isinstance(record, NewAddress):
            self._current_address = record.address
        elif isinstance(record, Data):
            self._advance_address()

        if self._options.group and not self._finished and isinstance(record, Data):
            record = self.group_data(record)

        return record

    def _advance_address(self):
        self._current_address = (self._current_address + 1) & MAX_ADDRESS

    def group_data(self, record):
        """
        Merge the bytes following record into it, until
        it is 8 bytes wide or the next token is not a byte.

        The next token is only consumed when it is merged, so a
        token that ends the group is read again by the next iteration.
        """
        value = record.value
        while value.width < MAX_WIDTH:
            token = self._tokens.peek()
            if token is None:
                break
            try:
                next_record = parse_record(token.value, self._current_address)
            except ReaderError:
                break
            if not isinstance(next_record, Data) or next_record.value.width != 1:
                break
            next(self._tokens)
            value = group_new_data(value, next_record.value.value)
            self._advance_address()
        return Data(record.address, value)

    def nth(self, n):
        """
        Skip n items and return the one following them.

        >>> Reader("@81000000 09 A0 F3").nth(2)
        Data(address=2164260865, value=DataType(width=1, value=160))

        :returns: The item, or None if there are less than n + 1 items left.
        """
        return next(islice(self, n, None), None)
