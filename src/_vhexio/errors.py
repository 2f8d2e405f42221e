class ReaderError(Exception):
    """
    Base class for errors found while reading a hex file.

    The reader does not raise these, instead the error is given as the
    item of the iteration where it was found, after which the reader
    is finished. parse_record raises them.

    Errors compare equal when they are of the same kind, regardless
    of detail and offset.
    """

    description = "reader error"

    def __init__(self, detail=None):
        """
        :param detail: Optional description of what failed, ie. the
            offending token.
        """
        super().__init__(detail)
        self.detail = detail
        self.offset = None

    def __str__(self):
        message = self.description
        if self.detail is not None:
            message += f": {self.detail}"
        if self.offset is not None:
            message += f" at {self.offset}"
        return message

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))


class InvalidSyntax(ReaderError):
    """
    Raised when the token could not be parsed at all, ie. it is empty.
    """

    description = "invalid format"


class BadNumberConversion(ReaderError):
    """
    Raised when an address directive or a byte value is not a
    hexadecimal number in the expected range.
    """

    description = "can't convert string to number"
