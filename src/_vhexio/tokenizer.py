"""
In this module, the tokenizer splits the text of a verilog hex file into
whitespace separated words. It does not know anything about what the words
mean, that is left to the parser (see _vhexio.parser).

The format is LL(1), the reader only ever needs to look at the token
directly following the one it is working on. Therefore, the tokenizer
supports peeking at exactly one token without consuming it.
"""

import re
from dataclasses import dataclass

# Only ascii whitespace separates tokens, so we do not use str.split()
# which also splits on vertical tab and unicode spaces.
token_pattern = re.compile(r"[^ \t\n\f\r]+")


@dataclass
class Token:
    """
    A word in a hex file, ie. "@81000000", "09" or "//".
    """

    value: str
    start: int
    end: int


class Tokenizer:
    """
    Lazy iterator of the tokens in a text.

    >>> tokenizer = Tokenizer("@81000000\\n09 A0")
    >>> tokenizer.peek().value
    '@81000000'
    >>> [t.value for t in tokenizer]
    ['@81000000', '09', 'A0']

    """

    def __init__(self, text):
        """
        :param text: The hex file contents. The text is not copied,
            tokens refer back to it by position.
        """
        self._matches = token_pattern.finditer(text)
        self._peeked = None

    def __iter__(self):
        return self

    def __next__(self):
        if self._peeked is not None:
            token = self._peeked
            self._peeked = None
            return token
        match = next(self._matches)
        return Token(match.group(), match.start(), match.end())

    def peek(self):
        """
        :returns: The next token without consuming it, or None
            if there are no more tokens.
        """
        if self._peeked is None:
            self._peeked = next(self, None)
        return self._peeked
