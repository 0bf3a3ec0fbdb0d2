import enum
import logging

logger = logging.getLogger(__name__)


class Token(str):
    """
    A word-like token tagged with the index of the source it came from.

    Equality, ordering and hashing are those of the plain string; the
    source tag is metadata only.
    """
    __slots__ = ('source',)

    def __new__(cls, text, source=0):
        token = super().__new__(cls, text)
        token.source = source
        return token

    def __repr__(self):
        return f"Token({str.__repr__(self)}, source={self.source})"


class CharClass(enum.Enum):
    SPACE = 'space'
    LETTER = 'letter'
    NUMBER = 'number'
    SPECIAL = 'special'


def classify(char):
    if char.isspace():
        return CharClass.SPACE
    if char.isalpha():
        return CharClass.LETTER
    if char.isalnum():
        return CharClass.NUMBER
    return CharClass.SPECIAL


def _iter_chars(stream):
    # Accepts a str, a text file object or any iterable of string chunks.
    if isinstance(stream, str):
        yield from stream
        return
    read = getattr(stream, 'read', None)
    if read is not None:
        while True:
            chunk = read(4096)
            if not chunk:
                return
            yield from chunk
        return
    for chunk in stream:
        yield from chunk


class Tokenizer:
    """
    Splits a character stream into tokens.

    Whitespace terminates the current token and never becomes part of
    one. Letters, digits and special characters are not separated from
    each other, so "don't" and "3rd." are single tokens.
    """

    def tokenize(self, stream, source=0):
        """Returns the list of tokens of `stream`, each tagged with `source`."""
        tokens = []
        chars = []
        for char in _iter_chars(stream):
            if classify(char) is CharClass.SPACE:
                if chars:
                    tokens.append(Token(''.join(chars), source))
                    chars = []
            else:
                chars.append(char)
        if chars:
            tokens.append(Token(''.join(chars), source))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Tokens of source {source}: {' | '.join(tokens)}")
        return tokens


def tokenize(stream, source=0):
    return Tokenizer().tokenize(stream, source=source)
