"""
sfntread.encoding.base - base classes and errors for character sets

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""


class NotFoundError(KeyError):
    """Encoding not found."""


class CharSetError(ValueError):
    """Bytes or text not representable in a character set."""


class CharSetDecodeError(CharSetError):
    """Bytes could not be decoded in a character set."""

    def __init__(self, message, consumed=0):
        super().__init__(message)
        # number of leading bytes successfully decoded
        self.consumed = consumed


class CharSetEncodeError(CharSetError):
    """Text could not be encoded in a character set."""

    def __init__(self, message, index=0):
        super().__init__(message)
        # index of first unrepresentable character in the text
        self.index = index


class EncodingName(str):

    # replacement patterns for normalisation
    # longest first to avoid partial match
    _patterns = {
        'microsoftcp': 'windows',
        'microsoft': 'windows',
        'msdoscp': 'oem',
        'oemcp': 'oem',
        'msdos': 'oem',
        'ibmcp': 'ibm',
        'apple': 'mac',
        'macos': 'mac',
        'doscp': 'oem',
        'mscp': 'windows',
        'dos': 'oem',
        'cp': 'ibm',
        'ms': 'windows',
        # mac-roman also known as x-mac-roman etc.
        'x': '',
    }

    def __new__(cls, value=''):
        """Convert value to encoding name."""
        value = cls._normalise_name(str(value))
        return super().__new__(cls, value)

    def __eq__(self, other):
        """Check if two names match."""
        return self._normalise_for_match() == EncodingName(other)._normalise_for_match()

    def __hash__(self):
        return str.__hash__(self._normalise_for_match())

    @staticmethod
    def _normalise_name(name=''):
        """Replace encoding name with normalised variant for display."""
        return name.lower().replace('_', '-').replace(' ', '-')

    def _normalise_for_match(self):
        """Further normalise names to base form."""
        name = str(self)
        # remove dashes and dots
        for char in '-.':
            name = name.replace(char, '')
        # try replacements
        for start, replacement in self._patterns.items():
            if name.startswith(start):
                name = replacement + name[len(start):]
                break
        return name


class CharSetChar:
    """
    A single character in a fixed repertoire.

    Subclasses hold one immutable value and implement conversion from and to
    the encoded bytes and the corresponding unicode character.
    """

    __slots__ = ('_value',)

    # registered encoding name, set by subclass
    name = ''

    def __init__(self, value):
        """Wrap a validated value. Use the from_* classmethods to construct."""
        object.__setattr__(self, '_value', value)

    def __setattr__(self, attr, value):
        raise AttributeError(f'{type(self).__name__} is immutable.')

    @classmethod
    def consume_bytes(cls, buffer):
        """
        Decode one character from the front of a bytearray and remove its bytes.
        If no character can be formed, raise CharSetDecodeError and leave the buffer as is.
        """
        raise NotImplementedError

    @classmethod
    def from_bytes(cls, data):
        """Decode bytes holding exactly one character."""
        raise NotImplementedError

    def get_bytes(self):
        """Encode character to bytes; from_bytes(c.get_bytes()) == c."""
        raise NotImplementedError

    def as_native(self):
        """Convert to single-character unicode string."""
        raise NotImplementedError

    @classmethod
    def from_native(cls, char):
        """Convert single-character unicode string; reverse of as_native."""
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) == type(other) and self._value == other._value

    def __hash__(self):
        return hash((type(self), self._value))

    def __str__(self):
        return self.as_native()

    def __repr__(self):
        return f'{type(self).__name__}({self.as_native()!r})'


def check_scalar(char):
    """Check that argument is a single unicode scalar value; return code point."""
    if not isinstance(char, str) or len(char) != 1:
        raise CharSetEncodeError(f'Expected a single character, got {char!r}.')
    codepoint = ord(char)
    if 0xd800 <= codepoint <= 0xdfff:
        raise CharSetEncodeError(f'Surrogate U+{codepoint:04X} is not a character.')
    return codepoint
