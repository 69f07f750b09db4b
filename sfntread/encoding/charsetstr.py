"""
sfntread.encoding.charsetstr - strings in a given character set

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

from functools import total_ordering

from .base import CharSetDecodeError, CharSetEncodeError


@total_ordering
class CharSetStr:
    """
    Sequence of characters of one character set.

    s = CharSetStr.from_bytes(CodePage437, b'\\1\\2\\3')
    assert str(s) == '☺☻♥'
    """

    def __init__(self, charset, chars=()):
        """Create string from CharSetChar subclass and sequence of its characters."""
        self.charset = charset
        self._data = []
        self.extend(chars)

    @classmethod
    def from_bytes(cls, charset, data):
        """
        Decode bytes to string.
        Raise CharSetDecodeError with the number of bytes consumed if not fully decodable.
        """
        buffer = bytearray(data)
        chars = []
        while buffer:
            try:
                chars.append(charset.consume_bytes(buffer))
            except CharSetDecodeError as e:
                consumed = len(data) - len(buffer)
                raise CharSetDecodeError(
                    f'Could not decode {charset.name} at byte {consumed}: {e}',
                    consumed=consumed
                ) from e
        return cls(charset, chars)

    @classmethod
    def from_string(cls, charset, text):
        """
        Encode unicode text to string.
        Raise CharSetEncodeError with the index of the first unrepresentable character.
        """
        chars = []
        for index, char in enumerate(text):
            try:
                chars.append(charset.from_native(char))
            except CharSetEncodeError as e:
                raise CharSetEncodeError(
                    f'Could not encode character {index} to {charset.name}: {e}',
                    index=index
                ) from e
        return cls(charset, chars)

    def to_bytes(self):
        """Encode to bytes."""
        return b''.join(_c.get_bytes() for _c in self._data)

    def to_string(self):
        """Convert to unicode text."""
        return ''.join(_c.as_native() for _c in self._data)

    __str__ = to_string

    def convert(self, charset):
        """Convert to other character set through unicode text."""
        return type(self).from_string(charset, self.to_string())

    def _check(self, char):
        if type(char) != self.charset:
            raise TypeError(
                f'Expected {self.charset.__name__} character, got {type(char).__name__}.'
            )
        return char

    # list-like operations

    def append(self, char):
        self._data.append(self._check(char))

    def extend(self, chars):
        self._data.extend([self._check(_c) for _c in chars])

    def insert(self, index, char):
        self._data.insert(index, self._check(char))

    def pop(self, index=-1):
        return self._data.pop(index)

    def remove(self, char):
        """Remove first occurrence of character; raise ValueError if absent."""
        self._data.remove(char)

    def truncate(self, length):
        """Keep only the first `length` characters."""
        del self._data[length:]

    def split_off(self, at):
        """Split at index; keep the head and return the tail."""
        tail = type(self)(self.charset, self._data[at:])
        del self._data[at:]
        return tail

    def clear(self):
        self._data.clear()

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self.charset, self._data[index])
        return self._data[index]

    def __delitem__(self, index):
        del self._data[index]

    def __add__(self, other):
        if not isinstance(other, CharSetStr) or other.charset != self.charset:
            return NotImplemented
        return type(self)(self.charset, self._data + other._data)

    def __iadd__(self, other):
        if not isinstance(other, CharSetStr) or other.charset != self.charset:
            return NotImplemented
        self.extend(other)
        return self

    def __eq__(self, other):
        if not isinstance(other, CharSetStr):
            return NotImplemented
        return self.charset == other.charset and self._data == other._data

    def __lt__(self, other):
        if not isinstance(other, CharSetStr) or other.charset != self.charset:
            return NotImplemented
        return self.to_bytes() < other.to_bytes()

    __hash__ = None

    def __repr__(self):
        return (
            f'{type(self).__name__}[{self.charset.__name__}]'
            f'({self.to_bytes()!r}, native={self.to_string()!r})'
        )
