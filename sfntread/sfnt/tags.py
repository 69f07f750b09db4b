"""
sfntread.sfnt.tags - four-byte table and feature identifiers

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

from ..binary import bytes_to_int, int_to_bytes
from ..struct import InvalidContent, read_exact


class Tag(str):
    """Four printable ASCII characters identifying a table or feature."""

    def __new__(cls, value):
        """Create tag from str or bytes; raise ValueError if not a valid tag."""
        if isinstance(value, (bytes, bytearray)):
            value = bytes(value).decode('latin-1')
        if len(value) != 4:
            raise ValueError(f'Tag must have 4 characters, got {value!r}.')
        for char in value:
            if not 0x20 <= ord(char) <= 0x7e:
                raise ValueError(f'Character {char!r} not allowed in tag {value!r}.')
        return super().__new__(cls, value)

    @classmethod
    def read_from(cls, stream, offset=None):
        """Read tag from stream."""
        if offset is not None:
            stream.seek(offset)
        data = read_exact(stream, 4)
        try:
            return cls(data)
        except ValueError as e:
            raise InvalidContent(str(e)) from e

    @classmethod
    def from_int(cls, value):
        """Tag from big-endian 32-bit integer value of its bytes."""
        return cls(int_to_bytes(value, 4))

    def __int__(self):
        return bytes_to_int(bytes(self))

    def __bytes__(self):
        return self.encode('latin-1')

    def __repr__(self):
        return f'{type(self).__name__}({str(self)!r})'
