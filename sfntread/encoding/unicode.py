"""
sfntread.encoding.unicode - unicode transformation formats

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

from ..binary import bytes_to_int, int_to_bytes
from .base import CharSetChar, CharSetDecodeError, CharSetEncodeError, check_scalar


def is_surrogate(unit):
    """UTF-16 code unit is a high or low surrogate."""
    return 0xd800 <= unit <= 0xdfff


def _decode_one(data, codec):
    """Decode bytes that must hold exactly one character."""
    try:
        text = bytes(data).decode(codec)
    except UnicodeDecodeError as e:
        raise CharSetDecodeError(f'Invalid {codec} sequence {bytes(data)!r}: {e.reason}') from e
    if len(text) != 1:
        raise CharSetDecodeError(
            f'Expected one character in {bytes(data)!r}, found {len(text)}.'
        )
    return text


class Utf8(CharSetChar):
    """Unicode character in UTF-8."""

    __slots__ = ()
    name = 'utf-8'

    @classmethod
    def consume_bytes(cls, buffer):
        if not buffer:
            raise CharSetDecodeError('No bytes to decode.')
        head = bytes(buffer[:4])
        try:
            text = head.decode('utf-8')
        except UnicodeDecodeError as e:
            # the first character may still be fine
            # if the error is further along the sequence
            if not e.start:
                raise CharSetDecodeError(
                    f'Invalid utf-8 sequence {head!r}: {e.reason}'
                ) from e
            text = head[:e.start].decode('utf-8')
        char = text[0]
        del buffer[:len(char.encode('utf-8'))]
        return cls(char)

    @classmethod
    def from_bytes(cls, data):
        return cls(_decode_one(data, 'utf-8'))

    def get_bytes(self):
        return self._value.encode('utf-8')

    def as_native(self):
        return self._value

    @classmethod
    def from_native(cls, char):
        check_scalar(char)
        return cls(char)


class Utf16(CharSetChar):
    """Unicode character in big-endian UTF-16, with surrogate pairs."""

    __slots__ = ()
    name = 'utf-16be'

    @classmethod
    def consume_bytes(cls, buffer):
        if len(buffer) < 2:
            raise CharSetDecodeError(f'Need 2 bytes, found {len(buffer)}.')
        # try a surrogate pair first, then a single code unit
        for size in (4, 2):
            if len(buffer) < size:
                continue
            try:
                text = bytes(buffer[:size]).decode('utf-16-be')
            except UnicodeDecodeError:
                continue
            char = text[0]
            del buffer[:2 if ord(char) < 0x10000 else 4]
            return cls(char)
        raise CharSetDecodeError(f'Invalid utf-16 sequence {bytes(buffer[:4])!r}.')

    @classmethod
    def from_bytes(cls, data):
        return cls(_decode_one(data, 'utf-16-be'))

    def get_bytes(self):
        return self._value.encode('utf-16-be')

    def as_native(self):
        return self._value

    @classmethod
    def from_native(cls, char):
        check_scalar(char)
        return cls(char)


class Utf16BMP(CharSetChar):
    """Unicode character in the basic multilingual plane, as one UTF-16 code unit."""

    __slots__ = ()
    name = 'utf-16be-bmp'

    @classmethod
    def consume_bytes(cls, buffer):
        if len(buffer) < 2:
            raise CharSetDecodeError(f'Need 2 bytes, found {len(buffer)}.')
        char = cls.from_bytes(buffer[:2])
        del buffer[:2]
        return char

    @classmethod
    def from_bytes(cls, data):
        if len(data) != 2:
            raise CharSetDecodeError(f'Expected 2 bytes, found {len(data)}.')
        unit = bytes_to_int(data)
        if is_surrogate(unit):
            raise CharSetDecodeError(f'Surrogate code unit 0x{unit:04X} not allowed.')
        return cls(unit)

    def get_bytes(self):
        return int_to_bytes(self._value, 2)

    def as_native(self):
        return chr(self._value)

    @classmethod
    def from_native(cls, char):
        codepoint = check_scalar(char)
        if codepoint > 0xffff:
            raise CharSetEncodeError(f'U+{codepoint:04X} is outside the BMP.')
        return cls(codepoint)
