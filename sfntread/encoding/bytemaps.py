"""
sfntread.encoding.bytemaps - single-byte character sets

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

import logging
from functools import cache
from importlib.resources import files

from .base import CharSetChar, CharSetDecodeError, CharSetEncodeError, check_scalar
from . import tables


def _from_text_columns(data, *, comment='#', separator=None, base=16):
    """Extract byte -> char mapping from text columns in file data (as bytes)."""
    mapping = {}
    for line in data.decode('utf-8-sig').splitlines():
        # ignore empty lines and comment lines (first char is #)
        if (not line) or (line[0] == comment):
            continue
        # strip off comments
        line = line.split(comment)[0]
        splitline = line.split(separator)
        if len(splitline) < 2:
            continue
        cp_str, uni_str = splitline[0].strip(), splitline[1].strip()
        try:
            byte, char = int(cp_str, base), chr(int(uni_str, base))
        except (ValueError, TypeError, OverflowError) as e:
            # ignore malformed lines
            logging.warning('Could not parse line in text charmap file: %s [%s]', e, repr(line))
            continue
        if char != '\ufffd':
            # u+FFFD replacement character is used to mark undefined code points
            mapping[byte] = char
    return mapping


@cache
def load_charmap(filename, ascii_base=False):
    """
    Load charmap file from tables package.

    filename: name of file in tables package
    ascii_base: map bytes 0x00--0x7F to ASCII
    returns: (byte -> char, char -> byte) dictionaries
    """
    mapping = {}
    if ascii_base:
        mapping.update({_b: chr(_b) for _b in range(0x80)})
    path = files(tables) / filename
    logging.debug('Loading charmap file `%s`', filename)
    mapping.update(_from_text_columns(path.read_bytes()))
    return mapping, {_v: _k for _k, _v in mapping.items()}


class ByteCharSet(CharSetChar):
    """Single-byte character set defined by a charmap file."""

    __slots__ = ()

    # charmap file in tables package, to be set by subclass
    _table_file = ''
    # bytes below 0x80 are ASCII and not listed in the charmap file
    _ascii_base = False

    @classmethod
    def _charmap(cls):
        return load_charmap(cls._table_file, cls._ascii_base)

    @classmethod
    def consume_bytes(cls, buffer):
        if not buffer:
            raise CharSetDecodeError('No bytes to decode.')
        char = cls.from_bytes(buffer[:1])
        del buffer[:1]
        return char

    @classmethod
    def from_bytes(cls, data):
        if len(data) != 1:
            raise CharSetDecodeError(f'Expected 1 byte, found {len(data)}.')
        ord2chr, _ = cls._charmap()
        if data[0] not in ord2chr:
            raise CharSetDecodeError(f'Byte 0x{data[0]:02X} is undefined in {cls.name}.')
        return cls(data[0])

    def get_bytes(self):
        return bytes((self._value,))

    def as_native(self):
        ord2chr, _ = self._charmap()
        return ord2chr[self._value]

    @classmethod
    def from_native(cls, char):
        codepoint = check_scalar(char)
        _, chr2ord = cls._charmap()
        try:
            return cls(chr2ord[char])
        except KeyError:
            raise CharSetEncodeError(f'U+{codepoint:04X} is not in {cls.name}.') from None


class CodePage437(ByteCharSet):
    """IBM PC Code Page 437; all 256 byte values are defined."""

    __slots__ = ()
    name = 'cp437'
    _table_file = 'CP437.TXT'


class MacOSRoman(ByteCharSet):
    """Mac OS Roman; ASCII lower half, byte 0xF0 (Apple logo) undefined."""

    __slots__ = ()
    name = 'mac-roman'
    _table_file = 'ROMAN.TXT'
    _ascii_base = True


class Ascii(ByteCharSet):
    """7-bit ASCII character."""

    __slots__ = ()
    name = 'ascii'

    @classmethod
    def _charmap(cls):
        return _ascii_charmap()


@cache
def _ascii_charmap():
    """7-bit ASCII maps."""
    mapping = {_b: chr(_b) for _b in range(0x80)}
    return mapping, {_v: _k for _k, _v in mapping.items()}
