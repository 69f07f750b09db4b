"""
sfntread test suite
character set tests
"""

import unittest

import sfntread
from sfntread.encoding import (
    Ascii, Utf8, Utf16, Utf16BMP, CodePage437, MacOSRoman,
    CharSetDecodeError, CharSetEncodeError, NotFoundError, EncodingName,
    charsets,
)
from .base import BaseTester


class TestSingleByte(BaseTester):
    """Test single-byte character sets."""

    def test_cp437_all_bytes_round_trip(self):
        for byte in range(256):
            char = CodePage437.from_bytes(bytes((byte,)))
            self.assertEqual(char.get_bytes(), bytes((byte,)))
            self.assertEqual(CodePage437.from_native(char.as_native()), char)

    def test_cp437_glyphs(self):
        self.assertEqual(CodePage437.from_bytes(b'\x01').as_native(), '☺')
        self.assertEqual(CodePage437.from_bytes(b'\x7f').as_native(), '⌂')
        self.assertEqual(CodePage437.from_bytes(b'\xdb').as_native(), '█')
        self.assertEqual(CodePage437.from_bytes(b'\xff').as_native(), '\xa0')
        self.assertEqual(CodePage437.from_bytes(b'A').as_native(), 'A')

    def test_cp437_unencodable(self):
        with self.assertRaises(CharSetEncodeError):
            CodePage437.from_native('€')

    def test_mac_roman_round_trip(self):
        for byte in range(256):
            if byte == 0xf0:
                continue
            char = MacOSRoman.from_bytes(bytes((byte,)))
            self.assertEqual(MacOSRoman.from_native(char.as_native()).get_bytes(), bytes((byte,)))

    def test_mac_roman_upper_half(self):
        self.assertEqual(MacOSRoman.from_bytes(b'\x80').as_native(), '\xc4')
        self.assertEqual(MacOSRoman.from_bytes(b'\x8e').as_native(), '\xe9')
        self.assertEqual(MacOSRoman.from_bytes(b'\xdb').as_native(), '€')
        self.assertEqual(MacOSRoman.from_native('€').get_bytes(), b'\xdb')

    def test_mac_roman_matches_python_codec(self):
        for byte in range(256):
            if byte == 0xf0:
                continue
            data = bytes((byte,))
            self.assertEqual(MacOSRoman.from_bytes(data).as_native(), data.decode('mac_roman'))
        self.assertEqual(MacOSRoman.from_bytes(b'\xc6').as_native(), '\u2206')
        self.assertEqual(MacOSRoman.from_native('\u2206').get_bytes(), b'\xc6')

    def test_mac_roman_apple_logo_undefined(self):
        with self.assertRaises(CharSetDecodeError):
            MacOSRoman.from_bytes(b'\xf0')
        with self.assertRaises(CharSetEncodeError):
            MacOSRoman.from_native('\uf8ff')

    def test_ascii(self):
        for byte in range(0x80):
            self.assertEqual(Ascii.from_bytes(bytes((byte,))).as_native(), chr(byte))
        with self.assertRaises(CharSetDecodeError):
            Ascii.from_bytes(b'\x80')
        with self.assertRaises(CharSetEncodeError):
            Ascii.from_native('\xe9')

    def test_wrong_length(self):
        with self.assertRaises(CharSetDecodeError):
            CodePage437.from_bytes(b'')
        with self.assertRaises(CharSetDecodeError):
            Ascii.from_bytes(b'ab')

    def test_consume_leaves_buffer_on_failure(self):
        buffer = bytearray(b'\xf0abc')
        with self.assertRaises(CharSetDecodeError):
            MacOSRoman.consume_bytes(buffer)
        self.assertEqual(buffer, b'\xf0abc')

    def test_consume_removes_one_byte(self):
        buffer = bytearray(b'\x8eabc')
        char = MacOSRoman.consume_bytes(buffer)
        self.assertEqual(char.as_native(), '\xe9')
        self.assertEqual(buffer, b'abc')


class TestUtf8(BaseTester):
    """Test UTF-8 characters."""

    def test_widths(self):
        for char in ('A', '\xe9', '€', '\U0001f600'):
            encoded = char.encode('utf-8')
            buffer = bytearray(encoded + b'z')
            self.assertEqual(Utf8.consume_bytes(buffer).as_native(), char)
            self.assertEqual(buffer, b'z')

    def test_resync_after_valid_prefix(self):
        # decoding stops at the invalid byte, the first char is still delivered
        buffer = bytearray(b'a\xff')
        self.assertEqual(Utf8.consume_bytes(buffer).as_native(), 'a')
        self.assertEqual(buffer, b'\xff')

    def test_invalid_start(self):
        for data in (b'\xff', b'\x80abc', b'\xe2\x82', b'\xc0\xaf'):
            buffer = bytearray(data)
            with self.assertRaises(CharSetDecodeError):
                Utf8.consume_bytes(buffer)
            self.assertEqual(buffer, data)

    def test_empty(self):
        with self.assertRaises(CharSetDecodeError):
            Utf8.consume_bytes(bytearray())

    def test_from_bytes_exactly_one(self):
        self.assertEqual(Utf8.from_bytes('€'.encode('utf-8')).as_native(), '€')
        with self.assertRaises(CharSetDecodeError):
            Utf8.from_bytes(b'ab')

    def test_surrogate_not_encodable(self):
        with self.assertRaises(CharSetEncodeError):
            Utf8.from_native('\ud800')
        with self.assertRaises(CharSetEncodeError):
            Utf8.from_native('ab')


class TestUtf16(BaseTester):
    """Test UTF-16 characters."""

    def test_surrogate_pair(self):
        buffer = bytearray(b'\xd8\x3d\xde\x00\x00A')
        char = Utf16.consume_bytes(buffer)
        self.assertEqual(char.as_native(), '\U0001f600')
        self.assertEqual(char.get_bytes(), b'\xd8\x3d\xde\x00')
        self.assertEqual(buffer, b'\x00A')

    def test_single_unit_before_truncated_pair(self):
        buffer = bytearray(b'\x00A\xd8\x3d')
        self.assertEqual(Utf16.consume_bytes(buffer).as_native(), 'A')
        self.assertEqual(buffer, b'\xd8\x3d')
        with self.assertRaises(CharSetDecodeError):
            Utf16.consume_bytes(buffer)
        self.assertEqual(buffer, b'\xd8\x3d')

    def test_lone_low_surrogate(self):
        buffer = bytearray(b'\xde\x00\x00A')
        with self.assertRaises(CharSetDecodeError):
            Utf16.consume_bytes(buffer)
        self.assertEqual(buffer, b'\xde\x00\x00A')

    def test_odd_byte(self):
        with self.assertRaises(CharSetDecodeError):
            Utf16.consume_bytes(bytearray(b'A'))

    def test_bmp(self):
        buffer = bytearray(b'\x20\xac\x00A')
        self.assertEqual(Utf16BMP.consume_bytes(buffer).as_native(), '€')
        self.assertEqual(buffer, b'\x00A')
        self.assertEqual(Utf16BMP.from_native('€').get_bytes(), b'\x20\xac')

    def test_bmp_rejects_surrogates(self):
        buffer = bytearray(b'\xd8\x3d\xde\x00')
        with self.assertRaises(CharSetDecodeError):
            Utf16BMP.consume_bytes(buffer)
        self.assertEqual(len(buffer), 4)
        with self.assertRaises(CharSetEncodeError):
            Utf16BMP.from_native('\U0001f600')


class TestCharSetChar(BaseTester):
    """Test character value semantics."""

    def test_immutable(self):
        char = Utf8.from_native('a')
        with self.assertRaises(AttributeError):
            char.value = 'b'

    def test_equality_by_charset(self):
        self.assertEqual(Utf8.from_native('a'), Utf8.from_native('a'))
        self.assertNotEqual(Utf8.from_native('a'), Utf16.from_native('a'))
        self.assertEqual(len({Ascii.from_native('a'), Ascii.from_bytes(b'a')}), 1)

    def test_str_and_repr(self):
        char = CodePage437.from_bytes(b'\x03')
        self.assertEqual(str(char), '♥')
        self.assertEqual(repr(char), "CodePage437('♥')")


class TestRegistry(BaseTester):
    """Test character set lookup by name."""

    def test_names(self):
        self.assertIs(charsets['utf-8'], Utf8)
        self.assertIs(charsets['UTF8'], Utf8)
        self.assertIs(charsets['cp437'], CodePage437)
        self.assertIs(charsets['CP 437'], CodePage437)
        self.assertIs(charsets['IBM437'], CodePage437)
        self.assertIs(charsets['x-mac-roman'], MacOSRoman)
        self.assertIs(charsets['MacRoman'], MacOSRoman)
        self.assertIs(charsets['UCS-2'], Utf16BMP)
        self.assertIs(charsets['US-ASCII'], Ascii)

    def test_not_found(self):
        self.assertNotIn('ebcdic', charsets)
        with self.assertRaises(NotFoundError):
            charsets['ebcdic']
        with self.assertRaises(KeyError):
            sfntread.charset('ebcdic')

    def test_encoding_name(self):
        self.assertEqual(EncodingName('Mac_OS Roman'), 'mac-roman')
        self.assertEqual(str(EncodingName('Mac_OS Roman')), 'mac-os-roman')

    def test_decode_encode(self):
        self.assertEqual(sfntread.decode(b'Caf\x8e', 'mac-roman'), 'Caf\xe9')
        self.assertEqual(sfntread.encode('☺☻', 'cp437'), b'\x01\x02')
        self.assertIs(sfntread.charset(Utf16), Utf16)


if __name__ == '__main__':
    unittest.main()
