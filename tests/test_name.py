"""
sfntread test suite
naming table tests
"""

import io
import unittest

from sfntread import EndOfInput
from sfntread.encoding import Utf8, Utf16, Utf16BMP, MacOSRoman
from sfntread.sfnt import (
    NameTable, NameRecord, name_charset,
    NameStringError, EncodingNotImplemented, InvalidNameString,
    InvalidPlatformEncoding, InvalidPlatformID, InvalidEncodingID,
)
from .base import BaseTester, build_name_table, NAME_TABLE


class TestNameCharset(BaseTester):
    """Test platform and encoding id lookup."""

    def test_supported(self):
        self.assertIs(name_charset(0, 3), Utf16BMP)
        self.assertIs(name_charset(0, 4), Utf16)
        self.assertIs(name_charset(1, 0), MacOSRoman)
        self.assertIs(name_charset(3, 1), Utf16BMP)
        self.assertIs(name_charset(3, 10), Utf8)

    def test_invalid_platform(self):
        for platform_id in (2, 4, 7, 0xffff):
            with self.assertRaises(InvalidPlatformID):
                name_charset(platform_id, 0)

    def test_invalid_encoding(self):
        for platform_id, encoding_id in ((0, 5), (0, 6), (1, 33), (3, 11)):
            with self.assertRaises(InvalidEncodingID):
                name_charset(platform_id, encoding_id)

    def test_not_implemented(self):
        for platform_id, encoding_id in ((0, 0), (1, 1), (1, 32), (3, 0), (3, 2)):
            with self.assertRaises(EncodingNotImplemented) as ctx:
                name_charset(platform_id, encoding_id)
            self.assertNotIsInstance(ctx.exception, InvalidPlatformEncoding)

    def test_error_hierarchy(self):
        self.assertTrue(issubclass(InvalidPlatformID, ValueError))
        self.assertTrue(issubclass(InvalidNameString, ValueError))
        for error in (EncodingNotImplemented, InvalidPlatformID, InvalidNameString):
            self.assertTrue(issubclass(error, NameStringError))


class TestNameTable(BaseTester):
    """Test naming table decoding."""

    def test_version_0(self):
        table = NameTable.read_from(io.BytesIO(NAME_TABLE))
        self.assertEqual(table.version, 0)
        self.assertEqual(table.count, 3)
        self.assertEqual(table.storage_offset, 6 + 3*12)
        self.assertEqual(table.storage_absolute, 6 + 3*12)
        self.assertIsNone(table.lang_tag_count)
        self.assertIsNone(table.lang_tag_records)
        record = table.name_records[1]
        self.assertIsInstance(record, NameRecord)
        self.assertEqual(
            (record.platform_id, record.encoding_id, record.language_id, record.name_id),
            (3, 1, 0x409, 1)
        )

    def test_version_1(self):
        data = build_name_table(
            ((3, 1, 0x8000, 1, 'Abc'.encode('utf-16-be')),),
            lang_tags=('en-US', 'nl')
        )
        stream = io.BytesIO(data)
        table = NameTable.read_from(stream)
        self.assertEqual(table.version, 1)
        self.assertEqual(table.lang_tag_count, 2)
        self.assertEqual(table.get_lang_tags(stream), ('en-US', 'nl'))
        self.assertEqual(table.get_name(stream, 1), 'Abc')

    def test_version_0_has_no_lang_tags(self):
        stream = io.BytesIO(NAME_TABLE)
        self.assertEqual(NameTable.read_from(stream).get_lang_tags(stream), ())

    def test_storage_relative_to_table(self):
        stream = io.BytesIO(b'\xaa' * 10 + NAME_TABLE)
        table = NameTable.read_from(stream, 10)
        self.assertEqual(table.start, 10)
        self.assertEqual(table.storage_absolute, 10 + table.storage_offset)
        self.assertEqual(table.get_name(stream, 2), 'Regular')

    def test_get_string_keeps_position(self):
        stream = io.BytesIO(NAME_TABLE)
        table = NameTable.read_from(stream)
        stream.seek(3)
        record = table.name_records[0]
        self.assertEqual(record.get_string(stream, table), b'Caf\x8e')
        self.assertEqual(stream.tell(), 3)
        self.assertEqual(record.get_text(stream, table), 'Caf\xe9')
        self.assertEqual(stream.tell(), 3)

    def test_string_beyond_end(self):
        data = bytearray(NAME_TABLE)
        # length of first record
        data[14:16] = b'\x10\x00'
        stream = io.BytesIO(bytes(data))
        table = NameTable.read_from(stream)
        with self.assertRaises(EndOfInput):
            table.name_records[0].get_string(stream, table)

    def test_iter_names(self):
        stream = io.BytesIO(NAME_TABLE)
        table = NameTable.read_from(stream)
        names = [(_rec.platform_id, _rec.name_id, _text) for _rec, _text in table.iter_names(stream)]
        self.assertEqual(names, [(1, 1, 'Caf\xe9'), (3, 1, 'Caf\xe9'), (3, 2, 'Regular')])

    def test_get_name_filters(self):
        stream = io.BytesIO(NAME_TABLE)
        table = NameTable.read_from(stream)
        self.assertEqual(table.get_name(stream, 1, platform_id=3), 'Caf\xe9')
        self.assertEqual(table.get_name(stream, 2, language_id=0x409), 'Regular')
        self.assertIsNone(table.get_name(stream, 2, platform_id=1))
        self.assertIsNone(table.get_name(stream, 6))


class TestNameStrings(BaseTester):
    """Test conversion of name strings in the various encodings."""

    def _table(self, *names):
        stream = io.BytesIO(build_name_table(names))
        return stream, NameTable.read_from(stream)

    def test_unicode_platform(self):
        stream, table = self._table(
            (0, 3, 0, 1, 'BMP'.encode('utf-16-be')),
            (0, 4, 0, 2, '\U0001f600'.encode('utf-16-be')),
        )
        self.assertEqual(table.get_name(stream, 1), 'BMP')
        self.assertEqual(table.get_name(stream, 2), '\U0001f600')

    def test_windows_utf8(self):
        stream, table = self._table((3, 10, 0x409, 1, 'Caf\xe9'.encode('utf-8')),)
        self.assertEqual(table.get_name(stream, 1), 'Caf\xe9')

    def test_windows_bmp_rejects_pairs(self):
        stream, table = self._table((3, 1, 0x409, 1, b'\x00a\xd8\x3d\xde\x00'),)
        record = table.name_records[0]
        with self.assertRaises(InvalidNameString) as ctx:
            record.get_text(stream, table)
        self.assertEqual(ctx.exception.consumed, 2)

    def test_odd_length(self):
        stream, table = self._table((3, 1, 0x409, 1, b'\x00a\x00'),)
        with self.assertRaises(InvalidNameString):
            table.name_records[0].get_text(stream, table)

    def test_invalid_ids_reported(self):
        stream, table = self._table(
            (2, 0, 0, 1, b'abc'),
            (3, 12, 0, 1, b'abc'),
            (1, 1, 0, 1, b'abc'),
        )
        records = table.name_records
        with self.assertRaises(InvalidPlatformID):
            records[0].get_text(stream, table)
        with self.assertRaises(InvalidEncodingID):
            records[1].get_text(stream, table)
        with self.assertRaises(EncodingNotImplemented):
            records[2].get_text(stream, table)
        # none of these can be converted
        self.assertEqual(list(table.iter_names(stream)), [])
        self.assertIsNone(table.get_name(stream, 1))

    def test_encoding_name(self):
        _, table = self._table(
            (1, 0, 0, 1, b''),
            (3, 1, 0x409, 1, b''),
            (3, 2, 0x411, 1, b''),
        )
        self.assertEqual(
            [_rec.encoding_name for _rec in table.name_records],
            ['mac-roman', 'utf-16be-bmp', '']
        )

    def test_empty_string(self):
        stream, table = self._table((1, 0, 0, 1, b''),)
        self.assertEqual(table.get_name(stream, 1), '')


if __name__ == '__main__':
    unittest.main()
