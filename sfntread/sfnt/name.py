"""
sfntread.sfnt.name - naming table

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

import logging

from ..struct import big_endian as be, counted, Structure, read_exact
from ..streams import saved_position, seek_to
from ..encoding import CharSetStr, CharSetDecodeError
from ..encoding import Utf8, Utf16, Utf16BMP, MacOSRoman
from .tables import register_table


##############################################################################
# errors

class NameStringError(Exception):
    """Name string could not be converted to text."""


class EncodingNotImplemented(NameStringError):
    """Valid platform and encoding, but no character set implemented for it."""

    def __init__(self, platform_id, encoding_id, description=''):
        super().__init__(
            f'Encoding {encoding_id} ({description}) on platform '
            f'{platform_id} ({PLATFORMS.get(platform_id, "")}) is not yet supported.'
        )
        self.platform_id = platform_id
        self.encoding_id = encoding_id
        self.description = description


class InvalidPlatformEncoding(NameStringError, ValueError):
    """Platform or encoding id is not defined."""


class InvalidPlatformID(InvalidPlatformEncoding):
    """Platform id is not defined."""

    def __init__(self, platform_id):
        super().__init__(f'Invalid platform id {platform_id}.')
        self.platform_id = platform_id


class InvalidEncodingID(InvalidPlatformEncoding):
    """Encoding id is not defined for the platform."""

    def __init__(self, platform_id, encoding_id):
        super().__init__(
            f'Invalid encoding id {encoding_id} for platform '
            f'{platform_id} ({PLATFORMS[platform_id]}).'
        )
        self.platform_id = platform_id
        self.encoding_id = encoding_id


class InvalidNameString(NameStringError, ValueError):
    """String bytes are not valid in the encoding of the record."""

    def __init__(self, message, consumed=0):
        super().__init__(message)
        self.consumed = consumed


##############################################################################
# platform and encoding ids

PLATFORMS = {
    0: 'Unicode',
    1: 'Macintosh',
    3: 'Windows',
}

# (platform_id, encoding_id) -> (description, CharSetChar subclass or None)
# None marks an encoding that is defined but not implemented
_NAME_ENCODINGS = {}


def register_name_encoding(platform_id, encoding_id, description, charset=None):
    """Register character set for a platform and encoding id."""
    if platform_id not in PLATFORMS:
        raise ValueError(f'Unknown platform id {platform_id}.')
    _NAME_ENCODINGS[platform_id, encoding_id] = (description, charset)


def name_charset(platform_id, encoding_id):
    """Get character set for platform and encoding id."""
    if platform_id not in PLATFORMS:
        raise InvalidPlatformID(platform_id)
    try:
        description, charset = _NAME_ENCODINGS[platform_id, encoding_id]
    except KeyError:
        raise InvalidEncodingID(platform_id, encoding_id) from None
    if charset is None:
        raise EncodingNotImplemented(platform_id, encoding_id, description)
    return charset


for _id, _desc, _charset in (
        (0, 'Unicode 1.0 semantics', None),
        (1, 'Unicode 1.1 semantics', None),
        (2, 'ISO/IEC 10646 semantics', None),
        (3, 'Unicode 2.0 and onwards semantics, BMP only', Utf16BMP),
        (4, 'Unicode 2.0 and onwards semantics, full repertoire', Utf16),
    ):
    register_name_encoding(0, _id, _desc, _charset)

register_name_encoding(1, 0, 'Roman', MacOSRoman)
for _id, _desc in enumerate((
        'Japanese', 'Chinese (Traditional)', 'Korean', 'Arabic', 'Hebrew',
        'Greek', 'Russian', 'RSymbol', 'Devanagari', 'Gurmukhi', 'Gujarati',
        'Oriya', 'Bengali', 'Tamil', 'Telugu', 'Kannada', 'Malayalam',
        'Sinhalese', 'Burmese', 'Khmer', 'Thai', 'Laotian', 'Georgian',
        'Armenian', 'Chinese (Simplified)', 'Tibetan', 'Mongolian', 'Geez',
        'Slavic', 'Vietnamese', 'Sindhi', 'Uninterpreted',
    ), start=1):
    register_name_encoding(1, _id, _desc)

for _id, _desc, _charset in (
        (0, 'Symbol', None),
        (1, 'Unicode BMP', Utf16BMP),
        (2, 'ShiftJIS', None),
        (3, 'PRC', None),
        (4, 'Big5', None),
        (5, 'Wansung', None),
        (6, 'Johab', None),
        (7, 'Reserved', None),
        (8, 'Reserved', None),
        (9, 'Reserved', None),
        (10, 'Unicode full repertoire', Utf8),
    ):
    register_name_encoding(3, _id, _desc, _charset)


# commonly used name ids
NAME_IDS = {
    0: 'copyright',
    1: 'family',
    2: 'subfamily',
    3: 'unique-id',
    4: 'full-name',
    5: 'version',
    6: 'postscript-name',
    7: 'trademark',
    8: 'manufacturer',
    9: 'designer',
    10: 'description',
    11: 'vendor-url',
    12: 'designer-url',
    13: 'license',
    14: 'license-url',
    16: 'typographic-family',
    17: 'typographic-subfamily',
    18: 'compatible-full',
    19: 'sample-text',
    20: 'postscript-cid-findfont-name',
    21: 'wws-family',
    22: 'wws-subfamily',
    23: 'light-background-palette',
    24: 'dark-background-palette',
    25: 'variations-postscript-name-prefix',
}


##############################################################################
# naming table

def _read_storage(stream, offset, length):
    """Read bytes at absolute offset in the storage area; restore stream position."""
    with saved_position(stream):
        seek_to(stream, offset)
        return read_exact(stream, length)


def _translate(charset, data):
    """Decode string bytes, raise InvalidNameString if malformed."""
    try:
        return CharSetStr.from_bytes(charset, data).to_string()
    except CharSetDecodeError as e:
        raise InvalidNameString(str(e), consumed=e.consumed) from e


class NameRecord(Structure):
    """Naming table entry locating one string."""

    _struct = be.Struct(
        platform_id='uint16',
        encoding_id='uint16',
        language_id='uint16',
        name_id='uint16',
        # in bytes
        length='uint16',
        # from start of storage area
        string_offset='uint16',
    )

    def get_string(self, stream, parent):
        """Read the raw string bytes from the parent table's storage area."""
        return _read_storage(
            stream, parent.storage_absolute + self.string_offset, self.length
        )

    def translate_string(self, data):
        """Convert raw string bytes to text in the record's encoding."""
        return _translate(name_charset(self.platform_id, self.encoding_id), data)

    def get_text(self, stream, parent):
        """Read string and convert to text."""
        return self.translate_string(self.get_string(stream, parent))

    @property
    def encoding_name(self):
        """Name of the character set for this record, empty if not supported."""
        try:
            return name_charset(self.platform_id, self.encoding_id).name
        except NameStringError:
            return ''


class LangTagRecord(Structure):
    """Language-tag string location in the storage area."""

    _struct = be.Struct(
        # in bytes
        length='uint16',
        # from start of storage area
        lang_tag_offset='uint16',
    )

    def get_string(self, stream, parent):
        """Read the raw language-tag bytes from the parent table's storage area."""
        return _read_storage(
            stream, parent.storage_absolute + self.lang_tag_offset, self.length
        )

    def get_text(self, stream, parent):
        """Read language tag and convert to text; always UTF-16BE."""
        return _translate(Utf16, self.get_string(stream, parent))


@register_table('name')
class NameTable(Structure):
    """Naming table."""

    _struct = be.Struct(
        version='uint16',
        count='uint16',
        # from start of table
        storage_offset='uint16',
        name_records=counted(NameRecord, 'count'),
    )

    # version 1 only
    _lang_tag_struct = be.Struct(
        lang_tag_count='uint16',
        lang_tag_records=counted(LangTagRecord, 'lang_tag_count'),
    )

    @classmethod
    def read_from(cls, stream, offset=None):
        """Read naming table from stream."""
        if offset is not None:
            stream.seek(offset)
        start = stream.tell()
        fields = cls._struct.read_fields(stream)
        if fields['version'] != 0:
            fields.update(cls._lang_tag_struct.read_fields(stream))
        else:
            fields.update(lang_tag_count=None, lang_tag_records=None)
        logging.debug(
            'Naming table version %d with %d records at offset %d',
            fields['version'], fields['count'], start
        )
        return cls(
            start=start,
            storage_absolute=start + fields['storage_offset'],
            **fields
        )

    def iter_names(self, stream):
        """
        Iterate over (record, text) for all records that can be converted to text.
        Records in unsupported or invalid encodings are skipped.
        """
        for record in self.name_records:
            try:
                text = record.get_text(stream, self)
            except NameStringError as e:
                logging.debug('Skipping name record %r: %s', record, e)
                continue
            yield record, text

    def get_name(self, stream, name_id, platform_id=None, language_id=None):
        """Text of first convertible record with given name id, or None."""
        for record in self.name_records:
            if (
                    record.name_id != name_id
                    or platform_id not in (None, record.platform_id)
                    or language_id not in (None, record.language_id)
                ):
                continue
            try:
                return record.get_text(stream, self)
            except NameStringError as e:
                logging.debug('Skipping name record %r: %s', record, e)
        return None

    def get_lang_tags(self, stream):
        """Language tags defined in a version 1 table, in order."""
        if not self.lang_tag_records:
            return ()
        return tuple(
            _rec.get_text(stream, self) for _rec in self.lang_tag_records
        )
