"""
sfntread.sfnt.directory - sfnt table directory and table records

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

import logging
from enum import IntEnum

from ..binary import ceildiv, bytes_to_int
from ..struct import big_endian as be, counted, Structure, InvalidContent, read_exact
from ..streams import saved_position, seek_to
from .tags import Tag
from .tables import decode_table


##############################################################################
# checksum

def calc_table_checksum(word_at, length):
    """
    Checksum of a table: sum of its big-endian 32-bit words, modulo 2**32.

    word_at: function from word index to value of the word
    length: length of the table in bytes; a final partial word is zero-padded
    """
    checksum = 0
    for index in range(ceildiv(length, 4)):
        checksum = (checksum + word_at(index)) & 0xffffffff
    return checksum


def table_word_reader(data):
    """Build word_at function for calc_table_checksum over table bytes."""
    def word_at(index):
        return bytes_to_int(data[4*index:4*index+4].ljust(4, b'\0'))
    return word_at


##############################################################################
# table directory

class SFNTVersion(IntEnum):
    """Recognised font format version tags."""

    TRUETYPE = 0x00010000
    # 'OTTO'
    CFF = 0x4f54544f

    @classmethod
    def read_from(cls, stream, offset=None):
        """Read version; keep unrecognised values as plain int."""
        value = be.uint32.read_from(stream, offset)
        try:
            return cls(value)
        except ValueError:
            logging.debug('Unrecognised sfnt version 0x%08x', value)
            return value


class TableRecord(Structure):
    """Directory entry locating a table in the font file."""

    _struct = be.Struct(
        table_tag=Tag,
        checksum='uint32',
        # from beginning of font file
        offset='uint32',
        length='uint32',
    )

    def read_data(self, stream):
        """Read the raw table bytes; restore stream position."""
        with saved_position(stream):
            seek_to(stream, self.offset)
            return read_exact(stream, self.length)

    def calc_checksum(self, stream):
        """Calculate the checksum of the table data."""
        data = self.read_data(stream)
        if self.table_tag == 'head':
            # checkSumAdjustment is not included in the checksum
            data = data[:8] + b'\0\0\0\0' + data[12:]
        return calc_table_checksum(table_word_reader(data), self.length)

    def verify_checksum(self, stream):
        """Check the stored checksum against the table data."""
        return self.calc_checksum(stream) == self.checksum

    def read_table(self, stream):
        """
        Decode the table body at the record's offset; restore stream position.
        Tags without a registered decoder give an UnsupportedTable.
        """
        with saved_position(stream):
            seek_to(stream, self.offset)
            logging.debug("Decoding '%s' table at offset %d", self.table_tag, self.offset)
            try:
                return decode_table(self.table_tag, stream)
            except InvalidContent as e:
                raise InvalidContent() from e


class TableDirectory(Structure):
    """Font header and table directory."""

    _struct = be.Struct(
        sfnt_version=SFNTVersion,
        num_tables='uint16',
        # (max power of 2 <= numTables) * 16
        search_range='uint16',
        # log2(max power of 2 <= numTables)
        entry_selector='uint16',
        # numTables * 16 - searchRange
        range_shift='uint16',
        table_records=counted(TableRecord, 'num_tables'),
    )

    @property
    def tags(self):
        """Table tags, in directory order."""
        return tuple(_rec.table_tag for _rec in self.table_records)

    def index(self, tag):
        """Index of the first record with the given tag; raise KeyError if absent."""
        for index, record in enumerate(self.table_records):
            if record.table_tag == tag:
                return index
        raise KeyError(tag)

    def find(self, tag):
        """First record with the given tag, or None."""
        try:
            return self[tag]
        except KeyError:
            return None

    def __getitem__(self, tag):
        return self.table_records[self.index(tag)]

    def __contains__(self, tag):
        return tag in self.tags

    def __len__(self):
        return len(self.table_records)

    def __iter__(self):
        return iter(self.table_records)
