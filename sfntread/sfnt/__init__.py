"""
sfntread.sfnt - TrueType/OpenType container and tables

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

from .tags import Tag
from .tables import register_table, is_supported, get_supported_tags, UnsupportedTable
from .directory import (
    SFNTVersion, TableDirectory, TableRecord,
    calc_table_checksum, table_word_reader,
)
from .name import (
    NameTable, NameRecord, LangTagRecord, NAME_IDS, PLATFORMS,
    register_name_encoding, name_charset,
    NameStringError, EncodingNotImplemented, InvalidNameString,
    InvalidPlatformEncoding, InvalidPlatformID, InvalidEncodingID,
)
from .dsig import DSIGTable, SignatureRecord
from .font import SFNTFont, TableCache, load
