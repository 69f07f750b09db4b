"""
sfntread - decode TrueType/OpenType font containers

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .struct import DecodeError, EndOfInput, InvalidContent, OtherError
from .streams import Stream
from .encoding import charsets, charset, decode, encode, CharSetStr, CharSetChar
from .sfnt import (
    SFNTFont, load, Tag, TableDirectory, TableRecord, SFNTVersion,
    NameTable, NameRecord, DSIGTable, UnsupportedTable, calc_table_checksum,
)
