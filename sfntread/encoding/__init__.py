"""
sfntread.encoding - character sets

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

from .base import (
    NotFoundError, EncodingName, CharSetChar,
    CharSetError, CharSetDecodeError, CharSetEncodeError,
)
from .registry import EncodingRegistry
from .unicode import Utf8, Utf16, Utf16BMP
from .bytemaps import Ascii, ByteCharSet, CodePage437, MacOSRoman
from .charsetstr import CharSetStr


charsets = EncodingRegistry()

charsets['ascii', 'us-ascii', 'iso646-us', 'ansi-x3.4-1968'] = Ascii
charsets['utf-8'] = Utf8
charsets['utf-16be', 'utf-16'] = Utf16
charsets['utf-16be-bmp', 'ucs-2be', 'ucs-2'] = Utf16BMP
charsets['cp437', 'oem-437', 'oem-us', 'pc-8', 'dos-latin-us'] = CodePage437
charsets['mac-roman', 'mac', 'macintosh', 'ibm-1275', 'windows-10000'] = MacOSRoman


def charset(name):
    """Retrieve character set from CharSetChar subclass or registered name."""
    if isinstance(name, type) and issubclass(name, CharSetChar):
        return name
    return charsets[str(name)]


def decode(data, name):
    """Decode bytes to unicode text in named character set."""
    return CharSetStr.from_bytes(charset(name), data).to_string()


def encode(text, name):
    """Encode unicode text to bytes in named character set."""
    return CharSetStr.from_string(charset(name), text).to_bytes()
