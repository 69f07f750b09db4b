"""
sfntread.sfnt.font - font view over an sfnt byte source

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

import logging
import threading
from pathlib import Path

from ..struct import DecodeError
from ..streams import Stream
from .directory import TableDirectory, TableRecord


class TableCache:
    """
    Decoded tables, keyed by directory index.

    Each table is decoded at most once; the outcome, a table object or the
    decoding error, is stored and returned or re-raised on later requests
    without reading the stream again.
    """

    def __init__(self):
        self._outcomes = {}
        self._lock = threading.Lock()

    def get(self, index, record, stream):
        """Get decoded table for record at given directory index."""
        # hold the lock while decoding so concurrent callers wait for the result
        with self._lock:
            try:
                outcome = self._outcomes[index]
            except KeyError:
                try:
                    outcome = record.read_table(stream)
                except DecodeError as e:
                    logging.debug("Failed to decode '%s' table: %r", record.table_tag, e)
                    outcome = e
                self._outcomes[index] = outcome
        if isinstance(outcome, DecodeError):
            raise outcome.with_traceback(None)
        return outcome


class SFNTFont:
    """TrueType/OpenType font: table directory with lazily decoded tables."""

    def __init__(self, file, *, check_checksums=False):
        """
        Read the table directory from a seekable binary stream.

        file: binary stream positioned at the start of the font
        check_checksums: verify table checksums and log mismatches (default: False)
        """
        self.stream = Stream(file)
        self.directory = TableDirectory.read_from(self.stream)
        self._cache = TableCache()
        logging.debug(
            'Font %r: version %r with tables %s',
            self.stream, self.directory.sfnt_version, ', '.join(self.directory.tags)
        )
        if check_checksums:
            self.check_checksums()

    def __repr__(self):
        return (
            f"<{type(self).__name__} name='{self.stream.name}' "
            f"tables={list(self.directory.tags)}>"
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        self.stream.close()

    @property
    def sfnt_version(self):
        return self.directory.sfnt_version

    @property
    def tags(self):
        return self.directory.tags

    def __contains__(self, tag):
        return tag in self.directory

    def get_table(self, key):
        """
        Get decoded table by tag or table record.

        Unsupported tags give an UnsupportedTable; decoding errors are raised.
        Raises KeyError if the tag is not in the directory.
        """
        if isinstance(key, TableRecord):
            index = self.directory.table_records.index(key)
        else:
            index = self.directory.index(key)
        record = self.directory.table_records[index]
        return self._cache.get(index, record, self.stream)

    __getitem__ = get_table

    def check_checksums(self):
        """Verify table checksums; return dict of tag -> match."""
        result = {}
        for record in self.directory.table_records:
            ok = record.verify_checksum(self.stream)
            if not ok:
                logging.warning("Bad checksum for '%s' table", record.table_tag)
            result[record.table_tag] = ok
        return result

    def get_names(self):
        """Convertible name strings as list of (NameRecord, text)."""
        if 'name' not in self.directory:
            return []
        table = self.get_table('name')
        return list(table.iter_names(self.stream))


def load(infile, **kwargs):
    """
    Open a font file or stream.

    infile: path or binary stream
    """
    if isinstance(infile, (str, Path)):
        with open(infile, 'rb') as f:
            return SFNTFont(Stream.from_data(f.read(), name=str(infile)), **kwargs)
    return SFNTFont(infile, **kwargs)
