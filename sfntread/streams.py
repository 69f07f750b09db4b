"""
sfntread.streams - byte source tools

(c) 2024 sfntread contributors
licence: https://opensource.org/licenses/MIT
"""

import io
import logging
from contextlib import contextmanager
from pathlib import Path

from .struct import EndOfInput


def get_bytesio(bytestring):
    """Workaround as our streams objects require a buffer."""
    return io.BufferedReader(io.BytesIO(bytestring))


class Stream:
    """Seekable binary byte source, with offsets relative to an anchor."""

    def __init__(self, file, *, name=''):
        """
        Ensure file is a seekable binary stream, wrap if necessary.

        file: binary stream or file-like object, positioned at the font start
        name: name to use in messages
        """
        if not file:
            raise ValueError('No stream provided.')
        if isinstance(file, (str, Path)):
            raise ValueError('Argument `file` must be a Python file or stream-like object.')
        if isinstance(file, Stream):
            name = name or file.name
            file = file._stream
        self._stream = file
        self.name = name or get_name(file)
        if not self._stream.readable():
            raise ValueError('Expected readable stream, got writable.')
        if not is_binary(self._stream):
            try:
                self._stream = self._stream.buffer
            except AttributeError as e:
                raise ValueError('Unable to access binary stream.') from e
            logging.debug('Getting buffer %r from text stream.', self._stream)
        if not self._stream.seekable():
            # we need streams to be seekable - drain to buffer
            # note you can only do this once on the input stream!
            logging.debug('Draining unseekable stream %r to buffer.', self)
            self._stream = get_bytesio(self._stream.read())
        # all offsets are relative to the font start
        self._anchor = self._stream.tell()

    @classmethod
    def from_data(cls, data, **kwargs):
        """BytesIO stream on bytes data."""
        return cls(get_bytesio(data), **kwargs)

    def __repr__(self):
        """String representation."""
        return f"<{type(self).__name__} name='{self.name}'>"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def read(self, size=-1, /):
        return self._stream.read(size)

    def seek(self, loc, whence=0, /):
        """Seek relative to anchor."""
        if whence == 0:
            loc += self._anchor
        self._stream.seek(loc, whence)
        return self.tell()

    def tell(self):
        """Location relative to anchor."""
        return self._stream.tell() - self._anchor

    def readable(self):
        return True

    def seekable(self):
        return True

    def close(self):
        self._stream.close()

    @property
    def closed(self):
        return self._stream.closed


###############################################################################

def seek_to(stream, offset):
    """Seek to absolute offset; raise EndOfInput if not possible."""
    if offset < 0:
        raise EndOfInput(f'Cannot seek to negative offset {offset}.')
    try:
        stream.seek(offset)
    except (OSError, ValueError, OverflowError) as e:
        raise EndOfInput(f'Cannot seek to offset {offset}: {e}') from e


@contextmanager
def saved_position(stream):
    """Restore the stream position on exit, whatever happens inside."""
    position = stream.tell()
    try:
        yield position
    finally:
        stream.seek(position)


def is_binary(stream):
    """Check if stream is binary."""
    # read 0 bytes - the return type will tell us if this is a text or binary stream
    return isinstance(stream.read(0), bytes)


def get_name(stream):
    """Get stream name, if available."""
    try:
        return stream.name
    except AttributeError:
        # not all streams have one (e.g. BytesIO)
        return ''
